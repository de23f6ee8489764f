from __future__ import annotations

import json
import threading
from dataclasses import asdict, dataclass
from typing import Any, TextIO


@dataclass(frozen=True, slots=True)
class Event:
    index: int
    text: str


@dataclass(frozen=True, slots=True)
class Transcript:
    scenario: str
    events: tuple[Event, ...]

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(event.text for event in self.events)

    def __len__(self) -> int:
        return len(self.events)

    def to_dict(self) -> dict[str, Any]:
        return {"scenario": self.scenario, "events": [asdict(event) for event in self.events]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


class TranscriptRecorder:
    """Text sink that turns printed output into ordered events.

    Instances stand in for ``sys.stdout`` while a scenario runs. Chunks are
    buffered until a newline completes a line; every completed line becomes
    one :class:`Event`. When ``echo`` is given, completed lines are also
    written there as they arrive.
    """

    def __init__(self, echo: TextIO | None = None) -> None:
        self._echo = echo
        self._pending = ""
        self._events: list[Event] = []
        self._closed = False
        self._lock = threading.Lock()

    @property
    def events(self) -> tuple[Event, ...]:
        with self._lock:
            return tuple(self._events)

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: str) -> int:
        if self._closed:
            msg = "write to closed recorder"
            raise ValueError(msg)
        if not chunk:
            return 0

        with self._lock:
            self._pending += chunk
            *complete, self._pending = self._pending.split("\n")
            for line in complete:
                self._append_locked(line)
        return len(chunk)

    def flush(self) -> None:
        if self._echo is not None:
            self._echo.flush()

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return False

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            if self._pending:
                self._append_locked(self._pending)
                self._pending = ""
            self._closed = True
        self.flush()

    def transcript(self, scenario: str) -> Transcript:
        return Transcript(scenario=scenario, events=self.events)

    def _append_locked(self, line: str) -> None:
        self._events.append(Event(index=len(self._events), text=line))
        if self._echo is not None:
            self._echo.write(line + "\n")

    def __enter__(self) -> "TranscriptRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()
