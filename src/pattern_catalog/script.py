from __future__ import annotations

import contextlib
import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from .recording import Event, Transcript, TranscriptRecorder
from .registry import Scenario

logger = logging.getLogger(__name__)


def _default_stream() -> TextIO:
    return sys.__stdout__


@dataclass(slots=True)
class RunConfig:
    echo: bool = False
    stream: TextIO = field(default_factory=_default_stream)


@dataclass(slots=True)
class OutputCondition:
    contains: str | None = None
    regex: str | None = None
    equals: str | None = None
    predicate: Callable[[str], bool] | None = None
    absent: bool = False

    def __post_init__(self) -> None:
        if self.contains is None and self.regex is None and self.equals is None and self.predicate is None:
            msg = "At least one condition must be provided"
            raise ValueError(msg)
        if self.regex is not None:
            re.compile(self.regex)

    def matches(self, text: str) -> bool:
        if self.equals is not None and text == self.equals:
            return True
        if self.contains is not None and self.contains in text:
            return True
        if self.regex is not None and re.search(self.regex, text):
            return True
        if self.predicate is not None and self.predicate(text):
            return True
        return False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        parts: list[str] = []
        if self.contains is not None:
            parts.append(f"contains={self.contains!r}")
        if self.regex is not None:
            parts.append(f"regex={self.regex!r}")
        if self.equals is not None:
            parts.append(f"equals={self.equals!r}")
        if self.predicate is not None:
            parts.append(f"predicate={self.predicate!r}")
        if self.absent:
            parts.append("absent=True")
        return f"OutputCondition({', '.join(parts)})"


@dataclass(slots=True)
class CheckReport:
    matched: list[tuple[OutputCondition, Event | None]]
    failures: list[str]

    @property
    def passed(self) -> bool:
        return not self.failures


def verify(
    transcript: Transcript,
    conditions: Sequence[OutputCondition],
    *,
    ordered: bool = True,
    event_count: int | None = None,
) -> CheckReport:
    """Match conditions against transcript events.

    With ``ordered`` each positive condition must match an event after the
    one matched by its predecessor. ``absent`` conditions must match no event
    anywhere in the transcript.
    """

    events = transcript.events
    matched: list[tuple[OutputCondition, Event | None]] = []
    failures: list[str] = []
    cursor = 0

    for condition in conditions:
        if condition.absent:
            hit = next((event for event in events if condition.matches(event.text)), None)
            if hit is not None:
                failures.append(f"{condition!r} matched event {hit.index}: {hit.text!r}")
            matched.append((condition, None))
            continue

        start = cursor if ordered else 0
        hit = next((event for event in events[start:] if condition.matches(event.text)), None)
        if hit is None:
            where = f" after event {cursor - 1}" if ordered and cursor else ""
            failures.append(f"{condition!r} not found{where}")
            matched.append((condition, None))
            continue
        matched.append((condition, hit))
        if ordered:
            cursor = hit.index + 1

    if event_count is not None and len(events) != event_count:
        failures.append(f"expected {event_count} events, got {len(events)}")

    return CheckReport(matched=matched, failures=failures)


class ScenarioDriver:
    """Execute a scenario entry point and capture its output as events."""

    def run(self, scenario: Scenario, config: RunConfig | None = None) -> Transcript:
        config = config or RunConfig()
        recorder = TranscriptRecorder(echo=config.stream if config.echo else None)

        logger.debug("Running scenario %s", scenario.name)
        try:
            with contextlib.redirect_stdout(recorder):
                scenario.entry()
        finally:
            recorder.close()

        transcript = recorder.transcript(scenario.name)
        logger.debug("Scenario %s produced %d events", scenario.name, len(transcript))
        return transcript
