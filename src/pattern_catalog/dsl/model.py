from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import ScriptLoadError
from .schema import validate_script


@dataclass(slots=True)
class Expectation:
    contains: str | None = None
    regex: str | None = None
    equals: str | None = None
    absent: bool = False

    def to_dict(self) -> dict[str, Any]:  # pragma: no cover - debugging helper
        data: dict[str, Any] = {}
        if self.contains is not None:
            data["contains"] = self.contains
        if self.regex is not None:
            data["regex"] = self.regex
        if self.equals is not None:
            data["equals"] = self.equals
        if self.absent:
            data["absent"] = True
        return data


@dataclass(slots=True)
class ExpectationScript:
    scenario: str
    expectations: list[Expectation]
    ordered: bool = True
    event_count: int | None = None
    name: str | None = None
    description: str | None = None

    @property
    def label(self) -> str:
        return self.name or self.scenario


def load_script(source: Path | dict[str, Any]) -> ExpectationScript:
    if isinstance(source, Path):
        try:
            data = json.loads(source.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ScriptLoadError(source, exc.strerror or str(exc)) from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ScriptLoadError(source, f"invalid JSON: {exc}") from exc
    else:
        data = source
    validate_script(data)

    expectations = [_parse_expect(raw) for raw in data["expect"]]
    event_count = data.get("event_count")
    return ExpectationScript(
        scenario=data["scenario"],
        expectations=expectations,
        ordered=bool(data.get("ordered", True)),
        event_count=int(event_count) if event_count is not None else None,
        name=data.get("name"),
        description=data.get("description"),
    )


def _parse_expect(payload: dict[str, Any]) -> Expectation:
    return Expectation(
        contains=payload.get("contains"),
        regex=payload.get("regex"),
        equals=payload.get("equals"),
        absent=bool(payload.get("absent", False)),
    )
