from __future__ import annotations

from typing import Iterable, Sequence


class PatternCatalogError(Exception):
    """Base class for catalog errors."""


class UnknownScenario(PatternCatalogError, KeyError):
    """Raised when a scenario name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(sorted(available))
        msg = f"Unknown scenario: {name!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ExpectationError(PatternCatalogError, AssertionError):
    """Raised when a transcript does not satisfy an expectation script."""

    def __init__(self, scenario: str, failures: Sequence[str]) -> None:
        self.scenario = scenario
        self.failures = tuple(failures)
        msg = f"Scenario {scenario!r} failed {len(self.failures)} expectation(s): " + "; ".join(self.failures)
        super().__init__(msg)


class UnsupportedFileType(PatternCatalogError, ValueError):
    """Raised by parser factories for extensions they cannot handle."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"I don't know how to deal with {file_name}.")


class HistoryIndexError(PatternCatalogError, IndexError):
    """Raised when a memento index is outside the recorded range."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Memento index {index} out of range (history holds {size})")


class ScriptLoadError(PatternCatalogError, ValueError):
    """Raised when an expectation script cannot be read or parsed."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load expectation script {path}: {reason}")
