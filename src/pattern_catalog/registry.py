from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, Iterator

from .errors import UnknownScenario

logger = logging.getLogger(__name__)

CATEGORIES = ("behavioral", "creational", "structural")

EntryPoint = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Scenario:
    name: str
    category: str
    title: str
    entry: EntryPoint


class ScenarioRegistry:
    """Name-indexed collection of pattern demos."""

    def __init__(self) -> None:
        self._scenarios: dict[str, Scenario] = {}

    def register(self, scenario: Scenario) -> Scenario:
        if scenario.category not in CATEGORIES:
            msg = f"Unsupported category for {scenario.name!r}: {scenario.category!r}"
            raise ValueError(msg)
        existing = self._scenarios.get(scenario.name)
        if existing is not None and existing.entry is not scenario.entry:
            msg = f"Scenario already registered: {scenario.name!r}"
            raise ValueError(msg)
        self._scenarios[scenario.name] = scenario
        return scenario

    def get(self, name: str) -> Scenario:
        try:
            return self._scenarios[name]
        except KeyError:
            raise UnknownScenario(name, self._scenarios) from None

    def names(self) -> list[str]:
        return sorted(self._scenarios)

    def __contains__(self, name: object) -> bool:
        return name in self._scenarios

    def __iter__(self) -> Iterator[Scenario]:
        ordered = sorted(self._scenarios.values(), key=lambda s: (CATEGORIES.index(s.category), s.name))
        return iter(ordered)

    def __len__(self) -> int:
        return len(self._scenarios)


REGISTRY = ScenarioRegistry()


def scenario(name: str, *, category: str, title: str) -> Callable[[EntryPoint], EntryPoint]:
    """Register the decorated ``main`` function as a scenario entry point."""

    def decorator(func: EntryPoint) -> EntryPoint:
        if func.__module__ == "__main__":
            # run as a script, not part of the catalog
            return func
        REGISTRY.register(Scenario(name=name, category=category, title=title, entry=func))
        return func

    return decorator


_discovered = False


def discover() -> ScenarioRegistry:
    """Import every demo module listed by the category packages."""

    global _discovered
    if not _discovered:
        for category in CATEGORIES:
            package = importlib.import_module(f"{__package__}.{category}")
            for module in package.MODULES:
                importlib.import_module(f"{package.__name__}.{module}")
        _discovered = True
        logger.debug("Discovered %d scenarios", len(REGISTRY))
    return REGISTRY


def get_scenario(name: str) -> Scenario:
    return discover().get(name)
