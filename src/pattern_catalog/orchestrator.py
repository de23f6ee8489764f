from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .dsl import build_conditions, load_script
from .dsl.model import ExpectationScript
from .errors import ExpectationError
from .recording import Event, Transcript
from .registry import Scenario, ScenarioRegistry, discover
from .script import CheckReport, RunConfig, ScenarioDriver, verify

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExecutionResult:
    scenario: Scenario
    config: RunConfig
    transcript: Transcript

    @property
    def events(self) -> tuple[Event, ...]:
        return self.transcript.events


@dataclass(slots=True)
class CheckResult:
    script: ExpectationScript
    execution: ExecutionResult
    report: CheckReport


class ExecutionOrchestrator:
    """High-level runner that ties the registry, driver and expectation scripts."""

    def __init__(
        self,
        driver: ScenarioDriver | None = None,
        registry: ScenarioRegistry | None = None,
    ) -> None:
        self._driver = driver or ScenarioDriver()
        self._registry = registry

    @property
    def registry(self) -> ScenarioRegistry:
        if self._registry is None:
            self._registry = discover()
        return self._registry

    def execute(self, name: str, *, config: RunConfig | None = None) -> ExecutionResult:
        scenario = self.registry.get(name)
        config = config or RunConfig()
        transcript = self._driver.run(scenario, config)
        return ExecutionResult(scenario=scenario, config=config, transcript=transcript)

    def check(
        self,
        source: Path | dict[str, Any],
        *,
        config: RunConfig | None = None,
    ) -> CheckResult:
        script = load_script(source)
        execution = self.execute(script.scenario, config=config)
        report = verify(
            execution.transcript,
            build_conditions(script),
            ordered=script.ordered,
            event_count=script.event_count,
        )
        if not report.passed:
            logger.info("Expectation script %s failed", script.label)
            raise ExpectationError(script.label, report.failures)
        return CheckResult(script=script, execution=execution, report=report)


def run(name: str) -> tuple[Event, ...]:
    """Run a registered scenario and return its ordered events."""

    return ExecutionOrchestrator().execute(name).events
