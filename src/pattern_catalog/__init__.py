"""Catalog of classic object-oriented design patterns as runnable demos."""

from .errors import (
    ExpectationError,
    HistoryIndexError,
    PatternCatalogError,
    ScriptLoadError,
    UnknownScenario,
    UnsupportedFileType,
)
from .orchestrator import CheckResult, ExecutionOrchestrator, ExecutionResult, run
from .recording import Event, Transcript, TranscriptRecorder
from .registry import REGISTRY, Scenario, ScenarioRegistry, discover, get_scenario, scenario
from .script import CheckReport, OutputCondition, RunConfig, ScenarioDriver, verify

__all__ = [
    "CheckReport",
    "CheckResult",
    "Event",
    "ExecutionOrchestrator",
    "ExecutionResult",
    "ExpectationError",
    "HistoryIndexError",
    "OutputCondition",
    "PatternCatalogError",
    "REGISTRY",
    "RunConfig",
    "Scenario",
    "ScenarioDriver",
    "ScenarioRegistry",
    "ScriptLoadError",
    "Transcript",
    "TranscriptRecorder",
    "UnknownScenario",
    "UnsupportedFileType",
    "discover",
    "get_scenario",
    "run",
    "scenario",
    "verify",
]
