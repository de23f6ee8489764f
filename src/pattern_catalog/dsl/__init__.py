from __future__ import annotations

from .model import Expectation, ExpectationScript, load_script
from .planner import build_conditions
from .schema import SCRIPT_SCHEMA, validate_script

__all__ = [
    "Expectation",
    "ExpectationScript",
    "build_conditions",
    "load_script",
    "SCRIPT_SCHEMA",
    "validate_script",
]
