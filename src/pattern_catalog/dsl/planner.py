from __future__ import annotations

from ..script import OutputCondition
from .model import Expectation, ExpectationScript


def build_conditions(script: ExpectationScript) -> list[OutputCondition]:
    return [_to_condition(expect) for expect in script.expectations]


def _to_condition(expect: Expectation) -> OutputCondition:
    return OutputCondition(
        contains=expect.contains,
        regex=expect.regex,
        equals=expect.equals,
        absent=expect.absent,
    )
