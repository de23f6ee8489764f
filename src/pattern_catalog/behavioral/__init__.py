"""Behavioral patterns.

Demo modules are imported by ``registry.discover()``, not here, so a single
module can still be run with ``python -m``.
"""

MODULES = (
    "chain",
    "command",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template",
    "visitor",
)
