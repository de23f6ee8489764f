"""Creational patterns."""

MODULES = (
    "abstract_factory",
    "builder",
    "factory",
    "prototype",
    "singleton",
)
