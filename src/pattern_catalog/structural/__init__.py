"""Structural patterns."""

MODULES = (
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "flyweight",
    "proxy",
)
