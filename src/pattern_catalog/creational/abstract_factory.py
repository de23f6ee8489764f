"""Abstract Factory.

A factory builds a matching terrain and vegetation pair, so a world never
ends up with cactus on grass.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class Terrain:
    def __str__(self) -> str:
        return type(self).__name__


class Sand(Terrain):
    pass


class Grass(Terrain):
    pass


class Vegetation:
    def __str__(self) -> str:
        return type(self).__name__


class Cactus(Vegetation):
    pass


class Tree(Vegetation):
    pass


class WorldFactory(Protocol):
    def create_terrain(self) -> Terrain: ...

    def create_vegetation(self) -> Vegetation: ...


class DesertFactory:
    def create_terrain(self) -> Terrain:
        return Sand()

    def create_vegetation(self) -> Vegetation:
        return Cactus()


class ForestFactory:
    def create_terrain(self) -> Terrain:
        return Grass()

    def create_vegetation(self) -> Vegetation:
        return Tree()


class World:
    def __init__(self, factory: WorldFactory) -> None:
        self.terrain = factory.create_terrain()
        self.vegetation = factory.create_vegetation()

    def describe(self) -> None:
        print(f"World built with {self.terrain} and {self.vegetation}")


@scenario("abstract_factory", category="creational", title="Abstract Factory")
def main() -> None:
    for factory in (DesertFactory(), ForestFactory()):
        World(factory).describe()


if __name__ == "__main__":
    main()

### OUTPUT ###
# World built with Sand and Cactus
# World built with Grass and Tree
