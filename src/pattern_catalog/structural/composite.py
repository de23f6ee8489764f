"""Composite.

Single shapes and groups of shapes answer the same ``draw()`` call, so a
whole tree is drawn by drawing its root.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from ..registry import scenario


class Graphic(Protocol):
    def draw(self) -> None: ...


class CompositeGraphic:
    def __init__(self, graphics: Iterable[Graphic] = ()) -> None:
        self._graphics: list[Graphic] = list(graphics)

    def __len__(self) -> int:
        return len(self._graphics)

    def draw(self) -> None:
        for graphic in self._graphics:
            graphic.draw()

    def add(self, graphic: Graphic) -> None:
        self._graphics.append(graphic)

    def remove(self, graphic: Graphic) -> None:
        self._graphics.remove(graphic)


class Ellipse:
    def draw(self) -> None:
        print("Ellipse")


class Square:
    def draw(self) -> None:
        print("Square")


@scenario("composite", category="structural", title="Composite")
def main() -> None:
    ellipse1, ellipse2, ellipse3, ellipse4 = Ellipse(), Ellipse(), Ellipse(), Ellipse()
    square1, square2, square3, square4 = Square(), Square(), Square(), Square()

    graphic = CompositeGraphic()
    graphic1 = CompositeGraphic()
    graphic2 = CompositeGraphic()

    graphic1.add(ellipse1)
    graphic1.add(ellipse2)
    graphic1.add(square1)
    graphic1.add(ellipse3)

    graphic2.add(ellipse4)
    graphic2.add(square2)
    graphic2.add(square3)
    graphic2.add(square4)

    graphic.add(graphic1)
    graphic.add(graphic2)
    graphic.draw()


if __name__ == "__main__":
    main()

### OUTPUT ###
# Ellipse
# Ellipse
# Square
# Ellipse
# Ellipse
# Square
# Square
# Square
