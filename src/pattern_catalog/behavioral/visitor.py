"""Visitor.

Shapes carry a kind tag instead of overloading ``visit``. Operations are
looked up in a table keyed by ``(operation, kind)``, so adding an operation
means adding rows, not touching the shape classes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from ..registry import scenario


class ShapeKind(enum.Enum):
    CIRCLE = "Circle"
    SQUARE = "Square"


class Operation(enum.Enum):
    DRAW = "draw"
    DESCRIBE = "describe"


@dataclass(frozen=True)
class Shape:
    kind: ShapeKind

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit(self)


def circle() -> Shape:
    return Shape(ShapeKind.CIRCLE)


def square() -> Shape:
    return Shape(ShapeKind.SQUARE)


Action = Callable[[Shape], None]

DISPATCH: dict[tuple[Operation, ShapeKind], Action] = {
    (Operation.DRAW, ShapeKind.CIRCLE): lambda shape: print("Drawing Circle"),
    (Operation.DRAW, ShapeKind.SQUARE): lambda shape: print("Drawing Square"),
    (Operation.DESCRIBE, ShapeKind.CIRCLE): lambda shape: print("Circle: round, no corners"),
    (Operation.DESCRIBE, ShapeKind.SQUARE): lambda shape: print("Square: four equal sides"),
}


class ShapeVisitor:
    def __init__(self, operation: Operation, table: dict[tuple[Operation, ShapeKind], Action] | None = None) -> None:
        self.operation = operation
        self._table = DISPATCH if table is None else table

    def visit(self, shape: Shape) -> None:
        key = (self.operation, shape.kind)
        try:
            action = self._table[key]
        except KeyError:
            msg = f"No {self.operation.value} action for {shape.kind.value}"
            raise LookupError(msg) from None
        action(shape)


def visit_all(shapes: Iterable[Shape], visitor: ShapeVisitor) -> None:
    for shape in shapes:
        shape.accept(visitor)


@scenario("visitor", category="behavioral", title="Visitor")
def main() -> None:
    shapes = [circle(), square()]
    visit_all(shapes, ShapeVisitor(Operation.DRAW))


if __name__ == "__main__":
    main()

### OUTPUT ###
# Drawing Circle
# Drawing Square
