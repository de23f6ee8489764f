"""Iterator.

Two collections with different storage expose the same traversal contract,
so client code never touches the underlying list or array.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Protocol

from ..registry import scenario


@dataclass(frozen=True)
class Product:
    id: int
    name: str


class ProductIterator(Protocol):
    def has_next(self) -> bool: ...

    def next(self) -> Product: ...


class _CursorIterator:
    """Explicit cursor that also speaks the Python iterator protocol."""

    def __init__(self, items: list[Product | None], size: Callable[[], int]) -> None:
        self._items = items
        self._size = size
        self._index = 0

    def has_next(self) -> bool:
        return self._index < self._size()

    def next(self) -> Product:
        if not self.has_next():
            raise StopIteration
        product = self._items[self._index]
        if product is None:
            msg = f"Empty slot at index {self._index}"
            raise RuntimeError(msg)
        self._index += 1
        return product

    def __iter__(self) -> Iterator[Product]:
        return self

    def __next__(self) -> Product:
        return self.next()


class ProductArrayCollection:
    CAPACITY = 10

    def __init__(self) -> None:
        self._products: list[Product | None] = [None] * self.CAPACITY
        self._count = 0

    def add(self, product: Product) -> None:
        # silently full, like a fixed array
        if self._count < len(self._products):
            self._products[self._count] = product
            self._count += 1

    def __len__(self) -> int:
        return self._count

    def create_iterator(self) -> _CursorIterator:
        return _CursorIterator(self._products, lambda: self._count)

    def __iter__(self) -> Iterator[Product]:
        return self.create_iterator()


class ProductListCollection:
    def __init__(self) -> None:
        self._products: list[Product | None] = []

    def add(self, product: Product) -> None:
        self._products.append(product)

    def __len__(self) -> int:
        return len(self._products)

    def create_iterator(self) -> _CursorIterator:
        return _CursorIterator(self._products, lambda: len(self._products))

    def __iter__(self) -> Iterator[Product]:
        return self.create_iterator()


@scenario("iterator", category="behavioral", title="Iterator")
def main() -> None:
    collection = ProductListCollection()
    collection.add(Product(1, "Product 1"))
    collection.add(Product(2, "Product 2"))
    collection.add(Product(3, "Product 3"))

    iterator = collection.create_iterator()
    while iterator.has_next():
        print(iterator.next())


if __name__ == "__main__":
    main()

### OUTPUT ###
# Product(id=1, name='Product 1')
# Product(id=2, name='Product 2')
# Product(id=3, name='Product 3')
