"""Builder: assemble an immutable food order one optional part at a time."""

from __future__ import annotations

from dataclasses import dataclass

from ..registry import scenario


@dataclass(frozen=True)
class FoodOrder:
    bread: str
    condiments: str | None = None
    meat: str | None = None
    fish: str | None = None

    class Builder:
        def __init__(self) -> None:
            self._bread: str | None = None
            self._condiments: str | None = None
            self._meat: str | None = None
            self._fish: str | None = None

        def bread(self, bread: str) -> FoodOrder.Builder:
            self._bread = bread
            return self

        def condiments(self, condiments: str) -> FoodOrder.Builder:
            self._condiments = condiments
            return self

        def meat(self, meat: str) -> FoodOrder.Builder:
            self._meat = meat
            return self

        def fish(self, fish: str) -> FoodOrder.Builder:
            self._fish = fish
            return self

        def build(self) -> FoodOrder:
            return FoodOrder(self._bread or "", self._condiments, self._meat, self._fish)

        def random_build(self) -> FoodOrder:
            return (
                self.bread(self._bread or "dry")
                .condiments(self._condiments or "pepper")
                .meat(self._meat or "beef")
                .fish(self._fish or "Tilapia")
                .build()
            )


@scenario("builder", category="creational", title="Builder")
def main() -> None:
    order = FoodOrder.Builder().bread("white bread").meat("bacon").condiments("olive oil").build()
    print(order)

    partial = FoodOrder.Builder().fish("Salmon").random_build()
    print(partial)


if __name__ == "__main__":
    main()

### OUTPUT ###
# FoodOrder(bread='white bread', condiments='olive oil', meat='bacon', fish=None)
# FoodOrder(bread='dry', condiments='pepper', meat='beef', fish='Salmon')
