"""Flyweight.

Orders for the same flavor share one ``CoffeeFlavor`` object; only the table
number varies per order.
"""

from __future__ import annotations

from ..registry import scenario


class CoffeeFlavor:
    def __init__(self, flavor_name: str) -> None:
        self.flavor_name = flavor_name

    def serve_coffee(self, table_number: int) -> None:
        print(f"Serving {self.flavor_name} coffee to table number {table_number}")


class CoffeeFlavorFactory:
    def __init__(self) -> None:
        self._flavors: dict[str, CoffeeFlavor] = {}

    def get_coffee_flavor(self, flavor_name: str) -> CoffeeFlavor:
        flavor = self._flavors.get(flavor_name)
        if flavor is None:
            flavor = self._flavors[flavor_name] = CoffeeFlavor(flavor_name)
        return flavor

    @property
    def total_flavors_made(self) -> int:
        return len(self._flavors)


ORDERS = (
    "Espresso", "Cappuccino", "Latte", "Espresso", "Espresso",
    "Cappuccino", "Cappuccino", "Latte", "Latte", "Espresso",
)


@scenario("flyweight", category="structural", title="Flyweight")
def main() -> None:
    factory = CoffeeFlavorFactory()
    for table_number, order in enumerate(ORDERS, start=1):
        factory.get_coffee_flavor(order).serve_coffee(table_number)
    print(f"Total coffee flavors made: {factory.total_flavors_made}")


if __name__ == "__main__":
    main()

### OUTPUT ###
# Serving Espresso coffee to table number 1
# Serving Cappuccino coffee to table number 2
# Serving Latte coffee to table number 3
# Serving Espresso coffee to table number 4
# Serving Espresso coffee to table number 5
# Serving Cappuccino coffee to table number 6
# Serving Cappuccino coffee to table number 7
# Serving Latte coffee to table number 8
# Serving Latte coffee to table number 9
# Serving Espresso coffee to table number 10
# Total coffee flavors made: 3
