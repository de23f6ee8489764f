"""Decorator.

Flavors wrap a milkshake and add to whatever the wrapped one already does.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class MilkShake(Protocol):
    def get_taste(self) -> None: ...


class ConcreteMilkShake:
    def get_taste(self) -> None:
        print("It’s milk !")


class MilkShakeDecorator:
    def __init__(self, milk_shake: MilkShake) -> None:
        self._milk_shake = milk_shake

    def get_taste(self) -> None:
        self._milk_shake.get_taste()


class BananaMilkShake:
    def __init__(self, milk_shake: MilkShake) -> None:
        self._base = MilkShakeDecorator(milk_shake)

    def get_taste(self) -> None:
        self._base.get_taste()
        print(" Adding Banana flavor to the milk shake !")
        print(" It’s Banana milk shake !")


class PeanutButterMilkShake:
    def __init__(self, milk_shake: MilkShake) -> None:
        self._base = MilkShakeDecorator(milk_shake)

    def get_taste(self) -> None:
        self._base.get_taste()
        print(" Adding Peanut butter flavor to the milk shake !")
        print(" It’s Peanut butter milk shake !")


@scenario("decorator", category="structural", title="Decorator")
def main() -> None:
    PeanutButterMilkShake(ConcreteMilkShake()).get_taste()
    BananaMilkShake(ConcreteMilkShake()).get_taste()


if __name__ == "__main__":
    main()

### OUTPUT ###
# It’s milk !
#  Adding Peanut butter flavor to the milk shake !
#  It’s Peanut butter milk shake !
# It’s milk !
#  Adding Banana flavor to the milk shake !
#  It’s Banana milk shake !
