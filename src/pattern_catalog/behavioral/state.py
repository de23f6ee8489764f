"""State.

A vending machine delegates every action to its current state object. States
decide the reply and, for the three legal moves, swap themselves out:

    Idle --insert_money--> AcceptingMoney --select_item--> Dispensing
    Dispensing --dispense_item--> Idle

Any other action prints a hint and leaves the state alone.
"""

from __future__ import annotations

import enum
from typing import Protocol

from ..registry import scenario


class VendingState(enum.Enum):
    IDLE = "Idle"
    ACCEPTING_MONEY = "AcceptingMoney"
    DISPENSING = "Dispensing"


class VendingMachineState(Protocol):
    name: VendingState

    def insert_money(self, amount: int) -> None: ...

    def select_item(self, item_code: str) -> None: ...

    def dispense_item(self) -> None: ...


class IdleState:
    name = VendingState.IDLE

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def insert_money(self, amount: int) -> None:
        print(f"{amount} credits inserted.")
        self._machine.change_state(AcceptingMoneyState(self._machine))

    def select_item(self, item_code: str) -> None:
        print("Please insert money first.")

    def dispense_item(self) -> None:
        print("Please select an item first.")


class AcceptingMoneyState:
    name = VendingState.ACCEPTING_MONEY

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def insert_money(self, amount: int) -> None:
        print(f"{amount} credits inserted.")

    def select_item(self, item_code: str) -> None:
        print(f"Item {item_code} selected.")
        self._machine.change_state(DispensingItemState(self._machine))

    def dispense_item(self) -> None:
        print("Please select an item first.")


class DispensingItemState:
    name = VendingState.DISPENSING

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def insert_money(self, amount: int) -> None:
        print("Please wait, dispensing item...")

    def select_item(self, item_code: str) -> None:
        print("Please wait, dispensing item...")

    def dispense_item(self) -> None:
        print("Item dispensed. Thank you for your purchase.")
        self._machine.change_state(IdleState(self._machine))


class VendingMachine:
    def __init__(self) -> None:
        self._state: VendingMachineState = IdleState(self)

    @property
    def state_name(self) -> VendingState:
        return self._state.name

    def insert_money(self, amount: int) -> None:
        self._state.insert_money(amount)

    def select_item(self, item_code: str) -> None:
        self._state.select_item(item_code)

    def dispense_item(self) -> None:
        self._state.dispense_item()

    def change_state(self, new_state: VendingMachineState) -> None:
        self._state = new_state


@scenario("state", category="behavioral", title="State")
def main() -> None:
    machine = VendingMachine()
    machine.select_item("A01")
    machine.insert_money(5)
    machine.select_item("A01")
    machine.dispense_item()
    machine.dispense_item()


if __name__ == "__main__":
    main()

### OUTPUT ###
# Please insert money first.
# 5 credits inserted.
# Item A01 selected.
# Item dispensed. Thank you for your purchase.
# Please select an item first.
