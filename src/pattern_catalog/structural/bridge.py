"""Bridge: one remote control abstraction drives any appliance implementation."""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class Appliance(Protocol):
    def run(self) -> None: ...


class TV:
    def run(self) -> None:
        print("TV turned on")


class VacuumCleaner:
    def run(self) -> None:
        print("VacuumCleaner turned on")


class RemoteControl:
    def __init__(self, appliance: Appliance) -> None:
        self.appliance = appliance

    def turn_on(self) -> None:
        self.appliance.run()


@scenario("bridge", category="structural", title="Bridge")
def main() -> None:
    RemoteControl(appliance=TV()).turn_on()
    RemoteControl(appliance=VacuumCleaner()).turn_on()


if __name__ == "__main__":
    main()

### OUTPUT ###
# TV turned on
# VacuumCleaner turned on
