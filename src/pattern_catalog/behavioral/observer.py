"""Observer.

Subscribers register with a newspaper and are told about every new edition
until they unsubscribe.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class Observer(Protocol):
    def update(self) -> None: ...


class Newspaper:
    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._latest_edition = ""

    @property
    def latest_edition(self) -> str:
        return self._latest_edition

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def set_latest_edition(self, edition: str) -> None:
        self._latest_edition = edition
        self.notify_observers()

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update()


class Subscriber:
    def __init__(self, newspaper: Newspaper, name: str) -> None:
        self._newspaper = newspaper
        self.name = name
        newspaper.register_observer(self)

    def update(self) -> None:
        print(f"{self.name}: Received the latest edition of the newspaper - '{self._newspaper.latest_edition}'")


@scenario("observer", category="behavioral", title="Observer")
def main() -> None:
    newspaper = Newspaper()
    Subscriber(newspaper, "Subscriber 1")
    subscriber2 = Subscriber(newspaper, "Subscriber 2")
    Subscriber(newspaper, "Subscriber 3")

    newspaper.set_latest_edition("New Edition 1")
    newspaper.set_latest_edition("New Edition 2")

    newspaper.remove_observer(subscriber2)
    newspaper.set_latest_edition("New Edition 3")


if __name__ == "__main__":
    main()

### OUTPUT ###
# Subscriber 1: Received the latest edition of the newspaper - 'New Edition 1'
# Subscriber 2: Received the latest edition of the newspaper - 'New Edition 1'
# Subscriber 3: Received the latest edition of the newspaper - 'New Edition 1'
# Subscriber 1: Received the latest edition of the newspaper - 'New Edition 2'
# Subscriber 2: Received the latest edition of the newspaper - 'New Edition 2'
# Subscriber 3: Received the latest edition of the newspaper - 'New Edition 2'
# Subscriber 1: Received the latest edition of the newspaper - 'New Edition 3'
# Subscriber 3: Received the latest edition of the newspaper - 'New Edition 3'
