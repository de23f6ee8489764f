"""Singleton, four ways.

Each variant hands out one process-wide instance through an accessor:

* ``Singleton0.get_instance()`` - lazy, double-checked locking
* ``get_singleton1()`` - eager, built at import time
* ``get_singleton2()`` - lazy, built on first call under a lock
* ``Singleton3.INSTANCE`` - enum member
"""

from __future__ import annotations

import enum
import threading
from typing import Callable, Generic, TypeVar

from ..registry import scenario

T = TypeVar("T")


class DoubleCheckedHolder(Generic[T]):
    """Create a value on first access, exactly once across threads."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._created = False

    @property
    def created(self) -> bool:
        return self._created

    def get(self) -> T:
        if not self._created:
            with self._lock:
                if not self._created:
                    self._value = self._factory()
                    self._created = True
        return self._value  # type: ignore[return-value]


class Singleton0:
    _holder: DoubleCheckedHolder[Singleton0]
    _token = object()

    def __init__(self, token: object = None) -> None:
        if token is not Singleton0._token:
            msg = "Use Singleton0.get_instance()"
            raise TypeError(msg)

    @classmethod
    def get_instance(cls) -> Singleton0:
        return cls._holder.get()

    def do_something(self) -> str:
        return "Doing something"


Singleton0._holder = DoubleCheckedHolder(lambda: Singleton0(Singleton0._token))


class _Singleton1:
    def do_something(self) -> str:
        return "Doing something"


_singleton1 = _Singleton1()


def get_singleton1() -> _Singleton1:
    return _singleton1


class _Singleton2:
    def do_something(self) -> str:
        return "Doing something"


_singleton2 = DoubleCheckedHolder(_Singleton2)


def get_singleton2() -> _Singleton2:
    return _singleton2.get()


class Singleton3(enum.Enum):
    INSTANCE = "instance"

    def do_something(self) -> str:
        return "Doing something"


@scenario("singleton", category="creational", title="Singleton")
def main() -> None:
    variants: list[tuple[str, Callable[[], object]]] = [
        ("Singleton0 (double-checked locking)", Singleton0.get_instance),
        ("Singleton1 (eager)", get_singleton1),
        ("Singleton2 (lazy)", get_singleton2),
        ("Singleton3 (enum)", lambda: Singleton3.INSTANCE),
    ]
    for label, acquire in variants:
        first, second = acquire(), acquire()
        print(f"{label}: {first.do_something()}, same instance: {first is second}")  # type: ignore[attr-defined]


if __name__ == "__main__":
    main()

### OUTPUT ###
# Singleton0 (double-checked locking): Doing something, same instance: True
# Singleton1 (eager): Doing something, same instance: True
# Singleton2 (lazy): Doing something, same instance: True
# Singleton3 (enum): Doing something, same instance: True
