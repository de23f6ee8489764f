"""Chain of Responsibility.

Each handler either processes a request or passes it to the next link. The
sender never learns which handler, if any, took it.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class Handler(Protocol):
    next_handler: Handler | None

    def handle(self, request: str) -> bool: ...


class FirstHandler:
    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next_handler = next_handler

    def handle(self, request: str) -> bool:
        if request == "Request1":
            print(f"FirstHandler handled {request}")
            return True
        return self.next_handler.handle(request) if self.next_handler else False


class SecondHandler:
    def __init__(self, next_handler: Handler | None = None) -> None:
        self.next_handler = next_handler

    def handle(self, request: str) -> bool:
        if request == "Request2":
            print(f"SecondHandler handled {request}")
            return True
        return self.next_handler.handle(request) if self.next_handler else False


@scenario("chain_of_responsibility", category="behavioral", title="Chain of Responsibility")
def main() -> None:
    chain = FirstHandler(SecondHandler(None))
    for request in ("Request1", "Request2", "Request3"):
        if not chain.handle(request):
            print(f"{request} was not handled")


if __name__ == "__main__":
    main()

### OUTPUT ###
# FirstHandler handled Request1
# SecondHandler handled Request2
# Request3 was not handled
