"""Mediator.

Chat users never reference each other; every message goes through a central
mediator that fans it out to everyone except the sender.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class ChatMediator(Protocol):
    def send_message(self, message: str, sender: "ChatUser") -> None: ...


class ChatMediatorImpl:
    def __init__(self) -> None:
        self._users: list[ChatUser] = []

    def add_user(self, user: "ChatUser") -> None:
        self._users.append(user)

    def send_message(self, message: str, sender: "ChatUser") -> None:
        for receiver in self._users:
            if receiver is not sender:
                receiver.receive(message)


class ChatUser:
    def __init__(self, name: str, mediator: ChatMediator) -> None:
        self.name = name
        self._mediator = mediator

    def send(self, message: str) -> None:
        print(f"{self.name} sending message: {message}")
        self._mediator.send_message(message, self)

    def receive(self, message: str) -> None:
        print(f"{self.name} received message: {message}")


@scenario("mediator", category="behavioral", title="Mediator")
def main() -> None:
    mediator = ChatMediatorImpl()
    user1 = ChatUser("User 1", mediator)
    user2 = ChatUser("User 2", mediator)
    user3 = ChatUser("User 3", mediator)
    for user in (user1, user2, user3):
        mediator.add_user(user)

    user1.send("Hello, everyone!")
    user2.send("Hi, User 1!")


if __name__ == "__main__":
    main()

### OUTPUT ###
# User 1 sending message: Hello, everyone!
# User 2 received message: Hello, everyone!
# User 3 received message: Hello, everyone!
# User 2 sending message: Hi, User 1!
# User 1 received message: Hi, User 1!
# User 3 received message: Hi, User 1!
