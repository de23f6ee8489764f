"""Template Method.

``Game.play`` fixes the order of the steps; the rules object supplies what
each step does.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class GameRules(Protocol):
    def initialize(self) -> None: ...

    def start_play(self) -> None: ...

    def end_play(self) -> None: ...


class Game:
    def __init__(self, rules: GameRules) -> None:
        self._rules = rules

    def play(self) -> None:
        self._rules.initialize()
        self._rules.start_play()
        self._rules.end_play()


class Cricket:
    def initialize(self) -> None:
        print("Cricket Game Initialized! Start playing.")

    def start_play(self) -> None:
        print("Cricket Game Started. Enjoy the game!")

    def end_play(self) -> None:
        print("Cricket Game Finished!")


class Football:
    def initialize(self) -> None:
        print("Football Game Initialized! Start playing.")

    def start_play(self) -> None:
        print("Football Game Started. Enjoy the game!")

    def end_play(self) -> None:
        print("Football Game Finished!")


@scenario("template_method", category="behavioral", title="Template Method")
def main() -> None:
    cricket = Game(Cricket())
    football = Game(Football())

    print("Playing Cricket:")
    cricket.play()

    print("\nPlaying Football:")
    football.play()


if __name__ == "__main__":
    main()

### OUTPUT ###
# Playing Cricket:
# Cricket Game Initialized! Start playing.
# Cricket Game Started. Enjoy the game!
# Cricket Game Finished!
#
# Playing Football:
# Football Game Initialized! Start playing.
# Football Game Started. Enjoy the game!
# Football Game Finished!
