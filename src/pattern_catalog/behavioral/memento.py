"""Memento.

The editor hands out opaque snapshots of its text; the history keeps them and
the editor can later be rolled back to any recorded one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import HistoryIndexError
from ..registry import scenario


@dataclass(frozen=True)
class EditorMemento:
    text: str


class TextEditorMemento:
    def __init__(self, text: str) -> None:
        self.text = text

    def create_memento(self) -> EditorMemento:
        return EditorMemento(self.text)

    def restore(self, memento: EditorMemento) -> None:
        self.text = memento.text


class History:
    def __init__(self) -> None:
        self._mementos: list[EditorMemento] = []

    def __len__(self) -> int:
        return len(self._mementos)

    def save_memento(self, memento: EditorMemento) -> None:
        self._mementos.append(memento)

    def get_memento(self, index: int) -> EditorMemento:
        """Return the memento saved at ``index``.

        Only ``0 <= index < len(history)`` is valid; negative indices do not
        count from the end.
        """
        if not 0 <= index < len(self._mementos):
            raise HistoryIndexError(index, len(self._mementos))
        return self._mementos[index]


@scenario("memento", category="behavioral", title="Memento")
def main() -> None:
    history = History()
    editor = TextEditorMemento("Initial text")
    history.save_memento(editor.create_memento())

    editor.text = "Edited text"
    history.save_memento(editor.create_memento())
    print(f"Current text: {editor.text}")

    editor.restore(history.get_memento(0))
    print(f"Restored text: {editor.text}")


if __name__ == "__main__":
    main()

### OUTPUT ###
# Current text: Edited text
# Restored text: Initial text
