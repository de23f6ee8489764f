"""Command.

Requests against a text editor are wrapped in objects so that the invoker
can run them now and undo them later.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..registry import scenario


class Command(Protocol):
    def execute(self) -> None: ...

    def undo(self) -> None: ...


@dataclass
class Clipboard:
    content: str = ""


class TextEditor:
    def __init__(self, initial_content: str) -> None:
        self._content = initial_content

    @property
    def content(self) -> str:
        return self._content

    def cut(self) -> str:
        cut_content = self._content[-1:]
        self._content = self._content[:-1]
        return cut_content

    def copy(self) -> str:
        return self._content

    def write(self, text: str) -> None:
        self._content += text

    def delete(self, text: str) -> None:
        self._content = self._content.removesuffix(text)

    def show(self) -> None:
        print(self._content)


class CutCommand:
    def __init__(self, receiver: TextEditor, clipboard: Clipboard) -> None:
        self._receiver = receiver
        self._clipboard = clipboard

    def execute(self) -> None:
        self._clipboard.content = self._receiver.cut()

    def undo(self) -> None:
        self._receiver.write(self._clipboard.content)
        self._clipboard.content = ""


class CopyCommand:
    def __init__(self, receiver: TextEditor, clipboard: Clipboard) -> None:
        self._receiver = receiver
        self._clipboard = clipboard

    def execute(self) -> None:
        self._clipboard.content = self._receiver.copy()

    def undo(self) -> None:
        self._clipboard.content = ""


class PasteCommand:
    def __init__(self, receiver: TextEditor, clipboard: Clipboard) -> None:
        self._receiver = receiver
        self._clipboard = clipboard

    def execute(self) -> None:
        self._receiver.write(self._clipboard.content)

    def undo(self) -> None:
        self._receiver.delete(self._clipboard.content)


class TextEditorInvoker:
    def __init__(self) -> None:
        self._history: list[Command] = []

    def __len__(self) -> int:
        return len(self._history)

    def execute_command(self, command: Command) -> None:
        self._history.append(command)
        command.execute()

    def undo(self) -> None:
        # nothing to undo is not an error
        if self._history:
            self._history.pop().undo()


@scenario("command", category="behavioral", title="Command")
def main() -> None:
    clipboard = Clipboard()
    editor = TextEditor("Baeldung")
    invoker = TextEditorInvoker()

    invoker.execute_command(CutCommand(editor, clipboard))
    invoker.execute_command(CopyCommand(editor, clipboard))
    invoker.execute_command(PasteCommand(editor, clipboard))
    editor.show()

    invoker.undo()
    editor.show()


if __name__ == "__main__":
    main()

### OUTPUT ###
# BaeldunBaeldun
# Baeldun
