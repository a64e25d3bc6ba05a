"""Single-line buffer backing the command prompt."""

from __future__ import annotations

from dataclasses import dataclass

from .caret import clamp_step


@dataclass(slots=True)
class LineBuffer:
    """One line of text plus a column caret. Newlines are never stored."""

    text: str = ""
    column: int = 0

    @classmethod
    def prefilled(cls, text: str) -> "LineBuffer":
        """Return a buffer holding ``text`` with the caret at its end."""

        return cls(text=text, column=len(text))

    def insert(self, char: str) -> None:
        if char == "\n":
            return
        self.text = self.text[: self.column] + char + self.text[self.column :]
        self.move_caret(0, 1)

    def backspace(self) -> None:
        if self.column == 0:
            return
        self.text = self.text[: self.column - 1] + self.text[self.column :]
        self.move_caret(0, -1)

    def delete_forward(self) -> None:
        if self.column < len(self.text):
            self.text = self.text[: self.column] + self.text[self.column + 1 :]

    def move_caret(self, row_delta: int, column_delta: int) -> None:
        del row_delta  # a single line has no rows to move between
        self.column = clamp_step(self.column, column_delta, len(self.text))


__all__ = ["LineBuffer"]
