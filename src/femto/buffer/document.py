"""Document buffer: the whole file as a list of lines plus caret and viewport."""

from __future__ import annotations

from typing import Iterable, List, Optional

from femto.errors import EditorIOError
from femto.runtime import telemetry
from femto.runtime.terminal import SizeProvider, ensure_terminal_size, fixed_size

from .caret import clamp_step
from .state import Caret, Viewport


class DocumentBuffer:
    """Editable list-of-lines document.

    The caret always addresses an existing line and a column between zero and
    that line's length, inclusive. Every caret motion also scrolls the
    viewport so the caret stays inside the terminal area reported by
    ``size_provider`` (minus the status bar row).
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        path: str = "",
        size_provider: Optional[SizeProvider] = None,
    ) -> None:
        self.lines: List[str] = list(lines) if lines is not None else [""]
        if not self.lines:
            self.lines = [""]
        self.path = path
        self.row = 0
        self.column = 0
        self.viewport = Viewport()
        self.size_provider: SizeProvider = size_provider or fixed_size()

    @property
    def caret(self) -> Caret:
        return (self.row, self.column)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.row]

    def insert(self, char: str) -> None:
        line = self.current_line
        if char == "\n":
            self.lines[self.row] = line[: self.column]
            self.lines.insert(self.row + 1, line[self.column :])
            self.move_caret(1, -self.column)
            return

        self.lines[self.row] = line[: self.column] + char + line[self.column :]
        self.move_caret(0, 1)

    def backspace(self) -> None:
        if self.column > 0:
            line = self.current_line
            self.lines[self.row] = line[: self.column - 1] + line[self.column :]
            self.move_caret(0, -1)
        elif self.row > 0:
            suffix = self.lines.pop(self.row)
            self.move_caret(-1, 0)
            joint = len(self.current_line)
            self.lines[self.row] = self.current_line + suffix
            self.move_caret(0, joint - self.column)

    def delete_forward(self) -> None:
        line = self.current_line
        if self.column < len(line):
            self.lines[self.row] = line[: self.column] + line[self.column + 1 :]
        elif self.row < len(self.lines) - 1:
            self.lines[self.row] = line + self.lines.pop(self.row + 1)

    def move_caret(self, row_delta: int, column_delta: int) -> None:
        self.row = clamp_step(self.row, row_delta, len(self.lines) - 1)
        self.column = clamp_step(self.column, column_delta, len(self.current_line))
        self.scroll_to_caret()

    def scroll_to_caret(self) -> None:
        """Re-derive the viewport offsets for the current caret and terminal."""

        size = ensure_terminal_size(self.size_provider())
        self.viewport.follow(self.caret, size.visible_rows, size.visible_columns)

    def load(self, path: str) -> None:
        """Replace the document with the contents of ``path``."""

        with telemetry.span(
            "document::load", component="document", metadata={"path": path}
        ) as handle:
            try:
                with open(path, "r", encoding="utf-8", newline="") as stream:
                    text = stream.read()
            except OSError as exc:
                raise EditorIOError.from_os_error(path, exc) from exc
            except UnicodeDecodeError as exc:
                raise EditorIOError(path, f"Not a UTF-8 text file: {path!r}") from exc

            self.lines = _split_records(text)
            self.path = path
            self.row = 0
            self.column = 0
            self.viewport.reset()
            handle.add_metadata("lines", len(self.lines))
        telemetry.record_event(
            "document.load", data={"path": path, "lines": len(self.lines)}
        )

    def save(self, path: str) -> None:
        """Write every line, each followed by a newline, to ``path``."""

        with telemetry.span(
            "document::save", component="document", metadata={"path": path}
        ):
            try:
                with open(path, "w", encoding="utf-8", newline="\n") as stream:
                    for line in self.lines:
                        stream.write(line)
                        stream.write("\n")
            except OSError as exc:
                raise EditorIOError.from_os_error(path, exc) from exc
            self.path = path
        telemetry.record_event(
            "document.save", data={"path": path, "lines": len(self.lines)}
        )


def _split_records(text: str) -> List[str]:
    """Split ``\\n``-terminated records; a final terminator adds no line.

    One ``\\r`` before each terminator is dropped so CRLF files load as plain
    lines. A lone ``\\r`` elsewhere stays part of its line.
    """

    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


__all__ = ["DocumentBuffer"]
