"""Turn editor state into a terminal frame.

A frame is ``rows - 1`` content rows followed by one status bar row. Content
rows are the visible slice of the document; rows past the end of the document
show ``FILLER``. The status bar carries the prompt label, the (possibly
horizontally scrolled) command text and the 1-based caret position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from femto.modes import Editor, StatusLine
from femto.runtime import telemetry
from femto.runtime.terminal import TerminalSize, ensure_terminal_size

FILLER = "~"


@dataclass(frozen=True, slots=True)
class StatusBar:
    text: str
    trim: int = 0


@dataclass(frozen=True, slots=True)
class Frame:
    """Rendered screen content; ``cursor`` is a 1-based ``(column, row)``."""

    rows: Tuple[str, ...]
    status: StatusBar
    cursor: Tuple[int, int]
    size: TerminalSize

    def lines(self) -> Iterator[str]:
        yield from self.rows
        yield self.status.text


def render_frame(editor: Editor, size: TerminalSize) -> Frame:
    columns, rows = ensure_terminal_size(size)
    document = editor.document
    row_offset, column_offset = document.viewport.offsets

    with telemetry.span(
        "render::frame",
        metadata={"columns": columns, "rows": rows, "mode": editor.mode_name},
    ):
        content = []
        for index in range(row_offset, row_offset + size.visible_rows):
            if index < len(document.lines):
                line = document.lines[index]
                content.append(line[column_offset : column_offset + columns])
            else:
                content.append(FILLER)

        status_line = editor.status_line()
        caret_row, caret_column = document.caret
        status = compose_status_bar(
            status_line, columns, caret_row + 1, caret_column + 1
        )

        if editor.prompt is None:
            cursor = (caret_column - column_offset + 1, caret_row - row_offset + 1)
        else:
            column = len(status_line.label) + status_line.caret + 1 - status.trim
            cursor = (min(column, columns), rows)

    return Frame(rows=tuple(content), status=status, cursor=cursor, size=size)


def compose_status_bar(
    status_line: StatusLine, columns: int, row: int, column: int
) -> StatusBar:
    """Lay out ``label + text + padding + position`` in exactly ``columns`` cells.

    Text wider than the space left by the label and the position indicator is
    windowed so the caret stays visible; ``trim`` reports how many characters
    were cut from its left edge.
    """

    label, text, caret = status_line
    position = f" row: {row}, col: {column}"
    available = max(columns - len(position) - len(label), 0)

    trim = 0
    if len(text) > available:
        trim = min(caret, len(text) - available)
        text = text[trim : trim + available]
    else:
        text = text + " " * (available - len(text))

    bar = f"{label}{text}{position}"
    return StatusBar(text=bar[:columns], trim=trim)


__all__ = ["FILLER", "Frame", "StatusBar", "compose_status_bar", "render_frame"]
