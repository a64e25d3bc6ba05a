"""Caret and viewport state for document buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Caret = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class Viewport:
    """Top-left document cell mapped onto the terminal."""

    row_offset: int = 0
    column_offset: int = 0

    def follow(self, caret: Caret, visible_rows: int, visible_columns: int) -> None:
        """Scroll the least amount needed to keep ``caret`` on screen."""

        row, column = caret
        self.row_offset = _follow_axis(self.row_offset, row, visible_rows)
        self.column_offset = _follow_axis(self.column_offset, column, visible_columns)

    def reset(self) -> None:
        self.row_offset = 0
        self.column_offset = 0

    @property
    def offsets(self) -> Caret:
        return (self.row_offset, self.column_offset)


def _follow_axis(offset: int, position: int, span: int) -> int:
    if position < offset:
        return position
    if position > offset + (span - 1):
        return position - (span - 1)
    return offset


__all__ = ["Caret", "Viewport"]
