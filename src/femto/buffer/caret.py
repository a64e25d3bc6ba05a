"""Capability set shared by every caret-editable buffer."""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

# Column deltas large enough to reach either end of any line.
LINE_START = -sys.maxsize
LINE_END = sys.maxsize


@runtime_checkable
class EditableBuffer(Protocol):
    """Operations the input loop may send to whichever buffer is active."""

    def insert(self, char: str) -> None:
        """Insert ``char`` at the caret and advance by one column."""
        ...

    def backspace(self) -> None:
        """Remove the character before the caret."""
        ...

    def delete_forward(self) -> None:
        """Remove the character under the caret."""
        ...

    def move_caret(self, row_delta: int, column_delta: int) -> None:
        """Move the caret by a relative amount, clamped into valid positions."""
        ...


def clamp_step(position: int, delta: int, upper: int) -> int:
    """Return ``position + delta`` clamped into ``[0, upper]``."""

    return min(max(position + delta, 0), max(upper, 0))


__all__ = ["EditableBuffer", "LINE_END", "LINE_START", "clamp_step"]
