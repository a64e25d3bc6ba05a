"""Caret-editable buffers: the document and the single-line prompt."""

from .caret import LINE_END, LINE_START, EditableBuffer, clamp_step
from .document import DocumentBuffer
from .line import LineBuffer
from .state import Caret, Viewport

__all__ = [
    "Caret",
    "DocumentBuffer",
    "EditableBuffer",
    "LINE_END",
    "LINE_START",
    "LineBuffer",
    "Viewport",
    "clamp_step",
]
