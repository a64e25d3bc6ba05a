"""Editing verbs bound to keys."""

from .core import (
    backspace,
    cancel_prompt,
    delete_forward,
    insert_newline,
    move_down,
    move_left,
    move_line_end,
    move_line_start,
    move_right,
    move_up,
    quit_editor,
    start_open,
    start_save,
)

__all__ = [
    "backspace",
    "cancel_prompt",
    "delete_forward",
    "insert_newline",
    "move_down",
    "move_left",
    "move_line_end",
    "move_line_start",
    "move_right",
    "move_up",
    "quit_editor",
    "start_open",
    "start_save",
]
