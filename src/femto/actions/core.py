"""Action implementations shared by both modes.

Motion and deletion act on ``editor.active_buffer()`` so the same binding
drives the document in normal mode and the line buffer in a prompt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from femto.buffer import LINE_END, LINE_START
from femto.runtime.events import KeyResult

if TYPE_CHECKING:  # pragma: no cover - typing only
    from femto.modes import Editor


def quit_editor(editor: "Editor") -> KeyResult:
    del editor
    return KeyResult(consumed=True, quit=True, status="quit")


def start_open(editor: "Editor") -> KeyResult:
    editor.start_open()
    return KeyResult(consumed=True, status="prompt_open")


def start_save(editor: "Editor") -> KeyResult:
    editor.start_save()
    return KeyResult(consumed=True, status="prompt_save")


def cancel_prompt(editor: "Editor") -> KeyResult:
    editor.cancel()
    return KeyResult(consumed=True, status="prompt_cancel")


def insert_newline(editor: "Editor") -> KeyResult:
    committing = editor.prompt is not None
    editor.dispatch_character("\n")
    if committing:
        return KeyResult(consumed=True, status="commit", message=editor.message)
    return KeyResult(consumed=True, status="newline")


def backspace(editor: "Editor") -> KeyResult:
    editor.active_buffer().backspace()
    return KeyResult(consumed=True, status="backspace")


def delete_forward(editor: "Editor") -> KeyResult:
    editor.active_buffer().delete_forward()
    return KeyResult(consumed=True, status="delete")


def _move(editor: "Editor", row_delta: int, column_delta: int) -> KeyResult:
    editor.active_buffer().move_caret(row_delta, column_delta)
    return KeyResult(consumed=True, status="move")


def move_left(editor: "Editor") -> KeyResult:
    return _move(editor, 0, -1)


def move_right(editor: "Editor") -> KeyResult:
    return _move(editor, 0, 1)


def move_up(editor: "Editor") -> KeyResult:
    return _move(editor, -1, 0)


def move_down(editor: "Editor") -> KeyResult:
    return _move(editor, 1, 0)


def move_line_start(editor: "Editor") -> KeyResult:
    return _move(editor, 0, LINE_START)


def move_line_end(editor: "Editor") -> KeyResult:
    return _move(editor, 0, LINE_END)


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
