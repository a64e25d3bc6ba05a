from __future__ import annotations

from typing import List

import pytest

from femto.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    normalize_textual_key,
)
from femto.buffer import DocumentBuffer
from femto.errors import UnsupportedTerminalError
from femto.modes import Editor
from femto.render import Frame
from femto.runtime.loop import InputLoop
from femto.runtime.terminal import TerminalSize


def make_adapter(
    frames: List[Frame],
    *,
    exits: List[bool] | None = None,
    logs: List[str] | None = None,
    size: TerminalSize = TerminalSize(30, 6),
) -> TextualEditorAdapter:
    editor = Editor(DocumentBuffer(), size_provider=lambda: size)
    hooks = TextualUIHooks(
        update_frame=frames.append,
        size=lambda: size,
        request_exit=lambda: exits.append(True) if exits is not None else None,
        log=logs.append if logs is not None else (lambda line: None),
    )
    return TextualEditorAdapter(InputLoop(editor), hooks)


def test_normalize_named_and_character_keys() -> None:
    assert normalize_textual_key("enter").token == "enter"
    assert normalize_textual_key("escape").token == "escape"
    assert normalize_textual_key("ctrl+s").token == "ctrl+s"
    tab = normalize_textual_key("tab", "\t")
    assert tab is not None and tab.text == "\t"
    letter = normalize_textual_key("A", "A")
    assert letter is not None and letter.text == "A"
    space = normalize_textual_key("space", " ")
    assert space is not None and space.text == " "
    assert normalize_textual_key("f5") is None


def test_adapter_renders_initial_frame_and_after_keys() -> None:
    frames: List[Frame] = []
    adapter = make_adapter(frames)

    adapter.handle_textual_key("h", character="h")
    adapter.handle_textual_key("i", character="i")

    assert len(frames) == 3
    assert frames[-1].rows[0] == "hi"
    assert frames[-1].cursor == (3, 1)
    assert adapter.editor.document.lines == ["hi"]


def test_adapter_quit_requests_exit() -> None:
    frames: List[Frame] = []
    exits: List[bool] = []
    adapter = make_adapter(frames, exits=exits)

    result = adapter.handle_textual_key("ctrl+q")

    assert result is not None and result.quit
    assert exits == [True]


def test_adapter_prompt_flow_shows_label() -> None:
    frames: List[Frame] = []
    adapter = make_adapter(frames)

    adapter.handle_textual_key("ctrl+o")
    adapter.handle_textual_key("x", character="x")

    assert frames[-1].status.text.startswith("Open file at: x")
    assert frames[-1].cursor == (len("Open file at: ") + 2, 6)

    adapter.handle_textual_key("escape")
    assert frames[-1].status.text.startswith("femto")


def test_adapter_emits_log_lines() -> None:
    frames: List[Frame] = []
    logs: List[str] = []
    adapter = make_adapter(frames, logs=logs)

    adapter.handle_textual_key("a", character="a")
    adapter.handle_textual_key("f5")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
    assert any(line.startswith("drop ->") for line in logs)


def test_adapter_resize_rescrolls_viewport() -> None:
    frames: List[Frame] = []
    size = [TerminalSize(30, 12)]
    editor = Editor(
        DocumentBuffer([str(i) for i in range(20)]), size_provider=lambda: size[0]
    )
    adapter = TextualEditorAdapter(
        InputLoop(editor),
        TextualUIHooks(update_frame=frames.append, size=lambda: size[0]),
    )
    editor.document.move_caret(9, 0)

    size[0] = TerminalSize(30, 4)
    adapter.resize()

    assert editor.document.viewport.row_offset == 7
    assert frames[-1].rows[-1] == "9"


def test_adapter_propagates_unsupported_terminal() -> None:
    frames: List[Frame] = []
    size = [TerminalSize(30, 6)]
    editor = Editor(DocumentBuffer(), size_provider=lambda: size[0])
    adapter = TextualEditorAdapter(
        InputLoop(editor),
        TextualUIHooks(update_frame=frames.append, size=lambda: size[0]),
    )

    size[0] = TerminalSize(30, 1)
    with pytest.raises(UnsupportedTerminalError):
        adapter.handle_textual_key("a", character="a")
