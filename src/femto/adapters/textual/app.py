"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.style import Style
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widget import Widget
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use femto.adapters.textual.app"
    ) from exc

from femto.errors import UnsupportedTerminalError
from femto.modes import Editor
from femto.render import Frame
from femto.runtime import telemetry
from femto.runtime.loop import InputLoop
from femto.runtime.terminal import TerminalSize

from .controller import TextualEditorAdapter, TextualUIHooks

USAGE = "usage: femto [FILE]"

_CARET = Style(reverse=True)
_BAR = Style(reverse=True)
_BAR_CARET = Style(reverse=False)


def frame_to_text(frame: Frame) -> Text:
    """Paint ``frame`` as one Rich text block with the caret cell highlighted."""

    text = Text(no_wrap=True, overflow="crop", end="")
    cursor_column, cursor_row = frame.cursor
    caret_offset = None

    for index, row in enumerate(frame.rows, start=1):
        line = row.replace("\t", " ")
        if index == cursor_row:
            line = line.ljust(cursor_column)
            caret_offset = len(text) + cursor_column - 1
        text.append(line)
        text.append("\n")

    bar_start = len(text)
    text.append(frame.status.text, style=_BAR)

    if cursor_row == len(frame.rows) + 1:
        offset = bar_start + cursor_column - 1
        text.stylize(_BAR_CARET, offset, offset + 1)
    elif caret_offset is not None:
        text.stylize(_CARET, caret_offset, caret_offset + 1)
    return text


class FrameView(Widget):
    """Full-screen widget that shows the latest frame."""

    DEFAULT_CSS = """
    FrameView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="frame")
        self._frame: Frame | None = None

    def show(self, frame: Frame) -> None:
        self._frame = frame
        self.refresh()

    def render(self) -> Text:
        if self._frame is None:
            return Text("")
        return frame_to_text(self._frame)


class FemtoApp(App[None]):
    """Textual host: raw input, key decoding, sizing and screen output."""

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+q", "editor_key('ctrl+q')", "Quit", show=False, priority=True),
        Binding("ctrl+c", "editor_key('ctrl+c')", show=False, priority=True),
    ]

    def __init__(self, *, path: Optional[str] = None) -> None:
        super().__init__()
        self._initial_path = path
        self._view = FrameView()
        self.adapter: TextualEditorAdapter | None = None

    def compose(self) -> ComposeResult:
        yield self._view

    def on_mount(self) -> None:
        editor = Editor(size_provider=self._terminal_size)
        hooks = TextualUIHooks(
            update_frame=self._view.show,
            size=self._terminal_size,
            request_exit=self.exit,
            log=self._log_line,
        )
        try:
            self.adapter = TextualEditorAdapter(InputLoop(editor), hooks)
            if self._initial_path:
                self.adapter.open_initial(self._initial_path)
        except UnsupportedTerminalError as exc:
            self._fail(exc)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        event.stop()
        event.prevent_default()
        try:
            self.adapter.handle_textual_key(event.key, character=event.character)
        except UnsupportedTerminalError as exc:
            self._fail(exc)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if not self.adapter:
            return
        try:
            self.adapter.resize()
        except UnsupportedTerminalError as exc:
            self._fail(exc)

    def action_editor_key(self, key: str) -> None:
        if not self.adapter:
            self.exit()
            return
        try:
            self.adapter.handle_textual_key(key)
        except UnsupportedTerminalError as exc:
            self._fail(exc)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "textual.key", level="debug", data={"line": line}, logger_name="femto.textual"
        )

    def _terminal_size(self) -> TerminalSize:
        return TerminalSize(self.size.width, self.size.height)

    def _fail(self, exc: UnsupportedTerminalError) -> None:
        telemetry.record_event("terminal.unsupported", level="error", data={"error": exc})
        self.exit(return_code=1, message=str(exc))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="femto", description="Minimal terminal text editor."
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="File to open")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: $FEMTO_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum telemetry level (default: $FEMTO_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-preset",
        default=None,
        choices=sorted(telemetry.PRESETS),
        help="Start from a named telemetry preset (default: $FEMTO_LOG_PRESET)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if len(args.files) > 1:
        print(f"Error: too many arguments.\n{USAGE}")
        return 2

    try:
        telemetry.configure_from_args(
            log_file=args.log_file,
            log_level=args.log_level,
            log_preset=args.log_preset,
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2
    app = FemtoApp(path=args.files[0] if args.files else None)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
