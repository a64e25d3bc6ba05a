"""Editor state and mode dispatch."""

from __future__ import annotations

from typing import NamedTuple, Optional

from femto.buffer import DocumentBuffer, EditableBuffer, LineBuffer
from femto.errors import EditorIOError
from femto.runtime import telemetry
from femto.runtime.terminal import SizeProvider

from .state import CommandPrompt, Mode, NormalMode, PromptKind

DEFAULT_IDLE_LABEL = "femto"


class StatusLine(NamedTuple):
    """Text shown in the status bar and the caret column inside ``text``."""

    label: str
    text: str
    caret: int


class Editor:
    """Owns the document, the active mode and the one-shot status message."""

    def __init__(
        self,
        document: Optional[DocumentBuffer] = None,
        *,
        size_provider: Optional[SizeProvider] = None,
        idle_label: str = DEFAULT_IDLE_LABEL,
    ) -> None:
        self.document = document or DocumentBuffer(size_provider=size_provider)
        if size_provider is not None:
            self.document.size_provider = size_provider
        self.mode: Mode = NormalMode()
        self.message: Optional[str] = None
        self.idle_label = idle_label

    @property
    def mode_name(self) -> str:
        return self.mode.name

    @property
    def prompt(self) -> Optional[CommandPrompt]:
        return self.mode if isinstance(self.mode, CommandPrompt) else None

    def active_buffer(self) -> EditableBuffer:
        """Return the buffer that receives motion, backspace and delete keys."""

        if isinstance(self.mode, CommandPrompt):
            return self.mode.buffer
        return self.document

    def dispatch_character(self, char: str) -> None:
        prompt = self.prompt
        if prompt is None:
            self.document.insert(char)
        elif char == "\n":
            self._commit(prompt)
        else:
            prompt.buffer.insert(char)

    def start_open(self) -> None:
        self._switch(CommandPrompt(PromptKind.OPEN_FILE, LineBuffer()))

    def start_save(self) -> None:
        buffer = LineBuffer.prefilled(self.document.path)
        self._switch(CommandPrompt(PromptKind.SAVE_FILE, buffer))

    def cancel(self) -> None:
        self._switch(NormalMode())

    def open(self, path: str) -> bool:
        try:
            self.document.load(path)
        except EditorIOError as exc:
            self.show_message(exc.description)
            return False
        self._switch(NormalMode())
        return True

    def save(self, path: str) -> bool:
        try:
            self.document.save(path)
        except EditorIOError as exc:
            self.show_message(exc.description)
            return False
        self._switch(NormalMode())
        return True

    def show_message(self, message: str) -> None:
        """Leave any prompt and queue ``message`` for the next status bar."""

        self._switch(NormalMode())
        self.message = message
        telemetry.record_event(
            "command.error", level="warning", data={"message": message}
        )

    def status_line(self) -> StatusLine:
        """Return what the status bar shows; a pending message is consumed here."""

        prompt = self.prompt
        if prompt is not None:
            return StatusLine(prompt.kind.label, prompt.buffer.text, prompt.buffer.column)
        if self.message is not None:
            message, self.message = self.message, None
            return StatusLine("", message, 0)
        return StatusLine(self.idle_label, "", 0)

    def refresh_viewport(self) -> None:
        self.document.scroll_to_caret()

    def _commit(self, prompt: CommandPrompt) -> None:
        path = prompt.buffer.text
        telemetry.record_event(
            "command.commit", data={"kind": prompt.kind.value, "path": path}
        )
        if prompt.kind is PromptKind.OPEN_FILE:
            self.open(path)
        else:
            self.save(path)

    def _switch(self, mode: Mode) -> None:
        previous = self.mode
        self.mode = mode
        if previous.name != mode.name:
            telemetry.record_event(
                "mode.switch", data={"from": previous.name, "to": mode.name}
            )


__all__ = ["DEFAULT_IDLE_LABEL", "Editor", "StatusLine"]
