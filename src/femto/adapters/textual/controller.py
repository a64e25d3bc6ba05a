"""Adapter that feeds Textual key events to the input loop and frames back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from femto.keymaps import KeyInput
from femto.render import Frame
from femto.runtime.events import KeyResult
from femto.runtime.loop import InputLoop
from femto.runtime.terminal import TerminalSize


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_NAMED_KEYS = frozenset(
    {
        "backspace",
        "delete",
        "down",
        "end",
        "enter",
        "escape",
        "home",
        "left",
        "right",
        "up",
    }
)


def normalize_textual_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual key name into a ``KeyInput``; ``None`` drops the key."""

    if key in _NAMED_KEYS:
        return KeyInput(key=key)
    if key == "tab":
        return KeyInput(key="tab", text="\t")
    if key.startswith(("ctrl+", "alt+")):
        return KeyInput.parse(key)
    if character and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to reach the Textual app."""

    update_frame: Callable[[Frame], None]
    size: Callable[[], TerminalSize]
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges Textual key events to ``InputLoop`` and repaints after each one."""

    def __init__(self, loop: InputLoop, hooks: TextualUIHooks) -> None:
        self.loop = loop
        self.hooks = hooks
        self.refresh()

    @property
    def editor(self):
        return self.loop.editor

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[KeyResult]:
        normalized = normalize_textual_key(key, character)
        if normalized is None:
            self._log_state("drop ->", key=key)
            return None

        self._log_state("key ->", key=normalized.token)
        result = self.loop.handle_key(normalized)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        if result.quit:
            self.hooks.request_exit()
            return result
        self.refresh()
        return result

    def open_initial(self, path: str) -> None:
        self.editor.open(path)
        self.refresh()

    def resize(self) -> None:
        self.editor.refresh_viewport()
        self.refresh()

    def refresh(self) -> Frame:
        frame = self.loop.render(self.hooks.size())
        self.hooks.update_frame(frame)
        return frame

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.editor
        prompt = editor.prompt
        return {
            "mode": editor.mode_name,
            "caret": editor.document.caret,
            "command": prompt.buffer.text if prompt else "",
            "path": editor.document.path,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]
