"""Input loop: one key, one editor mutation, one redraw."""

from __future__ import annotations

from typing import Optional

from femto.keymaps import KeyInput, KeymapRegistry, load_default_keymaps
from femto.modes import Editor
from femto.render import Frame, render_frame
from femto.runtime import telemetry

from .events import KeyResult
from .terminal import TerminalDriver, TerminalSize


class InputLoop:
    """Feeds decoded keys to the editor through the keymap registry."""

    def __init__(
        self, editor: Editor, *, registry: Optional[KeymapRegistry] = None
    ) -> None:
        self.editor = editor
        if registry is None:
            registry = KeymapRegistry(logger_name="femto.keymaps")
            load_default_keymaps(registry)
        self.registry = registry

    def handle_key(self, key: KeyInput) -> KeyResult:
        mode = self.editor.mode_name
        with telemetry.span(
            f"loop::{mode}",
            component=True,
            metadata={"key": key.token, "mode": mode},
        ) as handle:
            match = self.registry.lookup(mode, key.token)
            if match is not None:
                handle.add_metadata("action", match.action.telemetry_name)
                outcome = match.action(self.editor)
                if isinstance(outcome, KeyResult):
                    return outcome
                return KeyResult(consumed=True)

            if key.is_printable and key.text:
                for char in key.text:
                    self.editor.dispatch_character(char)
                return KeyResult(consumed=True, status="insert")

        return KeyResult(consumed=False, status="miss", message=key.token)

    def step(self, key: KeyInput) -> bool:
        """Handle ``key``; return ``False`` once the editor should exit."""

        result = self.handle_key(key)
        if result.quit:
            telemetry.record_event("loop.quit")
            return False
        return True

    def render(self, size: TerminalSize) -> Frame:
        return render_frame(self.editor, size)

    def run(self, driver: TerminalDriver) -> None:
        """Block on ``driver`` until quit, redrawing after every key."""

        with driver.session():
            while True:
                driver.draw(self.render(driver.size()))
                if not self.step(driver.read_key()):
                    break


__all__ = ["InputLoop"]
