"""Built-in keymaps for normal editing and the command prompt."""

from __future__ import annotations

from typing import Iterable, Sequence

from femto.actions import core as core_actions

from .models import ActionRef, Binding, KeyInput
from .registry import KeymapRegistry

NORMAL = "normal"
PROMPT = "prompt"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="editor.quit", handler=core_actions.quit_editor, description="Quit"),
    ActionRef(
        id="prompt.open",
        handler=core_actions.start_open,
        description="Prompt for a file to open",
    ),
    ActionRef(
        id="prompt.save",
        handler=core_actions.start_save,
        description="Prompt for a path to save to",
    ),
    ActionRef(
        id="prompt.cancel",
        handler=core_actions.cancel_prompt,
        description="Leave the prompt without side effects",
    ),
    ActionRef(
        id="edit.newline",
        handler=core_actions.insert_newline,
        description="Split the line, or commit the prompt",
    ),
    ActionRef(
        id="edit.backspace",
        handler=core_actions.backspace,
        description="Delete the character before the caret",
    ),
    ActionRef(
        id="edit.delete",
        handler=core_actions.delete_forward,
        description="Delete the character under the caret",
    ),
    ActionRef(id="move.left", handler=core_actions.move_left),
    ActionRef(id="move.right", handler=core_actions.move_right),
    ActionRef(id="move.up", handler=core_actions.move_up),
    ActionRef(id="move.down", handler=core_actions.move_down),
    ActionRef(id="move.line_start", handler=core_actions.move_line_start),
    ActionRef(id="move.line_end", handler=core_actions.move_line_end),
)

_SHARED_KEYS: tuple[tuple[str, str], ...] = (
    ("enter", "edit.newline"),
    ("backspace", "edit.backspace"),
    ("escape", "prompt.cancel"),
    ("left", "move.left"),
    ("right", "move.right"),
    ("up", "move.up"),
    ("down", "move.down"),
    ("home", "move.line_start"),
    ("end", "move.line_end"),
)

# Quit and forward delete stay out of the prompt: quitting there would drop a
# half-typed path.
_NORMAL_ONLY_KEYS: tuple[tuple[str, str], ...] = (
    ("ctrl+q", "editor.quit"),
    ("ctrl+o", "prompt.open"),
    ("ctrl+s", "prompt.save"),
    ("delete", "edit.delete"),
)


def _bindings(mode: str, keys: Iterable[tuple[str, str]]) -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=f"{mode}.{token}",
            mode=mode,
            key=KeyInput.parse(token),
            action_id=action_id,
        )
        for token, action_id in keys
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bindings(NORMAL, _SHARED_KEYS + _NORMAL_ONLY_KEYS)
    + _bindings(PROMPT, _SHARED_KEYS)
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for both modes."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "NORMAL",
    "PROMPT",
    "load_default_keymaps",
]
