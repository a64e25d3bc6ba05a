"""Mode values: normal editing, or a command prompt that owns its line buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from femto.buffer import LineBuffer


class PromptKind(Enum):
    OPEN_FILE = "open"
    SAVE_FILE = "save"

    @property
    def label(self) -> str:
        return _PROMPT_LABELS[self]


_PROMPT_LABELS = {
    PromptKind.OPEN_FILE: "Open file at: ",
    PromptKind.SAVE_FILE: "Save file at: ",
}


@dataclass(frozen=True, slots=True)
class NormalMode:
    name = "normal"


@dataclass(frozen=True, slots=True)
class CommandPrompt:
    """Single-line command entry; ``buffer`` lives exactly as long as the prompt."""

    kind: PromptKind
    buffer: LineBuffer = field(default_factory=LineBuffer)

    name = "prompt"


Mode = Union[NormalMode, CommandPrompt]

__all__ = ["CommandPrompt", "Mode", "NormalMode", "PromptKind"]
