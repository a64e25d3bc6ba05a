"""Editor modes and the dispatcher that switches between them."""

from .editor import Editor, StatusLine
from .state import CommandPrompt, Mode, NormalMode, PromptKind

__all__ = [
    "CommandPrompt",
    "Editor",
    "Mode",
    "NormalMode",
    "PromptKind",
    "StatusLine",
]
