"""Keymap registry and default bindings."""

from .models import ActionRef, Binding, KeyInput, KeymapMatch
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "KeymapMatch",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "load_default_keymaps",
]
