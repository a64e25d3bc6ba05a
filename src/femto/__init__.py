"""Minimal terminal text editor with an open/save command prompt."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "errors",
    "keymaps",
    "modes",
    "render",
    "runtime",
]

__version__ = "0.1.0"
