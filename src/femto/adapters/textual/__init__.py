"""Textual host: key normalization, frame painting and the ``femto`` command."""

from .controller import TextualEditorAdapter, TextualUIHooks, normalize_textual_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]
