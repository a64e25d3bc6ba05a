"""Error taxonomy shared by the buffers, the editor, and the terminal host."""

from __future__ import annotations


class FemtoError(RuntimeError):
    """Base class for errors raised by the editor."""


class EditorIOError(FemtoError):
    """Raised when a document cannot be read from or written to ``path``.

    ``description`` is the human readable text surfaced in the status bar.
    """

    def __init__(self, path: str, description: str) -> None:
        super().__init__(description)
        self.path = path
        self.description = description

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "EditorIOError":
        reason = exc.strerror or str(exc)
        return cls(path, f"{reason}: {path!r}" if path else reason)


class UnsupportedTerminalError(FemtoError):
    """Raised when the terminal size cannot be used to lay out a frame."""

    def __init__(self, message: str, *, size: tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.size = size


__all__ = ["FemtoError", "EditorIOError", "UnsupportedTerminalError"]
