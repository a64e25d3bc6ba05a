"""Terminal boundary: size queries and the driver protocol hosts implement."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ContextManager, NamedTuple, Protocol

from femto.errors import UnsupportedTerminalError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from femto.keymaps.models import KeyInput
    from femto.render.frame import Frame

STATUS_BAR_ROWS = 1


class TerminalSize(NamedTuple):
    """Terminal dimensions in character cells."""

    columns: int
    rows: int

    @property
    def visible_rows(self) -> int:
        return self.rows - STATUS_BAR_ROWS

    @property
    def visible_columns(self) -> int:
        return self.columns


SizeProvider = Callable[[], TerminalSize]


def ensure_terminal_size(size: TerminalSize) -> TerminalSize:
    """Return ``size`` if a frame can be laid out in it."""

    columns, rows = size
    if columns < 1 or rows < STATUS_BAR_ROWS + 1:
        raise UnsupportedTerminalError(
            f"Unsupported terminal size {columns}x{rows}", size=(columns, rows)
        )
    return size


def fixed_size(columns: int = 80, rows: int = 24) -> SizeProvider:
    """Size provider for hosts (and tests) with a known, constant terminal."""

    size = TerminalSize(columns, rows)

    def provider() -> TerminalSize:
        return size

    return provider


class TerminalDriver(Protocol):
    """Synchronous terminal host consumed by ``InputLoop.run``."""

    def session(self) -> ContextManager[object]:
        """Enter raw input mode for the duration of the block."""
        ...

    def size(self) -> TerminalSize:
        ...

    def read_key(self) -> "KeyInput":
        """Block until the next decoded key event."""
        ...

    def draw(self, frame: "Frame") -> None:
        """Clear the screen, write ``frame`` and place the cursor."""
        ...


__all__ = [
    "STATUS_BAR_ROWS",
    "SizeProvider",
    "TerminalDriver",
    "TerminalSize",
    "ensure_terminal_size",
    "fixed_size",
]
