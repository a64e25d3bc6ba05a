"""Outcome of feeding one key to the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class KeyResult:
    """Result returned from ``InputLoop.handle_key`` and action handlers."""

    consumed: bool
    quit: bool = False
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["KeyResult"]
