"""Dataclasses describing keys, bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Single decoded key event.

    ``key`` is a logical name (``"left"``, ``"enter"``, ``"q"`` ...) and
    ``text`` the character it produces, if any.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def char(cls, text: str) -> "KeyInput":
        return cls(key=text, text=text)

    @classmethod
    def parse(cls, token: str) -> "KeyInput":
        """Build a key from a ``"ctrl+q"`` style token."""

        *modifiers, key = token.split("+")
        return cls(key=key, modifiers=tuple(modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def is_printable(self) -> bool:
        if not self.text or set(self.modifiers) & {"ctrl", "alt"}:
            return False
        return self.text.isprintable() or self.text == "\t"


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key with an action inside one mode."""

    id: str
    mode: str
    key: KeyInput
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.key.token


@dataclass(frozen=True, slots=True)
class KeymapMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


__all__ = ["ActionRef", "Binding", "KeyInput", "KeymapMatch"]
