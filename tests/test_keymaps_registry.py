import pytest

from femto.keymaps import (
    ActionRef,
    Binding,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "test.action") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    token: str = "ctrl+x",
    action_id: str = "test.action",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        key=KeyInput.parse(token),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.ctrl+x")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]
    match = registry.lookup("normal", "ctrl+x")
    assert match is not None
    assert match.binding == binding
    assert match.action.id == "test.action"
    assert registry.get_binding("normal.ctrl+x") is binding
    assert registry.get_action("test.action").telemetry_name == "test.action"
    with pytest.raises(KeyError):
        registry.get_action("missing")


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="second"))


def test_same_key_in_other_mode_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal", mode="normal"))
    registry.register_binding(make_binding(binding_id="prompt", mode="prompt"))

    assert registry.stats().modes == ("normal", "prompt")


def test_replace_swaps_conflicting_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("test.other"))
    registry.register_binding(make_binding(binding_id="first"))

    registry.register_binding(
        make_binding(binding_id="second", action_id="test.other"), replace=True
    )

    match = registry.lookup("normal", "ctrl+x")
    assert match is not None
    assert match.binding.id == "second"
    assert registry.stats().binding_count == 1


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_duplicate_action_rejected() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="gone"))

    removed = registry.unregister_binding("gone")

    assert removed is not None
    assert registry.lookup("normal", "ctrl+x") is None
    assert registry.unregister_binding("gone") is None


def test_key_tokens_normalize_modifiers() -> None:
    assert KeyInput.parse("ctrl+q").token == "ctrl+q"
    assert KeyInput(key="q", modifiers=("CTRL",)).token == "ctrl+q"
    assert KeyInput.char("a").is_printable
    assert not KeyInput(key="a", modifiers=("ctrl",), text="a").is_printable
    assert not KeyInput(key="left").is_printable


def test_default_keymaps_bind_quit_and_delete_only_in_normal_mode() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    for token in ("ctrl+q", "ctrl+o", "ctrl+s", "delete"):
        assert registry.lookup("normal", token) is not None
        assert registry.lookup("prompt", token) is None

    for token in ("enter", "escape", "backspace", "left", "right", "up", "down", "home", "end"):
        assert registry.lookup("normal", token) is not None
        assert registry.lookup("prompt", token) is not None


def test_default_keymaps_respect_exclusions() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, exclude_bindings=["normal.delete"])

    assert registry.lookup("normal", "delete") is None
