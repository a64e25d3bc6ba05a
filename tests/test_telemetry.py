from __future__ import annotations

import pytest

from femto.runtime import telemetry
from femto.runtime.telemetry import LogSettings


def test_settings_default_to_quiet_info() -> None:
    settings = LogSettings.from_env({})

    assert settings.level == "INFO"
    assert settings.file == ""
    assert settings.console is False
    assert settings.buffer_size is None
    assert settings.logger_name == "femto"


def test_settings_read_environment() -> None:
    settings = LogSettings.from_env(
        {
            "FEMTO_LOG_LEVEL": "debug",
            "FEMTO_LOG_FILE": "trace.log",
            "FEMTO_LOG_CONSOLE": "1",
            "FEMTO_NO_COLOR": "yes",
            "FEMTO_LOG_JSON": "true",
            "FEMTO_LOG_BUFFERED": "on",
            "FEMTO_LOG_BUFFER_SIZE": "64",
            "FEMTO_LOGGER": "editor",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.file == "trace.log"
    assert settings.console is True
    assert settings.color is False
    assert settings.json is True
    assert settings.buffer_size == 64
    assert settings.logger_name == "editor"


def test_environment_preset_is_overridden_by_explicit_values() -> None:
    settings = LogSettings.from_env(
        {"FEMTO_LOG_PRESET": "production", "FEMTO_LOG_FILE": "custom.log"}
    )

    assert settings.level == "INFO"
    assert settings.file == "custom.log"
    assert settings.buffer_size == 2048


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        LogSettings.from_env({"FEMTO_LOG_PRESET": "loud"})


def test_command_line_overrides_apply_after_preset() -> None:
    settings = LogSettings().override(
        log_preset="performance", log_level="warning", log_file="run.log"
    )

    assert settings.level == "WARNING"
    assert settings.file == "run.log"
    assert settings.json is True


def test_configure_from_args_layers_flags_over_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    for name in ("LOG_PRESET", "LOG_FILE", "LOG_BUFFERED", "LOG_JSON"):
        monkeypatch.delenv(f"FEMTO_{name}", raising=False)
    monkeypatch.setenv("FEMTO_LOG_LEVEL", "error")
    adopted = []
    monkeypatch.setattr(telemetry, "configure", adopted.append)

    telemetry.configure_from_args(log_file="session.log", log_level="debug")

    (settings,) = adopted
    assert settings.level == "DEBUG"
    assert settings.file == "session.log"


def test_configure_from_args_keeps_environment_without_flags(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("FEMTO_LOG_PRESET", raising=False)
    monkeypatch.setenv("FEMTO_LOG_LEVEL", "error")
    monkeypatch.setenv("FEMTO_LOG_FILE", "env.log")
    adopted = []
    monkeypatch.setattr(telemetry, "configure", adopted.append)

    telemetry.configure_from_args()

    (settings,) = adopted
    assert settings.level == "ERROR"
    assert settings.file == "env.log"


def test_span_reports_failure_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::fail", component=True) as handle:
            handle.add_metadata("step", 1)
            raise RuntimeError("boom")

    assert handle.component_name == "test::fail"
    assert handle.metadata == {"step": "1"}
