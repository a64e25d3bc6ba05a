"""Editor telemetry on top of telelog.

Settings are read from ``FEMTO_*`` environment variables into a
:class:`LogSettings`, optionally seeded from a named preset and overridden by
the command line. Console output is off unless ``FEMTO_LOG_CONSOLE`` is set:
the editor owns the terminal while it runs, so log lines normally go to a file.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "FEMTO_"
_TRUTHY = {"1", "true", "yes", "on"}

PRESETS: Mapping[str, Mapping[str, Any]] = {
    "development": {"level": "DEBUG", "file": "femto-dev.log"},
    "production": {"level": "INFO", "file": "femto.log", "buffer_size": 2048},
    "performance": {
        "level": "DEBUG",
        "file": "femto-performance.log",
        "json": True,
        "buffer_size": 2048,
    },
}


@dataclass(slots=True)
class LogSettings:
    """Resolved logging options; ``to_config`` turns them into telelog's form."""

    level: str = "INFO"
    file: str = ""
    console: bool = False
    color: bool = True
    json: bool = False
    buffer_size: Optional[int] = None
    logger_name: str = "femto"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        env = os.environ if environ is None else environ

        def value(name: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", "")

        def flag(name: str) -> bool:
            return value(name).lower() in _TRUTHY

        settings = cls()
        if value("LOG_PRESET"):
            settings.apply_preset(value("LOG_PRESET"))
        if value("LOG_LEVEL"):
            settings.level = value("LOG_LEVEL").upper()
        if value("LOG_FILE"):
            settings.file = value("LOG_FILE")
        if value("LOGGER"):
            settings.logger_name = value("LOGGER")
        settings.console = flag("LOG_CONSOLE")
        settings.color = not flag("NO_COLOR")
        settings.json = settings.json or flag("LOG_JSON")
        if flag("LOG_BUFFERED"):
            settings.buffer_size = int(value("LOG_BUFFER_SIZE") or "2048")
        return settings

    def apply_preset(self, name: str) -> None:
        try:
            preset = PRESETS[name.lower()]
        except KeyError:
            raise ValueError(f"Unknown log preset '{name}'.") from None
        for key, item in preset.items():
            setattr(self, key, item)

    def override(
        self,
        *,
        log_file: Optional[str] = None,
        log_level: Optional[str] = None,
        log_preset: Optional[str] = None,
    ) -> "LogSettings":
        """Layer command-line options on top; a preset goes first."""

        if log_preset:
            self.apply_preset(log_preset)
        if log_level:
            self.level = log_level.upper()
        if log_file:
            self.file = log_file
        return self

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.file:
            config.with_file_output(self.file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


_settings: Optional[LogSettings] = None
_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def configure(settings: Optional[LogSettings] = None) -> LogSettings:
    """Adopt ``settings`` (default: the environment) and drop cached loggers."""

    global _settings, _config
    _settings = settings if settings is not None else LogSettings.from_env()
    _config = _settings.to_config()
    _loggers.clear()
    return _settings


def configure_from_args(
    *,
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    log_preset: Optional[str] = None,
) -> LogSettings:
    return configure(
        LogSettings.from_env().override(
            log_file=log_file, log_level=log_level, log_preset=log_preset
        )
    )


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name`` (default ``femto``)."""

    if _settings is None or _config is None:
        configure()
    assert _settings is not None
    logger_name = name or _settings.logger_name
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(key), _text(item)) for key, item in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here is reported if the span fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``component=True`` reuses ``name`` as the component id. ``metadata`` is
    pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(item) for key, item in (metadata or {}).items()}
    handle = SpanHandle(log, name, component_name, dict(context))

    with ExitStack() as stack:
        for key, item in context.items():
            log.add_context(key, item)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "LogSettings",
    "SpanHandle",
    "configure",
    "configure_from_args",
    "get_logger",
    "record_event",
    "span",
]
