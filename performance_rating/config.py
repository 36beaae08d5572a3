"""Configuration loading and validation.

Loads a ``settings.toml`` and validates every field up front, before any
employee is scored.  Scoring weights, caps and rating bands are fixed and
deliberately not configurable; settings only cover logging and the
per-employee leadership score overrides.
"""

from __future__ import annotations

import logging
import math
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from performance_rating.errors import ActionableError
from performance_rating.logging import configure_file_logging, configure_stream_logging

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass
class LoggingConfig:
    """Logging settings from ``[logging]``."""

    level: str = "INFO"
    log_dir: str = ""

    @property
    def level_number(self) -> int:
        return _LEVELS[self.level]


@dataclass
class Settings:
    """Top-level validated configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    leadership_overrides: dict[str, float] = field(default_factory=dict)


DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~performance_rating.errors.ActionableError`:
      - CONFIG if the file is missing or a section has the wrong shape
      - PARSE if the TOML is malformed
      - VALIDATION if a value is out of range
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or pass the path explicitly",
        )

    try:
        raw = tomllib.loads(filepath.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(str(filepath), str(exc)) from exc

    return Settings(
        logging=_parse_logging(raw.get("logging", {})),
        leadership_overrides=_parse_overrides(raw.get("leadership", {})),
    )


def _require_table(value: Any, field_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ActionableError.config(field_name=field_name, reason="must be a table")
    return value


def _parse_logging(section: Any) -> LoggingConfig:
    table = _require_table(section, "logging")
    level = str(table.get("level", "INFO")).upper()
    if level not in _LEVELS:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"unknown level {level!r}",
            suggestion=f"Use one of: {', '.join(_LEVELS)}",
        )
    log_dir = table.get("log_dir", "")
    if not isinstance(log_dir, str):
        raise ActionableError.validation(field_name="logging.log_dir", reason="must be a string")
    return LoggingConfig(level=level, log_dir=log_dir)


def _parse_overrides(section: Any) -> dict[str, float]:
    table = _require_table(section, "leadership")
    overrides = _require_table(table.get("overrides", {}), "leadership.overrides")

    parsed: dict[str, float] = {}
    for employee_id, value in overrides.items():
        field_name = f"leadership.overrides.{employee_id}"
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ActionableError.validation(field_name=field_name, reason="must be a number")
        if not math.isfinite(value) or not 0.0 <= value <= 100.0:
            raise ActionableError.validation(
                field_name=field_name,
                reason=f"{value} is outside 0-100",
                context={"employee_id": employee_id, "value": value},
            )
        parsed[employee_id] = float(value)
    return parsed


def apply_logging(settings: Settings) -> list[logging.Handler]:
    """Attach the handlers described by ``[logging]`` and return them."""
    level = settings.logging.level_number
    handlers: list[logging.Handler] = [configure_stream_logging(level)]
    if settings.logging.log_dir:
        handlers.append(configure_file_logging(settings.logging.log_dir, level=level))
    return handlers
