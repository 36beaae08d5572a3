from __future__ import annotations

import logging
from pathlib import Path

import pytest

from performance_rating.config import LoggingConfig, Settings, apply_logging, load_settings
from performance_rating.errors import ActionableError, ErrorType
from performance_rating.logging import logger

_VALID_SETTINGS = """\
[logging]
level = "debug"

[leadership.overrides]
"198001012005011001" = 85.0
"42" = 70
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "settings.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_valid_settings_load(tmp_path):
    settings = load_settings(_write(tmp_path, _VALID_SETTINGS))
    assert settings.logging.level == "DEBUG"
    assert settings.logging.level_number == logging.DEBUG
    assert settings.leadership_overrides == {"198001012005011001": 85.0, "42": 70.0}


def test_empty_file_uses_defaults(tmp_path):
    settings = load_settings(_write(tmp_path, ""))
    assert settings == Settings()
    assert settings.logging.level == "INFO"


def test_missing_file_is_config_error(tmp_path):
    with pytest.raises(ActionableError) as excinfo:
        load_settings(tmp_path / "nope.toml")
    assert excinfo.value.error_type is ErrorType.CONFIG


def test_malformed_toml_is_parse_error(tmp_path):
    with pytest.raises(ActionableError) as excinfo:
        load_settings(_write(tmp_path, "[logging\nlevel = "))
    assert excinfo.value.error_type is ErrorType.PARSE


def test_unknown_level_is_rejected(tmp_path):
    with pytest.raises(ActionableError) as excinfo:
        load_settings(_write(tmp_path, '[logging]\nlevel = "LOUD"\n'))
    assert excinfo.value.error_type is ErrorType.VALIDATION
    assert "logging.level" in excinfo.value.error


@pytest.mark.parametrize("value", ["120.0", "-1", '"tinggi"', "true"])
def test_bad_override_is_rejected(tmp_path, value):
    with pytest.raises(ActionableError) as excinfo:
        load_settings(_write(tmp_path, f'[leadership.overrides]\n"9" = {value}\n'))
    assert excinfo.value.error_type is ErrorType.VALIDATION
    assert "leadership.overrides.9" in excinfo.value.error


def test_overrides_must_be_a_table(tmp_path):
    with pytest.raises(ActionableError) as excinfo:
        load_settings(_write(tmp_path, "[leadership]\noverrides = 5\n"))
    assert excinfo.value.error_type is ErrorType.CONFIG


def test_apply_logging_adds_stream_and_file_handlers(tmp_path):
    settings = Settings(logging=LoggingConfig(level="WARNING", log_dir=str(tmp_path / "logs")))
    previous_level = logger.level
    handlers = apply_logging(settings)
    try:
        assert len(handlers) == 2
        assert all(h.level == logging.WARNING for h in handlers)
        logger.warning("smoke")
        log_files = list((tmp_path / "logs").glob("performance-rating_*.log"))
        assert len(log_files) == 1
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(previous_level)
