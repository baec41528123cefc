"""Tests for logging configuration."""

from unittest.mock import patch

import pytest

from posix_identity.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
    get_logger,
    setup_logging,
)


@pytest.mark.parametrize("verbosity,level", [
    ("QUIET", "ERROR"),
    ("normal", "WARNING"),
    ("VERBOSE", "INFO"),
    ("debug", "DEBUG"),
    ("chatty", "WARNING"),
])
def test_verbosity_maps_to_level(verbosity, level):
    assert get_log_level_from_verbosity(verbosity) == level


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
    assert LoggingConfig.resolve_level() == "DEBUG"


def test_invalid_level_falls_back_to_verbosity(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "loud")
    monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
    assert LoggingConfig.resolve_level() == "INFO"


def test_json_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "json")
    config = LoggingConfig.build_config(level="INFO")

    assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.JSON]
    assert config["root"]["level"] == "INFO"
    assert config["loggers"]["posix_identity"]["level"] == "INFO"


def test_unknown_format_is_simple():
    config = LoggingConfig.build_config(level="INFO", log_format="fancy")
    assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]


def test_setup_logging_applies_dict_config(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")

    with patch("logging.config.dictConfig") as dict_config:
        setup_logging()

    applied = dict_config.call_args.args[0]
    assert applied["root"]["level"] == "DEBUG"
    assert applied["handlers"]["console"]["stream"] == "ext://sys.stdout"


def test_get_logger_returns_named_logger():
    assert get_logger("posix_identity.features").name == "posix_identity.features"
