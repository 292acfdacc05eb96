"""Tests for configuration helpers."""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:  # pragma: no cover
    sys.path.insert(0, str(ROOT))

from simet_logging import config  # noqa: E402
from simet_logging.levels import OutputFormat, Severity  # noqa: E402
from simet_logging.sink import StructlogSink  # noqa: E402
from simet_logging.testing import RecordingSink  # noqa: E402


def test_get_settings_defaults_without_environment(monkeypatch):
    monkeypatch.delenv("SIMET_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SIMET_LOG_FORMAT", raising=False)
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.level is Severity.INFO
    assert settings.output_format is OutputFormat.JSON
    config.get_settings.cache_clear()


def test_get_settings_parses_environment(monkeypatch):
    monkeypatch.setenv("SIMET_LOG_LEVEL", "debug")
    monkeypatch.setenv("SIMET_LOG_FORMAT", "text")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.level is Severity.DEBUG
    assert settings.output_format is OutputFormat.TEXT
    config.get_settings.cache_clear()


def test_unrecognised_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SIMET_LOG_LEVEL", "loud")
    monkeypatch.setenv("SIMET_LOG_FORMAT", "xml")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.level is Severity.INFO
    assert settings.output_format is OutputFormat.JSON
    config.get_settings.cache_clear()


def test_settings_accept_aliases():
    settings = config.LoggerSettings(SIMET_LOG_LEVEL="warning", SIMET_LOG_FORMAT="text")

    assert settings.level is Severity.WARNING
    assert settings.output_format is OutputFormat.TEXT


def test_build_logger_configures_default_sink():
    settings = config.LoggerSettings(SIMET_LOG_LEVEL="error", SIMET_LOG_FORMAT="text")

    logger = config.build_logger(settings, {"service": "api"})

    assert logger.level is Severity.ERROR
    assert logger.fields == {"service": "api"}
    assert isinstance(logger.sink, StructlogSink)
    assert logger.sink.minimum_severity is Severity.ERROR
    assert logger.sink.output_format is OutputFormat.TEXT


def test_build_logger_reads_environment_when_settings_omitted(monkeypatch):
    monkeypatch.setenv("SIMET_LOG_LEVEL", "warning")
    config.get_settings.cache_clear()
    sink = RecordingSink()

    logger = config.build_logger(sink=sink)
    logger.info("hidden")
    logger.warning("shown")

    assert [call.message for call in sink.calls] == ["shown"]
    config.get_settings.cache_clear()


def test_unprefixed_environment_names_are_ignored(monkeypatch):
    monkeypatch.delenv("SIMET_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SIMET_LOG_FORMAT", raising=False)
    monkeypatch.setenv("level", "debug")
    monkeypatch.setenv("output_format", "text")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.level is Severity.INFO
    assert settings.output_format is OutputFormat.JSON
    config.get_settings.cache_clear()
