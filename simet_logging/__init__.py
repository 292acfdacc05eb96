"""Structured logging facade with call-site and context enrichment."""

from .config import LoggerSettings, build_logger, get_settings  # noqa: F401
from .facade import (  # noqa: F401
    DEFAULT_DEPTH,
    UNKNOWN_LOCATION,
    Logger,
    LoggerFacade,
    new,
    with_fields,
)
from .levels import OutputFormat, Severity, parse_level  # noqa: F401
from .sink import Sink, StructlogSink  # noqa: F401

__all__ = [
    "DEFAULT_DEPTH",
    "UNKNOWN_LOCATION",
    "Logger",
    "LoggerFacade",
    "new",
    "with_fields",
    "LoggerSettings",
    "build_logger",
    "get_settings",
    "OutputFormat",
    "Severity",
    "parse_level",
    "Sink",
    "StructlogSink",
]
