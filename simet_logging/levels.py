"""Severity and output format enumerations shared by the facade and sinks."""

from __future__ import annotations

from enum import Enum, IntEnum


class Severity(IntEnum):
    """Ordered log severities, numerically aligned with the stdlib levels."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50


class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


_LEVEL_NAMES = {
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
}


def parse_level(name: str | None) -> Severity:
    """Map a level name to a :class:`Severity`, defaulting to INFO."""

    if not name:
        return Severity.INFO
    return _LEVEL_NAMES.get(name.strip().lower(), Severity.INFO)


def parse_output_format(name: str | OutputFormat | None) -> OutputFormat:
    """Map a formatter name to an :class:`OutputFormat`, defaulting to JSON."""

    if isinstance(name, OutputFormat):
        return name
    if name and name.strip().lower() == OutputFormat.TEXT.value:
        return OutputFormat.TEXT
    return OutputFormat.JSON
