"""Pydantic-based configuration helpers for building loggers from the environment."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

from .facade import LoggerFacade
from .levels import OutputFormat, Severity, parse_level, parse_output_format
from .sink import Sink, StructlogSink


class LoggerSettings(BaseModel):
    """Settings read from ``SIMET_LOG_LEVEL`` and ``SIMET_LOG_FORMAT``."""

    level: Severity = Field(Severity.INFO, alias="SIMET_LOG_LEVEL")
    output_format: OutputFormat = Field(OutputFormat.JSON, alias="SIMET_LOG_FORMAT")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Severity:
        if isinstance(value, Severity):
            return value
        return parse_level(str(value))

    @field_validator("output_format", mode="before")
    @classmethod
    def _parse_format(cls, value: Any) -> OutputFormat:
        return parse_output_format(value if isinstance(value, OutputFormat) else str(value))


@lru_cache()
def get_settings() -> LoggerSettings:
    """Fetch and cache settings from environment variables."""

    return LoggerSettings.model_validate(dict(os.environ))


def build_logger(
    settings: LoggerSettings | None = None,
    fields: Mapping[str, Any] | None = None,
    *,
    sink: Sink | None = None,
) -> LoggerFacade:
    """Create a facade configured from *settings* (environment by default)."""

    settings = settings or get_settings()
    if sink is None:
        sink = StructlogSink(
            output_format=settings.output_format,
            minimum_severity=settings.level,
        )
    return LoggerFacade(settings.level, fields, sink=sink)
