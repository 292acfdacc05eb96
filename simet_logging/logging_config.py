"""Structlog configuration helpers for structured logging."""

from __future__ import annotations

from typing import Any, List

import structlog

from .levels import OutputFormat, parse_output_format


def build_processors(output_format: OutputFormat | str = OutputFormat.JSON) -> List[Any]:
    """Return the processor chain ending in the renderer for *output_format*."""

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    if parse_output_format(output_format) is OutputFormat.TEXT:
        renderer: Any = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    return [
        structlog.processors.add_log_level,
        timestamper,
        renderer,
    ]
