"""Logger facade that enriches structured events with call site and context.

Every event carries a ``file`` field naming the source location that invoked the
level method, plus the facade's persistent context fields.

A facade may be shared between threads. The context map is only mutated under
the facade's lock, and each log call takes a private copy of it before handing
fields to the sink, so the sink never sees the live map.

Level methods are more expensive than calling structlog directly because of the
copy and the stack walk. Calls below the minimum severity return before doing
any of that work.
"""

from __future__ import annotations

import sys
import threading
from pathlib import PurePath
from typing import Any, Dict, Mapping, Protocol

from .levels import OutputFormat, Severity, parse_level, parse_output_format
from .sink import Sink, StructlogSink

Fields = Dict[str, Any]

# Frames above the internal dispatch: 1 is the public level method, 2 its caller.
DEFAULT_DEPTH = 2
UNKNOWN_LOCATION = "[unknown]"
FILE_FIELD = "file"


class Logger(Protocol):
    """Capabilities shared by :class:`LoggerFacade` and its test double."""

    def set_depth(self, depth: int) -> None:
        ...

    def set_formatter(self, output_format: str) -> None:
        ...

    def add_fields(self, fields: Mapping[str, Any]) -> None:
        ...

    def fatal(self, template: str, *args: Any) -> None:
        ...

    def error(self, template: str, *args: Any) -> None:
        ...

    def warning(self, template: str, *args: Any) -> None:
        ...

    def info(self, template: str, *args: Any) -> None:
        ...

    def debug(self, template: str, *args: Any) -> None:
        ...


def format_location(filename: str, line: int) -> str:
    """Return ``[dir/file - line]`` using at most the last two path segments."""

    path = PurePath(filename)
    name = f"{path.parent.name}/{path.name}" if path.parent.name else path.name
    return f"[{name} - {line}]"


def format_message(template: str, args: tuple[Any, ...]) -> str:
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError, KeyError):
        return f"{template} {args!r}"


class LoggerFacade:
    """Leveled logger with persistent context fields and call-site enrichment."""

    def __init__(
        self,
        level: Severity,
        fields: Mapping[str, Any] | None = None,
        *,
        sink: Sink | None = None,
    ) -> None:
        self._level = Severity(level)
        self._depth = DEFAULT_DEPTH
        self._context: Fields = dict(fields or {})
        self._lock = threading.Lock()
        self._sink: Sink = sink if sink is not None else StructlogSink(minimum_severity=self._level)

    @property
    def level(self) -> Severity:
        return self._level

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def fields(self) -> Fields:
        """Snapshot of the context fields."""

        return self._copy_fields()

    def set_depth(self, depth: int) -> None:
        """Set how many frames above the internal dispatch the call site sits.

        Code wrapping the facade in one more function layer should use
        ``DEFAULT_DEPTH + 1``.
        """

        if depth < 0:
            raise ValueError("Call depth must not be negative.")
        self._depth = depth

    def set_formatter(self, output_format: OutputFormat | str) -> None:
        self._sink.set_output_format(parse_output_format(output_format))

    def add_fields(self, fields: Mapping[str, Any]) -> None:
        """Merge *fields* into the context; existing keys are overwritten."""

        with self._lock:
            self._context.update(fields)

    def fatal(self, template: str, *args: Any) -> None:
        # FATAL is the highest severity and is never filtered.
        self._emit(Severity.FATAL, template, args)

    def error(self, template: str, *args: Any) -> None:
        if self._level > Severity.ERROR:
            return
        self._emit(Severity.ERROR, template, args)

    def warning(self, template: str, *args: Any) -> None:
        if self._level > Severity.WARNING:
            return
        self._emit(Severity.WARNING, template, args)

    def info(self, template: str, *args: Any) -> None:
        if self._level > Severity.INFO:
            return
        self._emit(Severity.INFO, template, args)

    def debug(self, template: str, *args: Any) -> None:
        if self._level > Severity.DEBUG:
            return
        self._emit(Severity.DEBUG, template, args)

    def _emit(self, severity: Severity, template: str, args: tuple[Any, ...]) -> None:
        fields = self._copy_fields()
        fields[FILE_FIELD] = self._file()
        self._sink.emit(severity, format_message(template, args), fields)

    def _file(self) -> str:
        # One extra frame for this method itself.
        try:
            frame = sys._getframe(self._depth + 1)
        except ValueError:
            return UNKNOWN_LOCATION
        return format_location(frame.f_code.co_filename, frame.f_lineno)

    def _copy_fields(self) -> Fields:
        with self._lock:
            return dict(self._context)


def new(level: str, *, sink: Sink | None = None) -> LoggerFacade:
    """Create a facade with an empty context."""

    return LoggerFacade(parse_level(level), sink=sink)


def with_fields(level: str, fields: Mapping[str, Any], *, sink: Sink | None = None) -> LoggerFacade:
    """Create a facade whose context starts as a copy of *fields*."""

    return LoggerFacade(parse_level(level), fields, sink=sink)
