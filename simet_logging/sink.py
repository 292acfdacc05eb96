"""Sink protocol and the structlog-backed sink used by default.

A sink receives fully prepared ``(severity, message, fields)`` triples from the
facade and owns rendering, output and, for ``Severity.FATAL``, process
termination. Field maps handed to a sink are private copies; a sink may keep
them.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Callable, Dict, Mapping, Protocol, TextIO

import structlog

from .levels import OutputFormat, Severity, parse_output_format
from .logging_config import build_processors


_METHOD_NAMES = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FATAL: "critical",
}

# Keys written by the message and the processors; context keys with these
# names are kept under a ``fields.`` prefix.
RESERVED_KEYS = frozenset({"event", "level", "timestamp"})

FATAL_EXIT_CODE = 1


class Sink(Protocol):
    def emit(self, severity: Severity, message: str, fields: Mapping[str, Any]) -> None:
        ...

    def set_output_format(self, output_format: OutputFormat) -> None:
        ...

    def set_minimum_severity(self, level: Severity) -> None:
        ...


def prefix_reserved_keys(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a context dict with reserved keys renamed to ``fields.<key>``."""

    context: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in RESERVED_KEYS:
            key = f"fields.{key}"
        context[key] = value
    return context


class StructlogSink:
    """Render facade events through an independent structlog logger."""

    def __init__(
        self,
        *,
        output_format: OutputFormat | str = OutputFormat.JSON,
        minimum_severity: Severity = Severity.INFO,
        stream: TextIO | None = None,
        exit_func: Callable[[int], Any] | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._exit = exit_func or self._terminate
        self._lock = threading.Lock()
        self._printer = structlog.PrintLogger(file=self._stream)
        self._output_format = parse_output_format(output_format)
        self._minimum = Severity(minimum_severity)
        self._wrapper_class, self._processors = self._build_pipeline()

    @property
    def output_format(self) -> OutputFormat:
        return self._output_format

    @property
    def minimum_severity(self) -> Severity:
        return self._minimum

    def _build_pipeline(self):
        return (
            structlog.make_filtering_bound_logger(int(self._minimum)),
            build_processors(self._output_format),
        )

    def _terminate(self, code: int) -> None:
        # Ends the whole process even when called from a worker thread.
        self._stream.flush()
        os._exit(code)

    def set_output_format(self, output_format: OutputFormat | str) -> None:
        with self._lock:
            self._output_format = parse_output_format(output_format)
            self._wrapper_class, self._processors = self._build_pipeline()

    def set_minimum_severity(self, level: Severity) -> None:
        with self._lock:
            self._minimum = Severity(level)
            self._wrapper_class, self._processors = self._build_pipeline()

    def emit(self, severity: Severity, message: str, fields: Mapping[str, Any]) -> None:
        """Write one event; FATAL events terminate the process afterwards."""

        try:
            method_name = _METHOD_NAMES[Severity(severity)]
        except ValueError as exc:
            raise ValueError(f"Unsupported severity: {severity!r}") from exc

        with self._lock:
            wrapper_class, processors = self._wrapper_class, self._processors

        log = wrapper_class(self._printer, processors, prefix_reserved_keys(fields))
        getattr(log, method_name)(message)

        if severity == Severity.FATAL:
            self._exit(FATAL_EXIT_CODE)
