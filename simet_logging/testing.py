"""Test doubles for code that logs through :mod:`simet_logging`."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .facade import DEFAULT_DEPTH, format_message
from .levels import OutputFormat, Severity, parse_output_format


@dataclass(frozen=True)
class SinkCall:
    severity: Severity
    message: str
    fields: Mapping[str, Any]


class RecordingSink:
    """Sink that stores every emitted event instead of rendering it.

    FATAL events are recorded like any other; no process exit happens.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: List[SinkCall] = []
        self.output_format = OutputFormat.JSON
        self.minimum_severity = Severity.DEBUG

    @property
    def calls(self) -> List[SinkCall]:
        with self._lock:
            return list(self._calls)

    def emit(self, severity: Severity, message: str, fields: Mapping[str, Any]) -> None:
        with self._lock:
            # The received mapping is kept as is so callers can check it is a copy.
            self._calls.append(SinkCall(Severity(severity), message, fields))

    def set_output_format(self, output_format: OutputFormat) -> None:
        self.output_format = parse_output_format(output_format)

    def set_minimum_severity(self, level: Severity) -> None:
        self.minimum_severity = Severity(level)


@dataclass
class MockLogger:
    """Drop-in facade replacement recording each message with its context."""

    depth: int = DEFAULT_DEPTH
    context: Dict[str, Any] = field(default_factory=dict)
    output_format: OutputFormat = OutputFormat.JSON
    messages: List[tuple[Severity, str, Dict[str, Any]]] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def set_depth(self, depth: int) -> None:
        self.depth = depth

    def set_formatter(self, output_format: str) -> None:
        self.output_format = parse_output_format(output_format)

    def add_fields(self, fields: Mapping[str, Any]) -> None:
        with self._lock:
            self.context.update(fields)

    def _record(self, severity: Severity, template: str, args: tuple[Any, ...]) -> None:
        message = format_message(template, args)
        with self._lock:
            self.messages.append((severity, message, dict(self.context)))

    def fatal(self, template: str, *args: Any) -> None:
        self._record(Severity.FATAL, template, args)

    def error(self, template: str, *args: Any) -> None:
        self._record(Severity.ERROR, template, args)

    def warning(self, template: str, *args: Any) -> None:
        self._record(Severity.WARNING, template, args)

    def info(self, template: str, *args: Any) -> None:
        self._record(Severity.INFO, template, args)

    def debug(self, template: str, *args: Any) -> None:
        self._record(Severity.DEBUG, template, args)
