"""Emit one sample event per severity using environment configuration.

Usage:
    SIMET_LOG_LEVEL=debug SIMET_LOG_FORMAT=text python scripts/emit_sample_logs.py

The final FATAL event exits the process with status 1.
"""

from __future__ import annotations

from simet_logging import build_logger


def emit_samples() -> None:
    logger = build_logger(fields={"component": "sample"})
    logger.debug("debug event %d", 1)
    logger.info("info event %d", 2)
    logger.warning("warning event %d", 3)
    logger.error("error event %d", 4)
    logger.fatal("fatal event %d", 5)


if __name__ == "__main__":
    emit_samples()
