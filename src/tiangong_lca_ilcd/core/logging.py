"""Logging configuration helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

from .config import Settings, get_settings

_LOG_FILE_HANDLE: TextIO | None = None


def _close_log_file() -> None:
    global _LOG_FILE_HANDLE  # pylint: disable=global-statement
    if _LOG_FILE_HANDLE is not None:
        _LOG_FILE_HANDLE.close()
        _LOG_FILE_HANDLE = None


def _open_stream(log_path: Path | None) -> TextIO:
    global _LOG_FILE_HANDLE  # pylint: disable=global-statement
    _close_log_file()
    if log_path is None:
        return sys.stdout
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _LOG_FILE_HANDLE = log_path.open("a", encoding="utf-8")
    return _LOG_FILE_HANDLE


def _processors(log_format: str) -> list[Any]:
    processors: list[Any] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    level: str | None = None,
    *,
    settings: Settings | None = None,
    log_path: Path | None = None,
) -> None:
    """Route standard logging and structlog output to stdout or a log file.

    ``level`` and ``log_path`` override ``log_level`` and ``log_file`` from the
    settings; the renderer follows ``log_format`` (JSON lines or console text).
    The reader itself never calls this; applications and scripts do, once,
    before opening packages.
    """
    resolved_settings = settings or get_settings()
    effective_level = (level or resolved_settings.log_level).upper()
    numeric_level = getattr(logging, effective_level, logging.INFO)
    stream = _open_stream(log_path or resolved_settings.log_file)

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        handlers=[logging.StreamHandler(stream)],
        force=True,
    )

    structlog.configure(
        processors=_processors(resolved_settings.log_format),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger."""
    return structlog.get_logger(name)
