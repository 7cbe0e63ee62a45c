"""Loguru sinks for the mortmonitor CLI.

Library modules only import ``loguru.logger``; the CLI calls
``configure_logging`` once with the validated settings. The stderr sink stays
terse, and the optional file sink lands under ``paths.log_dir`` unless
``logging.file`` is an absolute path.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from mortmonitor.core.config_schema import MortMonitorConfig

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def resolve_log_file(settings: MortMonitorConfig) -> Path | None:
    """Where the file sink writes, or None when file logging is off."""
    name = settings.logging.file
    if not name:
        return None
    path = Path(name).expanduser()
    if path.is_absolute():
        return path
    log_dir = settings.paths.log_dir or settings.paths.data_dir / "logs"
    return log_dir / path


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace loguru's sinks with stderr and, if given, a rotating log file."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if log_file:
        logger.add(str(log_file), level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)


def configure_logging(settings: MortMonitorConfig) -> Path | None:
    """Set up sinks from ``settings.logging`` and return the log file in use."""
    log_file = resolve_log_file(settings)
    setup_logging(level=settings.logging.level, log_file=log_file)
    logger.debug(f"Logging at {settings.logging.level}" + (f" to {log_file}" if log_file else ""))
    return log_file
