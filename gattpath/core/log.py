"""
Core logging functionality for gattpath.

Every log type writes to its own file under ``config.LOG_DIR``. Records emitted
through :func:`get_logger` loggers reach the general log at the configured level
and the debug log unconditionally.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union
from . import config
from .errors import InvalidArgumentError

# Re-export log type constants for external modules
LOG__GENERAL = config.LOG__GENERAL
LOG__DEBUG = config.LOG__DEBUG
LOG__PARSE = config.LOG__PARSE

_LOG_PATHS: Dict[str, Path] = {
    LOG__GENERAL: config.LOG_DIR / "general.log",
    LOG__DEBUG: config.LOG_DIR / "debug.log",
    LOG__PARSE: config.LOG_DIR / "parse.log",
}

# Formatter identical to legacy (raw message only)
_formatter = logging.Formatter("%(message)s")

# Create and configure handlers
_handlers: Dict[str, logging.Handler] = {}
for log_type, path in _LOG_PATHS.items():
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_formatter)
    _handlers[log_type] = handler

_handlers[LOG__GENERAL].setLevel(logging.INFO)
_handlers[LOG__DEBUG].setLevel(logging.DEBUG)

# Root logger for gattpath; the parse log is only written through _emit
_logger = logging.getLogger("gattpath")
_logger.setLevel(logging.DEBUG)
_logger.addHandler(_handlers[LOG__GENERAL])
_logger.addHandler(_handlers[LOG__DEBUG])

# Clean up temporary variables
del log_type, path, handler


def _emit(line: str, log_type: str) -> None:
    """Internal helper to emit log records without altering the original message."""
    record = logging.LogRecord(
        name=f"gattpath.{log_type.lower()}",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=line.rstrip("\n"),
        args=(),
        exc_info=None,
    )
    _handlers.get(log_type, _handlers[LOG__GENERAL]).handle(record)


def logging__debug_log(msg: str) -> None:
    """Write to debug log."""
    _emit(msg, LOG__DEBUG)


def logging__general_log(msg: str) -> None:
    """Write to general log."""
    _emit(msg, LOG__GENERAL)


def logging__parse_log(msg: str) -> None:
    """Write to parse log."""
    _emit(msg, LOG__PARSE)


# Map log type to function for convenience
_log_func_map = {
    LOG__GENERAL: logging__general_log,
    LOG__DEBUG: logging__debug_log,
    LOG__PARSE: logging__parse_log,
}


def logging__log_event(log_type: str, string_to_log: str) -> None:
    """Log an event to the specified log type."""
    _log_func_map.get(log_type, logging__general_log)(string_to_log)


def print_and_log(output_string: str, log_type: str = LOG__GENERAL) -> None:
    """Print to stdout and log to the specified log type."""
    if log_type not in (LOG__DEBUG, LOG__PARSE):
        print(output_string)
    logging__log_event(log_type, output_string)


def set_level(level: Union[int, str]) -> None:
    """Set the threshold of the general log (the debug log keeps everything)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise InvalidArgumentError("log_level", f"unknown log level {level!r}")
        level = resolved
    _handlers[LOG__GENERAL].setLevel(level)


def get_log_path(log_type: str) -> Path:
    """Return the file backing *log_type*."""
    return _LOG_PATHS[log_type]


# Modern interface
def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger with the specified name.

    This is the preferred way to get a logger in new code.
    The logger will automatically handle writing to the appropriate log files.
    """
    if name:
        if name.startswith("gattpath."):
            name = name[len("gattpath."):]
        return _logger.getChild(name)
    return _logger
