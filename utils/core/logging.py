#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration and utilities
"""

# Standard library imports
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

# Third-party imports
import logging
import urllib3
from urllib3.exceptions import InsecureRequestWarning

# Local imports
from config import (
    APP_NAME,
    LOG_FILE_PATTERN,
    LOG_MAX_AGE_S,
    LOG_MAX_FILE_SIZE_MB_DEFAULT,
    LOG_SEPARATOR_WIDTH,
    LOG_TIMESTAMP_FORMAT,
)

# Add custom TRACE logging level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

def trace(self, message, *args, **kwargs):
    """Log a trace message (ultra-detailed, below DEBUG)"""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)

# Add trace() method to Logger class
logging.Logger.trace = trace

# Global log mode (set by setup_logging)
_CURRENT_LOG_MODE = 'customer'

_MODE_LEVELS = {
    'customer': logging.INFO,
    'verbose': logging.DEBUG,
    'debug': TRACE,
}

_MODE_FORMATS = {
    'customer': "%(_when)s | %(message)s",
    'verbose': "%(_when)s | %(levelname)-7s | %(message)s",
    'debug': "%(_when)s | %(levelname)-7s | %(name)-15s | %(funcName)-20s | %(message)s",
}


def get_log_mode() -> str:
    """Get the current logging mode"""
    return _CURRENT_LOG_MODE


class SizeRotatingFileHandler(logging.FileHandler):
    """
    File handler that rolls over to a new file when the current one
    reaches a size threshold.

    - Creates files as: base.ext, base.ext.1, base.ext.2, ...
    - Does not delete on rotation (retention handled by cleanup_logs)
    """
    def __init__(self, base_path: Path, max_bytes: int):
        self.base_path = Path(base_path)
        self.max_bytes = max_bytes
        self._index = 0
        super().__init__(self.base_path, encoding='utf-8')

    def _next_path(self) -> Path:
        self._index += 1
        return self.base_path.with_name(f"{self.base_path.name}.{self._index}")

    def emit(self, record):
        if self.stream is not None and self.stream.tell() >= self.max_bytes:
            self.stream.close()
            self.baseFilename = os.fspath(self._next_path().absolute())
            self.stream = self._open()
        super().emit(record)


class SafeStreamHandler(logging.StreamHandler):
    """A stream handler that ignores broken or closed streams"""

    def emit(self, record):
        try:
            msg = self.format(record)
            self.stream.write(msg + self.terminator)
            self.flush()
        except (BrokenPipeError, OSError, ValueError):
            pass


class _Fmt(logging.Formatter):
    def __init__(self, fmt: str, when_format: str):
        super().__init__(fmt)
        self.when_format = when_format

    def format(self, record):
        record._when = time.strftime(self.when_format, time.localtime())
        return super().format(record)


def setup_logging(log_mode: str = 'customer', *, write_logs: bool = False) -> Optional[Path]:
    """
    Setup logging configuration with three modes.

    Diagnostics go to stderr so that command output on stdout stays pipeable.

    Args:
        log_mode: 'customer' (clean logs), 'verbose' (developer), or 'debug' (ultra-detailed)
        write_logs: If True, also write a session log file in the user data directory.

    Returns:
        Path of the session log file, or None when file logging is off.
    """
    global _CURRENT_LOG_MODE
    _CURRENT_LOG_MODE = log_mode
    level = _MODE_LEVELS.get(log_mode, logging.INFO)
    fmt = _MODE_FORMATS.get(log_mode, _MODE_FORMATS['customer'])

    console_handler = SafeStreamHandler(sys.stderr)
    console_handler.setFormatter(_Fmt(fmt, "%H:%M:%S"))
    console_handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console_handler)
    # Root logger must be at TRACE so that every handler sees every record
    root.setLevel(TRACE)

    log_file = None
    if write_logs:
        try:
            from .paths import get_logs_dir
            logs_dir = get_logs_dir()
            timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
            log_file = logs_dir / f"{APP_NAME}_{timestamp}.log"
            max_bytes = int(LOG_MAX_FILE_SIZE_MB_DEFAULT * 1024 * 1024)
            file_handler = SizeRotatingFileHandler(log_file, max_bytes)
            file_handler.setFormatter(_Fmt(fmt, "%Y-%m-%d %H:%M:%S"))
            file_handler.setLevel(level)
            root.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, continue without it
            log_file = None
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    if log_mode != 'customer':
        logger = logging.getLogger("startup")
        logger.info("=" * LOG_SEPARATOR_WIDTH)
        if log_file:
            logger.info(f"{APP_NAME} - Starting... (Log file: {log_file.name})")
        else:
            logger.info(f"{APP_NAME} - Starting... (logs disabled)")
        logger.info("=" * LOG_SEPARATOR_WIDTH)
        if log_mode == 'debug':
            logger.info("Debug mode: ON (ultra-detailed logs with function traces)")
        else:
            logger.info("Verbose mode: ON (developer logs with technical details)")

    # Suppress HTTPS/HTTP and websocket logs
    logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("websocket").setLevel(logging.WARNING)

    # Disable SSL warnings for LCU (self-signed cert)
    urllib3.disable_warnings(InsecureRequestWarning)

    return log_file


def get_logger(name: str = APP_NAME) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)


def cleanup_logs():
    """Delete session logs older than LOG_MAX_AGE_S"""
    try:
        from .paths import get_user_data_dir
        logs_dir = get_user_data_dir() / "logs"
        if not logs_dir.exists():
            return

        now = time.time()
        for log_file in logs_dir.glob(LOG_FILE_PATTERN + "*"):
            try:
                if now - log_file.stat().st_mtime > LOG_MAX_AGE_S:
                    log_file.unlink()
            except OSError:
                pass
    except OSError as e:
        # Don't log this error to avoid recursion
        print(f"Warning: Failed to cleanup logs: {e}", file=sys.stderr)


# ==================== Pretty Logging Helpers ====================

def log_section(logger: logging.Logger, title: str, icon: str = "📌", details: dict = None, mode: str = None):
    """
    Log a section with title and optional details

    Args:
        logger: Logger instance
        title: Main title text (will be uppercased in verbose/debug mode)
        icon: Emoji icon to use
        details: Optional dict of key-value pairs to display
        mode: 'customer' (simple), 'verbose' (detailed), or 'debug' (ultra-detailed).
              If None, uses current global log mode.

    Example:
        log_section(log, "LCU Connected", "🔗", {"Port": 2999, "Status": "Ready"})
    """
    if mode is None:
        mode = get_log_mode()

    if mode == 'customer':
        if details:
            detail_str = ", ".join(f"{k}: {v}" for k, v in details.items())
            logger.info(f"{icon} {title} ({detail_str})")
        else:
            logger.info(f"{icon} {title}")
    else:
        logger.info("=" * LOG_SEPARATOR_WIDTH)
        logger.info(f"{icon} {title.upper()}")
        if details:
            for key, value in details.items():
                logger.info(f"   📋 {key}: {value}")
        logger.info("=" * LOG_SEPARATOR_WIDTH)


def log_event(logger: logging.Logger, event: str, icon: str = "✓", details: dict = None):
    """
    Log a single event with optional details

    Example:
        log_event(log, "Websocket subscribed", "🔌", {"Event": "OnJsonApiEvent"})
    """
    logger.info(f"{icon} {event}")
    if details:
        for key, value in details.items():
            logger.info(f"   • {key}: {value}")


def log_action(logger: logging.Logger, action: str, icon: str = "⚡"):
    """Log an action being performed"""
    logger.info(f"{icon} {action}")


def log_success(logger: logging.Logger, message: str, icon: str = "✅"):
    """Log a success message"""
    logger.info(f"{icon} {message}")
