"""
Logging configuration with a tag-based console handler.

Logs go to stderr: stdout carries the MCP stdio protocol and must stay clean.

Usage:
    from logging_config import get_logger
    logger = get_logger("git")
    logger.info("Server started", extra={"tool": "git_status"})
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime

# ANSI color codes for console output
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# Module-specific colors for tags
TAG_COLORS = {
    "git": "\033[92m",  # Green
    "tools": "\033[96m",  # Cyan
    "server": "\033[94m",  # Blue
    "mcp": "\033[95m",  # Magenta
    "api": "\033[93m",  # Yellow
}


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that adds colors and matches the `[tag]` console style."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color:
            level_color = COLORS.get(record.levelname, "")
            reset = COLORS["RESET"]
            tag_color = TAG_COLORS.get(record.name, "\033[37m")
        else:
            level_color = reset = tag_color = ""

        timestamp = datetime.now().strftime("%H:%M:%S")
        level_str = f"{level_color}{record.levelname:8}{reset}"
        tag_str = f"{tag_color}[{record.name}]{reset}"

        extra_parts = []
        if getattr(record, "tool", None):
            extra_parts.append(f"tool={record.tool}")
        if getattr(record, "cwd", None):
            extra_parts.append(f"cwd={record.cwd}")

        extra_str = f" ({', '.join(extra_parts)})" if extra_parts else ""
        msg = f"{timestamp} {level_str} {tag_str} {record.getMessage()}{extra_str}"

        if record.exc_info:
            msg += "\n" + self.formatException(record.exc_info)

        return msg


# Global state
_console_handler: logging.Handler | None = None
_initialized = False


def _get_console_level() -> int:
    """Get console log level from environment variable."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        return _get_console_level()
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def init_logging(console_level: int | str | None = None) -> None:
    """Initialize the logging system with a stderr console handler.

    Calling it again only adjusts the console level.
    """
    global _console_handler, _initialized

    level = _resolve_level(console_level)

    if _initialized:
        if console_level is not None and _console_handler is not None:
            _console_handler.setLevel(level)
        return

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setLevel(level)
    _console_handler.setFormatter(
        ColoredConsoleFormatter(use_color=sys.stderr.isatty() and not os.getenv("NO_COLOR"))
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(_console_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    if not _initialized:
        init_logging()
    return logging.getLogger(name)
