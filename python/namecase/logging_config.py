"""
Logging configuration for namecase.

The MCP server speaks JSON-RPC over stdout in stdio mode, so nothing may be
logged to stdout. Logs go to a daily file: .namecase/logs/namecase-YYYY-MM-DD.log
Console (stderr) logging can be enabled for the CLI and HTTP mode.

Environment:
    NAMECASE_LOG_DIR: Directory for log files (default: ./.namecase/logs)
    NAMECASE_LOG_LEVEL: Level name such as DEBUG or WARNING (default: INFO)
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "namecase"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Handler that flushes after every emit for immediate visibility."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def resolve_log_dir(log_dir: Optional[Path] = None) -> Path:
    """Explicit argument, then NAMECASE_LOG_DIR, then ./.namecase/logs."""
    if log_dir is not None:
        return Path(log_dir)
    env_dir = os.environ.get("NAMECASE_LOG_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.cwd() / ".namecase" / "logs"


def resolve_log_level(level: Optional[int] = None) -> int:
    """Explicit argument, then NAMECASE_LOG_LEVEL, then INFO."""
    if level is not None:
        return level
    name = os.environ.get("NAMECASE_LOG_LEVEL", "INFO").upper()
    resolved = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Optional[int] = None,
    backup_count: int = 30,  # Keep 30 days of logs
    console: bool = False,  # Also log to stderr (CLI and HTTP mode)
    log_file: bool = True,  # One-shot CLI runs pass False unless asked
) -> logging.Logger:
    """
    Set up file-based logging for namecase with daily rotation.

    Safe to call repeatedly: handlers are only added once.

    Args:
        log_dir: Directory for log files (default: NAMECASE_LOG_DIR or .namecase/logs)
        level: Logging level (default: NAMECASE_LOG_LEVEL or INFO)
        backup_count: Number of daily backup files to keep
        console: If True, also log to stderr
        log_file: If False, no log directory or file is created

    Returns:
        Configured "namecase" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(level))

    has_file_handler = any(isinstance(h, FlushingHandler) for h in logger.handlers)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    )

    if (has_file_handler or not log_file) and (not console or has_console_handler):
        if not logger.handlers:
            # Keep warnings off stderr when nothing was configured
            logger.addHandler(logging.NullHandler())
        return logger

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_file and not has_file_handler:
        directory = resolve_log_dir(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
        log_path = directory / f"namecase-{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = FlushingHandler(
            log_path,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.debug(f"Log file: {log_path}")
        logger.debug(f"Log level: {logging.getLevelName(logger.level)}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a namecase logger (child loggers use "namecase.<area>")."""
    return logging.getLogger(name)
