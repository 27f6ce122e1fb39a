"""
Logging configuration for appsettings.

The library itself only creates module loggers; applications (and the demo)
call setup_logging() once at startup.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.defaults import DEFAULT_APP_NAME

LOG_DIR_ENV = "APPSETTINGS_LOG_DIR"


def setup_logging(
    log_level: str = "INFO",
    log_file: bool = True,
    console_level: str = "INFO",
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure root logging for an application using appsettings.

    Args:
        log_level: Root logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log everything at DEBUG and above to a
            timestamped file
        console_level: Level for the stdout handler
        log_dir: Directory for the log file (defaults to get_log_dir())

    Returns:
        Root logger instance
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root.addHandler(console_handler)

    if log_file:
        directory = Path(log_dir) if log_dir else get_log_dir()
        directory.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = directory / f"{DEFAULT_APP_NAME}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root.addHandler(file_handler)

        root.info(f"Logging to file: {log_file_path}")

    return root


def get_log_dir() -> Path:
    """
    Get the log directory.

    APPSETTINGS_LOG_DIR wins; otherwise a per-user cache directory.
    """
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    if os.name == 'nt':  # Windows
        base = os.environ.get('LOCALAPPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_CACHE_HOME', os.path.expanduser('~/.cache'))
    return Path(base) / DEFAULT_APP_NAME / 'logs'
