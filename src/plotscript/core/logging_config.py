# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Logging configuration for the plotscript command line."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "plotscript"


def setup_logging(
    app_name: str = "plotscript",
    console_level: int = logging.WARNING,
    log_to_file: bool = False,
) -> Path | None:
    """
    Configure the ``plotscript`` logger.

    Console output goes to stderr so compiled scripts written to stdout stay
    clean. When ``log_to_file`` is set, DEBUG+ messages are also written to
    ``plotscript.log`` (1 MB per file, 3 rotations) in the platform log
    directory.

    Args:
        app_name: Application name for the log directory
        console_level: Minimum level for console output (default: WARNING)
        log_to_file: Whether to add the rotating file handler

    Returns:
        Path to the log file, or None when file logging is off
    """
    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(logging.DEBUG if log_to_file else console_level)
    # Remove any existing handlers (in case this is called multiple times)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    pkg_logger.addHandler(console_handler)

    if not log_to_file:
        return None

    log_dir = _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "plotscript.log"
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=1024 * 1024,  # 1 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    pkg_logger.addHandler(file_handler)

    log = logging.getLogger(__name__)
    log.info(f"{app_name} logging initialized")
    log.info(f"Log file: {log_path}")
    return log_path


def _get_log_directory(app_name: str) -> Path:
    """
    Get platform-specific log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: ~/.local/share/AppName/logs
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name / "logs"

    elif sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    else:
        # Linux/Unix: XDG Base Directory Specification
        xdg_data_home = os.environ.get("XDG_DATA_HOME", home / ".local" / "share")
        return Path(xdg_data_home) / app_name / "logs"


def get_log_directory(app_name: str = "plotscript") -> Path:
    """
    Get the log directory path without setting up logging.

    Useful for telling users where log files end up.
    """
    return _get_log_directory(app_name)
