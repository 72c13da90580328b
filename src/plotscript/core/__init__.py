"""Shared runtime services for plotscript."""

from plotscript.core.logging_config import get_log_directory, setup_logging

__all__ = ["get_log_directory", "setup_logging"]
