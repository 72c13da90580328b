"""Application configuration helpers."""

from plotscript.app.flags import all_enabled, is_enabled, reload

__all__ = ["all_enabled", "is_enabled", "reload"]
