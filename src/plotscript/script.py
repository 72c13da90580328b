"""Composition of script items into one gnuplot script."""

from __future__ import annotations

from typing import Protocol

__all__ = ["Script", "compose_script"]


class Script(Protocol):
    """Anything that compiles itself into newline-terminated script lines."""

    def serialize(self) -> str: ...


def compose_script(*items: Script) -> str:
    """Concatenate the compiled lines of ``items`` in the given order."""
    return "".join(item.serialize() for item in items)
