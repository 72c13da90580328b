# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Data-only token tables mapping key value types to gnuplot keywords."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from .types import Horizontal, Justification, Order, Position, Stacked, Vertical

__all__ = ["display", "display_placement"]


_VERTICAL_TOKENS: Dict[Vertical, str] = {
    Vertical.TOP: "top",
    Vertical.CENTER: "center",
    Vertical.BOTTOM: "bottom",
}

_HORIZONTAL_TOKENS: Dict[Horizontal, str] = {
    Horizontal.LEFT: "left",
    Horizontal.CENTER: "center",
    Horizontal.RIGHT: "right",
}

# gnuplot keywords are case sensitive here ("Left"/"Right").
_JUSTIFICATION_TOKENS: Dict[Justification, str] = {
    Justification.LEFT: "Left",
    Justification.RIGHT: "Right",
}

_ORDER_TOKENS: Dict[Order, str] = {
    Order.SAMPLE_THEN_TEXT: "reverse",
    Order.TEXT_THEN_SAMPLE: "noreverse",
}

_STACKED_TOKENS: Dict[Stacked, str] = {
    Stacked.HORIZONTALLY: "horizontally",
    Stacked.VERTICALLY: "vertically",
}

_TABLES: Dict[type, Dict] = {
    Vertical: _VERTICAL_TOKENS,
    Horizontal: _HORIZONTAL_TOKENS,
    Justification: _JUSTIFICATION_TOKENS,
    Order: _ORDER_TOKENS,
    Stacked: _STACKED_TOKENS,
}


def display(value: Enum) -> str:
    """Return the scripting token for a key enum value."""
    return _TABLES[type(value)][value]


def display_placement(position: Position) -> str:
    """Return ``inside`` or ``outside`` for a placed position."""
    return position.placement
