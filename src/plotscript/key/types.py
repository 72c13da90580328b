# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Value types accepted by the key mutators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

__all__ = [
    "Boxed",
    "Horizontal",
    "Inside",
    "Justification",
    "Order",
    "Outside",
    "Position",
    "Stacked",
    "Vertical",
]


class Boxed(Enum):
    """Whether the key is surrounded by a box or not."""

    NO = "no"
    YES = "yes"


class Horizontal(Enum):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class Vertical(Enum):
    BOTTOM = "bottom"
    CENTER = "center"
    TOP = "top"


class Justification(Enum):
    """Text justification of each key entry."""

    LEFT = "left"
    RIGHT = "right"


class Order(Enum):
    """Whether the line sample is drawn before or after the entry text."""

    SAMPLE_THEN_TEXT = "sample_then_text"
    TEXT_THEN_SAMPLE = "text_then_sample"


class Stacked(Enum):
    """How the entries of the key are stacked."""

    HORIZONTALLY = "horizontally"
    VERTICALLY = "vertically"


@dataclass(frozen=True)
class Position:
    """Where the key is placed relative to the plot border.

    Use :class:`Inside` or :class:`Outside`; absolute x/y placement is not
    supported yet.
    """

    placement: ClassVar[str] = ""

    vertical: Vertical
    horizontal: Horizontal

    def __post_init__(self) -> None:
        if not self.placement:
            raise TypeError("Position is abstract; use Inside or Outside")


@dataclass(frozen=True)
class Inside(Position):
    placement: ClassVar[str] = "inside"


@dataclass(frozen=True)
class Outside(Position):
    placement: ClassVar[str] = "outside"
