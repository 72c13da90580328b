# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Key (legend) properties and their compilation into a ``set key`` line.

Every mutator returns the same object so calls can be chained::

    KeyProperties().set_position(Inside(Vertical.TOP, Horizontal.RIGHT)).set_title("Runs")

Titles are written verbatim between single quotes. A title that itself holds a
single quote produces a line gnuplot cannot parse; no escaping is attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from plotscript.app.flags import is_enabled

from .display import display, display_placement
from .types import Boxed, Justification, Order, Position, Stacked

log = logging.getLogger(__name__)

__all__ = ["KeyProperties"]


@dataclass
class KeyProperties:
    """Legend configuration owned by a single plot."""

    visible: bool = True
    boxed: bool = False
    justification: Optional[Justification] = None  # None = engine default
    order: Optional[Order] = None
    position: Optional[Position] = None
    stacking: Optional[Stacked] = None
    title: Optional[str] = None

    def hide(self) -> KeyProperties:
        """Hide the key."""
        self.visible = False
        return self

    def show(self) -> KeyProperties:
        """Show the key (the key is shown by default)."""
        self.visible = True
        return self

    def set_boxed(self, boxed: Boxed) -> KeyProperties:
        """Select whether the key is surrounded by a box (not boxed by default)."""
        self.boxed = boxed is Boxed.YES
        return self

    def set_justification(self, justification: Justification) -> KeyProperties:
        self.justification = justification
        return self

    def set_order(self, order: Order) -> KeyProperties:
        self.order = order
        return self

    def set_position(self, position: Position) -> KeyProperties:
        self.position = position
        return self

    def set_stacking(self, stacking: Stacked) -> KeyProperties:
        self.stacking = stacking
        return self

    def set_title(self, title: str) -> KeyProperties:
        self.title = title
        return self

    def copy(self) -> KeyProperties:
        return replace(self)

    def serialize(self) -> str:
        """Compile the properties into a single newline-terminated script line."""
        if not self.visible:
            return "set key off\n"

        parts = ["set key on "]

        if self.position is not None:
            parts.append(
                f"{display_placement(self.position)} "
                f"{display(self.position.vertical)} {display(self.position.horizontal)} "
            )

        # Token order below is fixed by the gnuplot grammar.
        for value in (self.stacking, self.justification, self.order):
            if value is not None:
                parts.append(f"{display(value)} ")

        if self.title is not None:
            if "'" in self.title and is_enabled("title_quote_warning"):
                log.warning("Key title %r contains a single quote; gnuplot will reject it", self.title)
            parts.append(f"title '{self.title}' ")

        if self.boxed:
            parts.append("box ")

        parts.append("\n")
        script = "".join(parts)
        log.debug("Compiled key line: %r", script)
        return script
