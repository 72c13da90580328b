"""Legend ("key") configuration and its gnuplot script compiler."""

from __future__ import annotations

from .display import display, display_placement
from .properties import KeyProperties
from .serialization import (
    KeySpec,
    KeySpecError,
    key_spec_from_dict,
    key_spec_to_dict,
    load_key_spec,
    save_key_spec,
)
from .types import (
    Boxed,
    Horizontal,
    Inside,
    Justification,
    Order,
    Outside,
    Position,
    Stacked,
    Vertical,
)

__all__ = [
    "KeyProperties",
    "Boxed",
    "Horizontal",
    "Inside",
    "Justification",
    "Order",
    "Outside",
    "Position",
    "Stacked",
    "Vertical",
    "display",
    "display_placement",
    "KeySpec",
    "KeySpecError",
    "key_spec_from_dict",
    "key_spec_to_dict",
    "load_key_spec",
    "save_key_spec",
]
