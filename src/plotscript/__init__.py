# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for plotscript."""

from plotscript.key import (
    Boxed,
    Horizontal,
    Inside,
    Justification,
    KeyProperties,
    KeySpecError,
    Order,
    Outside,
    Position,
    Stacked,
    Vertical,
    key_spec_from_dict,
    key_spec_to_dict,
    load_key_spec,
    save_key_spec,
)
from plotscript.script import Script, compose_script

__version__ = "0.1.0"

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
    "KeySpecError",
    "key_spec_from_dict",
    "key_spec_to_dict",
    "load_key_spec",
    "save_key_spec",
    "Script",
    "compose_script",
]
