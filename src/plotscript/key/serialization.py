# plotscript
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""KeyProperties serialization helpers (dict and JSON file forms)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .properties import KeyProperties
from .types import Horizontal, Inside, Justification, Order, Outside, Stacked, Vertical

log = logging.getLogger(__name__)

KEY_SPEC_VERSION = 1

__all__ = [
    "KEY_SPEC_VERSION",
    "KeySpec",
    "KeySpecError",
    "PositionSpec",
    "key_spec_from_dict",
    "key_spec_to_dict",
    "load_key_spec",
    "save_key_spec",
]


class KeySpecError(ValueError):
    """Raised when a stored key spec cannot be turned into KeyProperties."""


class PositionSpec(BaseModel):
    model_config = ConfigDict(extra="ignore")

    placement: Literal["inside", "outside"]
    vertical: Literal["top", "center", "bottom"]
    horizontal: Literal["left", "center", "right"]


class KeySpec(BaseModel):
    """JSON-friendly description of a legend."""

    # Drop unknown keys so specs written by newer versions still load.
    model_config = ConfigDict(extra="ignore")

    spec_version: int = KEY_SPEC_VERSION
    visible: bool = True
    boxed: bool = False
    justification: Optional[Literal["left", "right"]] = None
    order: Optional[Literal["sample_then_text", "text_then_sample"]] = None
    position: Optional[PositionSpec] = None
    stacking: Optional[Literal["horizontally", "vertically"]] = None
    title: Optional[str] = None


_PLACEMENTS = {"inside": Inside, "outside": Outside}


def key_spec_to_dict(props: KeyProperties) -> dict[str, Any]:
    position = None
    if props.position is not None:
        position = PositionSpec(
            placement=props.position.placement,
            vertical=props.position.vertical.value,
            horizontal=props.position.horizontal.value,
        )
    spec = KeySpec(
        visible=props.visible,
        boxed=props.boxed,
        justification=props.justification.value if props.justification is not None else None,
        order=props.order.value if props.order is not None else None,
        position=position,
        stacking=props.stacking.value if props.stacking is not None else None,
        title=props.title,
    )
    return spec.model_dump(mode="json")


def key_spec_from_dict(data: dict[str, Any]) -> KeyProperties:
    try:
        spec = KeySpec.model_validate(data)
    except ValidationError as exc:
        raise KeySpecError(f"Invalid key spec: {exc}") from exc

    if spec.spec_version > KEY_SPEC_VERSION:
        log.warning(
            "Key spec version %s is newer than supported version %s; unknown fields ignored",
            spec.spec_version,
            KEY_SPEC_VERSION,
        )

    props = KeyProperties(visible=spec.visible, boxed=spec.boxed, title=spec.title)
    if spec.justification is not None:
        props.set_justification(Justification(spec.justification))
    if spec.order is not None:
        props.set_order(Order(spec.order))
    if spec.stacking is not None:
        props.set_stacking(Stacked(spec.stacking))
    if spec.position is not None:
        placement = _PLACEMENTS[spec.position.placement]
        props.set_position(
            placement(Vertical(spec.position.vertical), Horizontal(spec.position.horizontal))
        )
    return props


def save_key_spec(path: str | Path, props: KeyProperties) -> None:
    path = Path(path)
    data = key_spec_to_dict(props)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    log.debug("Saved key spec to %s", path)


def load_key_spec(path: str | Path) -> KeyProperties:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise KeySpecError(f"{path}: not valid UTF-8 JSON ({exc})") from exc
    if not isinstance(raw, dict):
        raise KeySpecError(f"{path}: expected a JSON object, got {type(raw).__name__}")
    return key_spec_from_dict(raw)
