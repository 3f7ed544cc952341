# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import List, Sequence, Tuple

from pydantic import BaseModel, Field

from patternforge.core import HexColor


class ColorPin(BaseModel):
    """A positioned, colored control point of a mesh gradient.

    Disabled pins are excluded from blending but keep their slot so the pin
    array can be indexed stably.
    """

    enabled: bool = Field(default=True, description="Whether the pin contributes.")
    x: float = Field(default=0.5, ge=0.0, le=1.0, description="Normalized X position.")
    y: float = Field(default=0.5, ge=0.0, le=1.0, description="Normalized Y position.")
    color: HexColor = Field(default="#FFFFFF", description="Pin color (#RRGGBB).")
    opacity: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Pin opacity (0.0 to 1.0)."
    )

    model_config = {"extra": "forbid", "frozen": True}


PinSet = Tuple[ColorPin, ColorPin, ColorPin, ColorPin, ColorPin]


def enabled_pins(pins: Sequence[ColorPin]) -> List[ColorPin]:
    return [pin for pin in pins if pin.enabled]


def invert_pins(pins: Sequence[ColorPin]) -> Tuple[ColorPin, ...]:
    """Mirror every pin through the center (`x' = 1 - x`, `y' = 1 - y`)."""
    return tuple(
        pin.model_copy(update={"x": 1.0 - pin.x, "y": 1.0 - pin.y}) for pin in pins
    )
