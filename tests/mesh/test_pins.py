# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from patternforge.mesh import ColorPin, enabled_pins, invert_pins


def test_pin_defaults() -> None:
    pin = ColorPin()
    assert pin.enabled
    assert pin.opacity == 1.0
    assert pin.color == "#FFFFFF"


@pytest.mark.parametrize(
    "field, value",
    [("x", -0.1), ("y", 1.5), ("opacity", 2.0), ("color", "green")],
)
def test_pin_validation(field: str, value) -> None:
    with pytest.raises(ValidationError):
        ColorPin(**{field: value})


def test_invert_pins_mirrors_through_center() -> None:
    pins = (
        ColorPin(x=0.0, y=0.25, color="#003F2D"),
        ColorPin(enabled=False, x=0.67, y=1.0, opacity=0.4),
    )
    inverted = invert_pins(pins)
    assert (inverted[0].x, inverted[0].y) == (1.0, 0.75)
    assert inverted[1].x == pytest.approx(0.33)
    assert inverted[1].y == 0.0
    # Everything except the position is kept.
    assert inverted[0].color == "#003F2D"
    assert not inverted[1].enabled
    assert inverted[1].opacity == 0.4


def test_enabled_pins_keeps_order() -> None:
    a, b = ColorPin(x=0.1), ColorPin(x=0.9)
    assert enabled_pins([a, ColorPin(enabled=False), b]) == [a, b]
