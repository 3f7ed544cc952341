# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Hex color parsing and channel interpolation."""

import math
import re
from typing import Annotated, Any, Tuple

from pydantic import BeforeValidator
from pydantic_extra_types.color import Color

from .errors import InvalidColorFormatError

RGB = Tuple[int, int, int]

_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def parse_hex(value: str) -> RGB:
    """Parse a `#RRGGBB` string into its channels.

    Args:
        value: The color string.

    Returns:
        Tuple of (red, green, blue), each in [0, 255].

    Raises:
        InvalidColorFormatError: If the value is not a `#RRGGBB` string.
    """
    if not isinstance(value, str) or not _HEX_PATTERN.fullmatch(value):
        raise InvalidColorFormatError(value)
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


def to_hex(red: int, green: int, blue: int) -> str:
    """Encode channels as an upper-case `#RRGGBB` string."""
    channels = [min(255, max(0, int(channel))) for channel in (red, green, blue)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def normalize_hex(value: str) -> str:
    """Validate a hex color and return it in canonical upper-case form."""
    return to_hex(*parse_hex(value))


def interpolate_color(from_color: str, to_color: str, progress: float) -> str:
    """Linearly interpolate two hex colors channel by channel.

    Each channel is rounded to the nearest integer independently. Progress is
    clamped to [0, 1]; the endpoints return the input colors unchanged.

    Args:
        from_color: Starting color (e.g. "#012A2D").
        to_color: Ending color (e.g. "#FFFFFF").
        progress: Value between 0 and 1.

    Returns:
        Interpolated color as hex string.
    """
    start = parse_hex(from_color)
    end = parse_hex(to_color)
    if progress <= 0:
        return from_color
    if progress >= 1:
        return to_color
    channels = [
        round_half_up(a + (b - a) * progress) for a, b in zip(start, end)
    ]
    return to_hex(*channels)


def coerce_hex_color(value: Any) -> str:
    """Pydantic hook turning user input into a canonical hex color.

    Strings must already be `#RRGGBB`; `Color` instances are converted
    through their RGB tuple.
    """
    if isinstance(value, Color):
        red, green, blue = value.as_rgb_tuple(alpha=False)
        return to_hex(red, green, blue)
    return normalize_hex(value)


HexColor = Annotated[str, BeforeValidator(coerce_hex_color)]
