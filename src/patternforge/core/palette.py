# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Static brand reference data: named colors, color pairs and canvas sizes."""

from typing import Dict, List, Tuple

from .errors import UnknownPaletteEntryError

BRAND_COLORS: Dict[str, str] = {
    # Primary
    "cbre-green": "#003F2D",
    "dark-grey": "#435254",
    "light-grey": "#CAD1D3",
    "white": "#FFFFFF",
    # Accent green family
    "accent-green": "#17E88F",
    "accent-green-shade-1": "#45EDA5",
    "accent-green-shade-2": "#74F1BC",
    "accent-green-shade-3": "#A2F6D2",
    # Dark green family
    "dark-green": "#012A2D",
    "dark-green-shade-1": "#355456",
    "dark-green-shade-2": "#677F80",
    "dark-green-shade-3": "#9AA9AB",
    # Midnight blue family
    "midnight": "#032842",
    "midnight-shade-1": "#355268",
    "midnight-shade-2": "#677D8E",
    "midnight-shade-3": "#9AA9B3",
    "midnight-tint": "#778F9C",
    # Sage family
    "sage": "#538184",
    "sage-shade-1": "#759A9D",
    "sage-shade-2": "#97B3B5",
    "sage-shade-3": "#BACDCE",
    "sage-tint": "#96B3B6",
    # Celadon family
    "celadon": "#80BBAD",
    "celadon-shade-1": "#99C9BD",
    "celadon-shade-2": "#B3D6CE",
    "celadon-shade-3": "#CCE4DE",
    "celadon-tint": "#C0D4CB",
    # Wheat family
    "wheat": "#DBD99A",
    "wheat-tint": "#EFECD2",
    # Cement family
    "cement": "#7F8480",
    "cement-tint": "#CBCDCB",
}

# (background, foreground)
BRAND_PAIRS: Dict[str, Tuple[str, str]] = {
    "Dark Green / Accent Mint": (
        BRAND_COLORS["dark-green"],
        BRAND_COLORS["accent-green"],
    ),
    "Midnight / Celadon": (BRAND_COLORS["midnight"], BRAND_COLORS["celadon"]),
    "Cement / CBRE Green": (
        BRAND_COLORS["cement-tint"],
        BRAND_COLORS["cbre-green"],
    ),
    "Light Grey / Dark Grey": (
        BRAND_COLORS["light-grey"],
        BRAND_COLORS["dark-grey"],
    ),
    "White / CBRE Green": (BRAND_COLORS["white"], BRAND_COLORS["cbre-green"]),
    "CBRE Green / Accent": (
        BRAND_COLORS["cbre-green"],
        BRAND_COLORS["accent-green"],
    ),
}

DEFAULT_BRAND_PAIR = "Dark Green / Accent Mint"

# (name, width, height)
CANVAS_SIZES: List[Tuple[str, int, int]] = [
    ("1024x1024", 1024, 1024),
    ("2000x2000", 2000, 2000),
    ("3000x3000", 3000, 3000),
]


def get_brand_color(name: str) -> str:
    """Look up a named brand color.

    Raises:
        UnknownPaletteEntryError: If no color has that name.
    """
    try:
        return BRAND_COLORS[name]
    except KeyError:
        raise UnknownPaletteEntryError(name, "color") from None


def get_brand_pair(name: str) -> Tuple[str, str]:
    """Look up a (background, foreground) brand pair by display name.

    Raises:
        UnknownPaletteEntryError: If no pair has that name.
    """
    try:
        return BRAND_PAIRS[name]
    except KeyError:
        raise UnknownPaletteEntryError(name, "pair") from None


def get_canvas_size(name: str) -> Tuple[int, int]:
    """Look up a canvas size preset by name."""
    for preset_name, width, height in CANVAS_SIZES:
        if preset_name == name:
            return width, height
    raise UnknownPaletteEntryError(name, "canvas size")
