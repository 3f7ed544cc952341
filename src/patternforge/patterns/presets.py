# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Curated, named parameter objects.

Applying a preset replaces the whole parameter object; presets carry no
behavior of their own.
"""

from typing import Dict, List, Union

from patternforge.core import PatternType, UnknownPresetError, get_brand_color
from patternforge.mesh import ColorPin

from .base import BasePatternParams
from .color_background import GlazeParams


def _pin(
    x: float, y: float, color: str, opacity: float = 1.0, enabled: bool = True
) -> ColorPin:
    if not color.startswith("#"):
        color = get_brand_color(color)
    return ColorPin(enabled=enabled, x=x, y=y, color=color, opacity=opacity)


GLAZE_PRESETS: Dict[str, GlazeParams] = {
    "preset1": GlazeParams(
        pins=(
            _pin(0.0, 0.0, "cbre-green", 0.47),
            _pin(1.0, 0.0, "sage", 1.0),
            _pin(1.0, 1.0, "celadon-shade-3", 0.77),
            _pin(0.67, 1.0, "accent-green-shade-2", 0.45),
            _pin(0.5, 0.5, "dark-green-shade-1", 1.0, enabled=False),
        ),
        background_color=get_brand_color("midnight"),
    ),
    "preset2": GlazeParams(
        pins=(
            _pin(0.0, 1.0, "midnight-shade-1", 0.8),
            _pin(1.0, 0.0, "celadon-shade-1", 0.79),
            _pin(0.0, 1.0, "midnight-shade-2", 0.9),
            _pin(1.0, 1.0, "wheat-tint", 0.59),
            _pin(0.5, 0.5, "sage-tint", 0.18),
        ),
        background_color=get_brand_color("celadon-shade-1"),
    ),
    "preset3": GlazeParams(
        pins=(
            _pin(0.10, 0.0, "white", 0.73),
            _pin(0.37, 1.0, "accent-green", 0.55),
            _pin(1.0, 0.10, "midnight-shade-1", 0.74),
            _pin(1.0, 1.0, "sage-shade-1", 0.66),
            _pin(0.5, 0.5, "celadon-tint", 0.30),
        ),
        background_color=get_brand_color("accent-green-shade-2"),
    ),
    "preset4": GlazeParams(
        pins=(
            _pin(0.0, 1.0, "dark-green", 0.55),
            _pin(1.0, 0.0, "celadon-shade-2", 0.85),
            _pin(0.0, 0.72, "dark-green", 0.40),
            _pin(1.0, 1.0, "sage-tint", 0.88),
            _pin(0.5, 0.5, "cbre-green", 0.5, enabled=False),
        ),
        background_color=get_brand_color("midnight"),
    ),
}


def _transformational(*pins: ColorPin) -> GlazeParams:
    return GlazeParams(
        pins=pins,
        blend_strength=0.1,
        background_color=None,
        mesh_profile="transformational",
    )


TRANSFORMATIONAL_PRESETS: Dict[str, GlazeParams] = {
    "sage_horizon": _transformational(
        _pin(0.1, 0.2, "sage-tint"),
        _pin(0.9, 0.3, "celadon"),
        _pin(0.5, 0.8, "wheat-tint"),
        _pin(0.2, 0.6, "midnight"),
        _pin(0.5, 0.5, "accent-green", enabled=False),
    ),
    "midnight_bloom": _transformational(
        _pin(0.15, 0.15, "accent-green"),
        _pin(0.85, 0.2, "midnight"),
        _pin(0.5, 0.9, "sage"),
        _pin(0.8, 0.75, "celadon-tint"),
        _pin(0.5, 0.5, "#FFFFFF", enabled=False),
    ),
    "wheat_fields": _transformational(
        _pin(0.2, 0.3, "celadon-tint"),
        _pin(0.7, 0.25, "sage"),
        _pin(0.4, 0.7, "wheat-tint"),
        _pin(0.85, 0.8, "midnight-tint"),
        _pin(0.5, 0.5, "#FFFFFF", enabled=False),
    ),
    "celadon_dream": _transformational(
        _pin(0.25, 0.25, "midnight"),
        _pin(0.75, 0.35, "celadon"),
        _pin(0.5, 0.75, "wheat-tint"),
        _pin(0.15, 0.65, "sage-tint"),
        _pin(0.85, 0.85, "cement-tint"),
    ),
}

PRESETS: Dict[PatternType, Dict[str, BasePatternParams]] = {
    PatternType.TRANSFORMATIONAL_COLOR_BACKGROUND: {
        **GLAZE_PRESETS,
        **TRANSFORMATIONAL_PRESETS,
    },
}


def list_presets(pattern: Union[PatternType, str]) -> List[str]:
    """Names of the presets available for `pattern`, in declaration order."""
    return list(PRESETS.get(PatternType(pattern), {}))


def get_preset(pattern: Union[PatternType, str], name: str) -> BasePatternParams:
    """Look up a preset parameter object.

    Raises:
        UnknownPresetError: If `pattern` has no preset called `name`.
    """
    pattern = PatternType(pattern)
    presets = PRESETS.get(pattern, {})
    try:
        return presets[name]
    except KeyError:
        raise UnknownPresetError(pattern.value, name, list(presets)) from None
