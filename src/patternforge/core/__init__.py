# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    PatternForgeError,
    InvalidColorFormatError,
    UnknownPaletteEntryError,
    UnknownPresetError,
    ParameterValidationError,
)

from .logger import logger

from .rng import RNG, mulberry32, generate_random_seed

from .color import (
    RGB,
    HexColor,
    parse_hex,
    to_hex,
    normalize_hex,
    interpolate_color,
    round_half_up,
)

from .palette import (
    BRAND_COLORS,
    BRAND_PAIRS,
    CANVAS_SIZES,
    get_brand_color,
    get_brand_pair,
)

from .density import (
    DensityCurve,
    DEFAULT_EXPOSED_CURVES,
    SEAM_THRESHOLD,
    MAX_SEAM_OVERLAP,
    evaluate_density,
    gap_after_density,
    apply_seam_clamp,
)

from .state import PatternType, CanvasSpec, BrandPair, GlobalState

__all__ = [
    "PatternForgeError",
    "InvalidColorFormatError",
    "UnknownPaletteEntryError",
    "UnknownPresetError",
    "ParameterValidationError",
    "logger",
    "RNG",
    "mulberry32",
    "generate_random_seed",
    "RGB",
    "HexColor",
    "parse_hex",
    "to_hex",
    "normalize_hex",
    "interpolate_color",
    "round_half_up",
    "BRAND_COLORS",
    "BRAND_PAIRS",
    "CANVAS_SIZES",
    "get_brand_color",
    "get_brand_pair",
    "DensityCurve",
    "DEFAULT_EXPOSED_CURVES",
    "SEAM_THRESHOLD",
    "MAX_SEAM_OVERLAP",
    "evaluate_density",
    "gap_after_density",
    "apply_seam_clamp",
    "PatternType",
    "CanvasSpec",
    "BrandPair",
    "GlobalState",
]
