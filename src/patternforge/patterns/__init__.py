# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Pattern generators and the dispatcher."""

from .base import BasePatternParams, EngineSettings, create_scene
from .horizontal_bands import HorizontalBandsParams, generate_horizontal_bands
from .vertical_bars import (
    Direction,
    MirrorMode,
    SplitConfig,
    VerticalBarsParams,
    generate_vertical_bars,
    layout_spans,
)
from .diagonal_contours import DiagonalContoursParams, generate_diagonal_contours
from .multidimensional_los import (
    FOLD_RATIO,
    REFERENCE_LINE_COUNT,
    LoSLayout,
    MultidimensionalLoSParams,
    fold_line_index,
    generate_multidimensional_los,
)
from .color_background import GlazeParams, generate_glaze, DEFAULT_PINS
from .portal import PortalParams, generate_portal
from .presets import (
    GLAZE_PRESETS,
    TRANSFORMATIONAL_PRESETS,
    get_preset,
    list_presets,
)
from .registry import (
    PATTERN_REGISTRY,
    default_params,
    generate,
    params_type_for,
    validate_params,
)

__all__ = [
    "BasePatternParams",
    "EngineSettings",
    "create_scene",
    "HorizontalBandsParams",
    "generate_horizontal_bands",
    "Direction",
    "MirrorMode",
    "SplitConfig",
    "VerticalBarsParams",
    "generate_vertical_bars",
    "layout_spans",
    "DiagonalContoursParams",
    "generate_diagonal_contours",
    "FOLD_RATIO",
    "REFERENCE_LINE_COUNT",
    "LoSLayout",
    "MultidimensionalLoSParams",
    "fold_line_index",
    "generate_multidimensional_los",
    "GlazeParams",
    "generate_glaze",
    "DEFAULT_PINS",
    "PortalParams",
    "generate_portal",
    "GLAZE_PRESETS",
    "TRANSFORMATIONAL_PRESETS",
    "get_preset",
    "list_presets",
    "PATTERN_REGISTRY",
    "default_params",
    "generate",
    "params_type_for",
    "validate_params",
]
