# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import math
from typing import List

from pydantic import Field

from patternforge.core import GlobalState, logger
from patternforge.scene import PathElement, Scene, ShapeStyle

from .base import BasePatternParams, create_scene, non_negative

MIN_OPACITY = 0.1


class DiagonalContoursParams(BasePatternParams):
    """A fading stack of roofline-shaped contour lines."""

    line_count: int = Field(default=50, description="Number of contour lines.")
    gap_between_lines: float = Field(
        default=40.0, description="Vertical offset between lines in pixels."
    )
    slope_angle: float = Field(default=10.0, description="Base slope in degrees.")
    peak_position: float = Field(
        default=0.25, description="X of the first peak as a fraction of the inner width."
    )
    peak_position2: float = Field(
        default=0.70, description="X of the second peak as a fraction of the inner width."
    )
    peak_height1: float = Field(default=200.0, description="Y offset of the first peak.")
    peak_height2: float = Field(default=-100.0, description="Y offset of the second peak.")
    start_height: float = Field(default=10.0, description="Y offset of the left edge.")
    end_height: float = Field(default=200.0, description="Y offset of the right edge.")
    skew_factor: float = Field(
        default=0.0, description="Horizontal shift per pixel of vertical offset."
    )
    line_length: float = Field(
        default=1.0, description="Line length as a multiple of the canvas width."
    )
    opacity_step: float = Field(default=0.007, description="Opacity lost per line.")

    def check_bounds(self) -> List[str]:
        problems: List[str] = []
        non_negative(
            problems,
            line_count=self.line_count,
            line_length=self.line_length,
            opacity_step=self.opacity_step,
        )
        return problems


def generate_diagonal_contours(
    params: DiagonalContoursParams, state: GlobalState
) -> Scene:
    """Draw `line_count` four-point paths: left edge, two peaks, right edge.

    Line `i` is shifted down by `i * gap_between_lines` and sideways by the
    skew factor times that offset. Its opacity is `max(0.1, 1 - i * step)`.
    """
    canvas = state.canvas
    width, padding = canvas.width, canvas.padding
    inner_width = canvas.inner_width

    peak_x1 = padding + params.peak_position * inner_width
    peak_x2 = padding + params.peak_position2 * inner_width
    slope = math.tan(math.radians(params.slope_angle))
    extension = (params.line_length - 1) * width / 2

    scene, root = create_scene(state, "diagonal-contours")

    for i in range(max(0, params.line_count)):
        offset = i * params.gap_between_lines
        skew = params.skew_factor * offset

        left_y = padding + offset + params.start_height
        peak1_y = left_y + (peak_x1 - padding) * slope + params.peak_height1
        peak2_y = peak1_y + abs(peak_x2 - peak_x1) * slope + params.peak_height2
        right_y = peak2_y + (width - padding - peak_x2) * slope + params.end_height

        line = PathElement(
            id=f"contour-{i}",
            points=[
                (padding + skew - extension, left_y),
                (peak_x1 + skew, peak1_y),
                (peak_x2 + skew, peak2_y),
                (width - padding + skew + extension, right_y),
            ],
            style=ShapeStyle(
                stroke=state.brand.foreground,
                stroke_width=state.line_weight,
                opacity=min(1.0, max(MIN_OPACITY, 1 - i * params.opacity_step)),
            ),
        )
        scene.add_element(line, parent_id=root.id)

    if params.line_count <= 0:
        logger.warning("Diagonal contours produced no lines.")
    logger.debug(f"Generated {max(0, params.line_count)} diagonal contour lines")
    return scene
