# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Angular "line of sight" motif folding back on itself.

Every line is a three-point polyline (start, peak, end). Lines up to the
fold index recede along the left angle; the rest continue from the fold
geometry along the right angle. The vertical step per line is derived from
a fixed reference line count so that changing `line_count` only changes how
far the pattern extends, never its apparent angle.
"""

import math
from typing import List, NamedTuple, Optional, Tuple

from pydantic import Field

from patternforge.core import CanvasSpec, GlobalState, HexColor, interpolate_color, logger
from patternforge.scene import (
    GroupTransform,
    Point,
    PolylineElement,
    Scene,
    SceneGroup,
    ShapeStyle,
)

from .base import BasePatternParams, create_scene, non_negative

FOLD_RATIO = 0.42
REFERENCE_LINE_COUNT = 42

# Horizontal travel of (start, peak, end) per pixel of line offset.
PHASE_ONE_FACTORS = (0.8, 0.55, 0.5)
PHASE_TWO_FACTORS = (0.47, 0.72, 0.76)

# Start and end points sit this many paddings in from the canvas edge.
EDGE_INSET = 1.5


def fold_line_index(line_count: int) -> int:
    """Index of the last line drawn with phase one."""
    return math.floor(line_count * FOLD_RATIO)


REFERENCE_FOLD_INDEX = fold_line_index(REFERENCE_LINE_COUNT)
REFERENCE_PHASE_TWO_LINES = REFERENCE_LINE_COUNT - REFERENCE_FOLD_INDEX - 1


class LineGeometry(NamedTuple):
    start: Point
    peak: Point
    end: Point

    @property
    def y(self) -> float:
        return self.start[1]

    @property
    def points(self) -> List[Point]:
        return [self.start, self.peak, self.end]


class MultidimensionalLoSParams(BasePatternParams):
    """Parameters of the line-of-sight motif. Positions are fractions of the inner canvas."""

    line_count: int = Field(default=52, description="Number of lines.")
    gap_between_lines: float = Field(default=12.0, description="Line offset in pixels.")
    master_position_x: float = Field(
        default=0.45, description="Horizontal position of the whole pattern."
    )
    master_position_y: float = Field(
        default=0.55, description="Vertical position of the whole pattern."
    )
    master_position_z: float = Field(
        default=1.0, description="Uniform scale of the whole pattern about the corner."
    )
    corner_position_x: float = Field(default=0.42, description="Peak X.")
    corner_position_y: float = Field(default=0.14, description="Peak Y.")
    first_line_y: float = Field(default=0.40, description="Y of the first line.")
    fold_line_y: float = Field(default=0.52, description="Y of the fold line.")
    last_line_y: float = Field(default=0.73, description="Y of the last line.")
    left_angle: float = Field(default=37.0, description="Phase one angle in degrees.")
    right_angle: float = Field(default=57.0, description="Phase two angle in degrees.")
    line_extension: float = Field(
        default=0.6, description="Multiplier applied to each corner-to-endpoint arm."
    )
    stroke_width_min: float = Field(default=0.5, description="Stroke width of the first line.")
    stroke_width_max: float = Field(default=2.0, description="Stroke width of the last line.")
    use_gradient: bool = Field(
        default=True, description="Interpolate line colors instead of using the foreground."
    )
    gradient_color_from: Optional[HexColor] = Field(
        default=None, description="First line color; brand foreground when unset."
    )
    gradient_color_to: Optional[HexColor] = Field(
        default=None, description="Last line color; brand background when unset."
    )

    def check_bounds(self) -> List[str]:
        problems: List[str] = []
        non_negative(
            problems,
            line_count=self.line_count,
            gap_between_lines=self.gap_between_lines,
            line_extension=self.line_extension,
            stroke_width_min=self.stroke_width_min,
            stroke_width_max=self.stroke_width_max,
        )
        if self.master_position_z <= 0:
            problems.append(
                f"master_position_z must be positive (got {self.master_position_z})"
            )
        return problems


class LoSLayout:
    """Per-line geometry of the motif before the master transform.

    Coordinates are canvas pixels. The master position and scale are applied
    afterwards as a single rigid transform about `corner`.
    """

    def __init__(self, params: MultidimensionalLoSParams, canvas: CanvasSpec):
        self.params = params
        padding = canvas.padding
        inner_width, inner_height = canvas.inner_width, canvas.inner_height

        self.fold_index = fold_line_index(params.line_count)
        self.corner: Point = (
            padding + params.corner_position_x * inner_width,
            padding + params.corner_position_y * inner_height,
        )
        self.first_y = padding + params.first_line_y * inner_height
        fold_y = padding + params.fold_line_y * inner_height
        last_y = padding + params.last_line_y * inner_height

        # The peak keeps its distance to the line it belongs to.
        self.peak_offset = self.corner[1] - self.first_y
        self.step_one = (fold_y - self.first_y) / REFERENCE_FOLD_INDEX
        self.step_two = (last_y - fold_y) / REFERENCE_PHASE_TWO_LINES

        self.base_x: Tuple[float, float, float] = (
            padding * EDGE_INSET,
            self.corner[0],
            canvas.width - padding * EDGE_INSET,
        )
        self.left_slope = math.tan(math.radians(params.left_angle))
        self.right_slope = math.tan(math.radians(params.right_angle))
        self.fold_line = self.phase_one(self.fold_index)

    def _geometry(self, xs: Tuple[float, float, float], y: float) -> LineGeometry:
        return LineGeometry((xs[0], y), (xs[1], y + self.peak_offset), (xs[2], y))

    def phase_one(self, i: int) -> LineGeometry:
        """Line `i` receding from the first line toward the fold."""
        offset = i * self.params.gap_between_lines
        xs = tuple(
            base - offset * self.left_slope * factor
            for base, factor in zip(self.base_x, PHASE_ONE_FACTORS)
        )
        return self._geometry(xs, self.first_y + i * self.step_one)

    def phase_two(self, i: int) -> LineGeometry:
        """Line `i` advancing away from the fold; equals phase one at the fold."""
        fold = self.fold_line
        since_fold = i - self.fold_index
        offset = since_fold * self.params.gap_between_lines
        fold_xs = (fold.start[0], fold.peak[0], fold.end[0])
        xs = tuple(
            x + offset * self.right_slope * factor
            for x, factor in zip(fold_xs, PHASE_TWO_FACTORS)
        )
        return self._geometry(xs, fold.y + since_fold * self.step_two)

    def line(self, i: int) -> LineGeometry:
        return self.phase_one(i) if i <= self.fold_index else self.phase_two(i)

    def extend(self, geometry: LineGeometry) -> LineGeometry:
        """Scale both arms of a line about its peak by `line_extension`.

        The horizontal drift a line has accumulated relative to its own peak
        acts as a lever that the extension would otherwise amplify. The
        stabilization factor `(e - 1) / e` removes that amplification so the
        stack keeps its angle while the arms grow.
        """
        extension = self.params.line_extension
        stabilization = (extension - 1) / extension if extension != 0 else 0.0
        peak_x, peak_y = geometry.peak
        peak_drift = peak_x - self.base_x[1]

        def scale(point: Point, base_x: float) -> Point:
            x, y = point
            lever = (x - base_x) - peak_drift
            return (
                peak_x + extension * ((x - peak_x) - stabilization * lever),
                peak_y + extension * (y - peak_y),
            )

        return LineGeometry(
            scale(geometry.start, self.base_x[0]),
            geometry.peak,
            scale(geometry.end, self.base_x[2]),
        )


def master_transform(
    params: MultidimensionalLoSParams, canvas: CanvasSpec, corner: Point
) -> Optional[GroupTransform]:
    """Translate by the master offset and scale by master Z about `corner`."""
    offset_x = (params.master_position_x - 0.5) * canvas.inner_width
    offset_y = (params.master_position_y - 0.5) * canvas.inner_height
    scale = params.master_position_z
    if scale == 1:
        if offset_x == 0 and offset_y == 0:
            return None
        return GroupTransform(translate=(offset_x, offset_y))
    cx, cy = corner
    return GroupTransform(
        translate=(offset_x + cx * (1 - scale), offset_y + cy * (1 - scale)),
        scale=(scale, scale),
    )


def generate_multidimensional_los(
    params: MultidimensionalLoSParams, state: GlobalState
) -> Scene:
    """Generate the motif: one polyline per line, stroke width and color ramped."""
    canvas = state.canvas
    layout = LoSLayout(params, canvas)

    color_from = params.gradient_color_from or state.brand.foreground
    color_to = params.gradient_color_to or state.brand.background
    count = max(0, params.line_count)

    scene, root = create_scene(state, "multidimensional-los")
    lines = SceneGroup(
        id="lines", transforms=master_transform(params, canvas, layout.corner)
    )
    scene.add_element(lines, parent_id=root.id)

    for i in range(count):
        progress = i / (count - 1) if count > 1 else 0.0
        stroke_width = params.stroke_width_min + progress * (
            params.stroke_width_max - params.stroke_width_min
        )
        color = (
            interpolate_color(color_from, color_to, progress)
            if params.use_gradient
            else state.brand.foreground
        )

        geometry = layout.extend(layout.line(i))
        scene.add_element(
            PolylineElement(
                id=f"line-{i}",
                points=geometry.points,
                style=ShapeStyle(
                    stroke=color, stroke_width=max(0.0, stroke_width)
                ),
            ),
            parent_id=lines.id,
        )

    if count == 0:
        logger.warning("Multidimensional LoS produced no lines.")
    logger.debug(
        f"Generated {count} line-of-sight lines, fold after line {layout.fold_index}"
    )
    return scene
