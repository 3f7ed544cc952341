# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Density-ramped bars along one of four directions.

Layout happens in three stages. First, spans (offset, size) are laid out
along the main axis with the density curve shrinking gaps and widths.
Then the span sequence is partitioned into splits, each optionally reversed
and mirrored within itself. Finally the spans are mapped to rectangles
for the chosen direction and the whole pattern is optionally mirrored
about the canvas midlines.
"""

from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

from pydantic import Field

from patternforge.core import (
    DensityCurve,
    GlobalState,
    HexColor,
    apply_seam_clamp,
    evaluate_density,
    gap_after_density,
    logger,
)
from patternforge.scene import RectElement, Scene, SceneGroup, ShapeStyle

from .base import BasePatternParams, create_scene, non_negative

MAX_SPLITS = 4
MAX_INTENSITY = 100.0

Rect = Tuple[float, float, float, float]


class Direction(str, Enum):
    """Direction in which bars are laid out (and density increases)."""

    LTR = "LTR"
    RTL = "RTL"
    TTB = "TTB"
    BTT = "BTT"

    @property
    def is_vertical(self) -> bool:
        """True when bars are vertical, i.e. laid out along the X axis."""
        return self in (Direction.LTR, Direction.RTL)


class MirrorMode(str, Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


class SplitConfig(BasePatternParams):
    """Per-split ordering, mirroring and color."""

    reverse: bool = Field(default=False, description="Reverse the bar order within the split.")
    mirror: bool = Field(
        default=False, description="Duplicate the split reflected about its own midline."
    )
    color: Optional[HexColor] = Field(
        default=None, description="Bar color of the split; brand foreground when unset."
    )


class Span(NamedTuple):
    offset: float
    size: float


class VerticalBarsParams(BasePatternParams):
    """Bars whose spacing and width follow a density curve."""

    bar_count: int = Field(default=24, description="Maximum number of bars.")
    bar_width: float = Field(default=50.0, description="Nominal bar width in pixels.")
    gap_width: float = Field(default=30.0, description="Nominal gap in pixels.")
    density_curve: DensityCurve = Field(
        default=DensityCurve.EASE, description="Curve driving gap and width modulation."
    )
    curve_intensity: float = Field(
        default=50.0, description="Gap modulation intensity (-100 to 100)."
    )
    bar_width_intensity: float = Field(
        default=0.0, description="Bar width modulation intensity (-100 to 100)."
    )
    direction: Direction = Direction.LTR
    edge_padding: float = Field(
        default=0.0, description="Dead zone before the first and after the last bar."
    )
    extend_last_bar: bool = Field(
        default=True, description="Stretch the final bar to exactly reach the far edge."
    )
    mirror: MirrorMode = MirrorMode.NONE
    split_count: int = Field(
        default=1, description="Number of splits (clamped to 1-4)."
    )
    splits: Tuple[SplitConfig, SplitConfig, SplitConfig, SplitConfig] = Field(
        default=(SplitConfig(), SplitConfig(), SplitConfig(), SplitConfig()),
        description="Configuration of each split, in order.",
    )
    padding_color_enabled: bool = Field(
        default=False, description="Paint the canvas padding as a matte over the bars."
    )
    padding_color: Optional[HexColor] = Field(
        default=None, description="Matte color; brand background when unset."
    )

    def check_bounds(self) -> List[str]:
        problems: List[str] = []
        non_negative(
            problems,
            bar_count=self.bar_count,
            bar_width=self.bar_width,
            gap_width=self.gap_width,
            edge_padding=self.edge_padding,
        )
        for name in ("curve_intensity", "bar_width_intensity"):
            value = getattr(self, name)
            if abs(value) > MAX_INTENSITY:
                problems.append(f"{name} must be within [-100, 100] (got {value})")
        if not 1 <= self.split_count <= MAX_SPLITS:
            problems.append(
                f"split_count must be within [1, {MAX_SPLITS}] (got {self.split_count})"
            )
        return problems


def layout_spans(
    params: VerticalBarsParams, axis_length: float, padding: float, line_weight: float
) -> List[Span]:
    """Lay out bar spans along the main axis, measured from its start.

    Bars are placed while fewer than `bar_count` exist and the cursor is
    before the far edge. With `extend_last_bar` the final span is stretched
    to end exactly at `axis_length - padding - edge_padding`.
    """
    start = padding + params.edge_padding
    end = axis_length - padding - params.edge_padding
    count = params.bar_count

    spans: List[Span] = []
    offset = start
    i = 0
    while i < count and offset < end:
        t = i / (count - 1) if count > 1 else 0.5
        gap_density = evaluate_density(t, params.density_curve, params.curve_intensity)
        width_density = evaluate_density(
            t, params.density_curve, params.bar_width_intensity
        )

        size = max(line_weight, params.bar_width * (1 - width_density))
        gap = apply_seam_clamp(
            gap_after_density(params.gap_width, gap_density), gap_density
        )
        spans.append(Span(offset, size))

        offset += size + gap
        i += 1

    if params.extend_last_bar and spans:
        last = spans[-1]
        spans[-1] = Span(last.offset, end - last.offset)
    return spans


def partition(spans: List[Span], count: int) -> List[List[Span]]:
    """Split `spans` into `count` contiguous chunks, earlier chunks one larger."""
    size, remainder = divmod(len(spans), count)
    chunks = []
    start = 0
    for k in range(count):
        stop = start + size + (1 if k < remainder else 0)
        chunks.append(spans[start:stop])
        start = stop
    return chunks


def _reflect(spans: List[Span], low: float, high: float) -> List[Span]:
    return [Span(low + high - (s.offset + s.size), s.size) for s in spans]


def arrange_split(spans: List[Span], config: SplitConfig) -> List[Span]:
    """Apply a split's reverse and mirror options within its own extent."""
    if not spans:
        return []
    low = min(s.offset for s in spans)
    high = max(s.offset + s.size for s in spans)
    if config.reverse:
        spans = _reflect(spans, low, high)
    if config.mirror:
        spans = spans + _reflect(spans, low, high)
    return spans


def span_to_rect(
    span: Span, direction: Direction, width: float, height: float, padding: float
) -> Rect:
    if direction is Direction.LTR:
        return (span.offset, padding, span.size, height - 2 * padding)
    if direction is Direction.RTL:
        return (width - span.offset - span.size, padding, span.size, height - 2 * padding)
    if direction is Direction.TTB:
        return (padding, span.offset, width - 2 * padding, span.size)
    return (padding, height - span.offset - span.size, width - 2 * padding, span.size)


def mirror_rects(
    rects: List[Rect], mode: MirrorMode, width: float, height: float
) -> List[Rect]:
    """Add copies of `rects` reflected about the canvas midline(s)."""
    if mode in (MirrorMode.HORIZONTAL, MirrorMode.BOTH):
        rects = rects + [(width - x - w, y, w, h) for x, y, w, h in rects]
    if mode in (MirrorMode.VERTICAL, MirrorMode.BOTH):
        rects = rects + [(x, height - y - h, w, h) for x, y, w, h in rects]
    return rects


def _unique(rects: Iterable[Rect]) -> List[Rect]:
    seen: Dict[Tuple[float, ...], None] = {}
    result = []
    for rect in rects:
        key = tuple(round(v, 9) for v in rect)
        if key not in seen:
            seen[key] = None
            result.append(rect)
    return result


def padding_rects(width: float, height: float, padding: float) -> List[Tuple[str, Rect]]:
    """The four border rectangles covering the padding: top, bottom, left, right."""
    return [
        ("top", (0.0, 0.0, width, padding)),
        ("bottom", (0.0, height - padding, width, padding)),
        ("left", (0.0, padding, padding, height - 2 * padding)),
        ("right", (width - padding, padding, padding, height - 2 * padding)),
    ]


def generate_vertical_bars(params: VerticalBarsParams, state: GlobalState) -> Scene:
    """Generate the bar pattern.

    Each split becomes its own group, painted in split order. The padding
    matte, when enabled, is painted last so it covers any bar reaching into
    the padding.
    """
    canvas = state.canvas
    width, height, padding = canvas.width, canvas.height, canvas.padding
    direction = params.direction
    axis_length = width if direction.is_vertical else height

    spans = layout_spans(params, axis_length, padding, state.line_weight)
    if not spans:
        logger.warning("Vertical bars produced no bars.")

    split_count = min(MAX_SPLITS, max(1, params.split_count))
    scene, root = create_scene(state, "vertical-bars")

    bar_total = 0
    for k, chunk in enumerate(partition(spans, split_count)):
        config = params.splits[k]
        arranged = arrange_split(chunk, config)
        rects = [span_to_rect(s, direction, width, height, padding) for s in arranged]
        rects = _unique(mirror_rects(rects, params.mirror, width, height))

        group = SceneGroup(id=f"split-{k}")
        scene.add_element(group, parent_id=root.id)
        style = ShapeStyle(fill=config.color or state.brand.foreground)
        for j, (x, y, w, h) in enumerate(rects):
            scene.add_element(
                RectElement(id=f"bar-{k}-{j}", x=x, y=y, width=w, height=h, style=style),
                parent_id=group.id,
            )
        bar_total += len(rects)

    if params.padding_color_enabled and padding > 0:
        matte = SceneGroup(id="padding-matte")
        scene.add_element(matte, parent_id=root.id)
        style = ShapeStyle(fill=params.padding_color or state.brand.background)
        for side, (x, y, w, h) in padding_rects(width, height, padding):
            scene.add_element(
                RectElement(id=f"padding-{side}", x=x, y=y, width=w, height=h, style=style),
                parent_id=matte.id,
            )

    logger.debug(
        f"Generated {bar_total} bars from {len(spans)} spans in {split_count} split(s)"
    )
    return scene
