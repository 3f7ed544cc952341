# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import List

from pydantic import Field

from patternforge.core import GlobalState, logger, mulberry32
from patternforge.scene import GroupTransform, RectElement, Scene, SceneGroup, ShapeStyle

from .base import BasePatternParams, create_scene, non_negative


class HorizontalBandsParams(BasePatternParams):
    """Stacked full-width bands fading towards the top and bottom."""

    band_count: int = Field(default=40, description="Maximum number of bands.")
    band_thickness: float = Field(default=10.0, description="Band height in pixels.")
    band_gap: float = Field(default=8.0, description="Space between bands in pixels.")
    vignette_depth: float = Field(
        default=0.4, description="Opacity loss at the top and bottom edge (0-1)."
    )
    tilt_angle: float = Field(
        default=0.0, description="Rotation of the whole pattern in degrees."
    )
    thickness_variation: float = Field(
        default=0.0, ge=0.0, description="Random thickness spread as a fraction."
    )
    gap_variation: float = Field(
        default=0.0, ge=0.0, description="Random gap spread as a fraction."
    )
    y_jitter: float = Field(
        default=0.0, ge=0.0, description="Random vertical offset in pixels."
    )

    def check_bounds(self) -> List[str]:
        problems: List[str] = []
        non_negative(
            problems,
            band_count=self.band_count,
            band_thickness=self.band_thickness,
            band_gap=self.band_gap,
        )
        return problems


def generate_horizontal_bands(
    params: HorizontalBandsParams, state: GlobalState
) -> Scene:
    """Lay out bands top to bottom until `band_count` or the bottom padding is reached.

    Each band advances the cursor by its thickness plus gap. With zero
    variation and jitter the layout is fully deterministic; otherwise the
    spread is drawn from the seeded generator, three draws per band.
    """
    canvas = state.canvas
    width, height, padding = canvas.width, canvas.height, canvas.padding
    rng = mulberry32(state.seed)

    transforms = None
    if params.tilt_angle != 0:
        transforms = GroupTransform(rotate=(params.tilt_angle, (width / 2, height / 2)))

    scene, root = create_scene(state, "horizontal-bands")
    bands = SceneGroup(id="bands", transforms=transforms)
    scene.add_element(bands, parent_id=root.id)

    half_height = height / 2
    y = padding
    i = 0
    while i < params.band_count and y < height - padding:
        spread = params.thickness_variation * params.band_thickness
        thickness = params.band_thickness + rng() * spread - spread / 2

        gap_spread = params.gap_variation * params.band_gap
        gap = params.band_gap + rng() * gap_spread - gap_spread / 2

        jitter = (rng() - 0.5) * 2 * params.y_jitter

        distance = abs(y + thickness / 2 - half_height) / half_height
        opacity = min(1.0, max(0.0, 1 - params.vignette_depth * distance))

        band = RectElement(
            id=f"band-{i}",
            x=padding,
            y=y + jitter,
            width=width - 2 * padding,
            height=max(state.line_weight, thickness),
            style=ShapeStyle(fill=state.brand.foreground, opacity=opacity),
        )
        scene.add_element(band, parent_id=bands.id)

        y += thickness + gap
        i += 1

    if i == 0:
        logger.warning("Horizontal bands produced no bands.")
    logger.debug(f"Generated {i} horizontal bands")
    return scene
