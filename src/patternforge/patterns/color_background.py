# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Transformational color background (Glaze): layered mesh gradients.

Layers, bottom to top:

1. a flat background fill covering the whole canvas (optional),
2. a frame ring showing the mesh with inverted pins (optional),
3. the main mesh, clipped to the inside of the frame when one is drawn.
"""

from typing import List, Literal, Optional, Sequence

from pydantic import Field

from patternforge.core import GlobalState, HexColor, get_brand_color, logger
from patternforge.mesh import (
    GLAZE_PROFILE,
    TRANSFORMATIONAL_PROFILE,
    ColorPin,
    MeshProfile,
    PinSet,
    enabled_pins,
    invert_pins,
    sample_mesh,
)
from patternforge.scene import (
    BaseSceneElement,
    ClipRect,
    FrameMask,
    GroupTransform,
    MeshGradientElement,
    RectElement,
    Scene,
    SceneGroup,
    ShapeStyle,
)

from .base import BasePatternParams, create_scene, non_negative

MESH_PROFILES = {
    GLAZE_PROFILE.name: GLAZE_PROFILE,
    TRANSFORMATIONAL_PROFILE.name: TRANSFORMATIONAL_PROFILE,
}

DEFAULT_PINS: PinSet = (
    ColorPin(x=0.0, y=0.0, color=get_brand_color("cbre-green"), opacity=0.47),
    ColorPin(x=1.0, y=0.0, color=get_brand_color("sage"), opacity=1.0),
    ColorPin(x=1.0, y=1.0, color=get_brand_color("celadon-shade-3"), opacity=0.77),
    ColorPin(x=0.67, y=1.0, color=get_brand_color("accent-green-shade-2"), opacity=0.45),
    ColorPin(enabled=False, x=0.5, y=0.5, color=get_brand_color("dark-green-shade-1"), opacity=1.0),
)


class GlazeParams(BasePatternParams):
    """Mesh gradient background with an optional inverted frame."""

    pins: PinSet = Field(default=DEFAULT_PINS, description="Exactly five color pins.")
    blend_strength: float = Field(
        default=0.5, description="Sharpness of transitions between pins."
    )
    frame_enabled: bool = Field(default=False, description="Draw the inverted frame.")
    frame_thickness: float = Field(default=100.0, description="Frame width in pixels.")
    background_color: Optional[HexColor] = Field(
        default=get_brand_color("midnight"),
        description="Flat fill beneath the mesh; no fill when unset.",
    )
    mesh_profile: Literal["glaze", "transformational"] = Field(
        default="glaze", description="Interpolation profile of the mesh."
    )

    @property
    def profile(self) -> MeshProfile:
        return MESH_PROFILES[self.mesh_profile]

    def check_bounds(self) -> List[str]:
        problems: List[str] = []
        non_negative(
            problems,
            blend_strength=self.blend_strength,
            frame_thickness=self.frame_thickness,
        )
        return problems


def mesh_layer(
    id: str,
    pins: Sequence[ColorPin],
    width: float,
    height: float,
    blend_strength: float,
    profile: MeshProfile,
) -> BaseSceneElement:
    """One mesh gradient covering (0, 0, width, height).

    Profiles with a solid fallback draw a single rectangle when at most one
    pin is enabled: white for none, the pin color for one.
    """
    active = enabled_pins(pins)
    if profile.solid_fallback and len(active) <= 1:
        color = active[0].color if active else "#FFFFFF"
        return RectElement(
            id=id, x=0, y=0, width=width, height=height, style=ShapeStyle(fill=color)
        )
    return MeshGradientElement(
        id=id, sample=sample_mesh(pins, width, height, blend_strength, profile)
    )


def generate_glaze(params: GlazeParams, state: GlobalState) -> Scene:
    """Compose background fill, optional inverted frame and the main mesh."""
    canvas = state.canvas
    padding = canvas.padding
    inner_width, inner_height = canvas.inner_width, canvas.inner_height
    profile = params.profile
    thickness = params.frame_thickness

    if not enabled_pins(params.pins):
        logger.warning("No color pins enabled; the mesh degenerates to solid white.")

    scene, root = create_scene(state, "color-background")

    if params.background_color is not None:
        scene.add_element(
            RectElement(
                id="background-fill",
                x=0,
                y=0,
                width=canvas.width,
                height=canvas.height,
                style=ShapeStyle(fill=params.background_color),
            ),
            parent_id=root.id,
        )

    translate = GroupTransform(translate=(padding, padding))
    frame_inner: Optional[ClipRect] = None
    if params.frame_enabled:
        if thickness * 2 < min(inner_width, inner_height) and thickness > 0:
            frame_inner = ClipRect(
                x=thickness,
                y=thickness,
                width=inner_width - thickness * 2,
                height=inner_height - thickness * 2,
            )
        else:
            logger.warning(
                f"Frame thickness {thickness} leaves no interior; frame skipped."
            )

    if frame_inner is not None:
        frame = SceneGroup(
            id="frame",
            transforms=translate,
            mask=FrameMask(
                outer=ClipRect(width=inner_width, height=inner_height),
                inner=frame_inner,
            ),
        )
        scene.add_element(frame, parent_id=root.id)
        scene.add_element(
            mesh_layer(
                "frame-mesh",
                invert_pins(params.pins),
                inner_width,
                inner_height,
                params.blend_strength,
                profile,
            ),
            parent_id=frame.id,
        )

    main = SceneGroup(id="main", transforms=translate, clip_rect=frame_inner)
    scene.add_element(main, parent_id=root.id)
    scene.add_element(
        mesh_layer(
            "main-mesh",
            params.pins,
            inner_width,
            inner_height,
            params.blend_strength,
            profile,
        ),
        parent_id=main.id,
    )

    logger.debug(
        f"Generated {profile.name} mesh background with "
        f"{len(enabled_pins(params.pins))} enabled pins, frame={frame_inner is not None}"
    )
    return scene
