# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Renders a PatternForge Scene object to an SVG image using the drawsvg library."""

from typing import Any, Dict, Optional

from drawsvg import ClipPath, Drawing, Group, Mask, Rectangle

from patternforge.core import logger
from patternforge.scene import (
    BaseSceneElement,
    ElementTypeError,
    MeshGradientElement,
    PathElement,
    PolylineElement,
    RectElement,
    Scene,
    SceneGroup,
)

from .svg_mesh import _draw_mesh
from .svg_shapes import _draw_path, _draw_polyline, _draw_rect


class SVGRenderer:
    """Renders a Scene object to an SVG Drawing.

    The drawing has the scene's pixel size and a matching viewBox. Paint
    order follows the scene's insertion order, with the scene background
    painted first.

    Attributes:
        scene: The Scene object to render.
    """

    # Map element types to their drawing functions
    DRAW_MAP = {
        RectElement: _draw_rect,
        PathElement: _draw_path,
        PolylineElement: _draw_polyline,
        MeshGradientElement: _draw_mesh,
    }

    def __init__(self, scene: Scene):
        """Initializes the SVGRenderer.

        Args:
            scene: The Scene object containing the elements to render.
        """
        if not isinstance(scene, Scene):
            raise TypeError("Renderer requires a valid Scene object.")
        self.scene = scene

    def _group_args(self, group: SceneGroup) -> Dict[str, Any]:
        args: Dict[str, Any] = {"id": group.id}
        if not group.transforms.is_identity:
            args["transform"] = str(group.transforms)
        if group.style.opacity != 1:
            args["opacity"] = group.style.opacity

        if group.clip_rect is not None:
            rect = group.clip_rect
            clip = ClipPath(id=f"{group.id}-clip")
            clip.append(Rectangle(rect.x, rect.y, rect.width, rect.height))
            args["clip_path"] = clip

        if group.mask is not None:
            outer, inner = group.mask.outer, group.mask.inner
            mask = Mask(id=f"{group.id}-mask")
            # White shows, black hides.
            mask.append(
                Rectangle(outer.x, outer.y, outer.width, outer.height, fill="white")
            )
            mask.append(
                Rectangle(inner.x, inner.y, inner.width, inner.height, fill="black")
            )
            args["mask"] = mask
        return args

    def _render_element(self, element: BaseSceneElement) -> Optional[Any]:
        """Recursively converts a scene element into a drawsvg element."""
        if element.hidden:
            logger.debug(f"Skipping {element.id}: hidden")
            return None

        if isinstance(element, SceneGroup):
            svg_group = Group(**self._group_args(element))
            for child in element.children:
                svg_child = self._render_element(child)
                if svg_child is not None:
                    svg_group.append(svg_child)
            return svg_group

        draw_func = self.DRAW_MAP.get(type(element))
        if draw_func is None:
            raise ElementTypeError(
                f"No drawing function for element type {type(element).__name__} ('{element.id}')."
            )
        return draw_func(element)

    def render(self) -> Drawing:
        """Renders the scene to a drawsvg.Drawing object."""
        drawing = Drawing(self.scene.width, self.scene.height)

        if self.scene.title:
            drawing.append_title(self.scene.title)

        if self.scene.background:
            drawing.append(
                Rectangle(
                    0,
                    0,
                    self.scene.width,
                    self.scene.height,
                    fill=self.scene.background,
                    class_="background",
                )
            )

        for node in self.scene.top_level_nodes:
            svg_node = self._render_element(node)
            if svg_node is not None:
                drawing.append(svg_node)

        logger.debug(
            f"Rendered scene with {len(self.scene)} elements "
            f"({self.scene.width}x{self.scene.height})"
        )
        return drawing
