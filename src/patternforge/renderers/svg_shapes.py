# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Dict

from drawsvg import Lines, Path, Rectangle

from patternforge.scene import PathElement, PolylineElement, RectElement, ShapeStyle


def _paint_args(style: ShapeStyle) -> Dict[str, Any]:
    """Explicit fill and stroke attributes; nothing is left to inheritance."""
    args: Dict[str, Any] = {
        "fill": style.fill if style.fill is not None else "none",
        "opacity": style.opacity,
    }
    if style.stroke is not None:
        args.update(
            stroke=style.stroke,
            stroke_width=style.stroke_width,
            stroke_linecap=style.line_cap,
            stroke_linejoin=style.line_join,
        )
    return args


def _draw_rect(element: RectElement) -> Rectangle:
    """Draws a RectElement as an SVG rect."""
    return Rectangle(
        element.x,
        element.y,
        element.width,
        element.height,
        id=element.id,
        **_paint_args(element.style),
    )


def _draw_path(element: PathElement) -> Path:
    """Draws a PathElement as an SVG path with moveto/lineto commands."""
    return Path(d=element.d, id=element.id, **_paint_args(element.style))


def _draw_polyline(element: PolylineElement) -> Lines:
    """Draws a PolylineElement as an open path through its points."""
    return Lines(
        *element.flat_points(),
        close=False,
        id=element.id,
        **_paint_args(element.style),
    )
