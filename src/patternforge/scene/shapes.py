# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import List, Literal, Optional, Sequence, Tuple

from pydantic import Field

from patternforge.core import HexColor

from .base_element import BaseSceneElement, BaseSceneStyle

Point = Tuple[float, float]


class ShapeStyle(BaseSceneStyle):
    """Fill and stroke of a primitive shape.

    Colors are always explicit; a shape never inherits a color from its
    parent group.
    """

    fill: Optional[HexColor] = Field(
        default=None, description="Fill color, or None for no fill."
    )
    stroke: Optional[HexColor] = Field(
        default=None, description="Stroke color, or None for no stroke."
    )
    stroke_width: float = Field(default=0.0, ge=0.0, description="Stroke width.")
    line_cap: Literal["butt", "round", "square"] = "butt"
    line_join: Literal["miter", "round", "bevel"] = "miter"


class RectElement(BaseSceneElement[ShapeStyle]):
    """An axis-aligned rectangle."""

    def __init__(
        self,
        id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        style: Optional[ShapeStyle] = None,
    ):
        super().__init__(id=id, style=style)
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    @property
    def default_style(self) -> ShapeStyle:
        return ShapeStyle(fill="#000000")

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


class PathElement(BaseSceneElement[ShapeStyle]):
    """An open path: a moveto followed by linetos through `points`."""

    def __init__(
        self,
        id: str,
        points: Sequence[Point],
        style: Optional[ShapeStyle] = None,
    ):
        super().__init__(id=id, style=style)
        if len(points) < 2:
            raise ValueError(f"Path '{id}' needs at least two points.")
        self.points: List[Point] = [(float(x), float(y)) for x, y in points]

    @property
    def default_style(self) -> ShapeStyle:
        return ShapeStyle(stroke="#000000", stroke_width=1.0)

    @property
    def d(self) -> str:
        """SVG path data for the point sequence."""
        (x0, y0), *rest = self.points
        commands = [f"M {x0} {y0}"] + [f"L {x} {y}" for x, y in rest]
        return " ".join(commands)


class PolylineElement(BaseSceneElement[ShapeStyle]):
    """A connected series of line segments."""

    def __init__(
        self,
        id: str,
        points: Sequence[Point],
        style: Optional[ShapeStyle] = None,
    ):
        super().__init__(id=id, style=style)
        if len(points) < 2:
            raise ValueError(f"Polyline '{id}' needs at least two points.")
        self.points: List[Point] = [(float(x), float(y)) for x, y in points]

    @property
    def default_style(self) -> ShapeStyle:
        return ShapeStyle(stroke="#000000", stroke_width=1.0)

    def flat_points(self) -> List[float]:
        return [coord for point in self.points for coord in point]
