# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Canvas, brand and global render state shared by every generator."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .color import HexColor
from .palette import DEFAULT_BRAND_PAIR, get_brand_pair, get_canvas_size


class PatternType(str, Enum):
    """Closed set of pattern tags understood by the dispatcher."""

    HORIZONTAL_BANDS = "horizontal_bands"
    VERTICAL_BARS = "vertical_bars"
    DIAGONAL_CONTOURS = "diagonal_contours"
    MULTIDIMENSIONAL_LOS = "multidimensional_los"
    TRANSFORMATIONAL_COLOR_BACKGROUND = "transformational_color_background"
    PORTAL = "portal"


class CanvasSpec(BaseModel):
    """Pixel dimensions of the output surface and its uniform inset."""

    width: int = Field(default=1024, gt=0, description="Canvas width in pixels.")
    height: int = Field(default=1024, gt=0, description="Canvas height in pixels.")
    padding: float = Field(
        default=0.0, ge=0.0, description="Inset applied before laying out content."
    )
    dimension_preset: Optional[str] = Field(
        default=None, description="Name of the canvas size preset, if any."
    )

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="after")
    def _check_padding(self) -> "CanvasSpec":
        if self.padding >= min(self.width, self.height) / 2:
            raise ValueError(
                f"padding ({self.padding}) must be smaller than half the shortest "
                f"canvas side ({min(self.width, self.height) / 2})"
            )
        return self

    @classmethod
    def from_preset(cls, name: str, padding: float = 0.0) -> "CanvasSpec":
        width, height = get_canvas_size(name)
        return cls(width=width, height=height, padding=padding, dimension_preset=name)

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.padding


class BrandPair(BaseModel):
    """Two-color palette used when a generator defines no colors of its own."""

    background: HexColor = Field(
        default=get_brand_pair(DEFAULT_BRAND_PAIR)[0],
        description="Canvas background color.",
    )
    foreground: HexColor = Field(
        default=get_brand_pair(DEFAULT_BRAND_PAIR)[1],
        description="Default drawing color.",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_preset(cls, name: str) -> "BrandPair":
        background, foreground = get_brand_pair(name)
        return cls(background=background, foreground=foreground)

    def swapped(self) -> "BrandPair":
        return BrandPair(background=self.foreground, foreground=self.background)


class GlobalState(BaseModel):
    """Snapshot of the shared render context passed to every generator."""

    canvas: CanvasSpec = Field(default_factory=CanvasSpec)
    brand: BrandPair = Field(default_factory=BrandPair)
    line_weight: float = Field(
        default=2.0, ge=0.0, description="Stroke width for line patterns."
    )
    seed: int = Field(
        default=12345,
        ge=0,
        le=0xFFFFFFFF,
        description="Seed for the deterministic random number generator.",
    )
    pattern: PatternType = PatternType.VERTICAL_BARS

    model_config = {"extra": "forbid", "frozen": True}
