# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Inverse distance weighted color fields sampled onto a coarse grid.

A mesh gradient is a continuous color field defined by up to five pins. The
field is sampled on a grid that extends past the visible area, each cell is
drawn as an opaque rectangle, and the renderer blurs the result into a smooth
gradient. A parallel alpha grid drives an opacity mask so pin opacity varies
spatially.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

import numpy as np
from pydantic import BaseModel

from patternforge.core import parse_hex

from .pins import ColorPin, enabled_pins

# Fraction of the visible size sampled beyond each edge.
EDGE_EXTENSION = 0.15
# Pins closer than this to the query point dominate the blend.
COINCIDENT_DISTANCE = 0.001
COINCIDENT_WEIGHT = 1_000_000.0
# Cells overlap their neighbours by this many pixels.
CELL_OVERLAP = 2.0


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float


WHITE = RGBA(255, 255, 255, 1.0)


class MeshProfile(BaseModel):
    """Tuning of the interpolation, sampling and blur for one mesh flavour."""

    name: str
    power_base: float
    aspect_correct: bool
    grid_divisor: float
    grid_min: int
    grid_max: int
    blur_min: float
    blur_factor: float
    blur_from_short_side: bool
    noise_dither: bool
    alpha_mask: bool
    solid_fallback: bool

    model_config = {"extra": "forbid", "frozen": True}

    def power(self, blend_strength: float) -> float:
        """IDW exponent; higher values sharpen transitions between pins."""
        return self.power_base + blend_strength * 2.0

    def grid_size(self, width: float, height: float) -> int:
        size = math.floor(min(width, height) / self.grid_divisor)
        return min(self.grid_max, max(self.grid_min, size))

    def blur_amount(self, width: float, height: float, grid_size: int) -> float:
        side = min(width, height) if self.blur_from_short_side else width
        return max(self.blur_min, side / grid_size * self.blur_factor)


GLAZE_PROFILE = MeshProfile(
    name="glaze",
    power_base=1.5,
    aspect_correct=True,
    grid_divisor=15,
    grid_min=80,
    grid_max=120,
    blur_min=40.0,
    blur_factor=2.5,
    blur_from_short_side=True,
    noise_dither=True,
    alpha_mask=True,
    solid_fallback=False,
)

TRANSFORMATIONAL_PROFILE = MeshProfile(
    name="transformational",
    power_base=2.0,
    aspect_correct=False,
    grid_divisor=20,
    grid_min=100,
    grid_max=150,
    blur_min=30.0,
    blur_factor=1.5,
    blur_from_short_side=False,
    noise_dither=False,
    alpha_mask=False,
    solid_fallback=True,
)


def _idw_field(
    xs: np.ndarray,
    ys: np.ndarray,
    pins: Sequence[ColorPin],
    blend_strength: float,
    profile: MeshProfile,
    aspect_ratio: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Evaluate the blended color and alpha at every query point.

    Returns:
        (colors, alpha): uint8 array of shape xs.shape + (3,) and a float
        array of shape xs.shape.
    """
    active = enabled_pins(pins)
    shape = xs.shape

    if not active:
        return np.full(shape + (3,), 255, dtype=np.uint8), np.ones(shape)

    if len(active) == 1:
        rgb = np.array(parse_hex(active[0].color), dtype=np.uint8)
        colors = np.broadcast_to(rgb, shape + (3,)).copy()
        return colors, np.full(shape, active[0].opacity)

    ratio = aspect_ratio if profile.aspect_correct else 1.0
    pin_x = np.array([pin.x for pin in active])
    pin_y = np.array([pin.y for pin in active])
    dx = (xs[..., np.newaxis] - pin_x) * ratio
    dy = ys[..., np.newaxis] - pin_y
    distances = np.sqrt(dx * dx + dy * dy)

    power = profile.power(blend_strength)
    weights = np.where(
        distances < COINCIDENT_DISTANCE,
        COINCIDENT_WEIGHT,
        1.0 / np.power(np.maximum(distances, COINCIDENT_DISTANCE), power),
    )
    weights = weights / weights.sum(axis=-1, keepdims=True)

    pin_rgb = np.array([parse_hex(pin.color) for pin in active], dtype=float)
    pin_alpha = np.array([pin.opacity for pin in active])
    colors = np.floor(weights @ pin_rgb + 0.5).clip(0, 255).astype(np.uint8)
    alpha = weights @ pin_alpha
    return colors, alpha


def color_at(
    x: float,
    y: float,
    pins: Sequence[ColorPin],
    blend_strength: float,
    profile: MeshProfile = GLAZE_PROFILE,
    aspect_ratio: float = 1.0,
) -> RGBA:
    """Blend the enabled pins at a single normalized point.

    Zero enabled pins yield opaque white; a single enabled pin yields its own
    color and opacity everywhere.

    Args:
        x: Normalized X in [0, 1].
        y: Normalized Y in [0, 1].
        pins: The pin array (disabled pins are ignored).
        blend_strength: Blend control, typically in [0, 1].
        profile: Interpolation profile.
        aspect_ratio: Width / height of the target area; scales X distances
            for profiles that correct for non-square canvases.

    Returns:
        The RGBA value, channels in [0, 255] and alpha in [0, 1].
    """
    active = enabled_pins(pins)
    if not active:
        return WHITE
    if len(active) == 1:
        red, green, blue = parse_hex(active[0].color)
        return RGBA(red, green, blue, active[0].opacity)

    colors, alpha = _idw_field(
        np.array([[x]], dtype=float),
        np.array([[y]], dtype=float),
        pins,
        blend_strength,
        profile,
        aspect_ratio,
    )
    red, green, blue = (int(channel) for channel in colors[0, 0])
    return RGBA(red, green, blue, float(alpha[0, 0]))


@dataclass(frozen=True)
class MeshSample:
    """A mesh gradient sampled on a square grid of cells.

    Attributes:
        width: Width of the visible area in pixels.
        height: Height of the visible area in pixels.
        grid_size: Number of cells per axis.
        colors: uint8 array (grid_size, grid_size, 3) indexed [row, col].
        alpha: float array (grid_size, grid_size) in [0, 1].
        blur_std: Standard deviation of the smoothing blur.
        profile: The profile the sample was taken with.
    """

    width: float
    height: float
    grid_size: int
    colors: np.ndarray
    alpha: np.ndarray
    blur_std: float
    profile: MeshProfile

    @property
    def extended_width(self) -> float:
        return self.width * (1 + EDGE_EXTENSION * 2)

    @property
    def extended_height(self) -> float:
        return self.height * (1 + EDGE_EXTENSION * 2)

    def cell_rect(self, row: int, col: int) -> Tuple[float, float, float, float]:
        """Pixel rectangle (x, y, width, height) covered by a grid cell."""
        offset_x = -self.width * EDGE_EXTENSION
        offset_y = -self.height * EDGE_EXTENSION
        x = offset_x + (col / self.grid_size) * self.extended_width
        y = offset_y + (row / self.grid_size) * self.extended_height
        return (
            x,
            y,
            self.extended_width / self.grid_size + CELL_OVERLAP,
            self.extended_height / self.grid_size + CELL_OVERLAP,
        )

    def cells(self):
        """Yield (row, col, (r, g, b), alpha) for every cell in row order."""
        for row in range(self.grid_size):
            for col in range(self.grid_size):
                red, green, blue = (int(c) for c in self.colors[row, col])
                yield row, col, (red, green, blue), float(self.alpha[row, col])


def sample_mesh(
    pins: Sequence[ColorPin],
    width: float,
    height: float,
    blend_strength: float,
    profile: MeshProfile = GLAZE_PROFILE,
) -> MeshSample:
    """Sample the mesh field for an area of `width` x `height` pixels.

    Sample positions extend `EDGE_EXTENSION` past every edge and are clamped
    back to [0, 1] for the color lookup, repeating the edge colors so the
    later blur does not darken the borders.
    """
    grid_size = profile.grid_size(width, height)
    steps = np.arange(grid_size) / (grid_size - 1)
    positions = steps * (1 + EDGE_EXTENSION * 2) - EDGE_EXTENSION
    clamped = np.clip(positions, 0.0, 1.0)
    xs, ys = np.meshgrid(clamped, clamped)

    aspect_ratio = width / height if height > 0 else 1.0
    colors, alpha = _idw_field(xs, ys, pins, blend_strength, profile, aspect_ratio)
    return MeshSample(
        width=width,
        height=height,
        grid_size=grid_size,
        colors=colors,
        alpha=alpha,
        blur_std=profile.blur_amount(width, height, grid_size),
        profile=profile,
    )
