# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Density curves that modulate spacing and widths along a bar sequence."""

import math
from enum import Enum
from typing import Tuple, Union

# Gap shrinks three times faster than the density rises.
GAP_REDUCTION_GAIN = 3.0

# Gaps narrower than the threshold become a small overlap of at most
# MAX_SEAM_OVERLAP pixels.
SEAM_THRESHOLD = 10.0
MAX_SEAM_OVERLAP = 10


class DensityCurve(str, Enum):
    """Available density ramps."""

    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    EXP = "exp"


DEFAULT_EXPOSED_CURVES: Tuple[DensityCurve, ...] = (
    DensityCurve.LINEAR,
    DensityCurve.EASE,
)


def _ramp(t: float, curve: DensityCurve) -> float:
    if curve in (DensityCurve.EASE, DensityCurve.EASE_IN):
        return t * t
    if curve is DensityCurve.EASE_OUT:
        return 1.0 - (1.0 - t) ** 2
    if curve is DensityCurve.EASE_IN_OUT:
        return 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0
    if curve is DensityCurve.EXP:
        return 0.0 if t <= 0 else 2.0 ** (10.0 * t - 10.0)
    return 0.0


def evaluate_density(
    t: float, curve: Union[DensityCurve, str], intensity: float
) -> float:
    """Map progress along a sequence to a density scalar.

    `linear` disables modulation and always yields 0. For the other curves the
    ramp is scaled by `|intensity| / 100`; a negative intensity mirrors the
    ramp so density is highest at the start of the sequence instead of the end.

    Args:
        t: Normalized progress in [0, 1] (clamped).
        curve: Curve kind.
        intensity: Signed intensity on a 0-100 scale.

    Returns:
        Density in [0, 1].
    """
    curve = DensityCurve(curve)
    if curve is DensityCurve.LINEAR:
        return 0.0
    t = min(1.0, max(0.0, t))
    if intensity < 0:
        t = 1.0 - t
    density = _ramp(t, curve) * abs(intensity) / 100.0
    return min(1.0, max(0.0, density))


def gap_after_density(gap_width: float, density: float) -> float:
    """Shrink a gap according to density: `gap * (1 - min(1, 3 * density))`."""
    reduction = min(1.0, density * GAP_REDUCTION_GAIN)
    return gap_width * (1.0 - reduction)


def apply_seam_clamp(gap: float, density: float) -> float:
    """Apply the minimum visual seam clamp to a computed gap.

    Gaps below `SEAM_THRESHOLD` become an overlap of `max(1, floor(10 * d))`
    pixels, never more than `MAX_SEAM_OVERLAP`.
    """
    if gap >= SEAM_THRESHOLD:
        return gap
    overlap = max(1, min(MAX_SEAM_OVERLAP, math.floor(density * 10)))
    return -float(overlap)
