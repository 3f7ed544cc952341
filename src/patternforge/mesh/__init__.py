# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Mesh gradient interpolation."""

from .pins import ColorPin, PinSet, enabled_pins, invert_pins
from .interpolation import (
    RGBA,
    WHITE,
    EDGE_EXTENSION,
    COINCIDENT_DISTANCE,
    MeshProfile,
    MeshSample,
    GLAZE_PROFILE,
    TRANSFORMATIONAL_PROFILE,
    color_at,
    sample_mesh,
)

__all__ = [
    "ColorPin",
    "PinSet",
    "enabled_pins",
    "invert_pins",
    "RGBA",
    "WHITE",
    "EDGE_EXTENSION",
    "COINCIDENT_DISTANCE",
    "MeshProfile",
    "MeshSample",
    "GLAZE_PROFILE",
    "TRANSFORMATIONAL_PROFILE",
    "color_at",
    "sample_mesh",
]
