# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Renderer-independent scene graph."""

from .base_element import BaseSceneElement, BaseSceneStyle
from .group import ClipRect, FrameMask, GroupStyle, GroupTransform, SceneGroup
from .shapes import PathElement, Point, PolylineElement, RectElement, ShapeStyle
from .mesh import MeshGradientElement
from .scene import Scene
from .errors import (
    SceneError,
    ElementNotFoundError,
    DuplicateElementError,
    ParentNotFoundError,
    ElementTypeError,
    CircularDependencyError,
    InvalidSceneOperationError,
)

__all__ = [
    "BaseSceneElement",
    "BaseSceneStyle",
    "ClipRect",
    "FrameMask",
    "GroupStyle",
    "GroupTransform",
    "SceneGroup",
    "PathElement",
    "Point",
    "PolylineElement",
    "RectElement",
    "ShapeStyle",
    "MeshGradientElement",
    "Scene",
    "SceneError",
    "ElementNotFoundError",
    "DuplicateElementError",
    "ParentNotFoundError",
    "ElementTypeError",
    "CircularDependencyError",
    "InvalidSceneOperationError",
]
