# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .base_element import BaseSceneElement, BaseSceneStyle
from .errors import CircularDependencyError, InvalidSceneOperationError


class GroupTransform(BaseModel):
    """Transform specific to SceneGroup elements.

    Components are emitted in a fixed order: translate, scale, rotate, skewX,
    skewY. SVG applies the rightmost transform first.
    """

    translate: Optional[Tuple[float, Optional[float]]] = None
    scale: Optional[Tuple[float, Optional[float]]] = None
    rotate: Optional[Tuple[float, Optional[Tuple[float, float]]]] = None
    skewX: Optional[float] = None
    skewY: Optional[float] = None

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def is_identity(self) -> bool:
        return not str(self)

    def __str__(self) -> str:
        """Return the SVG `transform` attribute value (empty for identity)."""
        parts = []

        if self.translate is not None:
            x, y = self.translate
            parts.append(f"translate({x} {y})" if y is not None else f"translate({x})")

        if self.scale is not None:
            x, y = self.scale
            parts.append(f"scale({x} {y})" if y is not None else f"scale({x})")

        if self.rotate is not None:
            angle, center = self.rotate
            if center is not None:
                cx, cy = center
                parts.append(f"rotate({angle} {cx} {cy})")
            else:
                parts.append(f"rotate({angle})")

        if self.skewX is not None:
            parts.append(f"skewX({self.skewX})")

        if self.skewY is not None:
            parts.append(f"skewY({self.skewY})")

        return " ".join(parts)


class ClipRect(BaseModel):
    """Rectangle, in the group's local coordinates, outside of which nothing is drawn."""

    x: float = 0.0
    y: float = 0.0
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    model_config = {"extra": "forbid", "frozen": True}


class FrameMask(BaseModel):
    """Ring-shaped mask: the `outer` rectangle minus the `inner` one."""

    outer: ClipRect
    inner: ClipRect

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="after")
    def _check_inner_inside_outer(self) -> "FrameMask":
        o, i = self.outer, self.inner
        if (
            i.x < o.x
            or i.y < o.y
            or i.x + i.width > o.x + o.width
            or i.y + i.height > o.y + o.height
        ):
            raise ValueError("Inner frame rectangle must lie inside the outer one.")
        return self


class GroupStyle(BaseSceneStyle):
    """Style specific to SceneGroup elements."""

    pass


class SceneGroup(BaseSceneElement[GroupStyle]):
    """Represents a group node in the scene graph.

    A SceneGroup contains other elements (including other SceneGroups) and
    applies a transform, clip rectangle and frame mask to them collectively.
    """

    def __init__(
        self,
        id: str,
        children: Optional[List[BaseSceneElement]] = None,
        transforms: Optional[GroupTransform] = None,
        clip_rect: Optional[ClipRect] = None,
        mask: Optional[FrameMask] = None,
        style: Optional[GroupStyle] = None,
        parent: Optional["SceneGroup"] = None,
    ):
        """Initializes a SceneGroup.

        Args:
            id: A unique identifier for this group.
            children: An optional list of initial child elements.
            transforms: Optional transform applied to all children.
            clip_rect: Optional clip rectangle in local coordinates.
            mask: Optional frame mask in local coordinates.
            style: An optional specific style instance for this group.
            parent: The parent SceneGroup in the scene graph, if any.
        """
        self._children: List[BaseSceneElement] = []
        self.transforms: GroupTransform = transforms or GroupTransform()
        self.clip_rect: Optional[ClipRect] = clip_rect
        self.mask: Optional[FrameMask] = mask
        super().__init__(id=id, style=style, parent=parent)

        for child in children or []:
            self.add_child(child)

    @property
    def children(self) -> List[BaseSceneElement]:
        """Get the list of direct child elements."""
        return self._children

    def add_child(self, element: BaseSceneElement) -> None:
        """Adds a SceneElement as a child of this group.

        Raises:
            TypeError: If the element is not a BaseSceneElement instance.
            InvalidSceneOperationError: If the element already has a parent.
            CircularDependencyError: If the element is this group or one of its ancestors.
        """
        if not isinstance(element, BaseSceneElement):
            raise TypeError("Child must be an instance of BaseSceneElement.")
        if element._parent is not None:
            raise InvalidSceneOperationError(
                f"Element '{element.id}' already has a parent ('{element.parent.id}')."
            )
        if any(node is element for node in self.lineage()):
            raise CircularDependencyError(
                f"Adding '{element.id}' to '{self.id}' would create a cycle."
            )

        element._set_parent(self)
        self._children.append(element)

    @property
    def default_style(self) -> GroupStyle:
        return GroupStyle()

    def __iter__(self):
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        parent_id = f"'{self._parent.id}'" if self._parent else None
        return (
            f"<{self.__class__.__name__} id='{self.id}' children={len(self._children)} "
            f"parent={parent_id} transforms='{self.transforms}'>"
        )
