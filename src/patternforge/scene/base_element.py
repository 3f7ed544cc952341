# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Common base of every node in a pattern scene.

Node ids end up verbatim as SVG ``id`` attributes and in ``url(#...)``
references for clip paths and masks, so they must be valid XML names.
"""

import re
from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, Field

StyleType = TypeVar("StyleType", bound="BaseSceneStyle")

_XML_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")


class BaseSceneStyle(BaseModel):
    """Presentation attributes shared by shapes, meshes and groups."""

    visibility: bool = Field(
        default=True, description="Skip the node (and its subtree) when rendering."
    )
    opacity: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Node opacity (0.0 to 1.0)."
    )

    model_config = {"extra": "forbid", "frozen": True}


class BaseSceneElement(ABC, Generic[StyleType]):
    """A node of the scene tree carrying an id, a style and its parent link.

    Subclasses provide `default_style`; an element built without an explicit
    style renders with it.
    """

    def __init__(
        self,
        id: str,
        style: Optional[StyleType] = None,
        parent: Optional["BaseSceneElement"] = None,
    ):
        if not isinstance(id, str) or not _XML_ID.match(id):
            raise ValueError(
                f"Scene element id must be a non-empty XML name, got {id!r}."
            )
        self.id = id
        self._style = style
        self._parent = parent

    @property
    def parent(self) -> Optional["BaseSceneElement"]:
        return self._parent

    def _set_parent(self, value: Optional["BaseSceneElement"]) -> None:
        # Only groups call this, from add_child.
        if value is not None and not isinstance(value, BaseSceneElement):
            raise TypeError("Parent must be a SceneGroup.")
        self._parent = value

    def lineage(self) -> Iterator["BaseSceneElement"]:
        """Yield this element followed by its ancestors up to the tree root."""
        node: Optional[BaseSceneElement] = self
        while node is not None:
            yield node
            node = node._parent

    @property
    @abstractmethod
    def default_style(self) -> StyleType:
        raise NotImplementedError

    @property
    def style(self) -> StyleType:
        return self._style if self._style is not None else self.default_style

    @property
    def hidden(self) -> bool:
        """True if the element is invisible or fully transparent."""
        return not self.style.visibility or self.style.opacity == 0

    def __repr__(self) -> str:
        parent = self._parent.id if self._parent else None
        return f"<{type(self).__name__} id={self.id!r} parent={parent!r}>"
