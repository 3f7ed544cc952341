# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Dict, Generator, List, Optional, Set, Tuple, Type, TypeVar

from patternforge.core import HexColor, normalize_hex

from .base_element import BaseSceneElement
from .errors import (
    DuplicateElementError,
    ElementNotFoundError,
    ElementTypeError,
    InvalidSceneOperationError,
    ParentNotFoundError,
    SceneError,
)
from .group import SceneGroup

ElementT = TypeVar("ElementT", bound=BaseSceneElement)


class Scene:
    """A renderer-independent description of one generated pattern.

    The Scene has a fixed canvas size and background color, and holds a
    hierarchical tree of elements with unique IDs. Insertion order is the
    paint order: earlier elements are drawn underneath later ones.
    """

    def __init__(
        self,
        width: float,
        height: float,
        background: Optional[HexColor] = None,
        title: Optional[str] = None,
    ):
        """Initializes an empty Scene.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            background: Optional color painted over the whole canvas first.
            title: Optional document title.
        """
        if width <= 0 or height <= 0:
            raise SceneError(f"Scene size must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.background: Optional[str] = (
            normalize_hex(background) if background is not None else None
        )
        self.title = title
        # The order here determines the paint order of top-level items.
        self._nodes: List[BaseSceneElement] = []
        self._element_registry: Dict[str, BaseSceneElement] = {}

    @property
    def top_level_nodes(self) -> List[BaseSceneElement]:
        """Get the list of top-level nodes in the scene graph."""
        return self._nodes

    def get_element_by_id(self, id: str) -> Optional[BaseSceneElement]:
        """Retrieve a scene element by its unique ID, or None if absent."""
        return self._element_registry.get(id)

    def __getitem__(self, id: str) -> BaseSceneElement:
        element = self.get_element_by_id(id)
        if element is None:
            raise ElementNotFoundError(f"Element with ID '{id}' not found.")
        return element

    def __contains__(self, id: str) -> bool:
        return id in self._element_registry

    def __len__(self) -> int:
        return len(self._element_registry)

    def _register_tree(self, element: BaseSceneElement) -> List[BaseSceneElement]:
        """Register an element and all of its descendants, all or nothing."""
        pending: List[BaseSceneElement] = []
        stack = [element]
        seen: Set[str] = set()
        while stack:
            node = stack.pop()
            if node.id in self._element_registry or node.id in seen:
                raise DuplicateElementError(
                    f"Element with ID '{node.id}' already exists in the scene."
                )
            seen.add(node.id)
            pending.append(node)
            if isinstance(node, SceneGroup):
                stack.extend(node.children)

        for node in pending:
            self._element_registry[node.id] = node
        return pending

    def add_element(
        self, element: BaseSceneElement, parent_id: Optional[str] = None
    ) -> None:
        """Adds a SceneElement (and any children it already has) to the scene.

        If parent_id is provided, the element is appended to the children of
        that group. Otherwise it is appended to the top level.

        Raises:
            ElementTypeError: If element is not a BaseSceneElement, or the
                parent is not a SceneGroup.
            DuplicateElementError: If any ID in the element's subtree is taken.
            ParentNotFoundError: If parent_id is unknown.
            InvalidSceneOperationError: If the element is already parented.
        """
        if not isinstance(element, BaseSceneElement):
            raise ElementTypeError(
                f"Object to add is not a BaseSceneElement subclass (got {type(element).__name__})."
            )
        if element.parent is not None:
            raise InvalidSceneOperationError(
                f"Element '{element.id}' already has a parent ('{element.parent.id}') and cannot be added directly."
            )

        parent: Optional[SceneGroup] = None
        if parent_id is not None:
            potential_parent = self.get_element_by_id(parent_id)
            if potential_parent is None:
                raise ParentNotFoundError(
                    f"Parent group with ID '{parent_id}' not found."
                )
            if not isinstance(potential_parent, SceneGroup):
                raise ElementTypeError(
                    f"Specified parent '{parent_id}' is not a SceneGroup (got {type(potential_parent).__name__})."
                )
            parent = potential_parent

        registered = self._register_tree(element)
        try:
            if parent is not None:
                parent.add_child(element)
            else:
                self._nodes.append(element)
        except (ValueError, TypeError, SceneError):
            for node in registered:
                del self._element_registry[node.id]
            raise

    def traverse(self) -> Generator[Tuple[BaseSceneElement, int], None, None]:
        """Performs a depth-first traversal of the scene graph in paint order.

        Yields:
            Tuple[BaseSceneElement, int]: The element and its depth in the
                tree (0 for top-level).
        """
        nodes_to_visit: List[Tuple[BaseSceneElement, int]] = [
            (node, 0) for node in reversed(self._nodes)
        ]
        while nodes_to_visit:
            element, depth = nodes_to_visit.pop()
            yield element, depth
            if isinstance(element, SceneGroup):
                nodes_to_visit.extend(
                    (child, depth + 1) for child in reversed(element.children)
                )

    def get_all_elements(self) -> List[BaseSceneElement]:
        """Returns a flat list of all registered elements."""
        return list(self._element_registry.values())

    def elements_of_type(self, element_type: Type[ElementT]) -> List[ElementT]:
        """Returns all elements of `element_type` in paint order."""
        return [
            element
            for element, _ in self.traverse()
            if isinstance(element, element_type)
        ]

    def __repr__(self) -> str:
        return (
            f"<Scene {self.width}x{self.height} background={self.background} "
            f"elements={len(self._element_registry)}>"
        )
