# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from patternforge.core import PatternForgeError


class SceneError(PatternForgeError):
    """Base class for all errors in the scene module."""

    pass


class ElementNotFoundError(SceneError):
    """Raised when a scene element is not found, typically by ID."""

    pass


class DuplicateElementError(SceneError):
    """Raised when attempting to add an element whose ID is already registered."""

    pass


class ParentNotFoundError(ElementNotFoundError):
    """Raised when a specified parent element ID is not found."""

    pass


class ElementTypeError(SceneError, TypeError):
    """Raised when an element is not of the expected type (e.g., expecting SceneGroup)."""

    pass


class CircularDependencyError(SceneError, ValueError):
    """Raised when an operation would create a circular parent-child relationship."""

    pass


class InvalidSceneOperationError(SceneError, ValueError):
    """Raised for operations that are invalid given the current element state."""

    pass
