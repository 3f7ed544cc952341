# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import List


class PatternForgeError(Exception):
    """Base exception class for PatternForge errors.

    This class is used as the base for all custom exceptions raised by the
    engine, the IO layer and the CLI. It provides a consistent interface for
    error handling and formatting.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidColorFormatError(PatternForgeError, ValueError):
    """Raised when a color string is not a `#RRGGBB` hex value."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid color format: {value!r}. Expected a '#RRGGBB' hex string."
        )


class UnknownPaletteEntryError(PatternForgeError, KeyError):
    """Raised when a named brand color or brand pair does not exist."""

    def __init__(self, name: str, kind: str = "color"):
        self.name = name
        super().__init__(f"Unknown brand {kind}: '{name}'")

    def __str__(self) -> str:
        return self.message


class UnknownPresetError(PatternForgeError, KeyError):
    """Raised when a preset name is not registered for a pattern."""

    def __init__(self, pattern: str, name: str, available: List[str]):
        self.pattern = pattern
        self.name = name
        options = ", ".join(available) if available else "none"
        super().__init__(
            f"Unknown preset '{name}' for pattern '{pattern}'. Available: {options}"
        )

    def __str__(self) -> str:
        return self.message


class ParameterValidationError(PatternForgeError, ValueError):
    """Raised when parameters are rejected at the engine boundary.

    Structural problems (wrong parameter type for a pattern, unexposed density
    curves) always raise. Out-of-range numbers only raise when strict
    validation is enabled in the engine settings.
    """

    def __init__(self, pattern: str, problems: List[str]):
        self.pattern = pattern
        self.problems = problems
        details = "\n".join(f"  - {problem}" for problem in problems)
        super().__init__(f"Invalid parameters for pattern '{pattern}':\n{details}")
