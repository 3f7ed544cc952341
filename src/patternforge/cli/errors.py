# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for the PatternForge CLI."""

import functools
import os
import sys
import traceback
from typing import Any, Callable, TypeVar, cast

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.traceback import Traceback

from patternforge.core import (
    PatternForgeError,
    UnknownPaletteEntryError,
    UnknownPresetError,
)

console = Console(stderr=True)

F = TypeVar("F", bound=Callable[..., Any])


class CLIError(PatternForgeError):
    """Base class for CLI-specific errors."""

    def __init__(self, message: str):
        super().__init__(f"CLI error: {message}")


class InvalidArgumentError(CLIError):
    """Exception raised when an invalid argument is provided."""

    def __init__(self, argument: str, reason: str):
        message = f"Invalid argument: {argument}"
        suggestion = f"Reason: {reason}\nRun 'patternforge --help' for more information."
        super().__init__(f"{message}\n{suggestion}")


HINTS = (
    (UnknownPresetError, "Run 'patternforge presets' to list the available presets."),
    (UnknownPaletteEntryError, "Run 'patternforge palette' to list brand colors and pairs."),
)


def _hint(error: PatternForgeError) -> str:
    for error_type, hint in HINTS:
        if isinstance(error, error_type):
            return hint
    return ""


def error_handler(func: F) -> F:
    """Decorator to handle exceptions in CLI functions.

    PatternForge errors are printed as a rich panel naming the error type and
    where it was raised, plus a hint for unknown preset and palette names.
    Anything else gets a full rich traceback. Both return exit code 1.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PatternForgeError as e:
            frame = traceback.extract_tb(sys.exc_info()[2])[-1]
            filename = os.path.basename(frame.filename)

            title = Text("PatternForge Error", style="bold red")
            error_type = Text(f"[{e.__class__.__name__}]", style="red")
            location = Text(f" at {filename}:{frame.lineno}", style="dim")
            hint = _hint(e)
            header = Text.assemble(title, " ", error_type, location)

            console.print(
                Panel(
                    Text.assemble(e.message, ("\n" + hint, "dim") if hint else ""),
                    title=header,
                    border_style="red",
                    padding=(1, 2),
                )
            )
            return 1
        except Exception as e:
            console.print("[bold red]Unexpected Error:[/bold red]", str(e))
            console.print(Traceback())
            return 1

    return cast(F, wrapper)
