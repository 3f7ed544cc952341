# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from patternforge.core import BRAND_COLORS, BRAND_PAIRS, CANVAS_SIZES, PatternType
from patternforge.patterns import list_presets

from .errors import error_handler
from .utils import CommonParameters, set_logging_level


@error_handler
def show_presets(
    pattern: Optional[PatternType] = None,
    *,
    common: CommonParameters | None = None,
) -> int:
    """
    List the named presets of one or all patterns.

    Args:
        pattern: Pattern whose presets to list. All patterns if omitted.
    Returns:
        int: 0 for success, 1 for errors.
    """
    set_logging_level(common)
    console = Console()

    patterns = [pattern] if pattern is not None else list(PatternType)
    table = Table(title="Presets")
    table.add_column("Pattern")
    table.add_column("Presets")
    for item in patterns:
        names = list_presets(item)
        table.add_row(item.value, ", ".join(names) if names else "-")
    console.print(table)
    return 0


def _swatch(color: str) -> Text:
    return Text.assemble(("  ", f"on {color}"), f" {color}")


@error_handler
def show_palette(*, common: CommonParameters | None = None) -> int:
    """
    List the brand colors, brand color pairs and canvas size presets.

    Returns:
        int: 0 for success, 1 for errors.
    """
    set_logging_level(common)
    console = Console()

    colors = Table(title="Brand colors")
    colors.add_column("Name")
    colors.add_column("Color")
    for name, color in BRAND_COLORS.items():
        colors.add_row(name, _swatch(color))
    console.print(colors)

    pairs = Table(title="Brand pairs")
    pairs.add_column("Name")
    pairs.add_column("Background")
    pairs.add_column("Foreground")
    for name, (background, foreground) in BRAND_PAIRS.items():
        pairs.add_row(name, _swatch(background), _swatch(foreground))
    console.print(pairs)

    sizes = Table(title="Canvas sizes")
    sizes.add_column("Name")
    sizes.add_column("Width")
    sizes.add_column("Height")
    for name, width, height in CANVAS_SIZES:
        sizes.add_row(name, str(width), str(height))
    console.print(sizes)
    return 0
