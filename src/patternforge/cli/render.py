# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Annotated, Any, Dict, Optional

from cyclopts import Parameter
from pydantic import ValidationError

from patternforge.core import (
    BrandPair,
    CanvasSpec,
    GlobalState,
    PatternType,
    logger,
)
from patternforge.io import DesignParser, save_scene, serialize
from patternforge.patterns import (
    EngineSettings,
    default_params,
    generate,
    get_preset,
)

from .errors import InvalidArgumentError, error_handler
from .utils import CommonParameters, set_logging_level


def _validated(argument: str, model: Any, **values: Any) -> Any:
    try:
        return model(**values)
    except ValidationError as e:
        reasons = "; ".join(err["msg"] for err in e.errors())
        raise InvalidArgumentError(argument, reasons) from e


def _apply_overrides(
    state: GlobalState,
    width: Optional[int],
    height: Optional[int],
    padding: Optional[float],
    seed: Optional[int],
    brand: Optional[str],
    line_weight: Optional[float],
) -> GlobalState:
    canvas_update: Dict[str, Any] = {
        key: value
        for key, value in (("width", width), ("height", height), ("padding", padding))
        if value is not None
    }
    canvas = state.canvas
    if canvas_update:
        canvas_update.setdefault("dimension_preset", None)
        canvas = _validated(
            "--width/--height/--padding",
            CanvasSpec,
            **{**canvas.model_dump(), **canvas_update},
        )

    return _validated(
        "--seed/--line-weight",
        GlobalState,
        canvas=canvas,
        brand=BrandPair.from_preset(brand) if brand is not None else state.brand,
        line_weight=state.line_weight if line_weight is None else line_weight,
        seed=state.seed if seed is None else seed,
        pattern=state.pattern,
    )


@error_handler
def render_pattern(
    pattern: Optional[PatternType] = None,
    output: Annotated[Optional[Path], Parameter(name=["-o", "--output"])] = None,
    design: Optional[Path] = None,
    preset: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    padding: Optional[float] = None,
    seed: Optional[int] = None,
    brand: Optional[str] = None,
    line_weight: Optional[float] = None,
    scale: float = 1.0,
    *,
    common: CommonParameters | None = None,
) -> int:
    """
    Generate a brand pattern and export it as SVG or PNG.

    Args:
        pattern: Pattern to generate, e.g. vertical_bars or
            transformational_color_background. Optional when a design file
            names the pattern.
        output: Path of the .svg or .png file to write.
            If not provided, the SVG document is printed to stdout.
            The directory will be created if it doesn't exist.
        design: Path to a TOML design file with [global], [canvas], [brand],
            [params] and [settings] tables.
        preset: Name of a preset replacing the pattern parameters.
            Run 'patternforge presets' to list them.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        padding: Canvas padding in pixels.
        seed: Seed of the deterministic random number generator.
        brand: Brand color pair, e.g. "Midnight / Celadon".
            Run 'patternforge palette' to list them.
        line_weight: Stroke width of line patterns.
        scale: Raster scale factor for PNG output.
    Returns:
        int: 0 for success, 1 for errors.
    Examples:
        patternforge render vertical_bars -o bars.svg
        patternforge render transformational_color_background --preset preset2 -o glaze.png --scale 2
        patternforge render --design poster.toml -o poster.svg
    """
    set_logging_level(common)

    if design is not None:
        parsed = DesignParser(design).parse()
        state, params, settings = parsed.state, parsed.params, parsed.settings
        if pattern is not None and pattern != state.pattern:
            raise InvalidArgumentError(
                "pattern",
                f"the design file describes '{state.pattern.value}', not '{pattern.value}'",
            )
    elif pattern is None:
        raise InvalidArgumentError("pattern", "name a pattern or pass --design")
    else:
        state = GlobalState(pattern=pattern)
        params = default_params(pattern)
        settings = EngineSettings()

    if preset is not None:
        params = get_preset(state.pattern, preset)

    state = _apply_overrides(state, width, height, padding, seed, brand, line_weight)
    scene = generate(params, state, settings)

    if output is not None:
        save_scene(scene, output, scale)
    else:
        print(serialize(scene))

    logger.info(f"[bold]Rendered {state.pattern.value}[/bold]")
    logger.info(f"  Canvas: {state.canvas.width}x{state.canvas.height}")
    logger.info(f"  Seed: {state.seed}")
    logger.info(f"  Output: {output if output else 'stdout'}")
    return 0
