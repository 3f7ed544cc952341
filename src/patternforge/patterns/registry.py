# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Dispatcher selecting a generator by pattern tag."""

from typing import Callable, Dict, NamedTuple, Optional, Type, Union

from patternforge.core import (
    GlobalState,
    ParameterValidationError,
    PatternType,
    logger,
)
from patternforge.scene import Scene

from .base import BasePatternParams, EngineSettings
from .color_background import GlazeParams, generate_glaze
from .diagonal_contours import DiagonalContoursParams, generate_diagonal_contours
from .horizontal_bands import HorizontalBandsParams, generate_horizontal_bands
from .multidimensional_los import (
    MultidimensionalLoSParams,
    generate_multidimensional_los,
)
from .portal import PortalParams, generate_portal
from .vertical_bars import VerticalBarsParams, generate_vertical_bars

Generator = Callable[[BasePatternParams, GlobalState], Scene]


class PatternEntry(NamedTuple):
    params_type: Type[BasePatternParams]
    generator: Generator


PATTERN_REGISTRY: Dict[PatternType, PatternEntry] = {
    PatternType.HORIZONTAL_BANDS: PatternEntry(
        HorizontalBandsParams, generate_horizontal_bands
    ),
    PatternType.VERTICAL_BARS: PatternEntry(VerticalBarsParams, generate_vertical_bars),
    PatternType.DIAGONAL_CONTOURS: PatternEntry(
        DiagonalContoursParams, generate_diagonal_contours
    ),
    PatternType.MULTIDIMENSIONAL_LOS: PatternEntry(
        MultidimensionalLoSParams, generate_multidimensional_los
    ),
    PatternType.TRANSFORMATIONAL_COLOR_BACKGROUND: PatternEntry(
        GlazeParams, generate_glaze
    ),
    PatternType.PORTAL: PatternEntry(PortalParams, generate_portal),
}


def params_type_for(pattern: Union[PatternType, str]) -> Type[BasePatternParams]:
    """The parameter model accepted by `pattern`."""
    return PATTERN_REGISTRY[PatternType(pattern)].params_type


def default_params(pattern: Union[PatternType, str]) -> BasePatternParams:
    """A parameter object holding every default of `pattern`."""
    return params_type_for(pattern)()


def validate_params(
    pattern: PatternType, params: BasePatternParams, settings: EngineSettings
) -> None:
    """Check the parameter object against the pattern and the engine settings.

    Raises:
        ParameterValidationError: If the parameter type does not belong to the
            pattern, a density curve is not exposed, or strict validation
            finds out-of-range values.
    """
    expected = PATTERN_REGISTRY[pattern].params_type
    if not isinstance(params, expected):
        raise ParameterValidationError(
            pattern.value,
            [f"expected {expected.__name__}, got {type(params).__name__}"],
        )

    problems = []
    curve = getattr(params, "density_curve", None)
    if curve is not None and curve not in settings.exposed_density_curves:
        exposed = ", ".join(c.value for c in settings.exposed_density_curves)
        problems.append(
            f"density curve '{curve.value}' is not enabled (enabled: {exposed})"
        )
    if problems:
        raise ParameterValidationError(pattern.value, problems)

    if settings.strict_validation:
        problems = params.check_bounds()
        if problems:
            raise ParameterValidationError(pattern.value, problems)


def generate(
    params: BasePatternParams,
    state: GlobalState,
    settings: Optional[EngineSettings] = None,
) -> Scene:
    """Render `params` with the generator selected by `state.pattern`.

    The call is pure: identical inputs always produce an identical scene.

    Args:
        params: Parameter object of the pattern named by `state.pattern`.
        state: Canvas, brand, line weight and seed.
        settings: Engine switches; defaults to `EngineSettings()`.

    Returns:
        The generated scene.

    Raises:
        ParameterValidationError: See `validate_params`.
    """
    settings = settings or EngineSettings()
    pattern = state.pattern
    validate_params(pattern, params, settings)

    logger.debug(f"Generating {pattern.value} (seed={state.seed})")
    return PATTERN_REGISTRY[pattern].generator(params, state)
