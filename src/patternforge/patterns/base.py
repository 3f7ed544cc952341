# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Shared contract of the pattern generators."""

from typing import List, Tuple

from pydantic import BaseModel, Field

from patternforge.core import DEFAULT_EXPOSED_CURVES, DensityCurve, GlobalState
from patternforge.scene import Scene, SceneGroup


class BasePatternParams(BaseModel):
    """Base class of every pattern parameter object.

    Parameter objects are fully specified: every field has its default
    declared here once, unknown fields are rejected, and instances are
    immutable so a preset can be shared safely.
    """

    model_config = {"extra": "forbid", "frozen": True}

    def check_bounds(self) -> List[str]:
        """List values that would make the pattern degenerate.

        Generators never raise for such values; this is only consulted when
        strict validation is enabled.
        """
        return []


class EngineSettings(BaseModel):
    """Engine-wide behavior switches."""

    strict_validation: bool = Field(
        default=False,
        description="Reject degenerate parameter values instead of rendering an empty pattern.",
    )
    exposed_density_curves: Tuple[DensityCurve, ...] = Field(
        default=DEFAULT_EXPOSED_CURVES,
        description="Density curves accepted by the dispatcher.",
    )

    model_config = {"extra": "forbid", "frozen": True}


def non_negative(problems: List[str], **values: float) -> None:
    """Append a message for every named value below zero."""
    for name, value in values.items():
        if value < 0:
            problems.append(f"{name} must not be negative (got {value})")


def create_scene(state: GlobalState, root_id: str) -> Tuple[Scene, SceneGroup]:
    """Create an empty scene for `state` with a single root group.

    The scene background is the brand background, painted before anything
    else.
    """
    scene = Scene(
        width=state.canvas.width,
        height=state.canvas.height,
        background=state.brand.background,
        title=root_id.replace("-", " ").title(),
    )
    root = SceneGroup(id=root_id)
    scene.add_element(root)
    return scene, root
