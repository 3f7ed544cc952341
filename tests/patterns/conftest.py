# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Fixtures shared by the pattern generator tests."""

from typing import Callable

import pytest

from patternforge.core import BrandPair, CanvasSpec, GlobalState, PatternType


@pytest.fixture
def make_state() -> Callable[..., GlobalState]:
    """Build a GlobalState for a pattern on a small canvas."""

    def _make(
        pattern: PatternType,
        width: int = 200,
        height: int = 200,
        padding: float = 0.0,
        line_weight: float = 2.0,
        seed: int = 12345,
    ) -> GlobalState:
        return GlobalState(
            canvas=CanvasSpec(width=width, height=height, padding=padding),
            brand=BrandPair.from_preset("Midnight / Celadon"),
            line_weight=line_weight,
            seed=seed,
            pattern=pattern,
        )

    return _make
