# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the pattern dispatcher, presets and the reserved portal pattern."""

import logging

import pytest

from patternforge.core import ParameterValidationError, PatternType, UnknownPresetError
from patternforge.io import serialize
from patternforge.patterns import (
    GLAZE_PRESETS,
    PATTERN_REGISTRY,
    TRANSFORMATIONAL_PRESETS,
    EngineSettings,
    GlazeParams,
    HorizontalBandsParams,
    PortalParams,
    VerticalBarsParams,
    default_params,
    generate,
    get_preset,
    list_presets,
    params_type_for,
)


def test_every_pattern_is_registered() -> None:
    assert set(PATTERN_REGISTRY) == set(PatternType)
    assert params_type_for("vertical_bars") is VerticalBarsParams
    assert isinstance(default_params(PatternType.PORTAL), PortalParams)


@pytest.mark.parametrize("pattern", list(PatternType))
def test_generation_is_deterministic(make_state, pattern) -> None:
    params = default_params(pattern)
    if isinstance(params, HorizontalBandsParams):
        params = HorizontalBandsParams(thickness_variation=0.3, y_jitter=2)
    state = make_state(pattern, 320, 240, padding=10, seed=99)
    assert serialize(generate(params, state)) == serialize(generate(params, state))


def test_wrong_params_type_rejected(make_state) -> None:
    with pytest.raises(ParameterValidationError, match="expected VerticalBarsParams"):
        generate(HorizontalBandsParams(), make_state(PatternType.VERTICAL_BARS))


def test_strict_validation_passes_valid_params(make_state) -> None:
    settings = EngineSettings(strict_validation=True)
    for pattern in PatternType:
        generate(default_params(pattern), make_state(pattern), settings)


def test_params_forbid_unknown_fields() -> None:
    with pytest.raises(ValueError):
        HorizontalBandsParams(band_cnt=3)


def test_list_presets() -> None:
    names = list_presets(PatternType.TRANSFORMATIONAL_COLOR_BACKGROUND)
    assert names == list(GLAZE_PRESETS) + list(TRANSFORMATIONAL_PRESETS)
    assert names[:4] == ["preset1", "preset2", "preset3", "preset4"]
    assert "celadon_dream" in names
    assert list_presets("vertical_bars") == []


def test_get_preset_replaces_params_wholesale() -> None:
    preset = get_preset("transformational_color_background", "midnight_bloom")
    assert isinstance(preset, GlazeParams)
    assert preset.mesh_profile == "transformational"
    assert preset.background_color is None
    assert preset.blend_strength == 0.1
    assert len(preset.pins) == 5


def test_get_preset_unknown() -> None:
    with pytest.raises(UnknownPresetError) as excinfo:
        get_preset(PatternType.TRANSFORMATIONAL_COLOR_BACKGROUND, "preset9")
    assert "preset1" in str(excinfo.value)
    with pytest.raises(UnknownPresetError, match="Available: none"):
        get_preset(PatternType.PORTAL, "anything")


def test_portal_renders_background_only(make_state, caplog) -> None:
    with caplog.at_level(logging.INFO):
        scene = generate(PortalParams(), make_state(PatternType.PORTAL))
    assert [node.id for node in scene.top_level_nodes] == ["portal"]
    assert len(scene) == 1
    assert scene.background == "#032842"
    assert "not implemented" in caplog.text
