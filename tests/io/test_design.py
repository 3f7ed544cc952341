# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for src/patternforge/io/design.py"""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from patternforge.core import DensityCurve, PatternType, UnknownPaletteEntryError
from patternforge.io import (
    Design,
    DesignParser,
    FileNotFoundError,
    InvalidTomlError,
    ParamsValidationError,
)
from patternforge.patterns import (
    GlazeParams,
    HorizontalBandsParams,
    VerticalBarsParams,
)


def create_temp_toml(content: str) -> Path:
    """Helper function to create a temporary TOML file with the given content."""
    f = tempfile.NamedTemporaryFile(suffix=".toml", mode="w", delete=False)
    f.write(content)
    f.close()
    return Path(f.name)


@pytest.fixture
def design_file():
    """Write TOML content to a temporary file and remove it afterwards."""
    paths = []

    def _write(content: str) -> Path:
        path = create_temp_toml(content)
        paths.append(path)
        return path

    yield _write
    for path in paths:
        os.unlink(path)


def test_full_design(design_file) -> None:
    path = design_file(
        """
        [global]
        pattern = "horizontal_bands"
        seed = 7
        line_weight = 1.5

        [canvas]
        width = 400
        height = 300
        padding = 10

        [brand]
        pair = "Midnight / Celadon"

        [params]
        band_count = 5
        band_gap = 4.0

        [settings]
        strict_validation = true
        exposed_density_curves = ["linear", "ease", "exp"]
        """
    )
    design = DesignParser(path).parse()

    assert isinstance(design, Design)
    state = design.state
    assert state.pattern is PatternType.HORIZONTAL_BANDS
    assert (state.seed, state.line_weight) == (7, 1.5)
    assert (state.canvas.width, state.canvas.height, state.canvas.padding) == (400, 300, 10)
    assert (state.brand.background, state.brand.foreground) == ("#032842", "#80BBAD")

    assert isinstance(design.params, HorizontalBandsParams)
    assert design.params.band_count == 5
    assert design.params.band_thickness == 10.0
    assert design.settings.strict_validation
    assert DensityCurve.EXP in design.settings.exposed_density_curves


def test_empty_design_uses_defaults(design_file) -> None:
    design = DesignParser(design_file("")).parse()
    assert design.state.pattern is PatternType.VERTICAL_BARS
    assert design.params == VerticalBarsParams()
    assert not design.settings.strict_validation


def test_canvas_preset_and_brand_override(design_file) -> None:
    path = design_file(
        """
        [canvas]
        dimension_preset = "2000x2000"
        padding = 50

        [brand]
        pair = "Midnight / Celadon"
        foreground = "#ffffff"
        """
    )
    state = DesignParser(path).parse().state
    assert (state.canvas.width, state.canvas.height) == (2000, 2000)
    assert state.canvas.dimension_preset == "2000x2000"
    assert state.canvas.padding == 50
    assert state.brand.background == "#032842"
    assert state.brand.foreground == "#FFFFFF"


def test_glaze_pins_from_array_of_tables(design_file) -> None:
    pins = "\n".join(
        f"""
        [[params.pins]]
        x = {x}
        y = 0.5
        color = "#538184"
        enabled = {"true" if x < 0.5 else "false"}
        """
        for x in (0.0, 0.25, 0.5, 0.75, 1.0)
    )
    path = design_file(
        f"""
        [global]
        pattern = "transformational_color_background"

        [params]
        blend_strength = 0.2
        mesh_profile = "transformational"
        {pins}
        """
    )
    params = DesignParser(path).parse().params
    assert isinstance(params, GlazeParams)
    assert [pin.enabled for pin in params.pins] == [True, True, False, False, False]
    assert params.profile.name == "transformational"


def test_wrong_pin_count(design_file) -> None:
    path = design_file(
        """
        [global]
        pattern = "transformational_color_background"

        [[params.pins]]
        x = 0.5
        """
    )
    with pytest.raises(ParamsValidationError, match="section 'params'"):
        DesignParser(path).parse()


def test_unknown_param_field(design_file) -> None:
    path = design_file(
        """
        [global]
        pattern = "diagonal_contours"

        [params]
        line_count = 3
        wobble = 2
        """
    )
    with pytest.raises(ParamsValidationError) as excinfo:
        DesignParser(path).parse()
    assert "wobble" in excinfo.value.message


def test_bad_color(design_file) -> None:
    path = design_file('[brand]\nbackground = "navy-ish"\n')
    with pytest.raises(ParamsValidationError, match="section 'brand'"):
        DesignParser(path).parse()


def test_bad_padding(design_file) -> None:
    path = design_file("[canvas]\nwidth = 100\nheight = 100\npadding = 60\n")
    with pytest.raises(ParamsValidationError, match="section 'canvas'"):
        DesignParser(path).parse()


def test_unknown_pattern(design_file) -> None:
    path = design_file('[global]\npattern = "spiral"\n')
    with pytest.raises(ParamsValidationError, match="section 'global'"):
        DesignParser(path).parse()


def test_unknown_brand_pair(design_file) -> None:
    path = design_file('[brand]\npair = "Pink / Orange"\n')
    with pytest.raises(UnknownPaletteEntryError):
        DesignParser(path).parse()


def test_section_must_be_a_table(design_file) -> None:
    path = design_file('params = "nope"\n')
    with pytest.raises(ParamsValidationError, match="Expected a table"):
        DesignParser(path).parse()


def test_unknown_sections_warn(design_file, caplog) -> None:
    path = design_file("[extras]\nfoo = 1\n\n[global]\nseed = 3\n")
    with caplog.at_level(logging.WARNING):
        design = DesignParser(path).parse()
    assert "extras" in caplog.text
    assert design.state.seed == 3


def test_invalid_toml(design_file) -> None:
    path = design_file("[global\nseed = ")
    with pytest.raises(InvalidTomlError, match="Invalid TOML format"):
        DesignParser(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError) as excinfo:
        DesignParser(tmp_path / "missing.toml")
    assert "File not found" in excinfo.value.message
