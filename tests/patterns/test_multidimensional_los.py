# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from patternforge.core import CanvasSpec, PatternType
from patternforge.patterns import (
    FOLD_RATIO,
    REFERENCE_LINE_COUNT,
    LoSLayout,
    MultidimensionalLoSParams,
    fold_line_index,
    generate,
)
from patternforge.patterns.multidimensional_los import master_transform
from patternforge.scene import PolylineElement

LOS = PatternType.MULTIDIMENSIONAL_LOS
CANVAS = CanvasSpec(width=1024, height=1024, padding=40)


def test_reference_fold_index() -> None:
    assert REFERENCE_LINE_COUNT == 42
    assert FOLD_RATIO == 0.42
    assert fold_line_index(42) == 17
    assert fold_line_index(52) == 21


def test_no_seam_at_fold() -> None:
    layout = LoSLayout(MultidimensionalLoSParams(line_count=42), CANVAS)
    assert layout.fold_index == 17
    one, two = layout.phase_one(17), layout.phase_two(17)
    for a, b in zip(one.points, two.points):
        assert a == pytest.approx(b)


def test_phase_two_reuses_fold_line(mocker) -> None:
    layout = LoSLayout(MultidimensionalLoSParams(line_count=42), CANVAS)
    assert layout.fold_line == layout.phase_one(layout.fold_index)

    spy = mocker.spy(layout, "phase_one")
    for i in range(18, 42):
        layout.phase_two(i)
    spy.assert_not_called()


def test_phase_selection() -> None:
    layout = LoSLayout(MultidimensionalLoSParams(line_count=42), CANVAS)
    for i in range(18):
        assert layout.line(i) == layout.phase_one(i)
    for i in range(18, 42):
        assert layout.line(i) == layout.phase_two(i)


def test_reference_line_positions() -> None:
    params = MultidimensionalLoSParams(line_count=42)
    layout = LoSLayout(params, CANVAS)
    inner = CANVAS.inner_height
    assert layout.line(0).y == pytest.approx(40 + params.first_line_y * inner)
    assert layout.line(17).y == pytest.approx(40 + params.fold_line_y * inner)
    assert layout.line(41).y == pytest.approx(40 + params.last_line_y * inner)


def test_line_count_does_not_change_spacing() -> None:
    short = LoSLayout(MultidimensionalLoSParams(line_count=30), CANVAS)
    long = LoSLayout(MultidimensionalLoSParams(line_count=60), CANVAS)
    assert short.step_one == long.step_one
    assert short.phase_one(5) == long.phase_one(5)


def test_peak_keeps_distance_to_line() -> None:
    layout = LoSLayout(MultidimensionalLoSParams(), CANVAS)
    for i in (0, 10, 30, 50):
        geometry = layout.line(i)
        assert geometry.peak[1] - geometry.y == pytest.approx(layout.peak_offset)


def test_unit_extension_is_identity() -> None:
    layout = LoSLayout(MultidimensionalLoSParams(line_extension=1.0), CANVAS)
    geometry = layout.line(25)
    for a, b in zip(layout.extend(geometry).points, geometry.points):
        assert a == pytest.approx(b)


def test_extension_grows_arms_about_peak() -> None:
    layout = LoSLayout(MultidimensionalLoSParams(line_extension=2.0), CANVAS)
    geometry = layout.line(0)
    extended = layout.extend(geometry)
    assert extended.peak == geometry.peak
    # The first line has no accumulated drift, so the arms simply double.
    assert extended.start[0] - geometry.peak[0] == pytest.approx(
        2 * (geometry.start[0] - geometry.peak[0])
    )
    assert extended.end[1] - geometry.peak[1] == pytest.approx(
        2 * (geometry.end[1] - geometry.peak[1])
    )


def test_master_transform() -> None:
    centered = MultidimensionalLoSParams(master_position_x=0.5, master_position_y=0.5)
    assert master_transform(centered, CANVAS, (100, 100)) is None

    shifted = MultidimensionalLoSParams(master_position_x=0.6, master_position_y=0.5)
    transform = master_transform(shifted, CANVAS, (100, 100))
    assert transform.translate[0] == pytest.approx(0.1 * CANVAS.inner_width)
    assert transform.scale is None

    scaled = MultidimensionalLoSParams(
        master_position_x=0.5, master_position_y=0.5, master_position_z=2.0
    )
    transform = master_transform(scaled, CANVAS, (100, 50))
    # Scaling about the corner keeps the corner fixed.
    assert transform.translate == (-100.0, -50.0)
    assert transform.scale == (2.0, 2.0)


def test_generated_lines_ramp_stroke_and_color(make_state) -> None:
    params = MultidimensionalLoSParams(line_count=42)
    scene = generate(params, make_state(LOS, 1024, 1024, padding=40))
    lines = scene.elements_of_type(PolylineElement)
    assert len(lines) == 42
    assert lines[0].id == "line-0"
    assert all(len(line.points) == 3 for line in lines)
    assert lines[0].style.stroke_width == pytest.approx(0.5)
    assert lines[-1].style.stroke_width == pytest.approx(2.0)
    assert lines[0].style.stroke == "#80BBAD"
    assert lines[-1].style.stroke == "#032842"
    assert scene["lines"].transforms.translate is not None


def test_solid_color_without_gradient(make_state) -> None:
    params = MultidimensionalLoSParams(line_count=5, use_gradient=False)
    lines = generate(params, make_state(LOS)).elements_of_type(PolylineElement)
    assert {line.style.stroke for line in lines} == {"#80BBAD"}


def test_custom_gradient_colors(make_state) -> None:
    params = MultidimensionalLoSParams(
        line_count=3, gradient_color_from="#000000", gradient_color_to="#ffffff"
    )
    lines = generate(params, make_state(LOS)).elements_of_type(PolylineElement)
    assert [line.style.stroke for line in lines] == ["#000000", "#808080", "#FFFFFF"]


def test_zero_lines_warns(make_state, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        scene = generate(MultidimensionalLoSParams(line_count=0), make_state(LOS))
    assert scene.elements_of_type(PolylineElement) == []
    assert "no lines" in caplog.text
