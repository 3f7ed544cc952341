# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from patternforge.core import DensityCurve, ParameterValidationError, PatternType
from patternforge.patterns import (
    Direction,
    EngineSettings,
    MirrorMode,
    SplitConfig,
    VerticalBarsParams,
    generate,
    layout_spans,
)
from patternforge.patterns.vertical_bars import partition
from patternforge.scene import RectElement

BARS = PatternType.VERTICAL_BARS


def _bars(scene):
    return [r for r in scene.elements_of_type(RectElement) if r.id.startswith("bar-")]


def test_single_bar_fills_width(make_state) -> None:
    params = VerticalBarsParams(bar_count=1, extend_last_bar=True, edge_padding=0)
    bars = _bars(generate(params, make_state(BARS, 100, 100)))
    assert len(bars) == 1
    assert (bars[0].x, bars[0].width) == (0.0, 100.0)
    assert (bars[0].y, bars[0].height) == (0.0, 100.0)


@pytest.mark.parametrize("bar_count", [1, 2, 5, 13, 24, 60])
@pytest.mark.parametrize("padding, edge_padding", [(0, 0), (25, 0), (10, 35.5)])
def test_extended_last_bar_reaches_far_edge(bar_count, padding, edge_padding) -> None:
    params = VerticalBarsParams(
        bar_count=bar_count, edge_padding=edge_padding, extend_last_bar=True
    )
    spans = layout_spans(params, 1024, padding, 2.0)
    last = spans[-1]
    assert last.offset + last.size == pytest.approx(1024 - padding - edge_padding)
    assert spans[0].offset == padding + edge_padding


def test_without_extension_bars_keep_their_width() -> None:
    params = VerticalBarsParams(
        bar_count=3, bar_width=10, gap_width=20, density_curve="linear", extend_last_bar=False
    )
    spans = layout_spans(params, 1000, 0, 2.0)
    assert [(s.offset, s.size) for s in spans] == [(0, 10), (30, 10), (60, 10)]


def test_density_shrinks_gaps_and_clamps_seams() -> None:
    params = VerticalBarsParams(
        bar_count=10,
        bar_width=20,
        gap_width=30,
        density_curve="ease",
        curve_intensity=100,
        extend_last_bar=False,
    )
    spans = layout_spans(params, 10_000, 0, 2.0)
    gaps = [b.offset - (a.offset + a.size) for a, b in zip(spans, spans[1:])]
    assert gaps[0] == pytest.approx(30.0)
    assert gaps[-1] < gaps[0]
    assert all(gap >= -10 for gap in gaps)
    assert all(gap >= 10 or gap < 0 for gap in gaps)


def test_bar_width_intensity_narrows_bars() -> None:
    params = VerticalBarsParams(
        bar_count=5, bar_width=40, bar_width_intensity=100, extend_last_bar=False
    )
    spans = layout_spans(params, 10_000, 0, 2.0)
    assert spans[0].size == 40
    # Full density at the end; the line weight is the floor.
    assert spans[-1].size == 2.0


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.LTR, (0.0, 0.0, 10.0, 100.0)),
        (Direction.RTL, (190.0, 0.0, 10.0, 100.0)),
        (Direction.TTB, (0.0, 0.0, 200.0, 10.0)),
        (Direction.BTT, (0.0, 90.0, 200.0, 10.0)),
    ],
)
def test_directions(make_state, direction, expected) -> None:
    params = VerticalBarsParams(
        bar_count=2,
        bar_width=10,
        gap_width=20,
        density_curve="linear",
        direction=direction,
        extend_last_bar=False,
    )
    bars = _bars(generate(params, make_state(BARS, 200, 100)))
    first = bars[0]
    assert (first.x, first.y, first.width, first.height) == expected


def test_mirror_horizontal_duplicates_and_dedupes(make_state) -> None:
    params = VerticalBarsParams(
        bar_count=2,
        bar_width=10,
        gap_width=20,
        density_curve="linear",
        extend_last_bar=False,
        mirror=MirrorMode.HORIZONTAL,
    )
    bars = _bars(generate(params, make_state(BARS, 200, 100)))
    assert sorted(b.x for b in bars) == [0.0, 30.0, 160.0, 190.0]

    full = VerticalBarsParams(bar_count=1, mirror=MirrorMode.BOTH)
    assert len(_bars(generate(full, make_state(BARS, 100, 100)))) == 1


def test_splits_partition_and_color(make_state) -> None:
    params = VerticalBarsParams(
        bar_count=4,
        bar_width=10,
        gap_width=20,
        density_curve="linear",
        split_count=2,
        splits=(
            SplitConfig(reverse=True),
            SplitConfig(color="#ff0000"),
            SplitConfig(),
            SplitConfig(),
        ),
    )
    scene = generate(params, make_state(BARS, 200, 100))
    first, second = scene["split-0"], scene["split-1"]
    assert [c.id for c in first.children] == ["bar-0-0", "bar-0-1"]
    # Reversed within its extent (0..40).
    assert [c.x for c in first.children] == [30.0, 0.0]
    assert [c.style.fill for c in second.children] == ["#FF0000", "#FF0000"]
    assert first.children[0].style.fill == "#80BBAD"
    # The last bar is stretched to the edge.
    assert second.children[-1].x + second.children[-1].width == 200.0


def _split_rects(scene, split_id):
    return [v for c in scene[split_id].children for v in (c.x, c.y, c.width, c.height)]


@pytest.mark.parametrize(
    "first_split, expected_first",
    [
        # Own reflection within 0..350/9 follows the split's bars.
        (SplitConfig(mirror=True), [(0, 10), (30, 80 / 9), (260 / 9, 10), (0, 80 / 9)]),
        # Reverse happens before the split's own mirror.
        (
            SplitConfig(reverse=True, mirror=True),
            [(260 / 9, 10), (0, 80 / 9), (0, 10), (30, 80 / 9)],
        ),
    ],
)
def test_split_mirror_then_canvas_mirror(make_state, first_split, expected_first) -> None:
    params = VerticalBarsParams(
        bar_count=4,
        bar_width=10,
        gap_width=20,
        density_curve="ease",
        curve_intensity=100,
        bar_width_intensity=100,
        extend_last_bar=False,
        split_count=2,
        splits=(first_split, SplitConfig(), SplitConfig(), SplitConfig()),
        mirror=MirrorMode.HORIZONTAL,
    )
    scene = generate(params, make_state(BARS, 200, 200))

    # Per split: split bars first, then their copies about the canvas midline.
    mirrored = [(200 - x - w, w) for x, w in expected_first]
    expected = [v for x, w in expected_first + mirrored for v in (x, 0, w, 200)]
    assert _split_rects(scene, "split-0") == pytest.approx(expected)

    second = [
        470 / 9, 0, 50 / 9, 200,
        484 / 9, 0, 2, 200,
        1280 / 9, 0, 50 / 9, 200,
        1298 / 9, 0, 2, 200,
    ]
    assert _split_rects(scene, "split-1") == pytest.approx(second)


def test_partition_puts_remainder_first() -> None:
    spans = partition(list(range(5)), 2)
    assert spans == [[0, 1, 2], [3, 4]]


def test_split_count_is_clamped(make_state) -> None:
    params = VerticalBarsParams(bar_count=8, split_count=9)
    scene = generate(params, make_state(BARS, 400, 100))
    assert "split-3" in scene
    assert "split-4" not in scene


def test_padding_matte_painted_last(make_state) -> None:
    params = VerticalBarsParams(padding_color_enabled=True, padding_color="#ffffff")
    scene = generate(params, make_state(BARS, 300, 200, padding=20))
    root = scene.top_level_nodes[0]
    matte = root.children[-1]
    assert matte.id == "padding-matte"
    sides = {c.id: (c.x, c.y, c.width, c.height) for c in matte.children}
    assert sides == {
        "padding-top": (0.0, 0.0, 300.0, 20.0),
        "padding-bottom": (0.0, 180.0, 300.0, 20.0),
        "padding-left": (0.0, 20.0, 20.0, 160.0),
        "padding-right": (280.0, 20.0, 20.0, 160.0),
    }
    assert all(c.style.fill == "#FFFFFF" for c in matte.children)


def test_padding_matte_defaults_to_brand_background(make_state) -> None:
    params = VerticalBarsParams(padding_color_enabled=True)
    scene = generate(params, make_state(BARS, padding=10))
    assert scene["padding-top"].style.fill == "#032842"


def test_zero_bars_degrades_gracefully(make_state, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        scene = generate(VerticalBarsParams(bar_count=0), make_state(BARS))
    assert _bars(scene) == []
    assert "no bars" in caplog.text


def test_strict_validation_rejects_negative_values(make_state) -> None:
    params = VerticalBarsParams(bar_count=-1, curve_intensity=150)
    generate(params, make_state(BARS))
    with pytest.raises(ParameterValidationError) as excinfo:
        generate(params, make_state(BARS), EngineSettings(strict_validation=True))
    assert any("bar_count" in problem for problem in excinfo.value.problems)
    assert any("curve_intensity" in problem for problem in excinfo.value.problems)


def test_unexposed_density_curve_rejected(make_state) -> None:
    params = VerticalBarsParams(density_curve=DensityCurve.EXP)
    with pytest.raises(ParameterValidationError, match="not enabled"):
        generate(params, make_state(BARS))
    settings = EngineSettings(exposed_density_curves=list(DensityCurve))
    assert _bars(generate(params, make_state(BARS), settings))
