# tests/test_quality.py
import math

import pytest
from shapely.geometry import Polygon

from logomark.geometry import circle_path, polygon_path
from logomark.quality import (
    WEIGHTS,
    calculate_complexity,
    calculate_quality_score,
    extract_path_data,
    flatten_subpath,
    golden_ratio_adherence,
    meets_quality_threshold,
    parse_subpaths,
    path_smoothness,
    uniqueness,
    visual_balance,
)
from logomark.rng import PHI
from logomark.svg_builder import SVGBuilder


def _doc(*paths):
    b = SVGBuilder(100)
    for d in paths:
        b.path(d, {"fill": "#000000"})
    return b.build()


def test_complexity_bounds():
    """Complexity stays in [0, 1] for any input."""
    samples = [
        "",
        "M 0 0",
        "M 0 0 " + "C 1 1, 2 2, 3 3 " * 500,
        "garbage text with no commands",
        "zzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzzz" * 40,
        _doc(circle_path(50, 50, 20)),
    ]
    for s in samples:
        value = calculate_complexity(s)
        assert 0.0 <= value <= 1.0


def test_complexity_counts_commands_and_curves():
    assert calculate_complexity("") == 0.0
    # 4 commands, no curves
    assert calculate_complexity("M 0 0 L 1 1 L 2 0 Z") == pytest.approx(4 / 50)
    # 6 commands, 4 curves: 6/50 + 4/20
    assert calculate_complexity(circle_path(50, 50, 10)) == pytest.approx(6 / 50 + 4 / 20)


def test_extract_path_data_from_document():
    svg = _doc("M 0 0 L 10 10 Z", "M 5 5 L 6 6 Z")
    assert extract_path_data(svg) == ["M 0 0 L 10 10 Z", "M 5 5 L 6 6 Z"]
    assert extract_path_data("M 1 1 L 2 2") == ["M 1 1 L 2 2"]


def test_parse_relative_commands():
    subpaths = parse_subpaths("m 10 10 l 5 0 l 0 5 z")
    assert len(subpaths) == 1
    segments = list(subpaths[0])
    assert [type(s).__name__ for s in segments] == ["Line", "Line", "Line"]
    assert segments[0].start == complex(10, 10)
    assert segments[0].end == complex(15, 10)
    assert segments[1].end == complex(15, 15)
    # closing segment returns to the start
    assert segments[2].end == complex(10, 10)


def test_parse_splits_subpaths():
    ring = circle_path(50, 50, 20) + " " + circle_path(50, 50, 10, reverse=True)
    assert len(parse_subpaths(ring)) == 2


def test_parse_truncated_data_does_not_raise():
    assert parse_subpaths("M 0 0 C 1 2 3") == []
    assert parse_subpaths("not a path") == []


def _area(d):
    return sum(Polygon(flatten_subpath(sub)).area for sub in parse_subpaths(d))


def test_smooth_cubic_reflects_previous_control_point():
    d = "M 10 50 C 10 20 40 20 40 50 S 70 80 90 50 L 90 90 L 10 90 Z"
    smooth = parse_subpaths(d)[0][1]
    assert smooth.control1 == complex(40, 80)
    assert _area(d) == pytest.approx(2929.81, rel=0.03)


def test_arc_is_sampled_as_a_curve():
    # half disc of radius 30
    d = "M 20 50 A 30 30 0 0 1 80 50 Z"
    assert _area(d) == pytest.approx(math.pi * 30 * 30 / 2, rel=0.05)
    assert path_smoothness([d]) == 50.0


def test_smooth_quadratic_is_sampled_as_a_curve():
    d = "M 10 50 Q 30 10 50 50 T 90 50 Z"
    points = flatten_subpath(parse_subpaths(d)[0])
    # the reflected control point pulls the second hump below the baseline
    assert points[:, 1].max() > 55
    assert path_smoothness([d]) == pytest.approx(200 / 3)


def test_smoothness_lines_vs_curves():
    assert path_smoothness(["M 0 0 L 10 0 L 10 10 Z"]) == 0.0
    assert path_smoothness([circle_path(50, 50, 20)]) == 100.0


def test_balance_centered_vs_offset():
    centered = visual_balance([circle_path(50, 50, 20)])
    offset = visual_balance([circle_path(15, 15, 10)])
    assert centered == pytest.approx(100.0, abs=0.5)
    assert offset < centered


def test_golden_ratio_from_taper():
    assert golden_ratio_adherence([], {"taper_ratio": 1 / PHI}) == pytest.approx(100.0)
    assert golden_ratio_adherence([], {"taper_ratio": 0.2}) < 50


def test_golden_ratio_from_bounding_box():
    square = polygon_path([(20, 20), (80, 20), (80, 80), (20, 80)])
    assert golden_ratio_adherence([square]) == pytest.approx(100.0)


def test_uniqueness():
    d = "M 0 0 L 10 10 Z"
    assert uniqueness([d, d]) == 50.0
    assert uniqueness([d, "M 1 1 L 2 2 Z"]) == 100.0
    assert uniqueness([]) == 0.0


def test_quality_score_bounds_and_composite():
    svg = _doc(circle_path(50, 50, 25), polygon_path([(30, 30), (70, 30), (50, 70)]))
    q = calculate_quality_score(svg)
    for value in (q.score, q.path_smoothness, q.visual_balance, q.complexity, q.golden_ratio_adherence, q.uniqueness):
        assert 0.0 <= value <= 100.0
    expected = sum(WEIGHTS[k] * getattr(q, k) for k in WEIGHTS)
    assert q.score == pytest.approx(expected, abs=0.01)


def test_quality_score_empty_document():
    q = calculate_quality_score(SVGBuilder(100).build())
    assert q.score == 0.0


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


def test_threshold():
    assert meets_quality_threshold(80)
    assert meets_quality_threshold(95.5)
    assert not meets_quality_threshold(79.99)
    assert meets_quality_threshold(50, threshold=50)
