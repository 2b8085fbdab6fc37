# tests/test_geometry.py
import math

import pytest

from logomark.geometry import (
    circle_path,
    distance,
    fmt,
    polygon_path,
    regular_polygon_points,
    ring_path,
    rotate_point,
    rounded_parallelogram_path,
    rounded_polygon_path,
    rounded_rect_path,
    sample_cubic,
    smooth_closed_path,
    smooth_open_path,
    tapered_stroke_path,
)


def test_fmt_two_decimals_and_no_negative_zero():
    assert fmt(1.23456) == "1.23"
    assert fmt(-0.001) == "0.00"
    assert fmt(5) == "5.00"


def test_regular_polygon_points_on_circle():
    points = regular_polygon_points((50, 50), 20, 6)
    assert len(points) == 6
    for p in points:
        assert distance(p, (50, 50)) == pytest.approx(20)
    # first vertex points straight up by default
    assert points[0] == pytest.approx((50, 30))


def test_rotate_point_quarter_turn():
    x, y = rotate_point((60, 50), (50, 50), math.pi / 2)
    assert (x, y) == pytest.approx((50, 60))


def test_sample_cubic_endpoints():
    p0, p1, p2, p3 = (0, 0), (10, 20), (30, 20), (40, 0)
    assert sample_cubic(p0, p1, p2, p3, 0) == pytest.approx(p0)
    assert sample_cubic(p0, p1, p2, p3, 1) == pytest.approx(p3)


def test_smooth_closed_path_structure():
    points = regular_polygon_points((50, 50), 30, 5)
    d = smooth_closed_path(points, tension=0.5)
    assert d.startswith("M ")
    assert d.endswith("Z")
    assert d.count("C ") == 5


def _cubic_segments(d):
    """``[(start, c1, c2, end), ...]`` from a path of ``M`` followed by ``C`` commands."""
    head, *segs = d.rstrip(" Z").split(" C ")
    pos = tuple(map(float, head[2:].split()))
    out = []
    for seg in segs:
        c1, c2, end = (tuple(map(float, part.split())) for part in seg.split(","))
        out.append((pos, c1, c2, end))
        pos = end
    return out


def test_smooth_closed_path_zero_tension_is_straight():
    points = [(10.0, 10.0), (90.0, 10.0), (70.0, 80.0), (20.0, 60.0)]
    segments = _cubic_segments(smooth_closed_path(points, tension=0))
    assert len(segments) == 4
    for i, (start, c1, c2, end) in enumerate(segments):
        assert start == points[i]
        assert end == points[(i + 1) % 4]
        # handles sit on the vertices
        assert c1 == start
        assert c2 == end


def test_smooth_paths_degenerate_inputs():
    assert smooth_closed_path([(0, 0), (1, 1)]) == ""
    assert smooth_open_path([(0, 0)]) == ""
    assert polygon_path([(0, 0)]) == ""
    assert tapered_stroke_path([(0, 0)], [1.0]) == ""


def test_tapered_stroke_closed_outline():
    line = [(10, 50), (30, 40), (50, 50), (70, 60), (90, 50)]
    d = tapered_stroke_path(line, [1, 3, 4, 3, 1], tension=0.5, cap="round")
    assert d.startswith("M ")
    assert d.endswith("Z")
    # two round caps as quadratic segments
    assert d.count("Q ") == 2


def test_tapered_stroke_polyline_mode():
    d = tapered_stroke_path([(10, 10), (50, 50), (90, 10)], [2, 2, 2], cap="square", smooth=False)
    assert "C " not in d
    assert "Q " not in d


def test_circle_path_four_cubics():
    d = circle_path(50, 50, 20)
    assert d.startswith("M 50.00 30.00")
    assert d.count("C ") == 4


def test_circle_radius_clamped():
    """Degenerate radii still produce a drawable circle."""
    assert circle_path(50, 50, 0) == circle_path(50, 50, 1)


def test_ring_path_has_two_subpaths():
    d = ring_path(50, 50, 30, 20)
    assert d.count("M ") == 2
    assert d.count("Z") == 2


def test_rounded_polygon_zero_radius_is_polygon():
    square = [(10, 10), (90, 10), (90, 90), (10, 90)]
    assert rounded_polygon_path(square, 0) == polygon_path(square)
    rounded = rounded_rect_path(10, 10, 80, 80, 12)
    assert rounded.count("C ") == 4


def test_rounded_rect_radius_clamped_to_half_short_side():
    d = rounded_rect_path(0, 0, 80, 20, 50)
    # radius 50 clamps to 10, half of the 20-unit side
    assert d.startswith("M 0.00 10.00")
    for corner_point in ("10.00 0.00", "70.00 0.00", "80.00 10.00", "70.00 20.00", "10.00 20.00"):
        assert corner_point in d
    assert d == rounded_rect_path(0, 0, 80, 20, 10)


def test_rounded_parallelogram():
    d = rounded_parallelogram_path(10, 20, 60, 30, 8, 4)
    assert d.startswith("M ")
    assert d.count("C ") == 4
    sharp = rounded_parallelogram_path(10, 20, 60, 30, 8, 0)
    assert "C " not in sharp
