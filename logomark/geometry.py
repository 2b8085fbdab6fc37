#!/usr/bin/env python3
"""
Geometry Primitives

Point-list to path-data conversion shared by every generator:

- closed smooth polygons (Catmull-Rom to cubic bezier, tension controlled)
- open smooth strokes and tapered ribbons with round/square/pointed caps
- four-segment bezier circles and ellipses
- rounded polygons, rectangles and parallelograms

All functions are pure. Coordinates are written with two decimals so the same
input always serializes to the same string.
"""

import math
from typing import List, Optional, Sequence, Tuple

Point = Tuple[float, float]

KAPPA = 0.5522847498

CAP_STYLES = ("round", "square", "pointed")

# ============================================================================
# FORMATTING
# ============================================================================


def fmt(value: float) -> str:
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


def pt(p: Point) -> str:
    return f"{fmt(p[0])} {fmt(p[1])}"


def cubic(c1: Point, c2: Point, end: Point) -> str:
    return f"C {pt(c1)}, {pt(c2)}, {pt(end)}"


def quad(c: Point, end: Point) -> str:
    return f"Q {pt(c)}, {pt(end)}"


# ============================================================================
# POINT MATH
# ============================================================================


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def scale(a: Point, k: float) -> Point:
    return (a[0] * k, a[1] * k)


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def polar(center: Point, radius: float, angle: float) -> Point:
    return (center[0] + math.cos(angle) * radius, center[1] + math.sin(angle) * radius)


def rotate_point(p: Point, center: Point, angle: float) -> Point:
    """Rotate ``p`` around ``center`` by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    dx, dy = p[0] - center[0], p[1] - center[1]
    return (center[0] + dx * c - dy * s, center[1] + dx * s + dy * c)


def centroid(points: Sequence[Point]) -> Point:
    n = len(points) or 1
    return (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)


def regular_polygon_points(center: Point, radius: float, sides: int, rotation: float = -math.pi / 2) -> List[Point]:
    sides = max(3, sides)
    return [polar(center, radius, rotation + (i / sides) * math.pi * 2) for i in range(sides)]


def sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    a, b, c, d = mt * mt * mt, 3 * mt * mt * t, 3 * mt * t * t, t * t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
        a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
    )


def _unit_normal(prev: Point, nxt: Point) -> Point:
    dx, dy = nxt[0] - prev[0], nxt[1] - prev[1]
    length = math.hypot(dx, dy) or 1.0
    return (-dy / length, dx / length)


# ============================================================================
# SMOOTH PATHS
# ============================================================================


def smooth_closed_path(points: Sequence[Point], tension: float = 0.5, divisor: float = 6.0) -> str:
    """
    Closed Catmull-Rom spline through ``points`` as cubic beziers.

    Control handles are ``(next - prev) * tension / divisor``; at tension 0 the
    handles collapse onto the vertices and every edge is straight.
    """
    if len(points) < 3:
        return ""
    n = len(points)
    parts = [f"M {pt(points[0])}"]
    for i in range(n):
        p0 = points[(i - 1) % n]
        p1 = points[i]
        p2 = points[(i + 1) % n]
        p3 = points[(i + 2) % n]
        c1 = (p1[0] + (p2[0] - p0[0]) * tension / divisor, p1[1] + (p2[1] - p0[1]) * tension / divisor)
        c2 = (p2[0] - (p3[0] - p1[0]) * tension / divisor, p2[1] - (p3[1] - p1[1]) * tension / divisor)
        parts.append(cubic(c1, c2, p2))
    parts.append("Z")
    return " ".join(parts)


def _open_spline_segments(points: Sequence[Point], tension: float, divisor: float) -> List[str]:
    segs = []
    n = len(points)
    for i in range(n - 1):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(n - 1, i + 2)]
        c1 = (p1[0] + (p2[0] - p0[0]) * tension / divisor, p1[1] + (p2[1] - p0[1]) * tension / divisor)
        c2 = (p2[0] - (p3[0] - p1[0]) * tension / divisor, p2[1] - (p3[1] - p1[1]) * tension / divisor)
        segs.append(cubic(c1, c2, p2))
    return segs


def smooth_open_path(points: Sequence[Point], tension: float = 0.5, divisor: float = 6.0) -> str:
    if len(points) < 2:
        return ""
    return " ".join([f"M {pt(points[0])}"] + _open_spline_segments(points, tension, divisor))


def polygon_path(points: Sequence[Point]) -> str:
    if len(points) < 2:
        return ""
    return " ".join([f"M {pt(points[0])}"] + [f"L {pt(p)}" for p in points[1:]] + ["Z"])


def polyline_path(points: Sequence[Point]) -> str:
    if len(points) < 2:
        return ""
    return " ".join([f"M {pt(points[0])}"] + [f"L {pt(p)}" for p in points[1:]])


# ============================================================================
# STROKES
# ============================================================================


def offset_edges(centerline: Sequence[Point], half_widths: Sequence[float]) -> Tuple[List[Point], List[Point]]:
    """Left/right edges offset along each point's local tangent normal."""
    left: List[Point] = []
    right: List[Point] = []
    n = len(centerline)
    for i, cur in enumerate(centerline):
        nx, ny = _unit_normal(centerline[max(0, i - 1)], centerline[min(n - 1, i + 1)])
        w = half_widths[i]
        left.append((cur[0] + nx * w, cur[1] + ny * w))
        right.append((cur[0] - nx * w, cur[1] - ny * w))
    return left, right


def terminal_cap(start: Point, end: Point, style: str = "round") -> str:
    """Segment joining two stroke edges at a terminal."""
    if style not in ("round", "pointed"):
        return f"L {pt(end)}"
    mid = midpoint(start, end)
    dx, dy = end[0] - start[0], end[1] - start[1]
    length = math.hypot(dx, dy) or 1.0
    bulge = length * 0.3
    tip = (mid[0] - dy / length * bulge, mid[1] + dx / length * bulge)
    if style == "round":
        return quad(tip, end)
    return f"L {pt(tip)} L {pt(end)}"


def tapered_stroke_path(
    centerline: Sequence[Point],
    half_widths: Sequence[float],
    tension: float = 0.5,
    cap: str = "round",
    smooth: bool = True,
) -> str:
    """
    Filled outline of a variable-width stroke.

    The left edge runs forward, the end cap joins it to the right edge, which
    runs backward to the start cap. With ``smooth`` the edges are splines,
    otherwise polylines.
    """
    if len(centerline) < 2:
        return ""
    widths = [max(0.05, w) for w in half_widths]
    left, right = offset_edges(centerline, widths)
    back = list(reversed(right))

    parts = [f"M {pt(left[0])}"]
    if smooth:
        parts.extend(_open_spline_segments(left, tension, 6.0))
    else:
        parts.extend(f"L {pt(p)}" for p in left[1:])
    parts.append(terminal_cap(left[-1], right[-1], cap))
    if smooth:
        parts.extend(_open_spline_segments(back, tension, 6.0))
    else:
        parts.extend(f"L {pt(p)}" for p in back[1:])
    parts.append(terminal_cap(right[0], left[0], cap))
    parts.append("Z")
    return " ".join(parts)


# ============================================================================
# CIRCLES & ELLIPSES
# ============================================================================


def ellipse_path(cx: float, cy: float, rx: float, ry: float, reverse: bool = False) -> str:
    """Four-segment cubic ellipse; ``reverse`` winds counter-clockwise (for holes)."""
    rx = max(1.0, rx)
    ry = max(1.0, ry)
    k = KAPPA
    top, right, bottom, left = (cx, cy - ry), (cx + rx, cy), (cx, cy + ry), (cx - rx, cy)
    if not reverse:
        segs = [
            cubic((cx + rx * k, cy - ry), (cx + rx, cy - ry * k), right),
            cubic((cx + rx, cy + ry * k), (cx + rx * k, cy + ry), bottom),
            cubic((cx - rx * k, cy + ry), (cx - rx, cy + ry * k), left),
            cubic((cx - rx, cy - ry * k), (cx - rx * k, cy - ry), top),
        ]
    else:
        segs = [
            cubic((cx - rx * k, cy - ry), (cx - rx, cy - ry * k), left),
            cubic((cx - rx, cy + ry * k), (cx - rx * k, cy + ry), bottom),
            cubic((cx + rx * k, cy + ry), (cx + rx, cy + ry * k), right),
            cubic((cx + rx, cy - ry * k), (cx + rx * k, cy - ry), top),
        ]
    return " ".join([f"M {pt(top)}"] + segs + ["Z"])


def circle_path(cx: float, cy: float, r: float, reverse: bool = False) -> str:
    return ellipse_path(cx, cy, r, r, reverse=reverse)


def ring_path(cx: float, cy: float, outer: float, inner: float) -> str:
    """Annulus as one path; pair with ``fill-rule: evenodd``."""
    inner = max(1.0, min(inner, outer - 0.5))
    return f"{circle_path(cx, cy, outer)} {circle_path(cx, cy, inner, reverse=True)}"


# ============================================================================
# ROUNDED POLYGONS
# ============================================================================


def rounded_polygon_path(points: Sequence[Point], radius: float) -> str:
    """
    Closed polygon with each corner replaced by a cubic arc.

    The radius at a corner is clamped to half of the shorter adjacent edge.
    """
    n = len(points)
    if n < 3:
        return ""
    if radius <= 0.01:
        return polygon_path(points)

    corners = []
    for i in range(n):
        prev, cur, nxt = points[(i - 1) % n], points[i], points[(i + 1) % n]
        r = min(radius, distance(prev, cur) / 2, distance(cur, nxt) / 2)
        d_in = distance(prev, cur) or 1.0
        d_out = distance(cur, nxt) or 1.0
        a = (cur[0] + (prev[0] - cur[0]) * r / d_in, cur[1] + (prev[1] - cur[1]) * r / d_in)
        b = (cur[0] + (nxt[0] - cur[0]) * r / d_out, cur[1] + (nxt[1] - cur[1]) * r / d_out)
        corners.append((a, cur, b))

    parts = [f"M {pt(corners[0][0])}"]
    for a, v, b in corners:
        parts.append(f"L {pt(a)}")
        c1 = (a[0] + (v[0] - a[0]) * KAPPA, a[1] + (v[1] - a[1]) * KAPPA)
        c2 = (b[0] + (v[0] - b[0]) * KAPPA, b[1] + (v[1] - b[1]) * KAPPA)
        parts.append(cubic(c1, c2, b))
    parts.append("Z")
    return " ".join(parts)


def rounded_rect_path(x: float, y: float, width: float, height: float, radius: float) -> str:
    width = max(1.0, width)
    height = max(1.0, height)
    radius = max(0.0, min(radius, width / 2, height / 2))
    return rounded_polygon_path(
        [(x, y), (x + width, y), (x + width, y + height), (x, y + height)], radius
    )


def parallelogram_points(x: float, y: float, width: float, height: float, skew: float) -> List[Point]:
    """Corners of a parallelogram whose top edge is shifted by ``skew``."""
    width = max(1.0, width)
    height = max(1.0, height)
    return [(x + skew, y), (x + width + skew, y), (x + width, y + height), (x, y + height)]


def rounded_parallelogram_path(
    x: float, y: float, width: float, height: float, skew: float, radius: float
) -> str:
    radius = max(0.0, min(radius, max(1.0, width) / 2, max(1.0, height) / 2))
    return rounded_polygon_path(parallelogram_points(x, y, width, height, skew), radius)


def transform_points(
    points: Sequence[Point],
    center: Point,
    rotation: float = 0.0,
    scale_xy: Optional[Tuple[float, float]] = None,
) -> List[Point]:
    sx, sy = scale_xy or (1.0, 1.0)
    out = []
    for p in points:
        q = (center[0] + (p[0] - center[0]) * sx, center[1] + (p[1] - center[1]) * sy)
        out.append(rotate_point(q, center, rotation) if rotation else q)
    return out


__all__ = [
    "Point",
    "KAPPA",
    "CAP_STYLES",
    "fmt",
    "pt",
    "cubic",
    "quad",
    "add",
    "sub",
    "scale",
    "midpoint",
    "distance",
    "polar",
    "rotate_point",
    "centroid",
    "regular_polygon_points",
    "sample_cubic",
    "smooth_closed_path",
    "smooth_open_path",
    "polygon_path",
    "polyline_path",
    "offset_edges",
    "terminal_cap",
    "tapered_stroke_path",
    "ellipse_path",
    "circle_path",
    "ring_path",
    "rounded_polygon_path",
    "rounded_rect_path",
    "parallelogram_points",
    "rounded_parallelogram_path",
    "transform_points",
]
