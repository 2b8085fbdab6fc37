"""
Perfect triangle: a single equilateral, golden isosceles or right triangle.

Edges bow slightly inward through quadratic curves. Outline and cutout
variants punch the inner triangle out with ``evenodd`` rather than painting
over it.
"""

import math
from typing import List, Optional

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import Point, centroid, midpoint, pt, quad, rotate_point, rounded_polygon_path
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, HashDerivedParams, PerfectTriangleParams
from ..rng import PHI, SeededRandom, clamp
from ..svg_builder import linear
from .base import Render, RenderContext, run_candidate_selection

TRIANGLE_TYPES = ["equilateral", "isoceles", "right"]
FILL_STYLES = ["solid", "gradient", "outline"]
EDGE_BOW = 0.02


def triangle_params(base: BaseParameters, derived: HashDerivedParams) -> PerfectTriangleParams:
    return PerfectTriangleParams(
        base=base,
        triangle_type=TRIANGLE_TYPES[derived.style_variant % 3],
        size=clamp(75 + derived.scale_factor * 10, 60, 90),
        rotation=derived.rotation_offset,
        fill_style=FILL_STYLES[(derived.color_placement // 3) % 3],
        outline_width=clamp(derived.stroke_width, 2, 10),
        inner_cutout=derived.cut_depth > 0.5,
        cutout_scale=clamp(derived.cut_depth, 0.3, 0.7),
        corner_radius=derived.corner_radius * 0.1,
    )


def triangle_vertices(kind: str, center: Point, size: float, rotation: float) -> List[Point]:
    cx, cy = center
    half = size / 2
    if kind == "equilateral":
        h = half * math.sqrt(3)
        points = [(cx, cy - h * 0.6), (cx - half, cy + h * 0.4), (cx + half, cy + h * 0.4)]
    elif kind == "isoceles":
        w = half * PHI
        h = half * 1.2
        points = [(cx, cy - h * 0.5), (cx - w / 2, cy + h * 0.5), (cx + w / 2, cy + h * 0.5)]
    else:
        points = [(cx - half * 0.4, cy - half * 0.5), (cx - half * 0.4, cy + half * 0.5), (cx + half * 0.6, cy + half * 0.5)]
    angle = math.radians(rotation)
    return [rotate_point(p, center, angle) for p in points]


def bowed_triangle_path(vertices: List[Point], bow: float = EDGE_BOW) -> str:
    c = centroid(vertices)
    parts = [f"M {pt(vertices[0])}"]
    for i in range(3):
        a, b = vertices[i], vertices[(i + 1) % 3]
        m = midpoint(a, b)
        parts.append(quad((m[0] + (c[0] - m[0]) * bow, m[1] + (c[1] - m[1]) * bow), b))
    parts.append("Z")
    return " ".join(parts)


def scaled(vertices: List[Point], k: float) -> List[Point]:
    c = centroid(vertices)
    return [(c[0] + (x - c[0]) * k, c[1] + (y - c[1]) * k) for x, y in vertices]


def outline_path(vertices: List[Point], corner_radius: float) -> str:
    if corner_radius >= 1.5:
        return rounded_polygon_path(vertices, corner_radius)
    return bowed_triangle_path(vertices)


def _draw(rng: SeededRandom, base: BaseParameters, derived: HashDerivedParams, ctx: RenderContext) -> Render:
    p = triangle_params(base, derived)
    svg = ctx.builder()
    size = p.size / 100 * ctx.size
    vertices = triangle_vertices(p.triangle_type, (ctx.center, ctx.center), size, p.rotation)
    outer = outline_path(vertices, p.corner_radius)

    end = ctx.accent if ctx.has_accent else darken(ctx.primary, 15)
    grad = svg.add_gradient(ctx.gid("grad"), linear(p.rotation + 90, (0, lighten(ctx.primary, 10)), (1, end)))
    sheen = svg.add_gradient(
        ctx.gid("sheen"), linear(p.rotation + 180, (0, "#ffffff", 0.25), (0.6, "#ffffff", 0.0))
    )

    hole = None
    if p.fill_style == "outline":
        hole = max(0.1, 1 - (p.outline_width / size) * 2)
    elif p.inner_cutout:
        hole = p.cutout_scale

    d = outer if hole is None else f"{outer} {bowed_triangle_path(scaled(vertices, hole))}"
    fill = ctx.primary if p.fill_style == "solid" else f"url(#{grad})"
    svg.path(d, {"fill": fill, "fill_rule": "evenodd"})
    svg.path(d, {"fill": f"url(#{sheen})", "fill_rule": "evenodd"})

    return Render(
        p,
        svg,
        {
            "uses_golden_ratio": p.triangle_type == "isoceles",
            "symmetry": "rotational-3" if p.triangle_type == "equilateral" else "none",
            "path_count": 2 if hole is not None else 1,
        },
        palette=[ctx.primary, end],
    )


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_candidate_selection(request, Algorithm.PERFECT_TRIANGLE, _draw, cfg)
