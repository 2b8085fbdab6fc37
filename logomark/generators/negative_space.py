"""
Negative space: a positive mark with a second shape punched out of it.

Positive and negative outlines are combined into one ``evenodd`` path so the
inner shape reads as a hole. Each positive shape has a matching hidden form:

    triangle -> arrow, arrow -> triangle, chevron -> inner void,
    custom -> abstract void
"""

import math
from typing import List, Optional

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import Point, polygon_path, rounded_polygon_path, smooth_closed_path
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, NegativeSpaceParams
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "negative-space"
POSITIVE_SHAPES = ["triangle", "arrow", "chevron", "custom"]


def draw_params(rng: SeededRandom, base: BaseParameters) -> NegativeSpaceParams:
    return NegativeSpaceParams(
        base=base,
        positive_shape=rng.choice(POSITIVE_SHAPES),
        negative_reveal=rng.uniform(0.4, 0.8),
        balance_ratio=rng.uniform(0.4, 0.6),
        sharpness=rng.uniform(0.3, 0.9),
        inner_contrast=rng.uniform(0.5, 0.9),
        boundary_blur=rng() * 5,
        dual_tone=rng.chance(0.5),
        inversion_point=rng.uniform(0.4, 0.6),
    )


def _bezier_polygon(points: List[Point], tension: float) -> str:
    return smooth_closed_path(points, tension, divisor=3.0)


def triangle_path(c: Point, s: float, sharpness: float) -> str:
    points = [(c[0], c[1] - s), (c[0] + s * 0.95, c[1] + s * 0.7), (c[0] - s * 0.95, c[1] + s * 0.7)]
    radius = (1 - sharpness) * s * 0.15
    return rounded_polygon_path(points, radius) if radius >= 2 else polygon_path(points)


def arrow_path(c: Point, s: float, p: NegativeSpaceParams) -> str:
    stem = s * (0.3 + (1 - p.sharpness) * 0.2)
    cx, cy = c
    points = [
        (cx, cy - s),
        (cx + s * 0.8, cy),
        (cx + stem, cy),
        (cx + stem, cy + s * 0.7),
        (cx - stem, cy + s * 0.7),
        (cx - stem, cy),
        (cx - s * 0.8, cy),
    ]
    return _bezier_polygon(points, p.base.curve_tension * 0.2)


def chevron_path(c: Point, s: float, p: NegativeSpaceParams) -> str:
    cx, cy = c
    thickness = s * 0.3 * (1 + (1 - p.sharpness) * 0.3)
    outer = [(cx, cy - s * 0.8), (cx + s * 0.9, cy + s * 0.3), (cx, cy + s * 0.8), (cx - s * 0.9, cy + s * 0.3)]
    inner = [(cx, cy - s * 0.8 + thickness), (cx + s * 0.5, cy + s * 0.1), (cx, cy + s * 0.5), (cx - s * 0.5, cy + s * 0.1)]
    tension = p.base.curve_tension * 0.3
    return f"{_bezier_polygon(outer, tension)} {_bezier_polygon(inner, tension)}"


def radial_blob(c: Point, s: float, count: int, low: float, spread: float, rng: SeededRandom, tension: float) -> str:
    points = []
    for i in range(count):
        angle = (i / count) * math.pi * 2 - math.pi / 2
        r = s * (low + rng() * spread)
        points.append((c[0] + math.cos(angle) * r, c[1] + math.sin(angle) * r))
    return _bezier_polygon(points, tension)


def positive_path(p: NegativeSpaceParams, c: Point, size: float, rng: SeededRandom) -> str:
    s = size * 0.4
    if p.positive_shape == "triangle":
        return triangle_path(c, s, p.sharpness)
    if p.positive_shape == "arrow":
        return arrow_path(c, s, p)
    if p.positive_shape == "chevron":
        return chevron_path(c, s, p)
    return radial_blob(c, s, rng.randint(5, 3), 0.7, 0.6, rng, p.base.curve_tension * 0.5)


def negative_path(p: NegativeSpaceParams, c: Point, size: float, rng: SeededRandom) -> str:
    s = max(2.0, size * 0.4 * p.negative_reveal)
    nc = (c[0] + (p.balance_ratio - 0.5) * size * 0.3, c[1] + size * 0.05)
    tension = p.base.curve_tension
    if p.positive_shape == "triangle":
        # hidden arrow pointing right
        return _bezier_polygon(
            [(nc[0] - s * 0.3, nc[1] - s * 0.4), (nc[0] + s * 0.4, nc[1]), (nc[0] - s * 0.3, nc[1] + s * 0.4)], tension * 0.3
        )
    if p.positive_shape == "arrow":
        return triangle_path(nc, s * 0.6, p.sharpness)
    if p.positive_shape == "chevron":
        return _bezier_polygon(
            [(nc[0], nc[1] - s * 0.5), (nc[0] + s * 0.4, nc[1] + s * 0.2), (nc[0], nc[1] + s * 0.5), (nc[0] - s * 0.4, nc[1] + s * 0.2)],
            tension * 0.4,
        )
    return radial_blob(nc, s, rng.randint(4, 2), 0.3, 0.4, rng, tension * 0.5)


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)
    positive = positive_path(p, center, ctx.size, rng)
    negative = negative_path(p, center, ctx.size, rng)

    pos_grad = svg.add_gradient(ctx.gid("positive"), linear(135, (0, ctx.primary), (1, ctx.accent)))
    neg_tone = ctx.accent if (p.dual_tone and ctx.has_accent) else lighten(ctx.primary, 30)
    neg_grad = svg.add_gradient(ctx.gid("negative"), linear(135, (0, neg_tone), (1, lighten(ctx.primary, 20))))

    if p.boundary_blur > 2.5:
        blur = svg.add_filter(ctx.gid("soft"), "blur", std_deviation=p.boundary_blur * 0.2)
        svg.path(positive, {"fill": darken(ctx.primary, 25), "opacity": 0.25, "filter": f"url(#{blur})"})
    svg.path(f"{positive} {negative}", {"fill": f"url(#{pos_grad})", "fill_rule": "evenodd"})

    if p.dual_tone and p.inner_contrast > 0.7:
        svg.path(negative, {"fill": f"url(#{neg_grad})"})
    else:
        svg.path(negative, {"fill": "none", "stroke": f"url(#{neg_grad})", "stroke_width": round(0.5 + p.inner_contrast, 3), "opacity": round(p.inversion_point, 3)})

    return Render(p, svg, {"symmetry": "bilateral", "path_count": 2})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.NEGATIVE_SPACE, SLUG, _draw, cfg)
