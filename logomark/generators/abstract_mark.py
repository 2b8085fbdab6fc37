"""Abstract mark: an angular 3-8 point star-like polygon, filled or stroked, with an optional inner void."""

import math
from typing import List, Optional

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import Point, rotate_point, rounded_polygon_path, smooth_closed_path
from ..noise import add_noise
from ..params import AbstractMarkParams, Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, HashDerivedParams
from ..rng import SeededRandom, clamp
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_candidate_selection

SHARP_CORNER = 2.0
INNER_SCALE = 0.4


def mark_params(base: BaseParameters, derived: HashDerivedParams) -> AbstractMarkParams:
    return AbstractMarkParams(
        base=base,
        angular_complexity=int(clamp(round(derived.element_count / 3) + 2, 3, 8)),
        sharpness=derived.curve_tension,
        asymmetry=derived.organic_amount * 0.5,
        inner_negative_space=derived.cut_depth > 0.4,
        stroke_only=derived.style_variant % 3 == 2,
        dynamic_thickness=derived.taper_ratio,
        organic_amount=derived.organic_amount,
        rotation=derived.angle_spread - 45,
    )


def mark_outline_points(p: AbstractMarkParams, center: Point, size: float, rng: SeededRandom) -> List[Point]:
    """Vertices pushed out along ``|sin 2a|`` so the outline reads as angular."""
    count = p.angular_complexity
    base_radius = size * 0.4
    rotation = math.radians(p.rotation)
    points = []
    for i in range(count):
        angle = (i / count) * math.pi * 2 - math.pi / 2
        skew = add_noise(0.0, p.asymmetry, rng, base_radius * 0.3) if p.asymmetry > 0 else 0.0
        r = base_radius + abs(math.sin(angle * 2)) * p.sharpness * base_radius * 0.4 + skew
        points.append(rotate_point((center[0] + math.cos(angle) * r, center[1] + math.sin(angle) * r), center, rotation))
    return points


def angular_path(points: List[Point], p: AbstractMarkParams) -> str:
    if len(points) < 3:
        return ""
    if p.sharpness > 0.8:
        return rounded_polygon_path(points, SHARP_CORNER)
    tension = (0.2 + p.sharpness * 0.3) * (1 - p.sharpness * 0.7)
    return smooth_closed_path(points, tension)


def _draw(rng: SeededRandom, base: BaseParameters, derived: HashDerivedParams, ctx: RenderContext) -> Render:
    p = mark_params(base, derived)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)
    points = mark_outline_points(p, center, ctx.size, rng)
    outline = angular_path(points, p)

    end = ctx.accent if ctx.has_accent else darken(ctx.primary, 20)
    grad = svg.add_gradient(ctx.gid("grad"), linear(135, (0, lighten(ctx.primary, 15)), (0.5, ctx.primary), (1, end)))
    core = svg.add_gradient(ctx.gid("core"), radial((0, lighten(ctx.primary, 25), 0.6), (1, ctx.primary, 0.0)))

    inner = None
    if p.inner_negative_space:
        inner = angular_path([(center[0] + (x - center[0]) * INNER_SCALE, center[1] + (y - center[1]) * INNER_SCALE) for x, y in points], p)

    if p.stroke_only:
        svg.path(outline, {"fill": f"url(#{core})"})
        svg.path(
            outline,
            {
                "fill": "none",
                "stroke": f"url(#{grad})",
                "stroke_width": round(3 + p.dynamic_thickness * 4, 3),
                "stroke_linecap": "round",
                "stroke_linejoin": "round",
            },
        )
    else:
        d = outline if inner is None else f"{outline} {inner}"
        svg.path(d, {"fill": f"url(#{grad})", "fill_rule": "evenodd"})
        svg.path(d, {"fill": f"url(#{core})", "fill_rule": "evenodd"})

    return Render(
        p,
        svg,
        {
            "symmetry": "radial" if p.asymmetry < 0.1 else "none",
            "path_count": 2 if (inner is not None and not p.stroke_only) else 1,
        },
        palette=[ctx.primary, end],
    )


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_candidate_selection(request, Algorithm.ABSTRACT_MARK, _draw, cfg)
