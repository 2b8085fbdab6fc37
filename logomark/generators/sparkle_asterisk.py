"""
Sparkle asterisk: curved, tapered arms radiating from a central disc.

Each arm is a closed outline through three cross-sections (root, bulging
middle, tip) joined by cubic curves, with quadratic caps at both ends.
"""

import math
from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import Point, circle_path, cubic, polar, pt, quad
from ..noise import add_noise
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, SparkleAsteriskParams
from ..rng import SeededRandom
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_direct_variants

SLUG = "sparkle"


def draw_params(rng: SeededRandom, base: BaseParameters) -> SparkleAsteriskParams:
    return SparkleAsteriskParams(
        base=base,
        arm_count=rng.randint(4, 5),
        arm_length=rng.uniform(25, 43),
        arm_width=rng.uniform(3, 10),
        arm_curvature=rng.uniform(0.2, 0.8),
        arm_taper=rng.uniform(0.3, 0.8),
        center_radius=rng.uniform(2, 12),
        rotational_symmetry=rng.chance(0.3),
        spiral_amount=rng() * 0.4,
        arm_bulge=rng() * 0.5,
    )


def curved_arm_path(
    start: Point,
    end: Point,
    angle: float,
    start_width: float,
    end_width: float,
    curve_offset: float,
    bulge: float,
    tension: float,
) -> str:
    perp = angle + math.pi / 2
    px, py = math.cos(perp), math.sin(perp)

    def side(p: Point, w: float, sign: int) -> Point:
        return (p[0] + sign * px * w / 2, p[1] + sign * py * w / 2)

    mid = ((start[0] + end[0]) / 2 + px * curve_offset, (start[1] + end[1]) / 2 + py * curve_offset)
    mid_width = max(start_width, end_width) * (1 + bulge)

    sl, sr = side(start, start_width, 1), side(start, start_width, -1)
    el, er = side(end, end_width, 1), side(end, end_width, -1)
    ml, mr = side(mid, mid_width, 1), side(mid, mid_width, -1)

    t = tension

    def toward(a: Point, b: Point, k: float) -> Point:
        return (a[0] + (b[0] - a[0]) * k, a[1] + (b[1] - a[1]) * k)

    return " ".join([
        f"M {pt(sl)}",
        cubic(toward(sl, ml, t), toward(ml, sl, (1 - t) * 0.5), ml),
        cubic(toward(ml, el, t), toward(el, ml, (1 - t) * 0.5), el),
        quad(end, er),
        cubic(toward(er, mr, t), toward(mr, er, (1 - t) * 0.5), mr),
        cubic(toward(mr, sr, t), toward(sr, mr, (1 - t) * 0.5), sr),
        quad(start, sl),
        "Z",
    ])


def arm(p: SparkleAsteriskParams, index: int, count: int, center: Point, rng: SeededRandom):
    """Outline and direction (radians) of arm ``index``."""
    base = p.base
    angle = (index / count) * math.pi * 2 + p.spiral_amount * (index / count) * math.pi * 0.5
    if not p.rotational_symmetry:
        angle += add_noise(0.0, base.angle_variance * 0.01, rng, 0.2)
    angle += math.radians(base.rotation_offset)

    length = max(4.0, add_noise(p.arm_length, base.size_variance, rng, 5))
    start_width = max(1.0, p.arm_width)
    end_width = start_width * (1 - p.arm_taper)
    start = polar(center, p.center_radius, angle)
    end = polar(center, p.center_radius + length, angle)
    offset = length * p.arm_curvature * (1 if index % 2 == 0 else -1) * 0.25
    d = curved_arm_path(start, end, angle, start_width, end_width, offset, p.arm_bulge, base.curve_tension)
    return d, angle


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)
    count = max(1, p.arm_count)

    body = svg.add_gradient(
        ctx.gid("grad"),
        radial((0, lighten(ctx.primary, 15)), (0.5, ctx.primary), (1, ctx.accent if ctx.has_accent else darken(ctx.primary, 10))),
    )
    for i in range(count):
        d, angle = arm(p, i, count, center, rng)
        norm = (angle / (math.pi * 2)) % 1.0
        grad = svg.add_gradient(
            ctx.gid(f"arm-{i}"),
            linear(math.degrees(angle), (0, lighten(ctx.primary, 10)), (1, mix_colors(ctx.primary, ctx.accent, norm))),
        )
        svg.path(d, {"fill": f"url(#{grad})"})

    if p.center_radius >= 2:
        svg.path(circle_path(center[0], center[1], p.center_radius), {"fill": f"url(#{body})"})

    return Render(
        p,
        svg,
        {
            "symmetry": f"rotational-{count}" if p.rotational_symmetry else "radial",
            "path_count": count + (1 if p.center_radius >= 2 else 0),
        },
    )


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.SPARKLE_ASTERISK, SLUG, _draw, cfg)
