"""
Starburst: 6-16 curved, tapered arms around an optional centre disc.

Arm geometry comes from the hash-derived parameter set; each variant keeps
the best of up to five scored candidates.
"""

import math
from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..derive import golden_taper
from ..geometry import Point, circle_path, polar
from ..noise import add_noise
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, HashDerivedParams, StarburstParams
from ..rng import SeededRandom, clamp
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_candidate_selection
from .sparkle_asterisk import curved_arm_path

MIN_ARMS = 6
MAX_ARMS = 16


def starburst_params(base: BaseParameters, derived: HashDerivedParams) -> StarburstParams:
    return StarburstParams(
        base=base,
        arm_count=int(clamp(derived.element_count, MIN_ARMS, MAX_ARMS)),
        arm_length=derived.arm_length,
        arm_width=derived.arm_width,
        taper_ratio=derived.taper_ratio,
        curvature=derived.curve_tension,
        center_radius=derived.center_radius,
        spiral_amount=derived.spiral_amount,
        bulge_amount=derived.bulge_amount,
        rotation_offset=derived.rotation_offset,
        symmetry_type=derived.symmetry_type,
    )


def is_symmetric(p: StarburstParams) -> bool:
    return "rotational" in p.symmetry_type or p.symmetry_type == "radial"


def arm_outline(p: StarburstParams, index: int, center: Point, wobble: float, rng: SeededRandom):
    count = p.arm_count
    angle = (
        (index / count) * math.pi * 2
        + math.radians(p.rotation_offset)
        + p.spiral_amount * (index / count) * math.pi * 0.5
    )
    if wobble > 0:
        angle += add_noise(0.0, wobble, rng, 0.15)
    length = p.arm_length
    if not is_symmetric(p):
        length += add_noise(0.0, p.base.size_variance, rng, 5)
    length = max(4.0, length)

    start = polar(center, p.center_radius, angle)
    end = polar(center, p.center_radius + length, angle)
    offset = length * p.curvature * (1 if index % 2 == 0 else -1) * 0.3
    d = curved_arm_path(start, end, angle, p.arm_width, p.arm_width * (1 - p.taper_ratio), offset, p.bulge_amount, p.curvature)
    return d, angle


def _draw(rng: SeededRandom, base: BaseParameters, derived: HashDerivedParams, ctx: RenderContext) -> Render:
    p = starburst_params(base, derived)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)

    body = svg.add_gradient(
        ctx.gid("grad"),
        radial((0, lighten(ctx.primary, 15)), (0.5, ctx.primary), (1, ctx.accent if ctx.has_accent else darken(ctx.primary, 10))),
    )
    tip = ctx.accent if ctx.has_accent else darken(ctx.primary, 20)
    for i in range(p.arm_count):
        d, angle = arm_outline(p, i, center, derived.organic_amount, rng)
        norm = (angle % (math.pi * 2)) / (math.pi * 2)
        grad = svg.add_gradient(
            ctx.gid(f"arm-{i}"),
            linear(math.degrees(angle), (0, lighten(ctx.primary, 10)), (1, mix_colors(ctx.primary, tip, norm))),
        )
        svg.path(d, {"fill": f"url(#{grad})"})

    has_center = p.center_radius >= 2
    if has_center:
        svg.path(circle_path(center[0], center[1], p.center_radius), {"fill": f"url(#{body})"})

    return Render(
        p,
        svg,
        {
            "uses_golden_ratio": golden_taper(p.taper_ratio),
            "symmetry": "radial" if is_symmetric(p) else "none",
            "path_count": p.arm_count + (1 if has_center else 0),
        },
    )


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_candidate_selection(request, Algorithm.STARBURST, _draw, cfg)
