"""
Arc swoosh: tapered ribbons that follow a bowed circular arc.

``arc_centerline`` and ``taper_widths`` are shared with the letter-swoosh
generator.
"""

import math
from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import Point, tapered_stroke_path
from ..noise import add_noise
from ..params import Algorithm, ArcSwooshParams, BaseParameters, GeneratedLogo, GenerationRequest
from ..rng import SeededRandom, lerp
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_direct_variants

SLUG = "arc-swoosh"
ARC_SEGMENTS = 20


def draw_params(rng: SeededRandom, base: BaseParameters) -> ArcSwooshParams:
    return ArcSwooshParams(
        base=base,
        swoosh_count=rng.randint(1, 3),
        swoosh_width=rng.uniform(5, 17),
        swoosh_length=rng.uniform(0.5, 0.9),
        swoosh_curvature=rng.uniform(0.3, 0.8),
        start_angle=rng() * 180,
        sweep_angle=rng.uniform(90, 210),
        taper_start=rng.uniform(0.1, 0.5),
        taper_end=rng.uniform(0.6, 0.95),
        dynamic_width=rng.chance(0.4),
    )


def arc_centerline(
    center: Point,
    radius: float,
    start_deg: float,
    sweep_deg: float,
    curvature: float,
    offset_y: float = 0.0,
    noise_amount: float = 0.0,
    rng: Optional[SeededRandom] = None,
    segments: int = ARC_SEGMENTS,
) -> List[Point]:
    """Points along an arc whose radius swells by ``curvature`` mid-sweep."""
    radius = max(1.0, radius)
    a0 = math.radians(start_deg)
    a1 = a0 + math.radians(sweep_deg)
    points = []
    for i in range(segments + 1):
        t = i / segments
        angle = lerp(a0, a1, t)
        r = radius + math.sin(t * math.pi) * curvature * radius * 0.3
        if rng is not None:
            r = add_noise(r, noise_amount, rng, 2)
        points.append((center[0] + math.cos(angle) * r, center[1] + math.sin(angle) * r + offset_y))
    return points


def taper_widths(count: int, width: float, taper_start: float, taper_end: float, dynamic: bool) -> List[float]:
    """Full widths along a ribbon, ramping in before ``taper_start`` and out after ``taper_end``."""
    segments = max(1, count - 1)
    widths = []
    for i in range(count):
        t = i / segments
        ramp_in = t / taper_start if taper_start > 0 and t < taper_start else 1.0
        ramp_out = (1 - t) / (1 - taper_end) if taper_end < 1 and t > taper_end else 1.0
        w = width * ramp_in * ramp_out
        if dynamic:
            w *= 0.7 + math.sin(t * math.pi) * 0.6
        widths.append(max(1.0, w))
    return widths


def swoosh_path(p: ArcSwooshParams, index: int, count: int, center: Point, size: float, rng: SeededRandom) -> str:
    padding = size * p.base.padding_ratio
    radius = (size - padding * 2) * 0.4 * p.swoosh_length
    offset = (index - (count - 1) / 2) * p.swoosh_width * 1.5
    centerline = arc_centerline(
        center, radius, p.start_angle + index * 15, p.sweep_angle, p.swoosh_curvature, offset, p.base.noise_amount, rng
    )
    widths = taper_widths(len(centerline), p.swoosh_width, p.taper_start, p.taper_end, p.dynamic_width)
    return tapered_stroke_path(centerline, [w / 2 for w in widths], tension=p.base.curve_tension, cap="round")


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)
    count = max(1, p.swoosh_count)

    glow = svg.add_gradient(ctx.gid("glow"), radial((0, lighten(ctx.primary, 30), 0.35), (1, ctx.primary, 0.0)))
    svg.circle(center[0], center[1], (ctx.size - ctx.size * base.padding_ratio * 2) * 0.3 * p.swoosh_length, {"fill": f"url(#{glow})"})

    for i in range(count):
        d = swoosh_path(p, i, count, center, ctx.size, rng)
        progress = i / (count - 1 or 1)
        end = mix_colors(ctx.primary, ctx.accent, progress) if ctx.has_accent else darken(ctx.primary, 15 * progress)
        grad = svg.add_gradient(
            ctx.gid(f"swoosh-{i}"),
            linear(p.start_angle, (0, lighten(ctx.primary, 15 * (1 - progress))), (0.5, ctx.primary), (1, end)),
        )
        opacity = max(0.4, base.base_opacity - progress * base.opacity_falloff * 0.3)
        svg.path(d, {"fill": f"url(#{grad})", "opacity": round(opacity, 3)})

    return Render(p, svg, {"symmetry": "none", "path_count": count})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.ARC_SWOOSH, SLUG, _draw, cfg)
