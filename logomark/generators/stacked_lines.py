"""
Stacked motion lines.

Horizontal ribbons whose centerlines wobble with fbm noise. Each ribbon fades
and thins further down the stack, which reads as motion blur.
"""

from typing import List, Optional, Tuple

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import Point, tapered_stroke_path
from ..noise import add_noise, fbm
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, StackedLinesParams
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "stacked-lines"


def draw_params(rng: SeededRandom, base: BaseParameters) -> StackedLinesParams:
    return StackedLinesParams(
        base=base,
        line_count=rng.randint(4, 6),
        line_thickness=rng.uniform(2, 7),
        line_wave_amplitude=rng() * 15,
        line_wave_frequency=rng.uniform(0.5, 3),
        line_spacing=rng.uniform(5, 15),
        motion_blur=rng() * 0.6,
        velocity_variance=rng() * 0.5,
        parallel_offset=rng() * 10,
        taper_amount=rng() * 0.5,
    )


def line_centerline(
    p: StackedLinesParams, index: int, rng: SeededRandom, size: float, seed: str
) -> Tuple[List[Point], float]:
    """Sample points along line ``index`` and its opacity."""
    count = max(1, p.line_count)
    padding = size * p.base.padding_ratio
    available = size - padding * 2
    area = max(count, available - (count - 1) * p.line_spacing)
    y_base = padding + index * (area / count + p.line_spacing)

    velocity = 1 + (rng() - 0.5) * p.velocity_variance
    x_offset = p.parallel_offset * (1 if index % 2 == 0 else -1) * velocity
    segments = max(3, int(p.base.curve_frequency * 2))
    span = max(4.0, size - padding * 2 - abs(x_offset))

    points = []
    for s in range(segments + 1):
        t = s / segments
        x = padding + x_offset + t * span
        wave = fbm(t * p.line_wave_frequency, index * 0.5, seed) * p.line_wave_amplitude
        y = y_base + wave + add_noise(0.0, p.base.noise_amount, rng, 2)
        points.append((x, y))

    opacity = p.base.base_opacity - (index / count) * p.base.opacity_falloff
    opacity *= 1 - p.motion_blur * (index / count)
    return points, max(0.2, opacity)


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    count = max(1, p.line_count)
    seed = ctx.logo_id
    accent = ctx.accent

    svg.add_gradient(ctx.gid("main-grad"), linear(90, (0, lighten(ctx.primary, 15)), (0.5, ctx.primary), (1, accent)))

    for i in range(count):
        centerline, opacity = line_centerline(p, i, rng, ctx.size, seed)
        progress = i / (count - 1) if count > 1 else 0.0
        thickness = p.line_thickness * (1 - (i / count) * p.taper_amount)
        half = [thickness / 2] * len(centerline)

        end = accent if ctx.has_accent else darken(ctx.primary, 15 * progress)
        grad_id = svg.add_gradient(
            ctx.gid(f"line-{i}"),
            linear(0, (0, lighten(ctx.primary, 20 * (1 - progress)), opacity), (1, end, opacity)),
        )
        d = tapered_stroke_path(centerline, half, tension=base.curve_tension, cap="round")
        svg.path(d, {"fill": f"url(#{grad_id})"})

    # speed streak under the leading line
    lead, _ = line_centerline(p, 0, rng, ctx.size, seed + "-streak")
    streak = [(x, y + p.line_thickness) for x, y in lead[: max(2, len(lead) // 2)]]
    svg.path(
        tapered_stroke_path(streak, [max(0.4, p.line_thickness * 0.15)] * len(streak), cap="pointed"),
        {"fill": f"url(#{ctx.gid('main-grad')})", "opacity": round(0.35 * (1 - p.motion_blur), 3)},
    )

    return Render(p, svg, {"grid_based": True, "symmetry": "horizontal", "path_count": count + 1})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.STACKED_LINES, SLUG, _draw, cfg)
