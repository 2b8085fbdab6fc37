"""Parallel gradient bars: stacked skewed parallelograms, each with its own gradient."""

import math
from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import rounded_polygon_path
from ..noise import add_noise
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, ParallelBarsParams
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "parallel-bars"


def draw_params(rng: SeededRandom, base: BaseParameters) -> ParallelBarsParams:
    return ParallelBarsParams(
        base=base,
        bar_count=rng.randint(3, 4),
        bar_width_ratio=rng.uniform(0.5, 0.9),
        bar_skew=(rng() - 0.5) * 40,
        bar_gap=rng.uniform(3, 13),
        bar_roundness=rng.uniform(0.3, 1.0),
        gradient_angle=rng() * 180,
        gradient_spread=rng.uniform(0.3, 1.0),
        stagger_offset=rng() * 20,
        taper_amount=rng() * 0.5,
    )


def bar_points(p: ParallelBarsParams, index: int, rng: SeededRandom, size: float) -> List[tuple]:
    """Corners of bar ``index``, top edge shifted by the skew."""
    count = max(1, p.bar_count)
    padding = size * p.base.padding_ratio
    available = size - padding * 2
    bar_height = max(1.0, (available - (count - 1) * p.bar_gap) / count)

    stagger = (1 if index % 2 == 0 else -1) * p.stagger_offset
    y = padding + index * (bar_height + p.bar_gap)
    progress = index / (count - 1) if count > 1 else 0.0
    width = (size - padding * 2) * p.bar_width_ratio * (1 - p.taper_amount * progress)
    width = max(2.0, add_noise(width, p.base.size_variance, rng, 10))

    x0 = (size - width) / 2 + stagger
    x1 = x0 + width
    dy = add_noise(0.0, p.base.noise_amount, rng, 3)
    skew = math.tan(math.radians(p.bar_skew)) * bar_height
    return [
        (x0 + skew, y + dy),
        (x1 + skew, y + dy),
        (x1, y + bar_height + dy),
        (x0, y + bar_height + dy),
    ]


def bar_gradient(p: ParallelBarsParams, index: int, primary: str, accent: str, has_accent: bool):
    count = p.bar_count
    progress = index / (count - 1) if count > 1 else 0.0
    spread = p.gradient_spread
    start = lighten(primary, 25 * (1 - progress) * spread)
    if has_accent:
        end = mix_colors(primary, accent, progress * spread)
    else:
        end = darken(primary, 20 * progress * spread)
    return linear(p.gradient_angle + index * 5, (0, start), (0.5, primary), (1, end))


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    count = max(1, p.bar_count)

    bars = []
    for i in range(count):
        points = bar_points(p, i, rng, ctx.size)
        bar_height = points[2][1] - points[0][1]
        bar_width = points[1][0] - points[0][0]
        radius = min(bar_height / 2 * p.bar_roundness, abs(bar_width) / 4, bar_height / 4)
        grad_id = svg.add_gradient(ctx.gid(f"grad-{i}"), bar_gradient(p, i, ctx.primary, ctx.accent, ctx.has_accent))
        bars.append((rounded_polygon_path(points, radius if radius >= 1 else 0), grad_id))

    # sheen over the leading bar
    svg.add_gradient(ctx.gid("sheen"), linear(90, (0, "#ffffff", 0.18), (1, "#ffffff", 0.0)))
    for d, grad_id in bars:
        svg.path(d, {"fill": f"url(#{grad_id})", "opacity": round(min(1.0, add_noise(base.base_opacity, base.opacity_falloff * 0.1, rng, 0.1)), 3)})
    if bars:
        svg.path(bars[0][0], {"fill": f"url(#{ctx.gid('sheen')})"})

    return Render(p, svg, {"uses_golden_ratio": True, "symmetry": "none", "path_count": count})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.PARALLEL_BARS, SLUG, _draw, cfg)
