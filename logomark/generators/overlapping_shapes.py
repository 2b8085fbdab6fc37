"""Overlapping translucent shapes (circles, ellipses or fbm blobs) with blend modes."""

import math
from typing import List, Optional

from ..colors import darken, lighten, rotate_hue
from ..config import EngineCfg
from ..geometry import circle_path, ellipse_path, smooth_closed_path
from ..noise import add_noise, fbm
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, OverlappingShapesParams
from ..rng import SeededRandom
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_direct_variants

SLUG = "overlapping"
SHAPE_TYPES = ["circle", "ellipse", "organic"]
BLEND_MODES = ["multiply", "screen", "overlay"]


def draw_params(rng: SeededRandom, base: BaseParameters) -> OverlappingShapesParams:
    return OverlappingShapesParams(
        base=base,
        shape_count=rng.randint(2, 3),
        shape_type=rng.choice(SHAPE_TYPES),
        overlap_amount=rng.uniform(0.3, 0.7),
        size_progression=rng.uniform(0.7, 1.2),
        blend_mode=rng.choice(BLEND_MODES),
        shape_padding=rng.uniform(10, 25),
        rotation_spread=rng() * 120,
        aspect_ratio=rng.uniform(0.7, 1.3),
    )


def organic_blob_path(cx: float, cy: float, rx: float, ry: float, complexity: float, seed: str) -> str:
    """Closed spline through 6-10 points whose radius wobbles with fbm."""
    count = 6 + int(complexity * 4)
    points = []
    for i in range(count):
        angle = (i / count) * math.pi * 2
        wobble = 1 + fbm(math.cos(angle) * 2, math.sin(angle) * 2, seed) * 0.3
        points.append((cx + math.cos(angle) * rx * wobble, cy + math.sin(angle) * ry * wobble))
    return smooth_closed_path(points, tension=0.5)


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    size = ctx.size
    count = max(1, p.shape_count)
    available = max(10.0, size - p.shape_padding * 2)
    step = available * (1 - p.overlap_amount) / (count - 1 or 1)
    base_size = available * 0.5

    shapes = []
    for i in range(count):
        radius = max(1.0, base_size * p.size_progression ** (i - count / 2) * 0.6)
        cx = p.shape_padding + available * 0.3 + i * step * 0.8
        cy = size / 2 + add_noise(0.0, base.noise_amount, rng, 5)
        rotation = p.rotation_spread * (i / count - 0.5)
        rx, ry = radius, radius * p.aspect_ratio

        if p.shape_type == "circle":
            d = circle_path(cx, cy, radius)
        elif p.shape_type == "ellipse":
            d = ellipse_path(cx, cy, rx, ry)
        else:
            d = organic_blob_path(cx, cy, rx, ry, rng.uniform(0.5, 1.0), f"{ctx.logo_id}-shape{i}")

        if ctx.has_accent:
            color = ctx.primary if i % 2 == 0 else ctx.accent
        else:
            color = rotate_hue(ctx.primary, (i / count) * 30 - 15)
        opacity = base.base_opacity * (1 - base.opacity_falloff * (i / count))
        shapes.append((d, color, opacity, rotation, cx, cy))

    # soft ground under the stack
    ground = svg.add_gradient(ctx.gid("ground"), linear(base.base_angle, (0, lighten(ctx.primary, 35), 0.25), (1, ctx.accent, 0.1)))
    svg.path(
        ellipse_path(size / 2, size / 2, available * 0.55, available * 0.45),
        {"fill": f"url(#{ground})"},
    )
    for i, (d, color, opacity, rotation, cx, cy) in enumerate(shapes):
        grad = svg.add_gradient(
            ctx.gid(f"shape-{i}"),
            radial((0, lighten(color, 15), opacity), (0.7, color, opacity), (1, darken(color, 10), opacity * 0.8)),
        )
        attrs = {"fill": f"url(#{grad})", "style": f"mix-blend-mode: {p.blend_mode}"}
        if p.shape_type == "circle" or abs(rotation) < 0.5:
            svg.path(d, attrs)
        else:
            svg.group(lambda b, d=d, attrs=attrs: b.path(d, attrs), transform=f"rotate({rotation:.2f} {cx:.2f} {cy:.2f})")

    return Render(p, svg, {"symmetry": "none", "path_count": count + 1})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.OVERLAPPING_SHAPES, SLUG, _draw, cfg)
