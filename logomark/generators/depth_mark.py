"""
Depth mark: a flat geometric mark extruded into stacked layers.

Layers are drawn back to front; between consecutive layers the side faces
are filled quads shaded away from the light direction.
"""

import math
from typing import List, Optional

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import Point, polygon_path, regular_polygon_points, smooth_closed_path
from ..noise import add_noise
from ..params import Algorithm, BaseParameters, DepthMarkParams, GeneratedLogo, GenerationRequest
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "depth-mark"
SHAPE_TYPES = ["triangle", "diamond", "hexagon", "arrow", "chevron"]


def mark_points(shape: str, center: Point, s: float) -> List[Point]:
    """Outline of a base mark with half-extent ``s``."""
    cx, cy = center
    if shape == "triangle":
        return [(cx, cy - s), (cx + s * 0.9, cy + s * 0.7), (cx - s * 0.9, cy + s * 0.7)]
    if shape == "diamond":
        return [(cx, cy - s), (cx + s * 0.8, cy), (cx, cy + s), (cx - s * 0.8, cy)]
    if shape == "hexagon":
        return regular_polygon_points(center, s * 0.9, 6)
    if shape == "arrow":
        return [
            (cx, cy - s),
            (cx + s * 0.7, cy),
            (cx + s * 0.3, cy),
            (cx + s * 0.3, cy + s * 0.8),
            (cx - s * 0.3, cy + s * 0.8),
            (cx - s * 0.3, cy),
            (cx - s * 0.7, cy),
        ]
    # chevron
    return [
        (cx - s * 0.8, cy - s * 0.3),
        (cx, cy - s * 0.8),
        (cx + s * 0.8, cy - s * 0.3),
        (cx + s * 0.4, cy - s * 0.3),
        (cx, cy - s * 0.5),
        (cx - s * 0.4, cy - s * 0.3),
    ]


def draw_params(rng: SeededRandom, base: BaseParameters) -> DepthMarkParams:
    return DepthMarkParams(
        base=base,
        depth_layers=rng.randint(2, 3),
        depth_offset=rng.uniform(3, 11),
        depth_angle=(rng() - 0.5) * 60,
        perspective_strength=rng.uniform(0.3, 0.8),
        shadow_intensity=rng.uniform(0.3, 0.8),
        extrusion_depth=rng.uniform(8, 26),
        light_direction=rng() * 360,
        surface_detail=rng() * 0.6,
        shape_type=rng.choice(SHAPE_TYPES),
    )


def side_faces(top: List[Point], bottom: List[Point]) -> List[str]:
    n = len(top)
    return [polygon_path([top[i], top[(i + 1) % n], bottom[(i + 1) % n], bottom[i]]) for i in range(n)]


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    center = (ctx.center, ctx.center)
    layers = max(1, p.depth_layers)
    tension = base.curve_tension * 0.3
    angle = math.radians(p.depth_angle)

    # pull the stack back so its visual centre stays on the canvas centre
    shift = p.depth_offset * (layers - 1) / 2
    origin = (center[0] - math.cos(angle) * shift, center[1] - shift * 0.7)
    points = [
        (add_noise(x, base.noise_amount * 0.5, rng, 2), add_noise(y, base.noise_amount * 0.5, rng, 2))
        for x, y in mark_points(p.shape_type, origin, ctx.size * 0.35 * (1 - p.perspective_strength * 0.15))
    ]

    def layer_points(layer: int) -> List[Point]:
        dx = math.cos(angle) * p.depth_offset * layer
        dy = p.depth_offset * layer * 0.7
        return [(x + dx, y + dy) for x, y in points]

    for layer in range(layers - 1, -1, -1):
        top = layer == 0
        progress = layer / (layers - 1 or 1)
        current = layer_points(layer)
        color = ctx.primary if top else darken(ctx.primary, p.shadow_intensity * 40 * progress)
        grad = svg.add_gradient(
            ctx.gid(f"layer-{layer}"),
            linear(
                p.light_direction,
                (0, lighten(color, 10) if top else color),
                (1, ctx.accent if top else darken(color, 15)),
            ),
        )
        if not top:
            side = svg.add_gradient(
                ctx.gid(f"side-{layer}"),
                linear(
                    p.light_direction + 90,
                    (0, darken(ctx.primary, 25 + progress * 15)),
                    (1, darken(ctx.primary, 40 + progress * 15)),
                ),
            )
            for face in side_faces(layer_points(layer - 1), current):
                svg.path(face, {"fill": f"url(#{side})"})
        svg.path(smooth_closed_path(current, tension, divisor=3.0), {"fill": f"url(#{grad})"})

    if p.surface_detail > 0.3:
        inset = [(origin[0] + (x - origin[0]) * 0.6, origin[1] + (y - origin[1]) * 0.6) for x, y in points]
        svg.path(
            smooth_closed_path(inset, tension, divisor=3.0),
            {"fill": "none", "stroke": lighten(ctx.primary, 25), "stroke_width": round(0.5 + p.surface_detail, 3), "opacity": 0.6},
        )

    return Render(p, svg, {"symmetry": "bilateral", "path_count": layers * 2})


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.DEPTH_MARK, SLUG, _draw, cfg)
