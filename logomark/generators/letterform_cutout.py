"""
Letterform cutout: a frame ring with the brand initial stroked inside it.

The frame is drawn as outer + inner outlines under ``evenodd`` so the inner
shape is a real hole; the letter is clipped to that hole.
"""

import math
from typing import List, Optional, Tuple

from ..colors import darken, lighten
from ..config import EngineCfg
from ..geometry import (
    circle_path,
    polygon_path,
    polyline_path,
    regular_polygon_points,
    rounded_polygon_path,
    smooth_open_path,
    transform_points,
)
from ..glyphs import CURVED_LETTERS, first_letter, letter_skeleton
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, LetterformCutoutParams
from ..rng import SeededRandom
from ..svg_builder import linear, radial
from .base import Render, RenderContext, run_direct_variants

SLUG = "letterform"
FRAME_SHAPES = ["square", "circle", "rounded", "hexagon"]


def draw_params(rng: SeededRandom, base: BaseParameters, letter: str) -> LetterformCutoutParams:
    return LetterformCutoutParams(
        base=base,
        frame_shape=rng.choice(FRAME_SHAPES),
        frame_thickness=rng.uniform(3, 11),
        letter_scale=rng.uniform(0.5, 0.85),
        letter_weight=rng.uniform(2, 7),
        cutout_depth=rng.uniform(0.3, 0.9),
        shadow_offset=rng() * 6,
        inner_padding=rng.uniform(8, 20),
        frame_rotation=rng() * 30,
        letter=letter,
    )


def frame_paths(shape: str, size: float, padding: float, thickness: float, rotation: float) -> Tuple[str, str]:
    """Outer and inner outlines of the frame; the inner one winds the same way."""
    c = (size / 2, size / 2)
    outer = max(4.0, size - padding * 2)
    inner = max(2.0, outer - thickness * 2)
    rot = math.radians(rotation)

    if shape == "circle":
        return circle_path(c[0], c[1], outer / 2), circle_path(c[0], c[1], inner / 2)
    if shape == "hexagon":
        return (
            polygon_path(regular_polygon_points(c, outer / 2, 6, -math.pi / 2 + rot)),
            polygon_path(regular_polygon_points(c, inner / 2, 6, -math.pi / 2 + rot)),
        )

    def square(edge: float) -> List[Tuple[float, float]]:
        h = edge / 2
        return transform_points([(c[0] - h, c[1] - h), (c[0] + h, c[1] - h), (c[0] + h, c[1] + h), (c[0] - h, c[1] + h)], c, rot)

    if shape == "rounded":
        return rounded_polygon_path(square(outer), outer * 0.2), rounded_polygon_path(square(inner), inner * 0.2)
    return polygon_path(square(outer)), polygon_path(square(inner))


def letter_path(letter: str, size: float, scale: float) -> str:
    strokes = letter_skeleton(letter, size=size, scale=max(0.1, scale) * 0.4)
    smooth = letter in CURVED_LETTERS
    parts = []
    for stroke in strokes:
        if smooth and len(stroke) > 2:
            parts.append(smooth_open_path(stroke, tension=0.8))
        else:
            parts.append(polyline_path(stroke))
    return " ".join(p for p in parts if p)


def _draw_for(letter: str):
    def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
        p = draw_params(rng, base, letter)
        svg = ctx.builder()
        outer, inner = frame_paths(p.frame_shape, ctx.size, ctx.size * base.padding_ratio, p.frame_thickness, p.frame_rotation)

        frame_grad = svg.add_gradient(ctx.gid("grad"), linear(135, (0, lighten(ctx.primary, 10)), (1, ctx.accent)))
        well_grad = svg.add_gradient(
            ctx.gid("well"),
            radial((0, lighten(ctx.primary, 45), 0.0), (1, darken(ctx.primary, 10), round(0.15 + 0.25 * p.cutout_depth, 3))),
        )
        clip_id = svg.add_clip_path(ctx.gid("clip"), lambda b: b.path(inner))

        svg.path(inner, {"fill": f"url(#{well_grad})"})
        svg.path(f"{outer} {inner}", {"fill": f"url(#{frame_grad})", "fill_rule": "evenodd"})

        d = letter_path(p.letter, ctx.size, p.letter_scale)
        stroke_attrs = {
            "fill": "none",
            "stroke_width": round(p.letter_weight, 3),
            "stroke_linecap": "round",
            "stroke_linejoin": "round",
            "clip_path": f"url(#{clip_id})",
        }
        if p.shadow_offset > 0.5:
            svg.group(
                lambda b: b.path(d, dict(stroke_attrs, stroke=darken(ctx.accent, 20), opacity=round(0.25 * p.cutout_depth, 3))),
                transform=f"translate({p.shadow_offset * 0.3:.2f} {p.shadow_offset * 0.3:.2f})",
            )
        svg.path(d, dict(stroke_attrs, stroke=f"url(#{frame_grad})"))

        return Render(p, svg, {"uses_golden_ratio": True, "grid_based": True, "symmetry": "radial", "path_count": 2})

    return _draw


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.LETTERFORM_CUTOUT, SLUG, _draw_for(first_letter(request.brand_name)), cfg)
