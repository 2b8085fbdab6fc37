"""
Letter swoosh: the brand initial with one to three tapered swooshes.

``under`` and ``through`` swooshes follow a cubic sweep across the mark;
``around`` swooshes ride a circular arc about the letter.
"""

from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import Point, sample_cubic, tapered_stroke_path
from ..glyphs import first_letter, glyph_outline
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, HashDerivedParams, LetterSwooshParams
from ..rng import SeededRandom, clamp, lerp
from ..svg_builder import linear
from .arc_swoosh import arc_centerline
from .base import Render, RenderContext, run_candidate_selection

PLACEMENTS = ["under", "through", "around"]
SWEEP_SAMPLES = 16


def swoosh_params(base: BaseParameters, derived: HashDerivedParams, letter: str) -> LetterSwooshParams:
    return LetterSwooshParams(
        base=base,
        swoosh_count=int(clamp(round(derived.element_count / 6), 1, 3)),
        swoosh_width=clamp(derived.stroke_width + 2, 3, 15),
        swoosh_curvature=clamp(derived.curve_tension, 0.3, 0.9),
        swoosh_placement=PLACEMENTS[derived.style_variant % 3],
        letter_weight=clamp(derived.letter_weight * 0.8, 400, 700),
        letter_scale=clamp(0.6 + derived.scale_factor * 0.1, 0.5, 0.8),
        dynamic_taper=derived.taper_ratio > 0.5,
        letter=letter,
    )


def width_profile(count: int, width: float, dynamic: bool) -> List[float]:
    """Half widths: thin start, full middle, medium end when ``dynamic``."""
    start, end = (0.3, 0.5) if dynamic else (1.0, 1.0)
    halves = []
    for i in range(count):
        t = i / (count - 1 or 1)
        k = lerp(start, 1.0, t * 2) if t < 0.5 else lerp(1.0, end, (t - 0.5) * 2)
        halves.append(width * k / 2)
    return halves


def sweep_centerline(p: LetterSwooshParams, center: Point, size: float, index: int) -> List[Point]:
    cx, cy = center
    if p.swoosh_placement == "under":
        base_y = cy + size * 0.35 + index * p.swoosh_width * 1.5
    else:
        base_y = cy + index * p.swoosh_width * 1.2
    lift = size * p.swoosh_curvature * 0.4
    start = (cx - size * 0.5, base_y)
    c1 = (start[0] + size * 0.25, base_y - lift)
    end = (cx + size * 0.5, base_y + lift * 0.3)
    c2 = (end[0] - size * 0.25, base_y - lift * 0.5)
    return [sample_cubic(start, c1, c2, end, i / SWEEP_SAMPLES) for i in range(SWEEP_SAMPLES + 1)]


def swoosh_path(p: LetterSwooshParams, center: Point, size: float, index: int) -> str:
    if p.swoosh_placement == "around":
        radius = size * (0.42 + index * 0.08)
        centerline = arc_centerline(center, radius, 150 + index * 20, 240, p.swoosh_curvature * 0.3)
    else:
        centerline = sweep_centerline(p, center, size, index)
    halves = width_profile(len(centerline), p.swoosh_width, p.dynamic_taper)
    return tapered_stroke_path(centerline, halves, tension=p.base.curve_tension, cap="round")


def _draw_for(letter: str):
    def _draw(rng: SeededRandom, base: BaseParameters, derived: HashDerivedParams, ctx: RenderContext) -> Render:
        p = swoosh_params(base, derived, letter)
        svg = ctx.builder()
        center = (ctx.center, ctx.center)

        letter_grad = svg.add_gradient(ctx.gid("letter"), linear(180, (0, lighten(ctx.primary, 10)), (1, ctx.primary)))
        if ctx.has_accent:
            stops = ((0, ctx.accent), (0.5, ctx.accent), (1, darken(ctx.accent, 10)))
        else:
            stops = ((0, mix_colors(ctx.primary, "#ffffff", 0.2)), (0.5, ctx.primary), (1, darken(ctx.primary, 15)))
        swoosh_grad = svg.add_gradient(ctx.gid("swoosh"), linear(0, *stops))

        for i in range(p.swoosh_count):
            svg.path(swoosh_path(p, center, ctx.size * 0.9, i), {"fill": f"url(#{swoosh_grad})"})

        letter_size = ctx.size * p.letter_scale
        letter_center = (center[0], center[1] - ctx.size * 0.1 if p.swoosh_placement == "under" else center[1])
        stroke = (p.letter_weight / 600) * letter_size * 0.1
        glyph = " ".join(glyph_outline(letter, letter_center, letter_size * 0.7, stroke, cap="round", tension=base.curve_tension))
        svg.path(glyph, {"fill": f"url(#{letter_grad})"})

        return Render(
            p,
            svg,
            {"symmetry": "none", "path_count": 1 + p.swoosh_count},
            palette=[ctx.primary, ctx.accent if ctx.has_accent else darken(ctx.primary, 15)],
        )

    return _draw


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_candidate_selection(request, Algorithm.LETTER_SWOOSH, _draw_for(first_letter(request.brand_name)), cfg)
