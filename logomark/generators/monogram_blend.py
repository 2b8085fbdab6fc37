"""Two-letter monogram: the brand's first two letters overlapped, interlocked, merged or stacked."""

from typing import List, Optional

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import Point
from ..glyphs import glyph_outline, letter_pair
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, HashDerivedParams, MonogramBlendParams
from ..rng import SeededRandom, clamp
from ..svg_builder import linear
from .base import Render, RenderContext, run_candidate_selection

BLEND_STYLES = ["overlap", "interlock", "merge", "stack"]


def blend_params(base: BaseParameters, derived: HashDerivedParams, letters: List[str]) -> MonogramBlendParams:
    return MonogramBlendParams(
        base=base,
        blend_style=BLEND_STYLES[derived.style_variant % len(BLEND_STYLES)],
        letter_spacing=(derived.spacing_factor - 1) * 20,
        share_strokes=derived.organic_amount > 0.5,
        stroke_modulation=derived.taper_ratio,
        letter_weights=[
            clamp(400 + derived.letter_weight * 0.3, 300, 700),
            clamp(400 + derived.letter_weight * 0.4, 300, 700),
        ],
        vertical_offset=(derived.jitter_amount - 5) * 2,
        letters=letters,
    )


def letter_centers(p: MonogramBlendParams, size: float) -> List[Point]:
    c = size / 2
    if p.blend_style == "stack":
        return [(c, c - size * 0.25), (c, c + size * 0.25)]
    dx = p.letter_spacing / 2 + size * 0.15
    dy = p.vertical_offset / 2
    return [(c - dx, c + dy), (c + dx, c - dy)]


def letter_path(letter: str, center: Point, letter_size: float, weight: float, tension: float) -> str:
    stroke = (weight / 700) * letter_size * 0.12
    return " ".join(glyph_outline(letter, center, letter_size * 0.7, stroke, cap="square", tension=tension))


def _draw_for(letters: List[str]):
    def _draw(rng: SeededRandom, base: BaseParameters, derived: HashDerivedParams, ctx: RenderContext) -> Render:
        p = blend_params(base, derived, letters)
        svg = ctx.builder()
        letter_size = ctx.size * (0.6 if p.blend_style == "stack" else 0.8)
        first, second = (
            letter_path(letter, center, letter_size, weight, base.curve_tension)
            for letter, center, weight in zip(letters, letter_centers(p, ctx.size), p.letter_weights)
        )

        g1 = svg.add_gradient(ctx.gid("grad1"), linear(135, (0, lighten(ctx.primary, 10)), (1, ctx.primary)))
        if ctx.has_accent:
            g2_stops = ((0, ctx.accent), (1, darken(ctx.accent, 10)))
        else:
            g2_stops = ((0, mix_colors(ctx.primary, "#000000", 0.2)), (1, darken(ctx.primary, 20)))
        g2 = svg.add_gradient(ctx.gid("grad2"), linear(135, *g2_stops))

        if p.blend_style == "overlap":
            svg.path(first, {"fill": f"url(#{g1})"})
            svg.path(second, {"fill": f"url(#{g2})", "opacity": 0.85})
        elif p.blend_style == "merge" and p.share_strokes:
            # shared strokes fuse into a single silhouette
            svg.path(f"{second} {first}", {"fill": f"url(#{g1})", "fill_rule": "nonzero"})
            svg.path(second, {"fill": f"url(#{g2})", "opacity": round(0.35 + p.stroke_modulation * 0.3, 3)})
        else:
            svg.path(second, {"fill": f"url(#{g2})"})
            svg.path(first, {"fill": f"url(#{g1})"})

        return Render(
            p,
            svg,
            {"symmetry": "vertical" if p.blend_style == "stack" else "none", "path_count": 2},
            palette=[ctx.primary, ctx.accent if ctx.has_accent else darken(ctx.primary, 20)],
        )

    return _draw


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    letters = list(letter_pair(request.brand_name))
    return run_candidate_selection(request, Algorithm.MONOGRAM_BLEND, _draw_for(letters), cfg)
