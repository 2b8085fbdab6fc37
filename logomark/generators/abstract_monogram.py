"""
Abstract monogram: the brand's first letter rebuilt from its stroke skeleton.

Every skeleton stroke becomes a filled ribbon in one of four styles:

- ``geometric``: straight edges, width swelling towards the stroke middle
- ``organic``: fbm-modulated width on a jittered centerline, smooth edges
- ``stencil``: geometric, with a bridge gap cut through longer strokes
- ``ribbon``: wider strokes whose width follows a full sine wave

Strokes may also be deconstructed into two or three overlapping pieces.
"""

import math
from typing import List, Optional, Sequence

from ..colors import darken, lighten, mix_colors
from ..config import EngineCfg
from ..geometry import Point, tapered_stroke_path
from ..glyphs import first_letter, letter_skeleton
from ..noise import add_noise, fbm
from ..params import AbstractMonogramParams, Algorithm, BaseParameters, GeneratedLogo, GenerationRequest
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "abstract-monogram"
LETTER_STYLES = ["geometric", "organic", "stencil", "ribbon"]
TERMINALS = ["round", "square", "pointed"]


def draw_params(rng: SeededRandom, base: BaseParameters, letter: str) -> AbstractMonogramParams:
    return AbstractMonogramParams(
        base=base,
        letter_style=rng.choice(LETTER_STYLES),
        letter_connections=rng.chance(0.4),
        stroke_modulation=rng.uniform(0.2, 0.8),
        terminal_style=rng.choice(TERMINALS),
        ligature_strength=rng.uniform(0.3, 0.8),
        deconstruct_level=rng() * 0.5,
        path_simplification=rng.uniform(0.3, 0.7),
        experimental_cuts=rng() * 0.4,
        letter=letter,
    )


def deconstruct(stroke: Sequence[Point], rng: SeededRandom) -> List[List[Point]]:
    """Split a stroke of three or more points into 2-3 pieces sharing their end points."""
    if len(stroke) < 3:
        return [list(stroke)]
    pieces = rng.randint(2, 2)
    per_piece = math.ceil(len(stroke) / pieces)
    out = []
    for i in range(pieces):
        part = list(stroke[i * per_piece:min((i + 1) * per_piece + 1, len(stroke))])
        if len(part) >= 2:
            out.append(part)
    return out


def _progress(count: int) -> List[float]:
    return [i / (count - 1 or 1) for i in range(count)]


def geometric_stroke(points: Sequence[Point], p: AbstractMonogramParams) -> str:
    width = p.base.stroke_width * 3
    halves = [width * (1 - abs(t - 0.5) * p.stroke_modulation * 2) / 2 for t in _progress(len(points))]
    return tapered_stroke_path(points, halves, cap=p.terminal_style, smooth=False)


def organic_stroke(points: Sequence[Point], p: AbstractMonogramParams, rng: SeededRandom, seed: str) -> str:
    width = p.base.stroke_width * 3
    amount = p.base.noise_amount
    halves = [
        width * (0.8 + fbm(t * 3, i * 0.5, seed) * p.stroke_modulation * 0.4) / 2
        for i, t in enumerate(_progress(len(points)))
    ]
    jittered = [(add_noise(x, amount, rng, 1), add_noise(y, amount, rng, 1)) for x, y in points]
    return tapered_stroke_path(jittered, halves, tension=p.base.curve_tension, cap=p.terminal_style)


def ribbon_stroke(points: Sequence[Point], p: AbstractMonogramParams) -> str:
    width = p.base.stroke_width * 4
    halves = [
        width * (0.5 + math.sin(t * math.pi * 2) * 0.3 * p.stroke_modulation) / 2
        for t in _progress(len(points))
    ]
    return tapered_stroke_path(points, halves, tension=p.base.curve_tension * 1.5, cap="round")


def stencil_strokes(points: Sequence[Point], p: AbstractMonogramParams) -> List[str]:
    """Geometric stroke with a bridge gap; two-point strokes are split at the middle."""
    if len(points) == 2:
        (x0, y0), (x1, y1) = points
        gap = 0.06 + p.experimental_cuts * 0.2
        a = (x0 + (x1 - x0) * (0.5 - gap), y0 + (y1 - y0) * (0.5 - gap))
        b = (x0 + (x1 - x0) * (0.5 + gap), y0 + (y1 - y0) * (0.5 + gap))
        return [geometric_stroke([points[0], a], p), geometric_stroke([b, points[1]], p)]
    if p.experimental_cuts <= 0.2:
        return [geometric_stroke(points, p)]
    mid = len(points) // 2
    return [geometric_stroke(points[: mid + 1], p), geometric_stroke(points[mid:], p)]


def styled_paths(strokes: Sequence[Sequence[Point]], p: AbstractMonogramParams, rng: SeededRandom, seed: str) -> List[str]:
    paths = []
    for s, stroke in enumerate(strokes):
        if len(stroke) < 2:
            continue
        parts = deconstruct(stroke, rng) if rng() < p.deconstruct_level else [list(stroke)]
        for k, points in enumerate(parts):
            if p.letter_style == "organic":
                paths.append(organic_stroke(points, p, rng, f"{seed}-{s}-{k}"))
            elif p.letter_style == "ribbon":
                paths.append(ribbon_stroke(points, p))
            elif p.letter_style == "stencil":
                paths.extend(stencil_strokes(points, p))
            else:
                paths.append(geometric_stroke(points, p))
    return [d for d in paths if d]


def _draw_for(letter: str):
    def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
        p = draw_params(rng, base, letter)
        svg = ctx.builder()
        strokes = letter_skeleton(letter, size=ctx.size, scale=0.35)
        paths = styled_paths(strokes, p, rng, ctx.logo_id)

        end = ctx.accent if ctx.has_accent else darken(ctx.primary, 15)
        body = svg.add_gradient(
            ctx.gid("grad"),
            linear(135 + rng() * 30, (0, lighten(ctx.primary, 10)), (0.5, ctx.primary), (1, end)),
        )
        if p.letter_connections and len(paths) > 1:
            shift = round(p.ligature_strength * 1.5, 2)

            def underlay(b):
                for d in paths:
                    b.path(d, {"fill": f"url(#{body})"})

            svg.group(
                underlay,
                transform=f"translate({shift} {shift})",
                attrs={"opacity": round(p.ligature_strength * 0.25, 3)},
            )
        for i, d in enumerate(paths):
            fill = body
            if len(paths) > 1:
                t = i / (len(paths) - 1)
                fill = svg.add_gradient(
                    ctx.gid(f"path-{i}"),
                    linear(90 + t * 45, (0, mix_colors(ctx.primary, lighten(ctx.primary, 20), t)), (1, mix_colors(ctx.primary, end, t))),
                )
            svg.path(d, {"fill": f"url(#{fill})"})

        return Render(p, svg, {"symmetry": "none", "path_count": len(paths)}, palette=[ctx.primary, end])

    return _draw


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.ABSTRACT_MONOGRAM, SLUG, _draw_for(first_letter(request.brand_name)), cfg)
