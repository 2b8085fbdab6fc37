"""Interlocking rings, links and woven pairs, filled with ``evenodd`` so the holes stay open."""

import math
from typing import List, Optional

from ..colors import darken, lighten, rotate_hue
from ..config import EngineCfg
from ..geometry import Point, ring_path, rounded_rect_path
from ..params import Algorithm, BaseParameters, GeneratedLogo, GenerationRequest, InterlockingFormsParams
from ..rng import SeededRandom
from ..svg_builder import linear
from .base import Render, RenderContext, run_direct_variants

SLUG = "interlocking"
FORM_SHAPES = ["ring", "link", "chain", "weave"]
ARRANGEMENTS = ["linear", "circular", "stacked"]


def draw_params(rng: SeededRandom, base: BaseParameters) -> InterlockingFormsParams:
    count = rng.randint(2, 3)
    return InterlockingFormsParams(
        base=base,
        form_count=count,
        form_shape=rng.choice(FORM_SHAPES),
        interlock_depth=rng.uniform(0.3, 0.7),
        form_thickness=rng.uniform(4, 12),
        gap_size=rng.uniform(2, 7),
        arrangement=rng.choice(ARRANGEMENTS),
        overlap_order=list(range(count)),
        connection_strength=rng.uniform(0.4, 0.9),
    )


def link_path(cx: float, cy: float, width: float, height: float, thickness: float) -> str:
    """Rounded-rectangle band: outer outline plus the inner hole."""
    hw, hh = width / 2, height / 2
    r = min(hw, thickness)
    inner_hw = max(0.5, hw - thickness)
    inner_hh = max(0.5, hh - thickness)
    outer = rounded_rect_path(cx - hw, cy - hh, width, height, r)
    inner = rounded_rect_path(cx - inner_hw, cy - inner_hh, inner_hw * 2, inner_hh * 2, max(1.0, r - thickness))
    return f"{outer} {inner}"


def weave_path(cx: float, cy: float, size: float, thickness: float) -> str:
    r = size * 0.35
    offset = size * 0.25
    return f"{ring_path(cx - offset, cy, r, r - thickness)} {ring_path(cx + offset, cy, r, r - thickness)}"


def form_center(p: InterlockingFormsParams, index: int, count: int, size: float) -> Point:
    padding = size * p.base.padding_ratio
    available = size - padding * 2
    mid = size / 2
    if p.arrangement == "circular":
        angle = (index / count) * math.pi * 2 - math.pi / 2
        radius = available * 0.25
        return mid + math.cos(angle) * radius, mid + math.sin(angle) * radius
    if p.arrangement == "stacked":
        offset = (index - (count - 1) / 2) * p.form_thickness * 0.5
        return mid + offset, mid + offset * 0.5
    # linear: deeper interlock pulls neighbours together
    spacing = available / (count + 1) * (1.3 - p.interlock_depth * 0.6)
    return mid + (index - (count - 1) / 2) * spacing, mid


def form_path(p: InterlockingFormsParams, index: int, count: int, size: float) -> str:
    available = size - size * p.base.padding_ratio * 2
    form_size = available / (count * 0.6)
    cx, cy = form_center(p, index, count, size)
    t = p.form_thickness
    if p.form_shape == "link":
        return link_path(cx, cy, form_size * 1.2, form_size * 0.8, t)
    if p.form_shape == "chain":
        return link_path(cx, cy, form_size, form_size * 0.6, t)
    if p.form_shape == "weave":
        return weave_path(cx, cy, form_size, t)
    return ring_path(cx, cy, form_size / 2, form_size / 2 - t)


def _draw(rng: SeededRandom, base: BaseParameters, ctx: RenderContext) -> Render:
    p = draw_params(rng, base)
    svg = ctx.builder()
    count = max(1, p.form_count)
    palette = []

    for i in p.overlap_order:
        color = rotate_hue(ctx.primary, (i / count) * 40 - 20)
        palette.append(color)
        progress = i / (count - 1 or 1)
        end = ctx.accent if (ctx.has_accent and progress > 0.5) else darken(color, 15)
        grad = svg.add_gradient(
            ctx.gid(f"form-{i}"),
            linear(45 + i * 30, (0, lighten(color, 15)), (0.5, color), (1, end)),
        )
        svg.path(form_path(p, i, count, ctx.size), {"fill": f"url(#{grad})", "fill_rule": "evenodd"})

    return Render(
        p,
        svg,
        {"symmetry": "radial" if p.arrangement == "circular" else "none", "path_count": count},
        palette=palette,
    )


def generate(request: GenerationRequest, cfg: Optional[EngineCfg] = None) -> List[GeneratedLogo]:
    return run_direct_variants(request, Algorithm.INTERLOCKING_FORMS, SLUG, _draw, cfg)
