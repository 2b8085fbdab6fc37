"""
Shared generation loops.

Two construction patterns:

- ``run_direct_variants``: one parameter draw per variant from the stream
  seeded with ``{seed}-{slug}-v{v}``; geometry is built once.
- ``run_candidate_selection``: up to ``candidates_per_variant`` hash-derived
  draws per variant, each scored and biased by the request category (or the
  algorithm's default one); the first to reach the quality threshold
  wins, otherwise the best scoring one is kept.

Generators supply a ``draw`` callable that returns a ``Render`` and never see
the loop, the hash or the metadata.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..colors import build_palette, resolve_accent
from ..config import EngineCfg
from ..core import get_logger
from ..derive import derive_params_from_hash, generate_base_params, hash_params_for_candidate
from ..ledger import generate_hash
from ..params import (
    Algorithm,
    AlgorithmParams,
    BaseParameters,
    ColorMeta,
    GeneratedLogo,
    GenerationRequest,
    GeometryMeta,
    HashDerivedParams,
    LogoMeta,
    QualityMetrics,
)
from ..quality import calculate_complexity, calculate_quality_score, meets_quality_threshold
from ..rng import SeededRandom, create_seeded_random, cyrb53_base36
from ..svg_builder import SVGBuilder

log = get_logger("logomark.generators")

_DEFAULT_CFG = EngineCfg()

# bias applied to hash-derived parameters when the request names no category
DEFAULT_CATEGORIES: Dict[Algorithm, str] = {
    Algorithm.STARBURST: "technology",
    Algorithm.PERFECT_TRIANGLE: "technology",
    Algorithm.ABSTRACT_MARK: "technology",
    Algorithm.MONOGRAM_BLEND: "creative",
    Algorithm.LETTER_SWOOSH: "creative",
}


@dataclass
class RenderContext:
    """Per-variant inputs a generator may read."""

    logo_id: str
    brand_name: str
    primary: str
    accent: str
    variant: int
    size: int = 100
    has_accent: bool = False

    @property
    def center(self) -> float:
        return self.size / 2

    def gid(self, name: str) -> str:
        """Definition id scoped to this document."""
        return f"{self.logo_id}-{name}"

    def builder(self) -> SVGBuilder:
        return SVGBuilder(self.size)


@dataclass
class Render:
    params: AlgorithmParams
    builder: SVGBuilder
    geometry: Dict[str, Any] = field(default_factory=dict)
    palette: Optional[List[str]] = None


DirectDraw = Callable[[SeededRandom, BaseParameters, RenderContext], Render]
CandidateDraw = Callable[[SeededRandom, BaseParameters, HashDerivedParams, RenderContext], Render]


def logo_id_for(algorithm: Algorithm, variant: int, variant_seed: str) -> str:
    return f"{algorithm.value}-{variant}-{cyrb53_base36(variant_seed)}"


def _context(request: GenerationRequest, algorithm: Algorithm, variant: int, variant_seed: str, cfg: EngineCfg) -> RenderContext:
    return RenderContext(
        logo_id=logo_id_for(algorithm, variant, variant_seed),
        brand_name=request.brand_name,
        primary=request.primary_color,
        accent=resolve_accent(request.primary_color, request.accent_color),
        variant=variant,
        size=cfg.canvas_size,
        has_accent=bool(request.accent_color),
    )


def _assemble(
    request: GenerationRequest,
    algorithm: Algorithm,
    ctx: RenderContext,
    render: Render,
    svg: str,
    seed: str,
    quality: Optional[QualityMetrics],
    cfg: EngineCfg,
) -> GeneratedLogo:
    geometry = dict(render.geometry)
    geometry.setdefault("path_count", render.builder.element_count)
    geometry.setdefault("complexity", round(calculate_complexity(svg), 4))
    params = render.params.model_dump(mode="json")
    return GeneratedLogo(
        id=ctx.logo_id,
        hash=generate_hash(request.brand_name, algorithm.value, ctx.variant, params, cfg.format_version),
        algorithm=algorithm,
        variant=ctx.variant,
        svg=svg,
        view_box=render.builder.view_box,
        params=params,
        quality=quality,
        meta=LogoMeta(
            brand_name=request.brand_name,
            generated_at=int(time.time() * 1000),
            seed=seed,
            geometry=GeometryMeta(**geometry),
            colors=ColorMeta(
                primary=ctx.primary,
                accent=ctx.accent,
                palette=render.palette or build_palette(ctx.primary, request.accent_color),
            ),
        ),
    )


def run_direct_variants(
    request: GenerationRequest,
    algorithm: Algorithm,
    slug: str,
    draw: DirectDraw,
    cfg: Optional[EngineCfg] = None,
) -> List[GeneratedLogo]:
    cfg = cfg or _DEFAULT_CFG
    seed = request.effective_seed
    logos = []
    for v in range(request.variations):
        variant_seed = f"{seed}-{slug}-v{v}"
        rng = create_seeded_random(variant_seed)
        base = generate_base_params(rng)
        ctx = _context(request, algorithm, v + 1, variant_seed, cfg)
        render = draw(rng, base, ctx)
        svg = render.builder.build()
        logos.append(_assemble(request, algorithm, ctx, render, svg, variant_seed, calculate_quality_score(svg), cfg))
    log.debug(f"{algorithm.value}: {len(logos)} variants for '{request.brand_name}'")
    return logos


def run_candidate_selection(
    request: GenerationRequest,
    algorithm: Algorithm,
    draw: CandidateDraw,
    cfg: Optional[EngineCfg] = None,
) -> List[GeneratedLogo]:
    cfg = cfg or _DEFAULT_CFG
    seed = request.effective_seed
    threshold = request.min_quality_score
    category = request.category or DEFAULT_CATEGORIES.get(algorithm)
    logos = []
    for v in range(request.variations):
        variant_seed = f"{seed}-{algorithm.value}-v{v}"
        ctx = _context(request, algorithm, v + 1, variant_seed, cfg)
        best = None
        for c in range(cfg.candidates_per_variant):
            hp = hash_params_for_candidate(seed, algorithm.value, v, c)
            derived = derive_params_from_hash(hp.hash_hex, category)
            rng = create_seeded_random(hp.seed)
            base = generate_base_params(rng)
            render = draw(rng, base, derived, ctx)
            svg = render.builder.build()
            quality = calculate_quality_score(svg, derived)
            log.debug(f"{algorithm.value} v{v + 1} c{c}: score {quality.score}")
            if best is None or quality.score > best[2].score:
                best = (render, svg, quality, hp.seed)
            if meets_quality_threshold(quality.score, threshold):
                break
        render, svg, quality, candidate_seed = best
        logos.append(_assemble(request, algorithm, ctx, render, svg, candidate_seed, quality, cfg))
    log.debug(f"{algorithm.value}: {len(logos)} variants for '{request.brand_name}'")
    return logos


__all__ = [
    "DEFAULT_CATEGORIES",
    "RenderContext",
    "Render",
    "logo_id_for",
    "run_direct_variants",
    "run_candidate_selection",
]
