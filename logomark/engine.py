#!/usr/bin/env python3
"""
Engine facade: algorithm dispatch, auto-selection and the bundle helpers.

Generation itself is pure. The optional ``HashLedger`` is only touched after
a generator has returned, once per produced logo.
"""

from typing import Dict, List, Optional, Union

from .config import EngineCfg
from .core import UnknownAlgorithmError, get_logger
from .generators import GENERATORS
from .ledger import HashLedger
from .params import ALL_ALGORITHMS, Algorithm, GeneratedLogo, GenerationRequest
from .rng import create_seeded_random

log = get_logger("logomark.engine")

# ============================================================================
# CATALOGUE
# ============================================================================

ALGORITHM_INFO: Dict[Algorithm, Dict[str, str]] = {
    Algorithm.PARALLEL_BARS: {
        "name": "Parallel Gradient Bars",
        "description": "Stacked skewed bars with gradient fills and subtle offsets",
        "inspiration": "Stripe",
    },
    Algorithm.STACKED_LINES: {
        "name": "Stacked Motion Lines",
        "description": "Layered tapered lines with a motion streak",
        "inspiration": "Linear",
    },
    Algorithm.LETTERFORM_CUTOUT: {
        "name": "Letterform Cutout",
        "description": "Letter inside a geometric frame with cutout depth",
        "inspiration": "Notion",
    },
    Algorithm.SPARKLE_ASTERISK: {
        "name": "Sparkle Asterisk",
        "description": "Curved bezier arms radiating from a small disc",
        "inspiration": "Claude/Anthropic",
    },
    Algorithm.OVERLAPPING_SHAPES: {
        "name": "Overlapping Shapes",
        "description": "Translucent layered shapes with blend modes",
        "inspiration": "Figma/Mastercard",
    },
    Algorithm.ARC_SWOOSH: {
        "name": "Arc Swoosh",
        "description": "Curved swooshes with tapered ends",
        "inspiration": "Nike",
    },
    Algorithm.DEPTH_MARK: {
        "name": "Depth Mark",
        "description": "Extruded mark built from stacked layers",
        "inspiration": "Raycast",
    },
    Algorithm.NEGATIVE_SPACE: {
        "name": "Negative Space",
        "description": "A hidden form revealed inside a solid mark",
        "inspiration": "FedEx/Vercel",
    },
    Algorithm.INTERLOCKING_FORMS: {
        "name": "Interlocking Forms",
        "description": "Rings and links that weave through each other",
        "inspiration": "Olympic Rings",
    },
    Algorithm.ABSTRACT_MONOGRAM: {
        "name": "Abstract Monogram",
        "description": "The initial rebuilt from styled stroke fragments",
        "inspiration": "Contemporary Type",
    },
    Algorithm.STARBURST: {
        "name": "Starburst",
        "description": "Six to sixteen organic arms, best of several scored candidates",
        "inspiration": "Claude/Anthropic",
    },
    Algorithm.MONOGRAM_BLEND: {
        "name": "Monogram Blend",
        "description": "Two initials overlapped, merged or stacked",
        "inspiration": "Classic monograms",
    },
    Algorithm.PERFECT_TRIANGLE: {
        "name": "Perfect Triangle",
        "description": "A single precise triangle, optionally hollow",
        "inspiration": "Vercel",
    },
    Algorithm.ABSTRACT_MARK: {
        "name": "Abstract Mark",
        "description": "Angular abstract polygon, filled or outlined",
        "inspiration": "Supabase",
    },
    Algorithm.LETTER_SWOOSH: {
        "name": "Letter Swoosh",
        "description": "Initial paired with dynamic swooshes",
        "inspiration": "Arc",
    },
}

INDUSTRY_ALGORITHMS: Dict[str, List[Algorithm]] = {
    "technology": [Algorithm.PARALLEL_BARS, Algorithm.STACKED_LINES, Algorithm.DEPTH_MARK, Algorithm.SPARKLE_ASTERISK],
    "finance": [Algorithm.LETTERFORM_CUTOUT, Algorithm.NEGATIVE_SPACE, Algorithm.INTERLOCKING_FORMS, Algorithm.ABSTRACT_MONOGRAM],
    "creative": [Algorithm.SPARKLE_ASTERISK, Algorithm.OVERLAPPING_SHAPES, Algorithm.ARC_SWOOSH, Algorithm.ABSTRACT_MONOGRAM],
    "healthcare": [Algorithm.OVERLAPPING_SHAPES, Algorithm.SPARKLE_ASTERISK, Algorithm.INTERLOCKING_FORMS],
}

AESTHETIC_ALGORITHMS: Dict[str, List[Algorithm]] = {
    "tech-minimal": [Algorithm.STACKED_LINES, Algorithm.NEGATIVE_SPACE, Algorithm.PARALLEL_BARS],
    "bold-geometric": [Algorithm.DEPTH_MARK, Algorithm.LETTERFORM_CUTOUT, Algorithm.INTERLOCKING_FORMS],
    "elegant-refined": [Algorithm.ABSTRACT_MONOGRAM, Algorithm.ARC_SWOOSH, Algorithm.LETTERFORM_CUTOUT],
    "friendly-rounded": [Algorithm.SPARKLE_ASTERISK, Algorithm.OVERLAPPING_SHAPES, Algorithm.ARC_SWOOSH],
}

# ============================================================================
# DISPATCH
# ============================================================================


def resolve_algorithm(name: Union[str, Algorithm]) -> Algorithm:
    """Map a name such as ``"starburst"`` to its ``Algorithm``."""
    if isinstance(name, Algorithm):
        return name
    try:
        return Algorithm(name)
    except ValueError:
        valid = ", ".join(a.value for a in Algorithm)
        raise UnknownAlgorithmError(f"Unknown algorithm '{name}'. Valid: {valid}") from None


def select_algorithm(request: GenerationRequest) -> Algorithm:
    """Pick an algorithm from industry, then aesthetic, then the full catalogue."""
    rng = create_seeded_random(request.effective_seed)
    if request.industry in INDUSTRY_ALGORITHMS:
        return rng.choice(INDUSTRY_ALGORITHMS[request.industry])
    if request.aesthetic in AESTHETIC_ALGORITHMS:
        return rng.choice(AESTHETIC_ALGORITHMS[request.aesthetic])
    return rng.choice(ALL_ALGORITHMS)


def _as_request(request) -> GenerationRequest:
    if isinstance(request, GenerationRequest):
        return request
    return GenerationRequest(**request)


def generate_logos(
    request,
    ledger: Optional[HashLedger] = None,
    cfg: Optional[EngineCfg] = None,
) -> List[GeneratedLogo]:
    """
    Generate ``request.variations`` logos with the requested (or selected) algorithm.

    ``request`` may be a ``GenerationRequest`` or a plain dict of its fields.
    When ``ledger`` is given every produced logo is recorded in it afterwards.
    """
    request = _as_request(request)
    algorithm = request.algorithm or select_algorithm(request)
    generator = GENERATORS.get(algorithm)
    if generator is None:
        raise UnknownAlgorithmError(f"No generator registered for '{algorithm}'")

    logos = generator(request, cfg)
    log.info(f"Generated {len(logos)} {algorithm.value} logo(s) for '{request.brand_name}'")

    if ledger is not None:
        written = sum(1 for logo in logos if ledger.record_logo(logo))
        log.debug(f"Recorded {written}/{len(logos)} hashes in ledger")
    return logos


def generate_all_algorithms(
    request,
    ledger: Optional[HashLedger] = None,
    cfg: Optional[EngineCfg] = None,
) -> List[GeneratedLogo]:
    """Every direct-variant algorithm in catalogue order, concatenated."""
    request = _as_request(request)
    logos: List[GeneratedLogo] = []
    for algorithm in ALL_ALGORITHMS:
        logos.extend(generate_logos(request.model_copy(update={"algorithm": algorithm}), ledger, cfg))
    return logos


def quick_generate(brand_name: str, primary_color: str, **options) -> List[GeneratedLogo]:
    """
    Shortcut for a one-off request.

    Accepts the optional request fields as keywords, e.g.
    ``quick_generate("Acme", "#3b82f6", algorithm="starburst", variations=2)``.
    ``ledger`` and ``cfg`` are passed through to ``generate_logos``.
    """
    ledger = options.pop("ledger", None)
    cfg = options.pop("cfg", None)
    if "algorithm" in options and options["algorithm"] is not None:
        options["algorithm"] = resolve_algorithm(options["algorithm"])
    if cfg is not None:
        options.setdefault("variations", cfg.default_variations)
    request = GenerationRequest(brand_name=brand_name, primary_color=primary_color, **options)
    return generate_logos(request, ledger, cfg)


BRAND_PACKAGE: Dict[str, List[Algorithm]] = {
    "primary": [Algorithm.ABSTRACT_MONOGRAM, Algorithm.LETTERFORM_CUTOUT],
    "secondary": [Algorithm.SPARKLE_ASTERISK, Algorithm.NEGATIVE_SPACE],
    "icons": [Algorithm.DEPTH_MARK, Algorithm.OVERLAPPING_SHAPES],
    "patterns": [Algorithm.PARALLEL_BARS, Algorithm.STACKED_LINES, Algorithm.ARC_SWOOSH],
}


def generate_brand_package(
    request,
    ledger: Optional[HashLedger] = None,
    cfg: Optional[EngineCfg] = None,
) -> Dict[str, List[GeneratedLogo]]:
    """Two variations of each algorithm, grouped into primary/secondary/icons/patterns."""
    request = _as_request(request)
    package: Dict[str, List[GeneratedLogo]] = {}
    for group, algorithms in BRAND_PACKAGE.items():
        package[group] = []
        for algorithm in algorithms:
            sub = request.model_copy(update={"algorithm": algorithm, "variations": 2})
            package[group].extend(generate_logos(sub, ledger, cfg))
    return package


def get_unique_logos(logos: List[GeneratedLogo]) -> List[GeneratedLogo]:
    """Drop logos whose hash was already seen, keeping the first occurrence."""
    seen = set()
    unique = []
    for logo in logos:
        if logo.hash in seen:
            continue
        seen.add(logo.hash)
        unique.append(logo)
    return unique


__all__ = [
    "ALGORITHM_INFO",
    "INDUSTRY_ALGORITHMS",
    "AESTHETIC_ALGORITHMS",
    "BRAND_PACKAGE",
    "resolve_algorithm",
    "select_algorithm",
    "generate_logos",
    "generate_all_algorithms",
    "quick_generate",
    "generate_brand_package",
    "get_unique_logos",
]
