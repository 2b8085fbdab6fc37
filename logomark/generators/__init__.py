"""
Logo generators, one module per algorithm.

Every module exposes ``generate(request, cfg=None) -> List[GeneratedLogo]``.
``GENERATORS`` maps each ``Algorithm`` member to its entry point.
"""

from typing import Callable, Dict, List, Optional

from ..config import EngineCfg
from ..params import Algorithm, GeneratedLogo, GenerationRequest
from . import (
    abstract_mark,
    abstract_monogram,
    arc_swoosh,
    depth_mark,
    interlocking_forms,
    letter_swoosh,
    letterform_cutout,
    monogram_blend,
    negative_space,
    overlapping_shapes,
    parallel_bars,
    perfect_triangle,
    sparkle_asterisk,
    stacked_lines,
    starburst,
)

Generator = Callable[[GenerationRequest, Optional[EngineCfg]], List[GeneratedLogo]]

GENERATORS: Dict[Algorithm, Generator] = {
    Algorithm.PARALLEL_BARS: parallel_bars.generate,
    Algorithm.STACKED_LINES: stacked_lines.generate,
    Algorithm.LETTERFORM_CUTOUT: letterform_cutout.generate,
    Algorithm.SPARKLE_ASTERISK: sparkle_asterisk.generate,
    Algorithm.OVERLAPPING_SHAPES: overlapping_shapes.generate,
    Algorithm.ARC_SWOOSH: arc_swoosh.generate,
    Algorithm.DEPTH_MARK: depth_mark.generate,
    Algorithm.NEGATIVE_SPACE: negative_space.generate,
    Algorithm.INTERLOCKING_FORMS: interlocking_forms.generate,
    Algorithm.ABSTRACT_MONOGRAM: abstract_monogram.generate,
    Algorithm.STARBURST: starburst.generate,
    Algorithm.MONOGRAM_BLEND: monogram_blend.generate,
    Algorithm.PERFECT_TRIANGLE: perfect_triangle.generate,
    Algorithm.ABSTRACT_MARK: abstract_mark.generate,
    Algorithm.LETTER_SWOOSH: letter_swoosh.generate,
}

_missing = set(Algorithm) - set(GENERATORS)
assert not _missing, f"no generator registered for: {sorted(a.value for a in _missing)}"

__all__ = ["GENERATORS", "Generator"]
