"""
Letter skeletons.

Each capital is a list of stroke centerlines in glyph units: x and y are
multiples of the half-height ``s`` measured from the glyph centre, with y
pointing down. ``letter_skeleton`` scales them into canvas coordinates and
``glyph_outline`` expands every stroke into a filled ribbon.

Anything that is not A-Z falls back to ``A``.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .geometry import Point, tapered_stroke_path

FALLBACK_LETTER = "A"

_Stroke = Sequence[Tuple[float, float]]

SKELETONS: Dict[str, List[_Stroke]] = {
    "A": [
        [(-0.4, 1), (0, -1), (0.4, 1)],
        [(-0.2, 0.3), (0.2, 0.3)],
    ],
    "B": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.1, -1), (0.3, -0.5), (0.1, 0), (-0.3, 0)],
        [(-0.3, 0), (0.15, 0), (0.35, 0.5), (0.1, 1), (-0.3, 1)],
    ],
    "C": [
        [(0.3, -0.7), (0, -1), (-0.4, -0.5), (-0.4, 0.5), (0, 1), (0.3, 0.7)],
    ],
    "D": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.1, -1), (0.4, -0.5), (0.4, 0.5), (0.1, 1), (-0.3, 1)],
    ],
    "E": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.3, -1)],
        [(-0.3, 0), (0.2, 0)],
        [(-0.3, 1), (0.3, 1)],
    ],
    "F": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.3, -1)],
        [(-0.3, 0), (0.2, 0)],
    ],
    "G": [
        [(0.3, -0.7), (0, -1), (-0.4, -0.5), (-0.4, 0.5), (0, 1), (0.3, 0.7), (0.3, 0), (0, 0)],
    ],
    "H": [
        [(-0.35, -1), (-0.35, 1)],
        [(0.35, -1), (0.35, 1)],
        [(-0.35, 0), (0.35, 0)],
    ],
    "I": [
        [(0, -1), (0, 1)],
        [(-0.2, -1), (0.2, -1)],
        [(-0.2, 1), (0.2, 1)],
    ],
    "J": [
        [(0.2, -1), (0.2, 0.5), (0, 1), (-0.3, 0.7)],
    ],
    "K": [
        [(-0.3, -1), (-0.3, 1)],
        [(0.35, -1), (-0.3, 0)],
        [(-0.3, 0), (0.35, 1)],
    ],
    "L": [
        [(-0.3, -1), (-0.3, 1), (0.3, 1)],
    ],
    "M": [
        [(-0.4, 1), (-0.4, -1), (0, 0.3), (0.4, -1), (0.4, 1)],
    ],
    "N": [
        [(-0.35, 1), (-0.35, -1), (0.35, 1), (0.35, -1)],
    ],
    "O": [
        [(0, -1), (0.4, -0.5), (0.4, 0.5), (0, 1), (-0.4, 0.5), (-0.4, -0.5), (0, -1)],
    ],
    "P": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.2, -1), (0.35, -0.5), (0.2, 0), (-0.3, 0)],
    ],
    "Q": [
        [(0, -1), (0.4, -0.5), (0.4, 0.5), (0, 1), (-0.4, 0.5), (-0.4, -0.5), (0, -1)],
        [(0.1, 0.3), (0.4, 1.1)],
    ],
    "R": [
        [(-0.3, -1), (-0.3, 1)],
        [(-0.3, -1), (0.2, -1), (0.35, -0.5), (0.2, 0), (-0.3, 0)],
        [(0, 0), (0.35, 1)],
    ],
    "S": [
        [(0.3, -0.7), (0, -1), (-0.3, -0.6), (-0.3, -0.2), (0.3, 0.2), (0.3, 0.6), (0, 1), (-0.3, 0.7)],
    ],
    "T": [
        [(0, -1), (0, 1)],
        [(-0.4, -1), (0.4, -1)],
    ],
    "U": [
        [(-0.35, -1), (-0.35, 0.5), (0, 1), (0.35, 0.5), (0.35, -1)],
    ],
    "V": [
        [(-0.4, -1), (0, 1), (0.4, -1)],
    ],
    "W": [
        [(-0.45, -1), (-0.25, 1), (0, -0.2), (0.25, 1), (0.45, -1)],
    ],
    "X": [
        [(-0.35, -1), (0.35, 1)],
        [(0.35, -1), (-0.35, 1)],
    ],
    "Y": [
        [(-0.35, -1), (0, 0)],
        [(0.35, -1), (0, 0)],
        [(0, 0), (0, 1)],
    ],
    "Z": [
        [(-0.35, -1), (0.35, -1), (-0.35, 1), (0.35, 1)],
    ],
}

# Letters whose long strokes read as curves rather than corners
CURVED_LETTERS = frozenset("BCDGJOPQRSU")


def normalize_letter(letter: str) -> str:
    upper = (letter or "").upper()[:1]
    return upper if upper in SKELETONS else FALLBACK_LETTER


def brand_letters(brand_name: str) -> List[str]:
    """Alphabetic characters of the brand, upper-cased."""
    return [c for c in (brand_name or "").upper() if "A" <= c <= "Z"]


def first_letter(brand_name: str) -> str:
    letters = brand_letters(brand_name)
    return letters[0] if letters else FALLBACK_LETTER


def letter_pair(brand_name: str) -> Tuple[str, str]:
    """First two letters of the brand; a single letter is doubled, none gives ``A``/``B``."""
    letters = brand_letters(brand_name)
    first = letters[0] if letters else FALLBACK_LETTER
    if len(letters) > 1:
        second = letters[1]
    elif letters:
        second = letters[0]
    else:
        second = "B"
    return first, second


def letter_skeleton(
    letter: str, size: float = 100.0, center: Optional[Point] = None, scale: float = 0.35
) -> List[List[Point]]:
    """Stroke centerlines for ``letter`` with half-height ``size * scale``."""
    s = size * scale
    cx, cy = center if center is not None else (size / 2, size / 2)
    return [[(cx + x * s, cy + y * s) for x, y in stroke] for stroke in SKELETONS[normalize_letter(letter)]]


def glyph_outline(
    letter: str,
    center: Point,
    height: float,
    weight: float,
    cap: str = "square",
    tension: float = 0.5,
) -> List[str]:
    """
    Filled outline of ``letter`` as one closed path per stroke.

    ``height`` is the full glyph height, ``weight`` the stroke width.
    """
    half = max(0.5, weight / 2)
    curved = normalize_letter(letter) in CURVED_LETTERS
    paths = []
    for stroke in letter_skeleton(letter, size=height, center=center, scale=0.5):
        smooth = curved and len(stroke) > 2
        paths.append(tapered_stroke_path(stroke, [half] * len(stroke), tension=tension, cap=cap, smooth=smooth))
    return [p for p in paths if p]


__all__ = [
    "FALLBACK_LETTER",
    "SKELETONS",
    "CURVED_LETTERS",
    "normalize_letter",
    "brand_letters",
    "first_letter",
    "letter_pair",
    "letter_skeleton",
    "glyph_outline",
]
