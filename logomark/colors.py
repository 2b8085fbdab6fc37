#!/usr/bin/env python3
"""
Color arithmetic for generated marks.

Hex/HSL conversion plus the small set of operations the generators need to
build tonal gradients from one or two brand colors. Inputs are not validated:
a channel that does not parse as hex reads as 0, so a malformed color still
yields a document.
"""

from functools import lru_cache
from typing import List, Optional, Tuple

HSL_CACHE_SIZE = 256


def _channel(text: str) -> int:
    try:
        return max(0, int(text, 16))
    except ValueError:
        return 0


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple; unparseable channels become 0."""
    hex_color = hex_color.strip().lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join(c * 2 for c in hex_color)
    hex_color = hex_color[:6].ljust(6, "0")
    return tuple(_channel(hex_color[i:i + 2]) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB values to hex color, clamping each channel."""
    def channel(v: float) -> int:
        return max(0, min(255, int(round(v))))

    return f"#{channel(r):02x}{channel(g):02x}{channel(b):02x}"


@lru_cache(maxsize=HSL_CACHE_SIZE)
def hex_to_hsl(hex_color: str) -> Tuple[float, float, float]:
    """Convert hex color to HSL tuple (0-1 range)."""
    r, g, b = hex_to_rgb(hex_color)
    r, g, b = r / 255.0, g / 255.0, b / 255.0

    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val

    l = (max_val + min_val) / 2.0

    if delta == 0:
        h = s = 0.0
    else:
        s = delta / (2.0 - max_val - min_val) if l > 0.5 else delta / (max_val + min_val)
        if max_val == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_val == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6.0

    return h, s, l


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL tuple (0-1 range) to hex color."""
    def hue_to_rgb(m1: float, m2: float, h: float) -> float:
        h = h % 1.0
        if h < 1 / 6:
            return m1 + (m2 - m1) * 6 * h
        elif h < 1 / 2:
            return m2
        elif h < 2 / 3:
            return m1 + (m2 - m1) * 6 * (2 / 3 - h)
        else:
            return m1

    s = max(0.0, min(1.0, s))
    l = max(0.0, min(1.0, l))
    if s == 0:
        r = g = b = l
    else:
        m2 = l * (1 + s) if l <= 0.5 else l + s - l * s
        m1 = 2 * l - m2
        r = hue_to_rgb(m1, m2, h + 1 / 3)
        g = hue_to_rgb(m1, m2, h)
        b = hue_to_rgb(m1, m2, h - 1 / 3)

    return rgb_to_hex(r * 255, g * 255, b * 255)


# ============================================================================
# OPERATIONS
# ============================================================================


def lighten(hex_color: str, percent: float) -> str:
    """Raise HSL lightness by ``percent`` points."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, l + percent / 100.0)


def darken(hex_color: str, percent: float) -> str:
    """Lower HSL lightness by ``percent`` points."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, l - percent / 100.0)


def mix_colors(color_a: str, color_b: str, weight: float = 0.5) -> str:
    """Linear RGB blend; ``weight`` 0 gives ``color_a``, 1 gives ``color_b``."""
    weight = max(0.0, min(1.0, weight))
    a = hex_to_rgb(color_a)
    b = hex_to_rgb(color_b)
    return rgb_to_hex(*(a[i] + (b[i] - a[i]) * weight for i in range(3)))


def rotate_hue(hex_color: str, degrees: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex((h + degrees / 360.0) % 1.0, s, l)


def with_alpha(hex_color: str, alpha: float) -> str:
    """CSS ``rgba()`` string for a hex color."""
    r, g, b = hex_to_rgb(hex_color)
    alpha = max(0.0, min(1.0, alpha))
    return f"rgba({r}, {g}, {b}, {alpha:.2f})"


def resolve_accent(primary: str, accent: Optional[str], amount: float = 15) -> str:
    """Accent color, or the primary darkened by ``amount`` when none is given."""
    return accent if accent else darken(primary, amount)


def build_palette(primary: str, accent: Optional[str] = None) -> List[str]:
    """Five-tone palette anchored on primary and the resolved accent."""
    resolved = resolve_accent(primary, accent)
    return [
        lighten(primary, 20),
        primary,
        mix_colors(primary, resolved, 0.5),
        resolved,
        darken(resolved, 15),
    ]


__all__ = [
    "HSL_CACHE_SIZE",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "lighten",
    "darken",
    "mix_colors",
    "rotate_hue",
    "with_alpha",
    "resolve_accent",
    "build_palette",
]
