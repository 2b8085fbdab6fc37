#!/usr/bin/env python3
"""
Seeded Random Streams and Content Hashing

Turns an arbitrary string into a deterministic float stream (xoshiro128**
seeded through four independent 32-bit rolling hashes) and provides the
53-bit cyrb53 hash used for content identity. Nothing here reads the wall
clock or any global random state: the same string always yields the same
sequence.
"""

import math
from typing import Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
TWO_32 = 4294967296.0

PHI = 1.618033988749895

# ============================================================================
# 32-BIT HELPERS
# ============================================================================


def imul(a: int, b: int) -> int:
    """32-bit wrapping multiply (unsigned result)."""
    return ((a & MASK32) * (b & MASK32)) & MASK32


def rotl(x: int, k: int) -> int:
    x &= MASK32
    return ((x << k) | (x >> (32 - k))) & MASK32


def _code_units(text: str) -> Iterator[int]:
    """Yield UTF-16 code units so hashes match across platforms."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_string_to_4_seeds(text: str) -> Tuple[int, int, int, int]:
    h1 = 0x811C9DC5
    h2 = 0x01000193
    h3 = 0xDEADBEEF
    h4 = 0xCAFEBABE

    for c in _code_units(text):
        h1 = imul(h1 ^ c, 0x01000193)
        h2 = imul(h2 ^ c, 0x5BD1E995)
        h3 = imul(h3 ^ c, 0x1B873593)
        h4 = imul(h4 ^ c, 0xCC9E2D51)

    h1 ^= h1 >> 16
    h1 = imul(h1, 0x85EBCA6B)
    h2 ^= h2 >> 13
    h2 = imul(h2, 0xC2B2AE35)
    h3 ^= h3 >> 16
    h4 ^= h4 >> 13

    return h1, h2, h3, h4


# ============================================================================
# STREAM
# ============================================================================


class SeededRandom:
    """
    xoshiro128** stream seeded from a string.

    Calling the instance returns the next float in [0, 1). The helper methods
    each consume exactly one draw so parameter derivations stay aligned with
    the raw ``rng()`` call order.
    """

    __slots__ = ("seed", "_s0", "_s1", "_s2", "_s3")

    def __init__(self, seed: str):
        self.seed = seed
        self._s0, self._s1, self._s2, self._s3 = hash_string_to_4_seeds(seed)

    def __call__(self) -> float:
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3
        result = imul(rotl(imul(s1, 5), 7), 9)
        t = (s1 << 9) & MASK32

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl(s3, 11)

        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result / TWO_32

    def uniform(self, low: float, high: float) -> float:
        return low + self() * (high - low)

    def randint(self, low: int, span: int) -> int:
        """``low + floor(rng() * span)``: an integer in [low, low + span)."""
        return low + int(math.floor(self() * span))

    def choice(self, items: Sequence[T]) -> T:
        return items[int(math.floor(self() * len(items)))]

    def chance(self, threshold: float) -> bool:
        """True when the draw exceeds ``threshold``."""
        return self() > threshold

    def take(self, n: int) -> List[float]:
        return [self() for _ in range(n)]


def create_seeded_random(seed: str) -> SeededRandom:
    return SeededRandom(seed)


# ============================================================================
# CONTENT HASH
# ============================================================================

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def cyrb53(text: str, seed: int = 0) -> int:
    """53-bit hash built from two 32-bit mixing lanes."""
    h1 = (0xDEADBEEF ^ seed) & MASK32
    h2 = (0x41C6CE57 ^ seed) & MASK32

    for ch in _code_units(text):
        h1 = imul(h1 ^ ch, 2654435761)
        h2 = imul(h2 ^ ch, 1597334677)

    h1 = imul(h1 ^ (h1 >> 16), 2246822507)
    h1 ^= imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = imul(h2 ^ (h2 >> 16), 2246822507)
    h2 ^= imul(h1 ^ (h1 >> 13), 3266489909)

    return 4294967296 * (2097151 & h2) + (h1 & MASK32)


def cyrb53_base36(text: str, seed: int = 0) -> str:
    return to_base36(cyrb53(text, seed))


def cyrb53_hex(text: str, seed: int = 0) -> str:
    return format(cyrb53(text, seed), "014x")


# ============================================================================
# NUMERIC HELPERS
# ============================================================================


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    if in_max == in_min:
        return out_min
    return ((value - in_min) * (out_max - out_min)) / (in_max - in_min) + out_min


__all__ = [
    "PHI",
    "SeededRandom",
    "create_seeded_random",
    "hash_string_to_4_seeds",
    "imul",
    "rotl",
    "cyrb53",
    "cyrb53_base36",
    "cyrb53_hex",
    "to_base36",
    "lerp",
    "clamp",
    "map_range",
]
