"""
Gradient noise built on the seeded stream.

``noise2d`` is Perlin-style: a unit gradient per integer lattice point (its
angle drawn from a stream seeded with the lattice coordinates), dotted with the
offset to the sample point and blended with smoothstep weights. ``fbm`` sums
octaves at doubling frequency and halving amplitude. Both are pure functions of
their arguments.
"""

import math
from typing import Tuple

from .rng import SeededRandom, create_seeded_random, lerp

Point = Tuple[float, float]


def _dot_grid_gradient(ix: int, iy: int, x: float, y: float, seed: str) -> float:
    rng = create_seeded_random(f"{seed}-grad-{ix}-{iy}")
    angle = rng() * math.pi * 2
    return (x - ix) * math.cos(angle) + (y - iy) * math.sin(angle)


def noise2d(x: float, y: float, seed: str) -> float:
    x0 = math.floor(x)
    y0 = math.floor(y)
    fx = x - x0
    fy = y - y0

    # smoothstep weights
    sx = fx * fx * (3 - 2 * fx)
    sy = fy * fy * (3 - 2 * fy)

    n00 = _dot_grid_gradient(x0, y0, x, y, seed)
    n10 = _dot_grid_gradient(x0 + 1, y0, x, y, seed)
    n01 = _dot_grid_gradient(x0, y0 + 1, x, y, seed)
    n11 = _dot_grid_gradient(x0 + 1, y0 + 1, x, y, seed)

    return lerp(lerp(n00, n10, sx), lerp(n01, n11, sx), sy)


def fbm(x: float, y: float, seed: str, octaves: int = 4) -> float:
    value = 0.0
    amplitude = 0.5
    frequency = 1.0
    max_value = 0.0

    for i in range(max(1, octaves)):
        value += amplitude * noise2d(x * frequency, y * frequency, f"{seed}-oct{i}")
        max_value += amplitude
        amplitude *= 0.5
        frequency *= 2

    return value / max_value


def add_noise(value: float, amount: float, rng: SeededRandom, spread: float = 1.0) -> float:
    """Offset ``value`` by up to ``spread * amount`` in either direction.

    No draw is consumed when ``amount`` is not positive.
    """
    if amount <= 0:
        return value
    return value + (rng() - 0.5) * 2 * spread * amount


def jitter_point(point: Point, amount: float, rng: SeededRandom) -> Point:
    return (
        point[0] + (rng() - 0.5) * 2 * amount,
        point[1] + (rng() - 0.5) * 2 * amount,
    )


__all__ = ["noise2d", "fbm", "add_noise", "jitter_point"]
