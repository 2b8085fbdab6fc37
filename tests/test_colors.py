# tests/test_colors.py
import pytest

from logomark.colors import (
    HSL_CACHE_SIZE,
    build_palette,
    darken,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    lighten,
    mix_colors,
    resolve_accent,
    rotate_hue,
    with_alpha,
)


def test_hex_to_rgb_long_and_short():
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)
    assert hex_to_rgb("#fff") == (255, 255, 255)


def test_hsl_conversion_primary_red():
    assert hex_to_hsl("#ff0000") == pytest.approx((0.0, 1.0, 0.5))
    assert hsl_to_hex(0.0, 1.0, 0.5) == "#ff0000"


def test_lighten_darken_clamp():
    assert lighten("#000000", 100) == "#ffffff"
    assert darken("#ffffff", 100) == "#000000"
    assert darken("#000000", 10) == "#000000"


def test_mix_and_rotate():
    assert mix_colors("#000000", "#ffffff", 0.5) == "#808080"
    assert mix_colors("#123456", "#abcdef", 0) == "#123456"
    assert rotate_hue("#ff0000", 120) == "#00ff00"


def test_with_alpha():
    assert with_alpha("#ff0000", 0.5) == "rgba(255, 0, 0, 0.50)"
    assert with_alpha("#ff0000", 3) == "rgba(255, 0, 0, 1.00)"


def test_accent_resolution_and_palette():
    assert resolve_accent("#3b82f6", "#f97316") == "#f97316"
    assert resolve_accent("#3b82f6", None) == darken("#3b82f6", 15)
    palette = build_palette("#3b82f6")
    assert len(palette) == 5
    assert palette[1] == "#3b82f6"
    assert palette[3] == resolve_accent("#3b82f6", None)


def test_malformed_hex_channels_read_as_zero():
    assert hex_to_rgb("") == (0, 0, 0)
    assert hex_to_rgb("#zz80ff") == (0, 128, 255)
    assert hex_to_rgb("#12") == (18, 0, 0)
    assert lighten("not-a-color", 0).startswith("#")


def test_hsl_cache_is_bounded():
    hex_to_hsl.cache_clear()
    for i in range(HSL_CACHE_SIZE + 50):
        hex_to_hsl(f"#{i:06x}")
    info = hex_to_hsl.cache_info()
    assert info.maxsize == HSL_CACHE_SIZE
    assert info.currsize == HSL_CACHE_SIZE
