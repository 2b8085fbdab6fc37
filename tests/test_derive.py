# tests/test_derive.py
import pytest

from logomark.derive import (
    SYMMETRY_TYPES,
    derive_params_from_hash,
    generate_base_params,
    golden_taper,
    hash_params_for_candidate,
)
from logomark.rng import create_seeded_random, cyrb53_hex


def test_base_params_ranges():
    """Base parameters land in their documented ranges for many seeds."""
    for i in range(50):
        base = generate_base_params(create_seeded_random(f"range-{i}"))
        assert 2 <= base.stroke_width < 6
        assert 0 <= base.base_angle < 360
        assert 0.3 <= base.curve_tension < 0.8
        assert 3 <= base.segment_count <= 10
        assert 0.1 <= base.padding_ratio < 0.25
        assert 0.7 <= base.base_opacity < 1.0
        assert 1 <= base.layer_count <= 5
        assert 0 <= base.noise_amount < 0.3


def test_base_params_deterministic():
    a = generate_base_params(create_seeded_random("Acme-sparkle-v0"))
    b = generate_base_params(create_seeded_random("Acme-sparkle-v0"))
    assert a == b


def test_candidate_hash_params():
    hp = hash_params_for_candidate("Acme", "starburst", 0, 3)
    assert hp.seed == "Acme-starburst-v0-c3"
    assert hp.hash_hex == cyrb53_hex("Acme-starburst-v0-c3")
    assert hash_params_for_candidate("Acme", "starburst", 0, 4).hash_hex != hp.hash_hex


def test_derived_params_ranges():
    for c in range(40):
        d = derive_params_from_hash(cyrb53_hex(f"derive-range-{c}"))
        assert 6 <= d.element_count <= 20
        assert 1 <= d.layer_count <= 5
        assert 0 <= d.angle_spread < 90
        assert 0.3 <= d.curve_tension < 0.9
        assert 0.2 <= d.taper_ratio < 0.8
        assert 1 <= d.stroke_width < 12
        assert d.symmetry_type in SYMMETRY_TYPES
        assert 0 <= d.style_variant <= 7
        assert 0 <= d.color_placement <= 7
        assert 2 <= d.arm_width < 15
        assert 20 <= d.arm_length < 50
        assert 100 <= d.letter_weight < 900
        assert 0.2 <= d.overlap_amount < 0.8
        assert 5 <= d.extrusion_depth < 25


def test_derived_params_deterministic():
    digest = cyrb53_hex("Acme-starburst-v0-c0")
    assert derive_params_from_hash(digest) == derive_params_from_hash(digest)


def test_category_bias():
    digest = cyrb53_hex("category-bias")
    neutral = derive_params_from_hash(digest)
    tech = derive_params_from_hash(digest, "technology")
    creative = derive_params_from_hash(digest, "creative")

    assert tech.organic_amount == pytest.approx(neutral.organic_amount * 0.5)
    assert tech.organic_amount <= 0.5
    assert creative.curve_amplitude == pytest.approx(min(50, neutral.curve_amplitude * 1.2))
    # unknown categories are neutral
    assert derive_params_from_hash(digest, "agriculture") == neutral


def test_golden_taper_band():
    assert golden_taper(0.618)
    assert not golden_taper(0.3)
    assert not golden_taper(0.75)
