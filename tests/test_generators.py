# tests/test_generators.py
import re

import pytest

import logomark.generators.base as generator_base
from logomark.generators import GENERATORS
from logomark.generators.base import logo_id_for
from logomark.params import ALL_ALGORITHMS, CANDIDATE_ALGORITHMS, Algorithm, GenerationRequest, QualityMetrics

LETTER_ALGORITHMS = [
    Algorithm.LETTERFORM_CUTOUT,
    Algorithm.ABSTRACT_MONOGRAM,
    Algorithm.MONOGRAM_BLEND,
    Algorithm.LETTER_SWOOSH,
]

_ID_RE = re.compile(r'\bid="([^"]+)"')
_REF_RE = re.compile(r"url\(#([^)]+)\)")


def _request(**overrides):
    fields = {"brand_name": "Acme", "primary_color": "#3b82f6", "variations": 2, "seed": "acme-seed"}
    fields.update(overrides)
    return GenerationRequest(**fields)


def _stub_quality(score):
    return QualityMetrics(
        score=score,
        path_smoothness=score,
        visual_balance=score,
        complexity=score,
        golden_ratio_adherence=score,
        uniqueness=score,
    )


def test_dispatch_table_covers_every_algorithm():
    assert set(GENERATORS) == set(Algorithm)
    assert len(ALL_ALGORITHMS) == 10
    assert len(CANDIDATE_ALGORITHMS) == 5


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_generation_is_deterministic(algorithm):
    """Two runs with the same request give byte-identical documents and hashes."""
    first = GENERATORS[algorithm](_request())
    second = GENERATORS[algorithm](_request())
    assert [l.svg for l in first] == [l.svg for l in second]
    assert [l.hash for l in first] == [l.hash for l in second]
    assert [l.id for l in first] == [l.id for l in second]
    assert [l.params for l in first] == [l.params for l in second]


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_five_variations_numbered_in_order(algorithm):
    logos = GENERATORS[algorithm](_request(variations=5))
    assert len(logos) == 5
    assert [l.variant for l in logos] == [1, 2, 3, 4, 5]
    assert all(l.algorithm == algorithm for l in logos)
    assert len({l.id for l in logos}) == 5


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_document_ids_scoped_and_resolved(algorithm):
    """Definition ids are unique, carry the logo id and every reference resolves."""
    for logo in GENERATORS[algorithm](_request()):
        ids = _ID_RE.findall(logo.svg)
        assert len(ids) == len(set(ids))
        assert all(i.startswith(logo.id + "-") for i in ids)
        assert set(_REF_RE.findall(logo.svg)) <= set(ids)
        assert 'viewBox="0 0 100 100"' in logo.svg


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_logo_metadata(algorithm):
    logo = GENERATORS[algorithm](_request(variations=1))[0]
    assert logo.view_box == "0 0 100 100"
    assert logo.meta.brand_name == "Acme"
    assert logo.meta.colors.primary == "#3b82f6"
    assert logo.meta.colors.accent.startswith("#")
    assert logo.meta.colors.palette
    assert logo.meta.geometry.path_count >= 1
    assert 0.0 <= logo.meta.geometry.complexity <= 1.0
    assert logo.quality is not None
    assert 0.0 <= logo.quality.score <= 100.0
    assert "base" in logo.params
    # at least two gradients in every document
    assert logo.svg.count("<linearGradient") + logo.svg.count("<radialGradient") >= 2


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_accent_color_changes_output(algorithm):
    plain = GENERATORS[algorithm](_request(variations=1))[0]
    accented = GENERATORS[algorithm](_request(variations=1, accent_color="#f97316"))[0]
    assert accented.meta.colors.accent == "#f97316"
    assert plain.svg != accented.svg


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_different_seeds_differ(algorithm):
    a = GENERATORS[algorithm](_request(variations=1, seed="one"))[0]
    b = GENERATORS[algorithm](_request(variations=1, seed="two"))[0]
    assert a.svg != b.svg


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("color", ["red", ""])
def test_malformed_color_still_renders(algorithm, color):
    logos = GENERATORS[algorithm](_request(primary_color=color, variations=1))
    assert len(logos) == 1
    assert logos[0].svg.startswith("<svg")


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_zero_variations_is_empty(algorithm):
    assert GENERATORS[algorithm](_request(variations=0)) == []


def test_scenario_radial_arms_repeatable(acme_request):
    first = GENERATORS[Algorithm.STARBURST](acme_request)
    second = GENERATORS[Algorithm.STARBURST](acme_request)
    assert len(first) == 1
    assert first[0].svg == second[0].svg
    assert first[0].hash == second[0].hash
    assert first[0].meta.seed.startswith("acme-seed-starburst-v0-c")


def test_logo_id_derived_from_variant_seed(acme_request):
    logo = GENERATORS[Algorithm.STARBURST](acme_request)[0]
    assert logo.id == logo_id_for(Algorithm.STARBURST, 1, "acme-seed-starburst-v0")


def test_seed_defaults_to_brand_name():
    explicit = GENERATORS[Algorithm.PARALLEL_BARS](_request(seed="Acme", variations=1))[0]
    implicit = GENERATORS[Algorithm.PARALLEL_BARS](_request(seed=None, variations=1))[0]
    assert explicit.svg == implicit.svg


@pytest.mark.parametrize("algorithm", LETTER_ALGORITHMS)
def test_empty_brand_falls_back_to_letter_a(algorithm):
    request = GenerationRequest(brand_name="", primary_color="#000000", variations=1)
    logo = GENERATORS[algorithm](request)[0]
    if algorithm == Algorithm.MONOGRAM_BLEND:
        assert logo.params["letters"] == ["A", "B"]
    else:
        assert logo.params["letter"] == "A"
    assert logo.svg.startswith("<svg")


@pytest.mark.parametrize("brand", ["123", "  ", "!!"])
def test_non_alphabetic_brand_falls_back(brand):
    request = GenerationRequest(brand_name=brand, primary_color="#222222", variations=1)
    logo = GENERATORS[Algorithm.LETTERFORM_CUTOUT](request)[0]
    assert logo.params["letter"] == "A"


def test_letter_follows_brand():
    logo = GENERATORS[Algorithm.LETTER_SWOOSH](_request(brand_name="zenith", variations=1))[0]
    assert logo.params["letter"] == "Z"
    blend = GENERATORS[Algorithm.MONOGRAM_BLEND](_request(brand_name="Kite", variations=1))[0]
    assert blend.params["letters"] == ["K", "I"]


@pytest.mark.parametrize("algorithm", CANDIDATE_ALGORITHMS)
def test_candidate_cap_when_threshold_never_met(monkeypatch, algorithm):
    """At most five candidates per variant, and a result is still returned."""
    calls = []

    def low_score(svg, derived=None):
        calls.append(svg)
        return _stub_quality(10.0)

    monkeypatch.setattr(generator_base, "calculate_quality_score", low_score)
    logos = GENERATORS[algorithm](_request(variations=2))
    assert len(logos) == 2
    assert len(calls) == 10
    assert all(l.quality.score == 10.0 for l in logos)


@pytest.mark.parametrize("algorithm", CANDIDATE_ALGORITHMS)
def test_candidate_early_stop(monkeypatch, algorithm):
    calls = []

    def high_score(svg, derived=None):
        calls.append(svg)
        return _stub_quality(95.0)

    monkeypatch.setattr(generator_base, "calculate_quality_score", high_score)
    logos = GENERATORS[algorithm](_request(variations=3))
    assert len(calls) == 3
    assert all(l.meta.seed.endswith("-c0") for l in logos)


def test_best_candidate_kept(monkeypatch):
    """Without an early stop the highest scoring candidate wins."""
    scores = iter([40.0, 70.0, 55.0, 10.0, 65.0])

    def scripted(svg, derived=None):
        return _stub_quality(next(scores))

    monkeypatch.setattr(generator_base, "calculate_quality_score", scripted)
    logo = GENERATORS[Algorithm.ABSTRACT_MARK](_request(variations=1))[0]
    assert logo.quality.score == 70.0
    assert logo.meta.seed == "acme-seed-abstract-mark-v0-c1"


def test_category_changes_candidate_output():
    request = _request(variations=1, min_quality_score=0, category="general")
    neutral = GENERATORS[Algorithm.ABSTRACT_MARK](request)[0]
    technology = GENERATORS[Algorithm.ABSTRACT_MARK](request.model_copy(update={"category": "technology"}))[0]
    assert neutral.meta.seed == technology.meta.seed
    assert technology.params["organic_amount"] < neutral.params["organic_amount"]


@pytest.mark.parametrize(
    "algorithm, category",
    [
        (Algorithm.STARBURST, "technology"),
        (Algorithm.PERFECT_TRIANGLE, "technology"),
        (Algorithm.ABSTRACT_MARK, "technology"),
        (Algorithm.MONOGRAM_BLEND, "creative"),
        (Algorithm.LETTER_SWOOSH, "creative"),
    ],
)
def test_candidate_algorithms_default_category(algorithm, category):
    request = _request(variations=1)
    implicit = GENERATORS[algorithm](request)[0]
    explicit = GENERATORS[algorithm](request.model_copy(update={"category": category}))[0]
    assert implicit.svg == explicit.svg


def test_abstract_mark_defaults_to_technology_bias():
    request = _request(variations=1, min_quality_score=0)
    implicit = GENERATORS[Algorithm.ABSTRACT_MARK](request)[0]
    neutral = GENERATORS[Algorithm.ABSTRACT_MARK](request.model_copy(update={"category": "general"}))[0]
    assert implicit.params["organic_amount"] < neutral.params["organic_amount"]
