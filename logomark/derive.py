"""
Parameter derivation.

``generate_base_params`` draws the shared BaseParameters from a stream in a
fixed order. ``derive_params_from_hash`` expands a candidate digest into the
bounded HashDerivedParams used by the candidate-selection generators. Neither
reads anything except its arguments.
"""

from typing import Optional

from .params import BaseParameters, HashDerivedParams, HashParams
from .rng import SeededRandom, clamp, create_seeded_random, cyrb53_hex

SYMMETRY_TYPES = [
    "none",
    "horizontal",
    "vertical",
    "radial",
    "bilateral",
    "rotational-4",
    "rotational-6",
    "rotational-8",
]


def generate_base_params(rng: SeededRandom) -> BaseParameters:
    return BaseParameters(
        stroke_width=rng.uniform(2, 6),
        stroke_width_variance=rng() * 0.3,
        base_angle=rng() * 360,
        angle_variance=rng() * 30,
        rotation_offset=rng() * 360,
        curve_tension=rng.uniform(0.3, 0.8),
        curve_amplitude=rng.uniform(5, 30),
        curve_frequency=rng.uniform(1, 5),
        segment_count=rng.randint(3, 8),
        segment_spacing=rng.uniform(5, 25),
        segment_length_ratio=rng.uniform(0.5, 1.0),
        horizontal_spacing=rng.uniform(5, 25),
        vertical_spacing=rng.uniform(5, 25),
        padding_ratio=rng.uniform(0.1, 0.25),
        scale_x=rng.uniform(0.8, 1.2),
        scale_y=rng.uniform(0.8, 1.2),
        size_variance=rng() * 0.3,
        corner_radius=rng() * 20,
        corner_radius_variance=rng() * 0.5,
        base_opacity=rng.uniform(0.7, 1.0),
        opacity_falloff=rng() * 0.5,
        layer_count=rng.randint(1, 5),
        noise_amount=rng() * 0.3,
        noise_frequency=rng.uniform(0.5, 2.5),
        jitter_amount=rng() * 5,
    )


def hash_params_for_candidate(seed: str, algorithm: str, variant: int, candidate: int) -> HashParams:
    """Digest for candidate ``candidate`` of variant ``variant``."""
    candidate_seed = f"{seed}-{algorithm}-v{variant}-c{candidate}"
    return HashParams(hash_hex=cyrb53_hex(candidate_seed), seed=candidate_seed)


def derive_params_from_hash(hash_hex: str, category: Optional[str] = None) -> HashDerivedParams:
    """
    Expand a digest into HashDerivedParams.

    The digest seeds a stream and each field takes one draw, in declaration
    order. ``technology`` narrows organic variation; ``creative`` widens curve
    amplitude.
    """
    rng = create_seeded_random(f"derive-{hash_hex}")

    element_count = rng.randint(6, 15)
    layer_count = rng.randint(1, 5)
    rotation_offset = rng() * 360
    angle_spread = rng() * 90
    curve_tension = rng.uniform(0.3, 0.9)
    curve_amplitude = rng() * 50
    taper_ratio = rng.uniform(0.2, 0.8)
    stroke_width = rng.uniform(1, 12)
    spacing_factor = rng.uniform(0.5, 2.0)
    scale_factor = rng.uniform(0.7, 1.3)
    symmetry_type = rng.choice(SYMMETRY_TYPES)
    style_variant = rng.randint(0, 8)
    color_placement = rng.randint(0, 8)
    gradient_angle = rng() * 360
    organic_amount = rng()
    jitter_amount = rng() * 10
    arm_width = rng.uniform(2, 15)
    arm_length = rng.uniform(20, 50)
    center_radius = rng() * 15
    spiral_amount = rng() * 0.5
    bulge_amount = rng() * 0.5
    corner_radius = rng() * 30
    depth_offset = rng.uniform(2, 20)
    perspective_strength = rng()
    letter_weight = rng.uniform(100, 900)
    cut_depth = rng()
    overlap_amount = rng.uniform(0.2, 0.8)
    ring_thickness = rng.uniform(2, 12)
    flow_intensity = rng()
    extrusion_depth = rng.uniform(5, 25)

    if category == "technology":
        organic_amount *= 0.5
    elif category == "creative":
        curve_amplitude = clamp(curve_amplitude * 1.2, 0, 50)

    return HashDerivedParams(
        element_count=element_count,
        layer_count=layer_count,
        rotation_offset=rotation_offset,
        angle_spread=angle_spread,
        curve_tension=curve_tension,
        curve_amplitude=curve_amplitude,
        taper_ratio=taper_ratio,
        stroke_width=stroke_width,
        spacing_factor=spacing_factor,
        scale_factor=scale_factor,
        symmetry_type=symmetry_type,
        style_variant=style_variant,
        color_placement=color_placement,
        gradient_angle=gradient_angle,
        organic_amount=organic_amount,
        jitter_amount=jitter_amount,
        arm_width=arm_width,
        arm_length=arm_length,
        center_radius=center_radius,
        spiral_amount=spiral_amount,
        bulge_amount=bulge_amount,
        corner_radius=corner_radius,
        depth_offset=depth_offset,
        perspective_strength=perspective_strength,
        letter_weight=letter_weight,
        cut_depth=cut_depth,
        overlap_amount=overlap_amount,
        ring_thickness=ring_thickness,
        flow_intensity=flow_intensity,
        extrusion_depth=extrusion_depth,
    )


def golden_taper(taper_ratio: float) -> bool:
    """Taper within the band around 1/phi that reads as golden-ratio proportioned."""
    return 0.55 < taper_ratio < 0.68


__all__ = [
    "SYMMETRY_TYPES",
    "generate_base_params",
    "hash_params_for_candidate",
    "derive_params_from_hash",
    "golden_taper",
]
