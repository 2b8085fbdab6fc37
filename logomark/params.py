#!/usr/bin/env python3
"""
Data model for the logo engine.

Single source of truth for the algorithm names, request/response models and
every parameter set. Algorithm parameter sets embed ``BaseParameters`` by
value under ``base`` instead of inheriting from it, so the shared fields are
always present and serialize as one nested object.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, validator

from .config import DEFAULT_MIN_QUALITY, DEFAULT_VARIATIONS


# ============================================================================
# ALGORITHMS
# ============================================================================


class Algorithm(str, Enum):
    PARALLEL_BARS = "parallel-bars"
    STACKED_LINES = "stacked-lines"
    LETTERFORM_CUTOUT = "letterform-cutout"
    SPARKLE_ASTERISK = "sparkle-asterisk"
    OVERLAPPING_SHAPES = "overlapping-shapes"
    ARC_SWOOSH = "arc-swoosh"
    DEPTH_MARK = "depth-mark"
    NEGATIVE_SPACE = "negative-space"
    INTERLOCKING_FORMS = "interlocking-forms"
    ABSTRACT_MONOGRAM = "abstract-monogram"
    STARBURST = "starburst"
    MONOGRAM_BLEND = "monogram-blend"
    PERFECT_TRIANGLE = "perfect-triangle"
    ABSTRACT_MARK = "abstract-mark"
    LETTER_SWOOSH = "letter-swoosh"


# The ten direct-variant algorithms, in catalogue order
ALL_ALGORITHMS: List[Algorithm] = [
    Algorithm.PARALLEL_BARS,
    Algorithm.STACKED_LINES,
    Algorithm.LETTERFORM_CUTOUT,
    Algorithm.SPARKLE_ASTERISK,
    Algorithm.OVERLAPPING_SHAPES,
    Algorithm.ARC_SWOOSH,
    Algorithm.DEPTH_MARK,
    Algorithm.NEGATIVE_SPACE,
    Algorithm.INTERLOCKING_FORMS,
    Algorithm.ABSTRACT_MONOGRAM,
]

CANDIDATE_ALGORITHMS: List[Algorithm] = [
    Algorithm.STARBURST,
    Algorithm.MONOGRAM_BLEND,
    Algorithm.PERFECT_TRIANGLE,
    Algorithm.ABSTRACT_MARK,
    Algorithm.LETTER_SWOOSH,
]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ============================================================================
# REQUEST
# ============================================================================


class GenerationRequest(_Frozen):
    """Input for every generator."""

    brand_name: str = Field(..., description="Brand name; may be empty")
    primary_color: str = Field(..., description="Hex color, not validated")
    accent_color: Optional[str] = Field(None, description="Hex color; derived from primary when absent")
    variations: int = Field(default=DEFAULT_VARIATIONS, description="Number of variants to emit")
    seed: Optional[str] = Field(None, description="Seed string; defaults to brand_name")
    category: Optional[str] = Field(None, description="Biases hash-derived parameters")
    min_quality_score: float = Field(default=DEFAULT_MIN_QUALITY, description="Candidate early-stop threshold")
    algorithm: Optional[Algorithm] = Field(None, description="Explicit algorithm; selected when absent")
    industry: Optional[str] = Field(None, description="Used by algorithm auto-selection")
    aesthetic: Optional[str] = Field(None, description="Used by algorithm auto-selection")

    @property
    def effective_seed(self) -> str:
        return self.seed if self.seed is not None else self.brand_name


# ============================================================================
# PARAMETER SETS
# ============================================================================


class BaseParameters(_Frozen):
    """Shared substrate drawn once per seed, in field order."""

    stroke_width: float = Field(..., description="2-6")
    stroke_width_variance: float
    base_angle: float = Field(..., description="0-360")
    angle_variance: float
    rotation_offset: float
    curve_tension: float = Field(..., description="0.3-0.8")
    curve_amplitude: float
    curve_frequency: float
    segment_count: int = Field(..., description="3-10")
    segment_spacing: float
    segment_length_ratio: float
    horizontal_spacing: float
    vertical_spacing: float
    padding_ratio: float = Field(..., description="0.1-0.25")
    scale_x: float
    scale_y: float
    size_variance: float
    corner_radius: float
    corner_radius_variance: float
    base_opacity: float = Field(..., description="0.7-1.0")
    opacity_falloff: float
    layer_count: int = Field(..., description="1-5")
    noise_amount: float = Field(..., description="0-0.3")
    noise_frequency: float
    jitter_amount: float


class HashDerivedParams(_Frozen):
    """Bounded fields derived from a candidate's hash digest."""

    element_count: int
    layer_count: int
    rotation_offset: float
    angle_spread: float
    curve_tension: float
    curve_amplitude: float
    taper_ratio: float
    stroke_width: float
    spacing_factor: float
    scale_factor: float
    symmetry_type: str
    style_variant: int
    color_placement: int
    gradient_angle: float
    organic_amount: float
    jitter_amount: float
    arm_width: float
    arm_length: float
    center_radius: float
    spiral_amount: float
    bulge_amount: float
    corner_radius: float
    depth_offset: float
    perspective_strength: float
    letter_weight: float
    cut_depth: float
    overlap_amount: float
    ring_thickness: float
    flow_intensity: float
    extrusion_depth: float


class HashParams(_Frozen):
    hash_hex: str
    seed: str


class AlgorithmParams(_Frozen):
    base: BaseParameters


class ParallelBarsParams(AlgorithmParams):
    bar_count: int
    bar_width_ratio: float
    bar_skew: float
    bar_gap: float
    bar_roundness: float
    gradient_angle: float
    gradient_spread: float
    stagger_offset: float
    taper_amount: float


class StackedLinesParams(AlgorithmParams):
    line_count: int
    line_thickness: float
    line_wave_amplitude: float
    line_wave_frequency: float
    line_spacing: float
    motion_blur: float
    velocity_variance: float
    parallel_offset: float
    taper_amount: float


class LetterformCutoutParams(AlgorithmParams):
    frame_shape: str
    frame_thickness: float
    letter_scale: float
    letter_weight: float
    cutout_depth: float
    shadow_offset: float
    inner_padding: float
    frame_rotation: float
    letter: str


class SparkleAsteriskParams(AlgorithmParams):
    arm_count: int
    arm_length: float
    arm_width: float
    arm_curvature: float
    arm_taper: float
    center_radius: float
    rotational_symmetry: bool
    spiral_amount: float
    arm_bulge: float


class OverlappingShapesParams(AlgorithmParams):
    shape_count: int
    shape_type: str
    overlap_amount: float
    size_progression: float
    blend_mode: str
    shape_padding: float
    rotation_spread: float
    aspect_ratio: float


class ArcSwooshParams(AlgorithmParams):
    swoosh_count: int
    swoosh_width: float
    swoosh_length: float
    swoosh_curvature: float
    start_angle: float
    sweep_angle: float
    taper_start: float
    taper_end: float
    dynamic_width: bool


class DepthMarkParams(AlgorithmParams):
    depth_layers: int
    depth_offset: float
    depth_angle: float
    perspective_strength: float
    shadow_intensity: float
    extrusion_depth: float
    light_direction: float
    surface_detail: float
    shape_type: str


class NegativeSpaceParams(AlgorithmParams):
    positive_shape: str
    negative_reveal: float
    balance_ratio: float
    sharpness: float
    inner_contrast: float
    boundary_blur: float
    dual_tone: bool
    inversion_point: float


class InterlockingFormsParams(AlgorithmParams):
    form_count: int
    form_shape: str
    interlock_depth: float
    form_thickness: float
    gap_size: float
    arrangement: str
    overlap_order: List[int]
    connection_strength: float


class AbstractMonogramParams(AlgorithmParams):
    letter_style: str
    letter_connections: bool
    stroke_modulation: float
    terminal_style: str
    ligature_strength: float
    deconstruct_level: float
    path_simplification: float
    experimental_cuts: float
    letter: str


class StarburstParams(AlgorithmParams):
    arm_count: int
    arm_length: float
    arm_width: float
    taper_ratio: float
    curvature: float
    center_radius: float
    spiral_amount: float
    bulge_amount: float
    rotation_offset: float
    symmetry_type: str


class MonogramBlendParams(AlgorithmParams):
    blend_style: str
    letter_spacing: float
    share_strokes: bool
    stroke_modulation: float
    letter_weights: List[float]
    vertical_offset: float
    letters: List[str]


class PerfectTriangleParams(AlgorithmParams):
    triangle_type: str
    size: float
    rotation: float
    fill_style: str
    outline_width: float
    inner_cutout: bool
    cutout_scale: float
    corner_radius: float


class AbstractMarkParams(AlgorithmParams):
    angular_complexity: int
    sharpness: float
    asymmetry: float
    inner_negative_space: bool
    stroke_only: bool
    dynamic_thickness: float
    organic_amount: float
    rotation: float


class LetterSwooshParams(AlgorithmParams):
    swoosh_count: int
    swoosh_width: float
    swoosh_curvature: float
    swoosh_placement: str
    letter_weight: float
    letter_scale: float
    dynamic_taper: bool
    letter: str


AnyAlgorithmParams = Union[
    ParallelBarsParams,
    StackedLinesParams,
    LetterformCutoutParams,
    SparkleAsteriskParams,
    OverlappingShapesParams,
    ArcSwooshParams,
    DepthMarkParams,
    NegativeSpaceParams,
    InterlockingFormsParams,
    AbstractMonogramParams,
    StarburstParams,
    MonogramBlendParams,
    PerfectTriangleParams,
    AbstractMarkParams,
    LetterSwooshParams,
]


# ============================================================================
# OUTPUT
# ============================================================================


class QualityMetrics(_Frozen):
    """Composite score and its components, all on a 0-100 scale."""

    score: float
    path_smoothness: float
    visual_balance: float
    complexity: float
    golden_ratio_adherence: float
    uniqueness: float

    @validator("score", "path_smoothness", "visual_balance", "complexity", "golden_ratio_adherence", "uniqueness")
    def validate_range(cls, v):
        if v < 0 or v > 100:
            raise ValueError("Quality components must be between 0 and 100")
        return v


class GeometryMeta(_Frozen):
    uses_golden_ratio: bool = False
    grid_based: bool = False
    bezier_curves: bool = True
    symmetry: str = "none"
    path_count: int = 0
    complexity: float = 0.0


class ColorMeta(_Frozen):
    primary: str
    accent: str
    palette: List[str] = Field(default_factory=list)


class LogoMeta(_Frozen):
    brand_name: str
    generated_at: int = Field(..., description="Epoch milliseconds; outside the determinism boundary")
    seed: str
    geometry: GeometryMeta
    colors: ColorMeta


class GeneratedLogo(_Frozen):
    id: str
    hash: str
    algorithm: Algorithm
    variant: int = Field(..., description="1-based")
    svg: str
    view_box: str = "0 0 100 100"
    params: Dict = Field(default_factory=dict)
    quality: Optional[QualityMetrics] = None
    meta: LogoMeta


class HashRecord(_Frozen):
    hash: str
    brand_name: str
    algorithm: str
    variant: int
    created_at: int
    quality_score: Optional[float] = None


__all__ = [
    "Algorithm",
    "ALL_ALGORITHMS",
    "CANDIDATE_ALGORITHMS",
    "GenerationRequest",
    "BaseParameters",
    "HashDerivedParams",
    "HashParams",
    "AlgorithmParams",
    "ParallelBarsParams",
    "StackedLinesParams",
    "LetterformCutoutParams",
    "SparkleAsteriskParams",
    "OverlappingShapesParams",
    "ArcSwooshParams",
    "DepthMarkParams",
    "NegativeSpaceParams",
    "InterlockingFormsParams",
    "AbstractMonogramParams",
    "StarburstParams",
    "MonogramBlendParams",
    "PerfectTriangleParams",
    "AbstractMarkParams",
    "LetterSwooshParams",
    "AnyAlgorithmParams",
    "QualityMetrics",
    "GeometryMeta",
    "ColorMeta",
    "LogoMeta",
    "GeneratedLogo",
    "HashRecord",
]
