#!/usr/bin/env python3
"""
Quality Scoring for generated marks

Side-effect free checks used to rank deterministic candidates. Path data is
read from the finished document, parsed with svgpathtools, sampled into
polylines and measured:

- complexity: command count against a fixed ceiling plus a curve-density bonus
- path smoothness: share of drawn segments that are curves
- visual balance: distance of the area-weighted centroid from canvas centre
- golden-ratio adherence: taper ratio (or bounding-box aspect) against phi
- uniqueness: share of distinct path outlines in the document

The composite weights complexity most heavily; every component and the total
stay within 0-100.
"""

import math
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from shapely.geometry import Polygon
from shapely.ops import unary_union
from svgpathtools import Line, Path, parse_path

from .config import DEFAULT_MIN_QUALITY
from .core import get_logger
from .params import HashDerivedParams, QualityMetrics
from .rng import PHI

log = get_logger("logomark.quality")

COMMAND_CEILING = 50
CURVE_BONUS_DIVISOR = 20
CURVE_BONUS_CAP = 0.3

WEIGHTS = {
    "complexity": 0.45,
    "path_smoothness": 0.20,
    "visual_balance": 0.15,
    "golden_ratio_adherence": 0.10,
    "uniqueness": 0.10,
}

_COMMANDS_RE = re.compile(r"[MLCQSAZ]", re.IGNORECASE)
_CURVES_RE = re.compile(r"[CQS]", re.IGNORECASE)



# ============================================================================
# DOCUMENT ACCESS
# ============================================================================


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def extract_path_data(svg: str) -> List[str]:
    """``d`` attributes of every ``<path>`` in a document, or ``[svg]`` for raw path data."""
    text = svg.strip()
    if not text.startswith("<"):
        return [text] if text else []
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        log.debug(f"Unparseable SVG, scanning raw text: {e}")
        return re.findall(r'\sd="([^"]*)"', text)
    return [el.get("d", "") for el in root.iter() if _local(el.tag) == "path" and el.get("d")]


def _canvas_size(svg: str) -> float:
    match = re.search(r'viewBox="([^"]+)"', svg)
    if match:
        parts = match.group(1).replace(",", " ").split()
        if len(parts) == 4:
            try:
                return max(float(parts[2]), float(parts[3]))
            except ValueError:
                pass
    return 100.0


# ============================================================================
# COMPLEXITY
# ============================================================================


def calculate_complexity(svg_or_path: str) -> float:
    """
    Path complexity in [0, 1].

    Counts path command letters (normalized against 50) and adds up to 0.3 for
    curve commands (one twentieth each). Accepts a whole document or bare path
    data.
    """
    if not svg_or_path:
        return 0.0
    data = " ".join(extract_path_data(svg_or_path)) if svg_or_path.lstrip().startswith("<") else svg_or_path
    total = len(_COMMANDS_RE.findall(data))
    curves = len(_CURVES_RE.findall(data))
    base = min(total / COMMAND_CEILING, 1.0)
    bonus = min(curves / CURVE_BONUS_DIVISOR, CURVE_BONUS_CAP)
    return min(base + bonus, 1.0)


# ============================================================================
# PATH FLATTENING
# ============================================================================


def parse_subpaths(d: str) -> List[Path]:
    """
    Continuous subpaths of ``d`` as svgpathtools ``Path`` objects.

    Data svgpathtools cannot parse yields no subpaths.
    """
    try:
        path = parse_path(d)
    except Exception as e:
        log.debug(f"Unparseable path data {d[:40]!r}: {e}")
        return []
    return [sub for sub in path.continuous_subpaths() if len(sub)]


def flatten_subpath(subpath: Path, steps: int = 8) -> np.ndarray:
    """Sample a subpath into an ``(n, 2)`` polyline; lines keep only their end point."""
    if not len(subpath):
        return np.empty((0, 2))
    points = [subpath[0].start]
    ts = np.linspace(0.0, 1.0, steps + 1)[1:]
    for segment in subpath:
        if isinstance(segment, Line):
            points.append(segment.end)
        else:
            points.extend(segment.point(float(t)) for t in ts)
    flat = np.asarray(points, dtype=complex)
    return np.column_stack([flat.real, flat.imag])


def _polygons(path_data: Sequence[str]) -> Tuple[List[Polygon], np.ndarray]:
    polys: List[Polygon] = []
    all_points = []
    for d in path_data:
        for sub in parse_subpaths(d):
            pts = flatten_subpath(sub)
            if len(pts):
                all_points.append(pts)
            if len(pts) >= 3:
                poly = Polygon(pts)
                if not poly.is_valid:
                    poly = poly.buffer(0)
                if not poly.is_empty and poly.area > 0:
                    polys.append(poly)
    stacked = np.vstack(all_points) if all_points else np.empty((0, 2))
    return polys, stacked


# ============================================================================
# COMPONENTS
# ============================================================================


def path_smoothness(path_data: Sequence[str]) -> float:
    curves = 0
    total = 0
    for d in path_data:
        for sub in parse_subpaths(d):
            for segment in sub:
                total += 1
                if not isinstance(segment, Line):
                    curves += 1
    return 100.0 * curves / total if total else 0.0



def visual_balance(path_data: Sequence[str], canvas: float = 100.0) -> float:
    polys, points = _polygons(path_data)
    if polys:
        shape = unary_union(polys)
        c = shape.centroid
        cx, cy = c.x, c.y
    elif len(points):
        (minx, miny), (maxx, maxy) = points.min(axis=0), points.max(axis=0)
        cx, cy = (minx + maxx) / 2, (miny + maxy) / 2
    else:
        return 0.0
    offset = math.hypot(cx - canvas / 2, cy - canvas / 2)
    return 100.0 * (1.0 - min(1.0, offset / (canvas / 2)))


def golden_ratio_adherence(path_data: Sequence[str], derived: Optional[Any] = None) -> float:
    taper = _taper_ratio(derived)
    if taper is not None:
        target = 1 / PHI
        return 100.0 * (1.0 - min(1.0, abs(taper - target) / target))
    _, points = _polygons(path_data)
    if not len(points):
        return 0.0
    w, h = points.max(axis=0) - points.min(axis=0)
    short, long = min(w, h), max(w, h)
    if short <= 0:
        return 0.0
    ratio = long / short
    # a square bounding box or a phi rectangle both read as proportioned
    error = min(abs(ratio - PHI), abs(ratio - 1.0))
    return 100.0 * (1.0 - min(1.0, error / PHI))


def uniqueness(path_data: Sequence[str]) -> float:
    if not path_data:
        return 0.0
    return 100.0 * len(set(path_data)) / len(path_data)


def _taper_ratio(derived: Optional[Any]) -> Optional[float]:
    if derived is None:
        return None
    if isinstance(derived, HashDerivedParams):
        return derived.taper_ratio
    if isinstance(derived, dict):
        value = derived.get("taper_ratio")
        return float(value) if value is not None else None
    return getattr(derived, "taper_ratio", None)


# ============================================================================
# COMPOSITE
# ============================================================================


def calculate_quality_score(
    svg: str, derived: Optional[Union[HashDerivedParams, Dict[str, Any]]] = None
) -> QualityMetrics:
    """Score a finished document; pure and callable without any generator."""
    path_data = extract_path_data(svg)
    canvas = _canvas_size(svg)

    components = {
        "complexity": 100.0 * calculate_complexity(svg),
        "path_smoothness": path_smoothness(path_data),
        "visual_balance": visual_balance(path_data, canvas),
        "golden_ratio_adherence": golden_ratio_adherence(path_data, derived),
        "uniqueness": uniqueness(path_data),
    }
    components = {k: round(max(0.0, min(100.0, v)), 2) for k, v in components.items()}
    score = sum(WEIGHTS[k] * v for k, v in components.items())
    return QualityMetrics(score=round(max(0.0, min(100.0, score)), 2), **components)


def meets_quality_threshold(score: float, threshold: float = DEFAULT_MIN_QUALITY) -> bool:
    return score >= threshold


__all__ = [
    "COMMAND_CEILING",
    "WEIGHTS",
    "extract_path_data",
    "calculate_complexity",
    "parse_subpaths",
    "flatten_subpath",
    "path_smoothness",
    "visual_balance",
    "golden_ratio_adherence",
    "uniqueness",
    "calculate_quality_score",
    "meets_quality_threshold",
]
