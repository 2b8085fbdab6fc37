#!/usr/bin/env python3
"""
Vector Document Builder

Thin fluent layer over ``svgwrite.Drawing``. One builder instance accumulates
the definitions (gradients, masks, clip paths, filters) and elements of exactly
one logo document and serializes them with ``build()``. Definition ids are
supplied by the caller and only need to be unique within the document.

Validation is disabled (``debug=False``) so arbitrary presentation attributes
such as ``fill-rule`` or ``mix-blend-mode`` pass through unchanged.
"""

import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

import svgwrite

from .geometry import fmt

Attrs = Optional[Dict[str, Any]]


@dataclass
class GradientStop:
    offset: float
    color: str
    opacity: Optional[float] = None


@dataclass
class GradientDef:
    """Linear gradients run along ``angle`` degrees; radial ones are centred."""
    type: str = "linear"
    stops: List[GradientStop] = field(default_factory=list)
    angle: float = 0.0
    cx: str = "50%"
    cy: str = "50%"
    r: str = "50%"


def linear(angle: float, *stops: Tuple) -> GradientDef:
    """Shorthand: ``linear(45, (0, "#fff"), (1, "#000", 0.8))``."""
    return GradientDef(type="linear", angle=angle, stops=[GradientStop(*s) for s in stops])


def radial(*stops: Tuple) -> GradientDef:
    return GradientDef(type="radial", stops=[GradientStop(*s) for s in stops])


def _percent(value: float) -> str:
    return f"{fmt(value).rstrip('0').rstrip('.') or '0'}%"


def _clean(attrs: Attrs) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in (attrs or {}).items():
        if value is None:
            continue
        if isinstance(value, float):
            value = round(value, 3)
        out[key] = value
    return out


class SVGBuilder:
    """Accumulates one self-contained SVG document."""

    def __init__(self, size: int = 100):
        self.size = size
        self._dwg = svgwrite.Drawing(size=None, debug=False)
        self._stack: List[Any] = [self._dwg]
        self._def_ids: List[str] = []
        self.element_count = 0
        self.set_view_box(f"0 0 {size} {size}")

    # ------------------------------------------------------------------
    # document
    # ------------------------------------------------------------------

    @property
    def view_box(self) -> str:
        return self._dwg.attribs["viewBox"]

    def set_view_box(self, view_box: str) -> "SVGBuilder":
        self._dwg.attribs["viewBox"] = view_box
        return self

    @property
    def def_ids(self) -> List[str]:
        return list(self._def_ids)

    def _register(self, def_id: str) -> str:
        if def_id in self._def_ids:
            raise ValueError(f"Duplicate definition id in document: {def_id}")
        self._def_ids.append(def_id)
        return def_id

    def _add(self, element) -> "SVGBuilder":
        self._stack[-1].add(element)
        self.element_count += 1
        return self

    @contextmanager
    def _into(self, container) -> Iterator["SVGBuilder"]:
        self._stack.append(container)
        try:
            yield self
        finally:
            self._stack.pop()

    # ------------------------------------------------------------------
    # definitions
    # ------------------------------------------------------------------

    def add_gradient(self, gradient_id: str, gradient: GradientDef) -> str:
        self._register(gradient_id)
        if gradient.type == "radial":
            grad = self._dwg.radialGradient(
                center=(gradient.cx, gradient.cy), r=gradient.r, id=gradient_id
            )
        else:
            rad = math.radians(gradient.angle)
            c, s = math.cos(rad), math.sin(rad)
            grad = self._dwg.linearGradient(
                start=(_percent(50 - 50 * c), _percent(50 - 50 * s)),
                end=(_percent(50 + 50 * c), _percent(50 + 50 * s)),
                id=gradient_id,
            )
        for stop in gradient.stops:
            opacity = None if stop.opacity is None else round(stop.opacity, 3)
            grad.add_stop_color(offset=_percent(stop.offset * 100), color=stop.color, opacity=opacity)
        self._dwg.defs.add(grad)
        return gradient_id

    def add_mask(self, mask_id: str, draw: Callable[["SVGBuilder"], None]) -> str:
        """Define a mask whose content is drawn by ``draw(builder)``."""
        self._register(mask_id)
        mask = self._dwg.mask(id=mask_id)
        self._dwg.defs.add(mask)
        with self._into(mask):
            draw(self)
        return mask_id

    def add_clip_path(self, clip_id: str, draw: Callable[["SVGBuilder"], None]) -> str:
        self._register(clip_id)
        clip = self._dwg.clipPath(id=clip_id)
        self._dwg.defs.add(clip)
        with self._into(clip):
            draw(self)
        return clip_id

    def add_filter(
        self,
        filter_id: str,
        kind: str = "blur",
        std_deviation: float = 2.0,
        dx: float = 0.0,
        dy: float = 2.0,
        color: str = "#000000",
        opacity: float = 0.3,
    ) -> str:
        """Gaussian ``blur`` or a ``shadow`` (blur, offset, flood, composite, blend)."""
        self._register(filter_id)
        flt = self._dwg.filter(id=filter_id, x="-20%", y="-20%", width="140%", height="140%")
        if kind == "shadow":
            flt.feGaussianBlur(in_="SourceAlpha", stdDeviation=round(std_deviation, 3), result="blur")
            flt.feOffset(in_="blur", dx=round(dx, 3), dy=round(dy, 3), result="offset")
            flt.feFlood(flood_color=color, flood_opacity=round(opacity, 3), result="flood")
            flt.feComposite(in_="flood", in2="offset", operator="in", result="shadow")
            flt.feBlend(in_="SourceGraphic", in2="shadow", mode="normal")
        else:
            flt.feGaussianBlur(in_="SourceGraphic", stdDeviation=round(std_deviation, 3))
        self._dwg.defs.add(flt)
        return filter_id

    # ------------------------------------------------------------------
    # elements
    # ------------------------------------------------------------------

    def path(self, d: str, attrs: Attrs = None) -> "SVGBuilder":
        if not d:
            return self
        return self._add(self._dwg.path(d=d, **_clean(attrs)))

    def rect(self, x: float, y: float, width: float, height: float, rx: float = 0, attrs: Attrs = None) -> "SVGBuilder":
        extra = _clean(attrs)
        if rx:
            extra["rx"] = round(rx, 3)
        return self._add(
            self._dwg.rect(insert=(round(x, 3), round(y, 3)), size=(round(max(width, 0), 3), round(max(height, 0), 3)), **extra)
        )

    def circle(self, cx: float, cy: float, r: float, attrs: Attrs = None) -> "SVGBuilder":
        return self._add(self._dwg.circle(center=(round(cx, 3), round(cy, 3)), r=round(max(r, 1.0), 3), **_clean(attrs)))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float, attrs: Attrs = None) -> "SVGBuilder":
        return self._add(
            self._dwg.ellipse(center=(round(cx, 3), round(cy, 3)), r=(round(max(rx, 1.0), 3), round(max(ry, 1.0), 3)), **_clean(attrs))
        )

    def line(self, x1: float, y1: float, x2: float, y2: float, attrs: Attrs = None) -> "SVGBuilder":
        return self._add(self._dwg.line(start=(round(x1, 3), round(y1, 3)), end=(round(x2, 3), round(y2, 3)), **_clean(attrs)))

    def polyline(self, points: Sequence[Tuple[float, float]], attrs: Attrs = None) -> "SVGBuilder":
        pts = [(round(x, 3), round(y, 3)) for x, y in points]
        return self._add(self._dwg.polyline(points=pts, **_clean(attrs)))

    def polygon(self, points: Sequence[Tuple[float, float]], attrs: Attrs = None) -> "SVGBuilder":
        pts = [(round(x, 3), round(y, 3)) for x, y in points]
        return self._add(self._dwg.polygon(points=pts, **_clean(attrs)))

    def text(self, content: str, x: float, y: float, attrs: Attrs = None) -> "SVGBuilder":
        return self._add(self._dwg.text(content, insert=(round(x, 3), round(y, 3)), **_clean(attrs)))

    def group(self, callback: Callable[["SVGBuilder"], None], transform: Optional[str] = None, attrs: Attrs = None) -> "SVGBuilder":
        """Nest the elements drawn by ``callback`` under one ``<g>``."""
        extra = _clean(attrs)
        if transform:
            extra["transform"] = transform
        grp = self._dwg.g(**extra)
        self._add(grp)
        with self._into(grp):
            callback(self)
        return self

    def build(self) -> str:
        return self._dwg.tostring()


def create_svg(size: int = 100) -> SVGBuilder:
    return SVGBuilder(size)


__all__ = ["GradientStop", "GradientDef", "linear", "radial", "SVGBuilder", "create_svg"]
