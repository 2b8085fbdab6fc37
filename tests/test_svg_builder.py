# tests/test_svg_builder.py
import xml.etree.ElementTree as ET

import pytest

from logomark.svg_builder import SVGBuilder, linear, radial


def _root(svg):
    return ET.fromstring(svg)


def test_empty_document_has_view_box():
    svg = SVGBuilder(100).build()
    root = _root(svg)
    assert root.get("viewBox") == "0 0 100 100"
    assert root.tag.endswith("svg")


def test_gradient_defs_serialized():
    b = SVGBuilder()
    b.add_gradient("g1", linear(90, (0, "#ffffff"), (1, "#000000", 0.5)))
    b.add_gradient("g2", radial((0, "#ff0000"), (1, "#00ff00")))
    svg = b.build()
    assert 'id="g1"' in svg
    assert 'id="g2"' in svg
    assert "linearGradient" in svg
    assert "radialGradient" in svg
    assert 'stop-opacity="0.5"' in svg


def test_duplicate_def_id_rejected():
    b = SVGBuilder()
    b.add_gradient("dup", linear(0, (0, "#fff"), (1, "#000")))
    with pytest.raises(ValueError):
        b.add_gradient("dup", linear(0, (0, "#fff"), (1, "#000")))


def test_empty_path_is_skipped():
    b = SVGBuilder()
    b.path("")
    b.path("M 0 0 L 10 10 Z", {"fill": "#000"})
    assert b.element_count == 1
    assert b.build().count("<path") == 1


def test_underscore_attributes_become_hyphenated():
    b = SVGBuilder()
    b.path("M 0 0 L 10 10 L 0 10 Z", {"fill_rule": "evenodd", "stroke_width": 2.0, "opacity": None})
    svg = b.build()
    assert 'fill-rule="evenodd"' in svg
    assert 'stroke-width="2' in svg
    assert "opacity" not in svg


def test_group_nests_children():
    b = SVGBuilder()

    def draw(inner):
        inner.circle(50, 50, 10, {"fill": "#123456"})
        inner.circle(60, 60, 5, {"fill": "#654321"})

    b.group(draw, transform="rotate(45 50 50)")
    root = _root(b.build())
    groups = [el for el in root.iter() if el.tag.rsplit("}", 1)[-1] == "g"]
    assert len(groups) == 1
    assert groups[0].get("transform") == "rotate(45 50 50)"
    assert len(list(groups[0])) == 2


def test_clip_path_and_filter_defs():
    b = SVGBuilder()
    clip = b.add_clip_path("c1", lambda inner: inner.path("M 0 0 L 50 0 L 50 50 Z"))
    blur = b.add_filter("f1", "blur", std_deviation=3)
    shadow = b.add_filter("f2", "shadow", dy=4)
    svg = b.build()
    assert (clip, blur, shadow) == ("c1", "f1", "f2")
    assert "clipPath" in svg
    assert "feGaussianBlur" in svg
    assert "feOffset" in svg
    assert b.def_ids == ["c1", "f1", "f2"]


def test_build_is_repeatable():
    b = SVGBuilder()
    b.add_gradient("g", linear(45, (0, "#fff"), (1, "#000")))
    b.path("M 10 10 L 90 10 L 50 90 Z", {"fill": "url(#g)"})
    assert b.build() == b.build()


def test_mask_and_basic_elements():
    b = SVGBuilder()
    mask = b.add_mask("m1", lambda inner: inner.rect(0, 0, 100, 100, attrs={"fill": "#ffffff"}))
    b.ellipse(50, 50, 20, 10, {"fill": "#000", "mask": f"url(#{mask})"})
    b.line(0, 0, 100, 100, {"stroke": "#000"})
    b.polyline([(0, 0), (10, 10), (20, 0)], {"fill": "none"})
    b.polygon([(0, 0), (10, 10), (20, 0)])
    b.text("A", 50, 50, {"font_size": 12})
    svg = b.build()
    for tag in ("<mask", "<rect", "<ellipse", "<line", "<polyline", "<polygon", "<text"):
        assert tag in svg
    assert 'font-size="12"' in svg
    assert b.element_count == 7
