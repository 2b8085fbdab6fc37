# tests/test_export.py
import re
from urllib.parse import unquote

from logomark.engine import quick_generate
from logomark.export import namespace_svg_ids, optimize_svg, save_svg, svg_to_data_url
from logomark.svg_builder import SVGBuilder, linear

SAMPLE = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <!-- generated -->
  <defs>
    <linearGradient id="a-grad"><stop offset="0%" stop-color="#fff"/></linearGradient>
    <linearGradient id="a-grad-1"><stop offset="0%" stop-color="#000"/></linearGradient>
  </defs>
  <path d="M 0 0 L 10 10 Z" fill="url(#a-grad)"/>
  <path d="M 5 5 L 9 9 Z" fill="url(#a-grad-1)"/>
  <use href="#a-grad"/>
</svg>"""


def test_optimize_strips_comments_and_whitespace():
    out = optimize_svg(SAMPLE)
    assert "<!--" not in out
    assert "\n" not in out
    assert "><" in out
    assert out.startswith("<svg")


def test_data_url():
    url = svg_to_data_url(SAMPLE)
    assert url.startswith("data:image/svg+xml,")
    body = url[len("data:image/svg+xml,"):]
    assert "<" not in body and " " not in body
    assert unquote(body) == optimize_svg(SAMPLE)


def test_namespace_rewrites_ids_and_references():
    out = namespace_svg_ids(SAMPLE, "p")
    assert 'id="p-a-grad"' in out
    assert 'id="p-a-grad-1"' in out
    assert "url(#p-a-grad)" in out
    assert "url(#p-a-grad-1)" in out
    assert 'href="#p-a-grad"' in out
    assert 'id="a-grad"' not in out


def test_namespace_without_ids_is_identity():
    assert namespace_svg_ids('<svg><path d="M 0 0"/></svg>', "p") == '<svg><path d="M 0 0"/></svg>'


def test_two_logos_inline_without_collisions():
    """Identical logos inlined on one page stay distinct after namespacing."""
    logo = quick_generate("Acme", "#3b82f6", algorithm="sparkle-asterisk", variations=1)[0]
    left = namespace_svg_ids(logo.svg, "left")
    right = namespace_svg_ids(logo.svg, "right")
    ids_left = set(re.findall(r'\bid="([^"]+)"', left))
    ids_right = set(re.findall(r'\bid="([^"]+)"', right))
    assert ids_left and not (ids_left & ids_right)
    assert set(re.findall(r"url\(#([^)]+)\)", left)) <= ids_left


def test_save_svg_creates_directories(tmp_path):
    b = SVGBuilder()
    b.add_gradient("g", linear(0, (0, "#fff"), (1, "#000")))
    b.path("M 10 10 L 90 10 L 50 90 Z", {"fill": "url(#g)"})
    svg = b.build()

    target = save_svg(svg, tmp_path / "nested" / "dir" / "logo.svg")
    assert target.exists()
    assert target.read_text(encoding="utf-8") == svg

    small = save_svg(SAMPLE, tmp_path / "small.svg", optimize=True)
    assert small.read_text(encoding="utf-8") == optimize_svg(SAMPLE)
