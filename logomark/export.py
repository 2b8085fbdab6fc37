"""
Export helpers for generated documents.

Each logo's definition ids are unique only inside its own document, so
pages that inline several logos should pass each one through
``namespace_svg_ids`` first.
"""

import re
from pathlib import Path
from typing import Union
from urllib.parse import quote

from .core import get_logger

log = get_logger("logomark.export")

_COMMENT = re.compile(r"<!--.*?-->", re.S)
_ID_ATTR = re.compile(r'\bid="([^"]+)"')


def optimize_svg(svg: str) -> str:
    """Strip comments and collapse whitespace."""
    out = _COMMENT.sub("", svg)
    out = re.sub(r"\s+", " ", out)
    out = re.sub(r">\s+<", "><", out)
    return out.strip()


def svg_to_data_url(svg: str) -> str:
    return "data:image/svg+xml," + quote(optimize_svg(svg), safe="")


def namespace_svg_ids(svg: str, prefix: str) -> str:
    """
    Rewrite every ``id="x"`` to ``id="{prefix}-x"`` together with its
    ``url(#x)``, ``href="#x"`` and ``xlink:href="#x"`` references.
    """
    ids = _ID_ATTR.findall(svg)
    if not ids:
        return svg
    # longest first so "a-grad-1" is not clobbered by "a-grad"
    alternation = "|".join(re.escape(i) for i in sorted(set(ids), key=len, reverse=True))

    def rename(m: re.Match) -> str:
        return f"{m.group(1)}{prefix}-{m.group(2)}{m.group(3)}"

    out = re.sub(rf'(\bid=")({alternation})(")', rename, svg)
    out = re.sub(rf"(url\(#)({alternation})(\))", rename, out)
    out = re.sub(rf'(href="#)({alternation})(")', rename, out)
    return out


def save_svg(svg: str, path: Union[str, Path], optimize: bool = False) -> Path:
    """Write ``svg`` to ``path``, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(optimize_svg(svg) if optimize else svg, encoding="utf-8")
    log.debug(f"Wrote {target}")
    return target


__all__ = ["optimize_svg", "svg_to_data_url", "namespace_svg_ids", "save_svg"]
