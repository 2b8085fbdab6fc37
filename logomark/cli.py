#!/usr/bin/env python3
"""
Command line entry point.

    python -m logomark "Acme" --color "#3b82f6" --algorithm starburst --out out/acme

Writes one ``<id>.svg`` per logo plus ``manifest.json`` (everything except
the SVG bodies). ``--all`` runs every direct-variant algorithm.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .core import LogoEngineError, get_logger, set_log_level
from .engine import generate_all_algorithms, generate_logos, resolve_algorithm
from .export import save_svg
from .ledger import open_file_ledger
from .params import Algorithm, GenerationRequest

log = get_logger("logomark.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="logomark", description="Deterministic parametric SVG logo generator")
    parser.add_argument("brand", help="Brand name (may be empty)")
    parser.add_argument("--color", required=True, help="Primary hex color, e.g. #3b82f6")
    parser.add_argument("--accent", help="Accent hex color; derived from --color when omitted")
    parser.add_argument("--algorithm", help="One of: " + ", ".join(a.value for a in Algorithm))
    parser.add_argument("--all", action="store_true", help="Generate every direct-variant algorithm")
    parser.add_argument("--variations", type=int, help="Variants per algorithm")
    parser.add_argument("--seed", help="Seed string; defaults to the brand name")
    parser.add_argument("--category", help="Bias for hash-derived parameters (technology, creative, ...)")
    parser.add_argument("--industry", help="Used when no algorithm is given")
    parser.add_argument("--aesthetic", help="Used when no algorithm is given")
    parser.add_argument("--min-quality", type=float, help="Candidate early-stop threshold (0-100)")
    parser.add_argument("--out", default="out", help="Output directory")
    parser.add_argument("--config", help="Path to a logomark YAML config")
    parser.add_argument("--no-ledger", action="store_true", help="Do not record hashes")
    parser.add_argument("--optimize", action="store_true", help="Minify written SVG files")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
        set_log_level(cfg.log_level)

        fields = {
            "brand_name": args.brand,
            "primary_color": args.color,
            "accent_color": args.accent,
            "variations": args.variations if args.variations is not None else cfg.default_variations,
            "seed": args.seed,
            "category": args.category,
            "industry": args.industry,
            "aesthetic": args.aesthetic,
            "min_quality_score": args.min_quality if args.min_quality is not None else cfg.min_quality_score,
        }
        if args.algorithm:
            fields["algorithm"] = resolve_algorithm(args.algorithm)
        request = GenerationRequest(**fields)

        ledger = None if args.no_ledger else open_file_ledger(cfg.resolved_ledger_path(), cfg.ledger_capacity)
        if args.all:
            logos = generate_all_algorithms(request, ledger, cfg)
        else:
            logos = generate_logos(request, ledger, cfg)
    except (LogoEngineError, ValueError) as e:
        print(f"logomark: {e}", file=sys.stderr)
        return 2

    out_dir = Path(args.out)
    manifest = []
    for logo in logos:
        path = save_svg(logo.svg, out_dir / f"{logo.id}.svg", optimize=args.optimize)
        entry = logo.model_dump(mode="json", exclude={"svg"})
        entry["file"] = path.name
        manifest.append(entry)

    out_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = out_dir / "manifest.json"
    manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    log.info(f"Wrote {len(logos)} logo(s) and {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
