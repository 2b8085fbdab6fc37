"""
Logomark - deterministic parametric logo generator

This package turns a brand name, a primary color and a seed string into
self-contained SVG logo documents. The same inputs always produce the same
documents and hashes.
"""

from .config import EngineCfg, load_config
from .core import LogoEngineError, UnknownAlgorithmError, get_logger
from .engine import (
    ALGORITHM_INFO,
    generate_all_algorithms,
    generate_brand_package,
    generate_logos,
    get_unique_logos,
    quick_generate,
    resolve_algorithm,
    select_algorithm,
)
from .export import namespace_svg_ids, optimize_svg, save_svg, svg_to_data_url
from .ledger import HashLedger, JsonFileLedgerStore, LedgerStore, MemoryLedgerStore, generate_hash, open_file_ledger
from .params import ALL_ALGORITHMS, CANDIDATE_ALGORITHMS, Algorithm, GeneratedLogo, GenerationRequest, QualityMetrics
from .quality import calculate_complexity, calculate_quality_score, meets_quality_threshold

__version__ = "0.1.0"

__all__ = [
    # Engine
    "ALGORITHM_INFO",
    "generate_logos",
    "generate_all_algorithms",
    "generate_brand_package",
    "get_unique_logos",
    "quick_generate",
    "resolve_algorithm",
    "select_algorithm",
    # Models
    "Algorithm",
    "ALL_ALGORITHMS",
    "CANDIDATE_ALGORITHMS",
    "GenerationRequest",
    "GeneratedLogo",
    "QualityMetrics",
    # Ledger
    "HashLedger",
    "LedgerStore",
    "MemoryLedgerStore",
    "JsonFileLedgerStore",
    "generate_hash",
    "open_file_ledger",
    # Quality
    "calculate_complexity",
    "calculate_quality_score",
    "meets_quality_threshold",
    # Export
    "optimize_svg",
    "svg_to_data_url",
    "namespace_svg_ids",
    "save_svg",
    # Config and errors
    "EngineCfg",
    "load_config",
    "get_logger",
    "LogoEngineError",
    "UnknownAlgorithmError",
]
