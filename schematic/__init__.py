"""Core modules for engine schematic analysis."""

from .adjacency import (
    GearCandidate,
    SymbolIndex,
    compute_adjacency,
    find_gear_candidates,
    find_part_numbers,
    is_adjacent,
)
from .aggregate import SchematicReport, analyze, gear_ratio, sum_of_gear_ratios, sum_of_parts
from .config import AnalyzerConfig, load_config
from .grid import (
    MalformedGridError,
    MissingGridError,
    NumericOverflowError,
    Schematic,
    SchematicError,
)
from .tokens import CellKind, NumberToken, SymbolToken, TokenSet, classify_glyph, tokenize

__all__ = [
    "Schematic",
    "SchematicError",
    "MissingGridError",
    "MalformedGridError",
    "NumericOverflowError",
    "CellKind",
    "classify_glyph",
    "NumberToken",
    "SymbolToken",
    "TokenSet",
    "tokenize",
    "GearCandidate",
    "SymbolIndex",
    "is_adjacent",
    "compute_adjacency",
    "find_part_numbers",
    "find_gear_candidates",
    "SchematicReport",
    "analyze",
    "gear_ratio",
    "sum_of_parts",
    "sum_of_gear_ratios",
    "AnalyzerConfig",
    "load_config",
]
