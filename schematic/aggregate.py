"""Reductions over adjacency results and the end-to-end analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

from .adjacency import GearCandidate, compute_adjacency, find_gear_candidates, find_part_numbers
from .config import AnalyzerConfig
from .grid import Schematic
from .tokens import NumberToken, TokenSet, tokenize


def sum_of_parts(parts: Iterable[NumberToken]) -> int:
    return sum(number.value for number in parts)


def gear_ratio(candidate: GearCandidate) -> int:
    ratio = 1
    for value in candidate.values:
        ratio *= value
    return ratio


def sum_of_gear_ratios(candidates: Iterable[GearCandidate]) -> int:
    return sum(gear_ratio(candidate) for candidate in candidates)


@dataclass(frozen=True)
class SchematicReport:
    """Aggregates and intermediate tokens produced by :func:`analyze`."""

    sum_of_parts: int
    sum_of_gear_ratios: int
    parts: Sequence[NumberToken]
    gears: Sequence[GearCandidate]
    tokens: TokenSet

    def to_json_record(self) -> Dict[str, object]:
        return {
            "sum_of_parts": self.sum_of_parts,
            "sum_of_gear_ratios": self.sum_of_gear_ratios,
            "num_numbers": len(self.tokens.numbers),
            "num_symbols": len(self.tokens.symbols),
            "num_parts": len(self.parts),
            "num_gears": len(self.gears),
            "glyph_counts": self.tokens.glyph_counts(),
        }


def analyze(
    grid: Schematic | str | Sequence[str] | None,
    config: AnalyzerConfig | None = None,
) -> SchematicReport:
    """Run tokenization, adjacency resolution and both reductions.

    ``grid`` may be a :class:`Schematic`, raw text, or a sequence of rows. An
    empty grid produces zero for both sums; ``None`` raises
    :class:`~schematic.grid.MissingGridError`.
    """

    config = config or AnalyzerConfig()
    schematic = Schematic.coerce(grid)
    tokens = tokenize(
        schematic,
        empty_glyph=config.empty_glyph,
        max_digits=config.max_number_digits,
    )

    adjacency = compute_adjacency(tokens, use_index=config.use_index)
    parts = tuple(find_part_numbers(tokens, adjacency=adjacency))
    gears = tuple(
        find_gear_candidates(
            tokens,
            gear_glyph=config.gear_glyph,
            arity=config.gear_arity,
            adjacency=adjacency,
        )
    )

    return SchematicReport(
        sum_of_parts=sum_of_parts(parts),
        sum_of_gear_ratios=sum_of_gear_ratios(gears),
        parts=parts,
        gears=gears,
        tokens=tokens,
    )


__all__ = [
    "SchematicReport",
    "analyze",
    "gear_ratio",
    "sum_of_parts",
    "sum_of_gear_ratios",
]
