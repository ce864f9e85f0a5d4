"""Adjacency relationships between number and symbol tokens.

A number and a symbol are adjacent when any digit cell of the number lies
within Chebyshev distance one of the symbol cell (8-neighbour rule,
diagonals included). The relation is existential: a number touching a
symbol through several digits is still linked to it exactly once.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .grid import Coords
from .tokens import NumberToken, SymbolToken, TokenSet


DEFAULT_GEAR_GLYPH = "*"
DEFAULT_GEAR_ARITY = 2


def cells_touching(a: Coords, b: Coords) -> bool:
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_adjacent(number: NumberToken, symbol: SymbolToken) -> bool:
    """Return True when any cell of ``number`` touches ``symbol``."""

    return any(cells_touching(cell, symbol.cell) for cell in number.cells)


@dataclass(frozen=True)
class GearCandidate:
    """Gear glyph together with the numbers adjacent to it."""

    symbol: SymbolToken
    numbers: Tuple[NumberToken, ...]

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(number.value for number in self.numbers)


class SymbolIndex:
    """Buckets symbols by row so lookups only probe rows ``r-1..r+1``.

    Results are identical to a full scan; the index only skips symbols that
    cannot be within reach of a number.
    """

    def __init__(self, symbols: Iterable[SymbolToken]) -> None:
        self._rows: Dict[int, List[SymbolToken]] = defaultdict(list)
        for symbol in symbols:
            self._rows[symbol.row].append(symbol)

    def near(self, number: NumberToken) -> List[SymbolToken]:
        """Return symbols adjacent to ``number`` in scan order."""

        found: List[SymbolToken] = []
        for y in (number.row - 1, number.row, number.row + 1):
            for symbol in self._rows.get(y, ()):
                if number.start - 1 <= symbol.column <= number.end + 1:
                    found.append(symbol)
        return found

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._rows.values())


def compute_adjacency(tokens: TokenSet, *, use_index: bool = True) -> Dict[int, Tuple[int, ...]]:
    """Map every symbol id to the ids of numbers adjacent to it.

    Number ids are listed in scan order and appear at most once per symbol.
    Symbols without neighbours map to an empty tuple.
    """

    adjacency: Dict[int, List[int]] = {symbol.id: [] for symbol in tokens.symbols}

    if use_index:
        index = SymbolIndex(tokens.symbols)
        for number in tokens.numbers:
            for symbol in index.near(number):
                adjacency[symbol.id].append(number.id)
    else:
        for number in tokens.numbers:
            for symbol in tokens.symbols:
                if is_adjacent(number, symbol):
                    adjacency[symbol.id].append(number.id)

    return {key: tuple(value) for key, value in adjacency.items()}


def invert_adjacency(adjacency: Mapping[int, Tuple[int, ...]]) -> Dict[int, Tuple[int, ...]]:
    """Turn a ``symbol -> numbers`` mapping into ``number -> symbols``."""

    inverted: Dict[int, List[int]] = defaultdict(list)
    for symbol_id in sorted(adjacency):
        for number_id in adjacency[symbol_id]:
            inverted[number_id].append(symbol_id)
    return {key: tuple(value) for key, value in sorted(inverted.items())}


def find_part_numbers(
    tokens: TokenSet,
    *,
    use_index: bool = True,
    adjacency: Optional[Mapping[int, Tuple[int, ...]]] = None,
) -> List[NumberToken]:
    """Return numbers adjacent to at least one symbol, in scan order.

    ``adjacency`` reuses a relation from :func:`compute_adjacency` instead of
    building a new one.
    """

    if adjacency is None:
        adjacency = compute_adjacency(tokens, use_index=use_index)
    linked = invert_adjacency(adjacency)
    return [number for number in tokens.numbers if number.id in linked]


def find_gear_candidates(
    tokens: TokenSet,
    *,
    gear_glyph: str = DEFAULT_GEAR_GLYPH,
    arity: int = DEFAULT_GEAR_ARITY,
    use_index: bool = True,
    adjacency: Optional[Mapping[int, Tuple[int, ...]]] = None,
) -> List[GearCandidate]:
    """Return gear glyphs adjacent to exactly ``arity`` numbers.

    A number may belong to several candidates when it touches more than one
    gear glyph.
    """

    if arity <= 0:
        raise ValueError("arity must be positive")

    if adjacency is None:
        adjacency = compute_adjacency(tokens, use_index=use_index)
    numbers_by_id = {number.id: number for number in tokens.numbers}

    candidates: List[GearCandidate] = []
    for symbol in tokens.symbols_with_glyph(gear_glyph):
        number_ids = adjacency[symbol.id]
        if len(number_ids) != arity:
            continue
        candidates.append(
            GearCandidate(symbol=symbol, numbers=tuple(numbers_by_id[number_id] for number_id in number_ids))
        )
    return candidates


__all__ = [
    "DEFAULT_GEAR_GLYPH",
    "DEFAULT_GEAR_ARITY",
    "GearCandidate",
    "SymbolIndex",
    "cells_touching",
    "is_adjacent",
    "compute_adjacency",
    "invert_adjacency",
    "find_part_numbers",
    "find_gear_candidates",
]
