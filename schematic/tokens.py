"""Token extraction for engine schematics.

Every character of a row is classified as a digit, the empty placeholder or
a symbol. Maximal digit runs become :class:`NumberToken` instances and every
symbol character becomes a :class:`SymbolToken`. Both streams are produced in
row-major scan order and carry the coordinates they occupy.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .grid import Coords, NumericOverflowError, Schematic


DEFAULT_EMPTY_GLYPH = "."


class CellKind(str, Enum):
    DIGIT = "digit"
    EMPTY = "empty"
    SYMBOL = "symbol"


def classify_glyph(glyph: str, empty_glyph: str = DEFAULT_EMPTY_GLYPH) -> CellKind:
    """Classify a single character. Every character maps to exactly one kind."""

    if "0" <= glyph <= "9":
        return CellKind.DIGIT
    if glyph == empty_glyph:
        return CellKind.EMPTY
    return CellKind.SYMBOL


@dataclass(frozen=True)
class NumberToken:
    """Maximal run of digits within a single row."""

    id: int
    value: int
    cells: Tuple[Coords, ...]

    @property
    def row(self) -> int:
        return self.cells[0][0]

    @property
    def start(self) -> int:
        return self.cells[0][1]

    @property
    def end(self) -> int:
        return self.cells[-1][1]

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def bbox(self) -> Tuple[int, int, int, int]:  # (min_y, min_x, max_y, max_x)
        return (self.row, self.start, self.row, self.end)


@dataclass(frozen=True)
class SymbolToken:
    """Single non-digit, non-empty character and its position."""

    id: int
    glyph: str
    cell: Coords

    @property
    def row(self) -> int:
        return self.cell[0]

    @property
    def column(self) -> int:
        return self.cell[1]


@dataclass(frozen=True)
class TokenSet:
    numbers: Tuple[NumberToken, ...]
    symbols: Tuple[SymbolToken, ...]

    def glyph_counts(self) -> Dict[str, int]:
        counts = Counter(symbol.glyph for symbol in self.symbols)
        return dict(sorted(counts.items()))

    def symbols_with_glyph(self, glyph: str) -> Tuple[SymbolToken, ...]:
        return tuple(symbol for symbol in self.symbols if symbol.glyph == glyph)


def _iter_digit_runs(row: str) -> Iterator[Tuple[int, int]]:
    """Yield ``(start, stop)`` column spans of maximal digit runs."""

    start: Optional[int] = None
    for x, glyph in enumerate(row):
        if classify_glyph(glyph) is CellKind.DIGIT:
            if start is None:
                start = x
        elif start is not None:
            yield start, x
            start = None
    if start is not None:
        yield start, len(row)


def extract_numbers(
    grid: Schematic,
    *,
    max_digits: int | None = None,
) -> List[NumberToken]:
    """Extract numeric tokens from ``grid`` in row-major order.

    ``max_digits`` bounds the length of a single run; longer runs raise
    :class:`NumericOverflowError` instead of producing an oversized value.
    """

    if max_digits is not None and max_digits <= 0:
        raise ValueError("max_digits must be positive")

    numbers: List[NumberToken] = []
    for y, row in enumerate(grid.rows):
        for start, stop in _iter_digit_runs(row):
            if max_digits is not None and stop - start > max_digits:
                raise NumericOverflowError(
                    f"digit run at ({y}, {start}) has {stop - start} digits, limit is {max_digits}"
                )
            numbers.append(
                NumberToken(
                    id=len(numbers),
                    value=int(row[start:stop]),
                    cells=tuple((y, x) for x in range(start, stop)),
                )
            )
    return numbers


def extract_symbols(grid: Schematic, *, empty_glyph: str = DEFAULT_EMPTY_GLYPH) -> List[SymbolToken]:
    """Extract symbol tokens from ``grid`` in row-major order."""

    symbols: List[SymbolToken] = []
    for y, row in enumerate(grid.rows):
        for x, glyph in enumerate(row):
            if classify_glyph(glyph, empty_glyph) is CellKind.SYMBOL:
                symbols.append(SymbolToken(id=len(symbols), glyph=glyph, cell=(y, x)))
    return symbols


def tokenize(
    grid: Schematic,
    *,
    empty_glyph: str = DEFAULT_EMPTY_GLYPH,
    max_digits: int | None = None,
) -> TokenSet:
    """Return both token streams for ``grid``."""

    if len(empty_glyph) != 1:
        raise ValueError("empty_glyph must be a single character")
    if classify_glyph(empty_glyph) is CellKind.DIGIT:
        raise ValueError("empty_glyph cannot be a digit")

    return TokenSet(
        numbers=tuple(extract_numbers(grid, max_digits=max_digits)),
        symbols=tuple(extract_symbols(grid, empty_glyph=empty_glyph)),
    )


__all__ = [
    "DEFAULT_EMPTY_GLYPH",
    "CellKind",
    "classify_glyph",
    "NumberToken",
    "SymbolToken",
    "TokenSet",
    "extract_numbers",
    "extract_symbols",
    "tokenize",
]
