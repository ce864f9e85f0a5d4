"""Grid utilities for engine schematics.

A schematic is a sequence of text rows. Rows may differ in length, so every
coordinate query is bounded by the width of its own row rather than by a
single grid width.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple


Coords = Tuple[int, int]

_LINE_BREAK = re.compile(r"\r?\n")


class SchematicError(Exception):
    """Base class for caller-visible schematic errors."""


class MissingGridError(SchematicError, TypeError):
    """Raised when no grid was supplied at all."""


class MalformedGridError(SchematicError, ValueError):
    """Raised when rows cannot be interpreted as single-line text."""


class NumericOverflowError(SchematicError, ValueError):
    """Raised when a digit run exceeds the configured width."""


def _validate_rows(rows: Sequence[str] | None) -> Tuple[str, ...]:
    if rows is None:
        raise MissingGridError("a schematic grid is required")
    if isinstance(rows, str):
        raise MalformedGridError("rows must be a sequence of strings, not a single string")
    if not isinstance(rows, Iterable):
        raise MalformedGridError(f"rows must be a sequence of strings, got {type(rows).__name__}")

    validated: List[str] = []
    for index, row in enumerate(rows):
        if not isinstance(row, str):
            raise MalformedGridError(f"row {index} must be a string, got {type(row).__name__}")
        if "\n" in row or "\r" in row:
            raise MalformedGridError(f"row {index} contains a line terminator")
        validated.append(row)
    return tuple(validated)


@dataclass(frozen=True)
class Schematic:
    """Immutable schematic grid backed by a tuple of row strings."""

    rows: Tuple[str, ...]

    def __init__(self, rows: Sequence[str] | None) -> None:
        object.__setattr__(self, "rows", _validate_rows(rows))

    # ------------------------------------------------------------------ basic
    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(len(row) for row in self.rows)

    def in_bounds(self, cell: Coords) -> bool:
        y, x = cell
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def glyph_at(self, cell: Coords) -> Optional[str]:
        """Return the character at ``cell`` or ``None`` when it is off-grid."""

        if not self.in_bounds(cell):
            return None
        y, x = cell
        return self.rows[y][x]

    def neighbours(self, cell: Coords) -> Iterator[Coords]:
        """Yield the in-bounds 8-neighbours of ``cell`` in row-major order."""

        y, x = cell
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dy == 0 and dx == 0:
                    continue
                candidate = (y + dy, x + dx)
                if self.in_bounds(candidate):
                    yield candidate

    def to_text(self) -> str:
        return "\n".join(self.rows)

    # ----------------------------------------------------------- constructions
    @classmethod
    def from_text(cls, text: str | None) -> "Schematic":
        """Build a schematic from raw file contents.

        Leading and trailing blank content is dropped and ``\\r\\n`` line
        breaks are normalised before splitting. An empty or whitespace-only
        text yields an empty schematic.
        """

        if text is None:
            raise MissingGridError("a schematic text is required")
        if not isinstance(text, str):
            raise MalformedGridError(f"schematic text must be a string, got {type(text).__name__}")

        stripped = text.strip()
        if not stripped:
            return cls(())
        return cls(_LINE_BREAK.split(stripped))

    @classmethod
    def coerce(cls, value: "Schematic | str | Sequence[str] | None") -> "Schematic":
        if isinstance(value, Schematic):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        return cls(value)


__all__ = [
    "Coords",
    "Schematic",
    "SchematicError",
    "MissingGridError",
    "MalformedGridError",
    "NumericOverflowError",
]
