from __future__ import annotations

import pytest


SAMPLE_ROWS = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.fixture
def sample_rows() -> list[str]:
    return list(SAMPLE_ROWS)


@pytest.fixture
def sample_text() -> str:
    return "\n".join(SAMPLE_ROWS)
