from hypothesis import given, settings, strategies as st

from schematic import AnalyzerConfig, Schematic, analyze, compute_adjacency, is_adjacent, tokenize
from schematic.tokens import CellKind, classify_glyph


GLYPHS = "0123456789....*#+$"


@st.composite
def schematics(draw):
    height = draw(st.integers(min_value=0, max_value=6))
    rows = draw(
        st.lists(
            st.text(alphabet=GLYPHS, min_size=1, max_size=8),
            min_size=height,
            max_size=height,
        )
    )
    return Schematic(rows)


def _reference_part_sum(grid: Schematic) -> int:
    """Neighbour-scan oracle that does not use the token adjacency code."""

    total = 0
    for number in tokenize(grid).numbers:
        touching = any(
            classify_glyph(grid.glyph_at(neighbour)) is CellKind.SYMBOL
            for cell in number.cells
            for neighbour in grid.neighbours(cell)
        )
        if touching:
            total += number.value
    return total


@settings(max_examples=60, deadline=500)
@given(grid=schematics())
def test_sums_are_non_negative_and_idempotent(grid: Schematic):
    first = analyze(grid)
    second = analyze(grid)

    assert first.sum_of_parts >= 0
    assert first.sum_of_gear_ratios >= 0
    assert first == second


@settings(max_examples=60, deadline=500)
@given(grid=schematics())
def test_part_sum_matches_neighbour_scan(grid: Schematic):
    assert analyze(grid).sum_of_parts == _reference_part_sum(grid)


@settings(max_examples=60, deadline=500)
@given(grid=schematics())
def test_indexed_resolver_matches_cross_product(grid: Schematic):
    tokens = tokenize(grid)
    assert compute_adjacency(tokens, use_index=True) == compute_adjacency(tokens, use_index=False)
    assert analyze(grid) == analyze(grid, AnalyzerConfig(use_index=False))


@settings(max_examples=40, deadline=500)
@given(grid=schematics())
def test_adjacency_is_symmetric(grid: Schematic):
    tokens = tokenize(grid)
    for number in tokens.numbers:
        for symbol in tokens.symbols:
            forward = is_adjacent(number, symbol)
            backward = any(
                abs(symbol.cell[0] - y) <= 1 and abs(symbol.cell[1] - x) <= 1 for y, x in number.cells
            )
            assert forward == backward


@settings(max_examples=40, deadline=500)
@given(grid=schematics())
def test_gears_have_exactly_two_numbers(grid: Schematic):
    report = analyze(grid)
    for gear in report.gears:
        assert gear.symbol.glyph == "*"
        assert len(gear.numbers) == 2
        assert all(is_adjacent(number, gear.symbol) for number in gear.numbers)
