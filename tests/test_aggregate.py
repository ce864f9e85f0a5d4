"""Tests for the analysis pipeline and its reductions."""

from __future__ import annotations

import pytest

import schematic.adjacency as adjacency_mod
import schematic.aggregate as aggregate_mod
from schematic import (
    AnalyzerConfig,
    MissingGridError,
    NumericOverflowError,
    Schematic,
    analyze,
    find_gear_candidates,
    gear_ratio,
    sum_of_gear_ratios,
    sum_of_parts,
    tokenize,
)


def test_sample_schematic_sums(sample_rows) -> None:
    report = analyze(sample_rows)

    assert report.sum_of_parts == 4361
    assert report.sum_of_gear_ratios == 467835


def test_analyze_accepts_text_and_schematic(sample_rows, sample_text) -> None:
    from_text = analyze(sample_text)
    from_grid = analyze(Schematic(sample_rows))

    assert (from_text.sum_of_parts, from_text.sum_of_gear_ratios) == (4361, 467835)
    assert from_text == from_grid


def test_grid_without_symbols_sums_to_zero() -> None:
    report = analyze("123\n456\n789")

    assert report.sum_of_parts == 0
    assert report.sum_of_gear_ratios == 0
    assert len(report.tokens.numbers) == 3


def test_empty_grid_sums_to_zero() -> None:
    for grid in ([], "", Schematic([])):
        report = analyze(grid)
        assert report.sum_of_parts == 0
        assert report.sum_of_gear_ratios == 0


def test_missing_grid_is_an_error() -> None:
    with pytest.raises(MissingGridError):
        analyze(None)


def test_three_way_gear_contributes_nothing() -> None:
    report = analyze(["1.2", ".*.", "3.."])

    assert report.sum_of_parts == 6
    assert report.sum_of_gear_ratios == 0
    assert report.gears == ()


def test_shared_number_counts_for_each_gear() -> None:
    report = analyze(["2*3*4"])

    assert report.sum_of_parts == 9
    assert report.sum_of_gear_ratios == 2 * 3 + 3 * 4


def test_reductions_on_empty_inputs() -> None:
    assert sum_of_parts([]) == 0
    assert sum_of_gear_ratios([]) == 0


def test_gear_ratio_multiplies_values() -> None:
    (gear,) = find_gear_candidates(tokenize(Schematic(["12*5"])))
    assert gear_ratio(gear) == 60


def test_config_changes_glyph_semantics() -> None:
    # With "_" as background, "." is an ordinary symbol.
    report = analyze(["4_", "._"], AnalyzerConfig(empty_glyph="_"))
    assert report.sum_of_parts == 4

    report = analyze(["1.2", ".#.", "3.."], AnalyzerConfig(gear_glyph="#", gear_arity=3))
    assert report.sum_of_gear_ratios == 6


def test_config_without_index_matches_default(sample_rows) -> None:
    indexed = analyze(sample_rows)
    naive = analyze(sample_rows, AnalyzerConfig(use_index=False))
    assert indexed == naive


def test_config_digit_limit() -> None:
    with pytest.raises(NumericOverflowError):
        analyze(["12345*"], AnalyzerConfig(max_number_digits=4))


def test_report_json_record(sample_rows) -> None:
    record = analyze(sample_rows).to_json_record()

    assert record == {
        "sum_of_parts": 4361,
        "sum_of_gear_ratios": 467835,
        "num_numbers": 10,
        "num_symbols": 6,
        "num_parts": 8,
        "num_gears": 2,
        "glyph_counts": {"#": 1, "$": 1, "*": 3, "+": 1},
    }


def test_analyze_builds_adjacency_once(sample_rows, monkeypatch) -> None:
    calls: list[bool] = []
    original = adjacency_mod.compute_adjacency

    def counting(tokens, *, use_index=True):
        calls.append(use_index)
        return original(tokens, use_index=use_index)

    monkeypatch.setattr(aggregate_mod, "compute_adjacency", counting)
    monkeypatch.setattr(adjacency_mod, "compute_adjacency", counting)

    report = analyze(sample_rows)

    assert (report.sum_of_parts, report.sum_of_gear_ratios) == (4361, 467835)
    assert calls == [True]
