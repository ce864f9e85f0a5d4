"""Analyzer configuration loaded from mappings or YAML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .adjacency import DEFAULT_GEAR_ARITY, DEFAULT_GEAR_GLYPH
from .tokens import DEFAULT_EMPTY_GLYPH


def _single_glyph(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"analyzer.{key} must be a single character")
    if "0" <= value <= "9":
        raise ValueError(f"analyzer.{key} cannot be a digit")
    return value


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuration bundle for :func:`schematic.aggregate.analyze`."""

    empty_glyph: str = DEFAULT_EMPTY_GLYPH
    gear_glyph: str = DEFAULT_GEAR_GLYPH
    gear_arity: int = DEFAULT_GEAR_ARITY
    use_index: bool = True
    max_number_digits: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "AnalyzerConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("analyzer configuration must be a mapping")

        empty_glyph = _single_glyph(data, "empty_glyph", cls.empty_glyph)
        gear_glyph = _single_glyph(data, "gear_glyph", cls.gear_glyph)
        if gear_glyph == empty_glyph:
            raise ValueError("analyzer.gear_glyph must differ from analyzer.empty_glyph")

        arity_value = int(data.get("gear_arity", cls.gear_arity))
        if arity_value <= 0:
            raise ValueError("analyzer.gear_arity must be positive")

        raw_digits = data.get("max_number_digits", cls.max_number_digits)
        max_digits = None if raw_digits is None else int(raw_digits)
        if max_digits is not None and max_digits <= 0:
            raise ValueError("analyzer.max_number_digits must be positive")

        return cls(
            empty_glyph=empty_glyph,
            gear_glyph=gear_glyph,
            gear_arity=arity_value,
            use_index=bool(data.get("use_index", cls.use_index)),
            max_number_digits=max_digits,
        )


def load_config(path: Path | str) -> AnalyzerConfig:
    """Read an :class:`AnalyzerConfig` from a YAML file.

    Fields may sit at the top level or under an ``analyzer`` key. An empty
    file yields the defaults.
    """

    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return AnalyzerConfig()
    if not isinstance(data, Mapping):
        raise ValueError(f"configuration must be a mapping: {path}")
    section = data.get("analyzer", data)
    return AnalyzerConfig.from_mapping(section)


__all__ = ["AnalyzerConfig", "load_config"]
