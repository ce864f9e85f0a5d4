"""Analyze an engine schematic file and report part and gear-ratio sums."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from schematic import AnalyzerConfig, Schematic, SchematicReport, analyze, load_config
from schematic.utils import create_analysis_logger


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze an engine schematic")
    parser.add_argument("--input", type=Path, required=True, help="Path to the schematic text file")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML analyzer config")
    parser.add_argument("--summary", type=Path, default=None, help="Optional path for JSON summary")
    parser.add_argument("--log-dir", type=Path, default=None, help="Optional directory for JSONL metric logs")
    parser.add_argument("--run-name", type=str, default=None, help="Run name used under --log-dir")
    return parser.parse_args(argv)


def read_schematic(path: Path) -> Schematic:
    with path.open("r", encoding="utf-8") as handle:
        return Schematic.from_text(handle.read())


def write_summary(path: Path, summary: Mapping[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(summary, handle, indent=2)


def log_report(log_dir: Path, run_name: Optional[str], report: SchematicReport) -> Path:
    record = report.to_json_record()
    with create_analysis_logger(log_dir, run_name=run_name) as logger:
        for key, value in record.items():
            if isinstance(value, int):
                logger.log_scalar(f"schematic/{key}", value)
        logger.log_scalars("glyphs", record["glyph_counts"])  # type: ignore[arg-type]
        return logger.log_path


def main(argv: Optional[Sequence[str]] = None) -> SchematicReport:
    args = parse_args(argv)
    config = load_config(args.config) if args.config else AnalyzerConfig()

    schematic = read_schematic(args.input)
    print(
        f"[analyze_schematic] Loaded {schematic.height} rows "
        f"(widest {max(schematic.widths, default=0)}) from {args.input}"
    )

    report = analyze(schematic, config)
    print(f"Sum of engine parts: {report.sum_of_parts}")
    print(f"Sum of gear ratios: {report.sum_of_gear_ratios}")

    if args.summary:
        write_summary(args.summary, report.to_json_record())
        print(f"[analyze_schematic] Wrote summary to {args.summary}")

    if args.log_dir:
        log_path = log_report(args.log_dir, args.run_name, report)
        print(f"[analyze_schematic] Logged metrics to {log_path}")

    return report


if __name__ == "__main__":
    main()
