"""Utility helpers for analysis runs."""

from .logging import AnalysisLogger, create_analysis_logger

__all__ = [
    "AnalysisLogger",
    "create_analysis_logger",
]
