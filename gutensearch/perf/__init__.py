"""Latency comparison between search backends."""

from gutensearch.perf.compare import compare_performance
from gutensearch.perf.models import ComparisonReport, PhraseComparison, Statistics, TrialRecord
from gutensearch.perf.phrases import DEFAULT_PHRASES_PATH, read_phrases

__all__ = [
    "ComparisonReport",
    "DEFAULT_PHRASES_PATH",
    "PhraseComparison",
    "Statistics",
    "TrialRecord",
    "compare_performance",
    "read_phrases",
]
