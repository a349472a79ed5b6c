"""Analyzers for matched curve pairs."""

from idif_auc.analyzers.matching import match_end_times, conform_to_end_time
from idif_auc.analyzers.windows import WindowAnalyzer, build_report, fixed_windows, bias_percent

__all__ = [
    "match_end_times",
    "conform_to_end_time",
    "WindowAnalyzer",
    "build_report",
    "fixed_windows",
    "bias_percent",
]
