"""
IDIF AUC - Area-under-curve comparison of image-derived and reference input functions.

This package provides modular components for:
- Parsing pasted or exported time-activity curves
- Matching the end times of a Real and a Combined curve
- Computing trapezoidal AUC and percentage bias over fixed time windows
- Generating text, TSV and structured reports
"""

from idif_auc.config import AnalysisConfig, load_config
from idif_auc.errors import (
    AUCError,
    InsufficientPointsError,
    StartTimeError,
    EmptyCurveError,
    InvalidWindowError,
    IncompatibleEndTimeError,
)
from idif_auc.models import Point, Curve, MatchedCurvePair, Window, WindowResult, AUCReport
from idif_auc.loaders import parse, parse_raw, parse_curves, parse_interleaved, normalize
from idif_auc.utils import value_at, clip, trapezoidal_auc, auc_in_window
from idif_auc.analyzers import match_end_times, build_report, WindowAnalyzer

__version__ = "1.0.0"
__all__ = [
    "AnalysisConfig",
    "load_config",
    "AUCError",
    "InsufficientPointsError",
    "StartTimeError",
    "EmptyCurveError",
    "InvalidWindowError",
    "IncompatibleEndTimeError",
    "Point",
    "Curve",
    "MatchedCurvePair",
    "Window",
    "WindowResult",
    "AUCReport",
    "parse",
    "parse_raw",
    "parse_curves",
    "parse_interleaved",
    "normalize",
    "value_at",
    "clip",
    "trapezoidal_auc",
    "auc_in_window",
    "match_end_times",
    "build_report",
    "WindowAnalyzer",
]
