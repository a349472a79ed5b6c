"""Numeric utilities for curve analysis."""

from idif_auc.utils.interpolation import value_at, clip
from idif_auc.utils.integration import trapezoidal_auc, auc_in_window

__all__ = [
    "value_at",
    "clip",
    "trapezoidal_auc",
    "auc_in_window",
]
