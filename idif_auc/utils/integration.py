"""
Trapezoidal AUC over whole curves and time windows.
"""

import numpy as np

from idif_auc.errors import InvalidWindowError
from idif_auc.models.curve import as_curve
from idif_auc.utils.interpolation import CurveLike, clip


def trapezoidal_auc(curve: CurveLike) -> float:
    """Calculate Area Under Curve using the trapezoidal rule.

    Negative activities are integrated as-is.

    Args:
        curve: Curve with strictly increasing times.

    Returns:
        AUC in activity x minutes, 0.0 for fewer than 2 points.
    """
    curve = as_curve(curve)
    if len(curve) < 2:
        return 0.0

    t = curve.times
    y = curve.activities
    return float(np.sum((y[:-1] + y[1:]) / 2.0 * np.diff(t)))


def auc_in_window(curve: CurveLike, a: float, b: float) -> float:
    """Calculate AUC over the closed window [a, b].

    Raises:
        InvalidWindowError: If a >= b.
    """
    if a >= b:
        raise InvalidWindowError(f"Invalid window: [{a:g}, {b:g}]")
    return trapezoidal_auc(clip(curve, a, b))
