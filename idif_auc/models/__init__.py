"""Dataclasses for curves and AUC results."""

from idif_auc.models.curve import Point, Curve, MatchedCurvePair, as_curve
from idif_auc.models.window import Window, WindowResult, AUCReport

__all__ = ["Point", "Curve", "MatchedCurvePair", "as_curve", "Window", "WindowResult", "AUCReport"]
