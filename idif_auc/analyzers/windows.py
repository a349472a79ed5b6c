"""
Window Analyzer - AUC and bias over the fixed analysis windows.

The report always has four rows, in this order:
- Combined: the whole matched span [0, end]
- 0-A min: [0, cutoff_a]
- 0-B min: [0, cutoff_b]
- B-end: [cutoff_b, end]
"""

import logging
from typing import Optional, List, Sequence

from idif_auc.analyzers.matching import match_end_times
from idif_auc.config import AnalysisConfig
from idif_auc.errors import IncompatibleEndTimeError
from idif_auc.models.curve import Curve, MatchedCurvePair, as_curve
from idif_auc.models.window import Window, WindowResult, AUCReport
from idif_auc.utils.integration import auc_in_window
from idif_auc.utils.interpolation import CurveLike

logger = logging.getLogger(__name__)

TOTAL_LABEL = "Combined"


def fixed_windows(common_end_time: float, cutoff_a: float, cutoff_b: float) -> List[Window]:
    """Build the four report windows in report order."""
    return [
        Window(TOTAL_LABEL, 0.0, common_end_time),
        Window(f"0-{cutoff_a:g} min", 0.0, cutoff_a),
        Window(f"0-{cutoff_b:g} min", 0.0, cutoff_b),
        Window(f"{cutoff_b:g}-end", cutoff_b, common_end_time),
    ]


def bias_percent(combined_auc: float, real_auc: float) -> Optional[float]:
    """Percentage deviation of the Combined AUC from the Real AUC.

    Returns None when real_auc is 0.
    """
    if real_auc == 0:
        return None
    # + 0.0 turns a -0.0 result into 0.0
    return (combined_auc - real_auc) / real_auc * 100 + 0.0


def evaluate_window(matched: MatchedCurvePair, window: Window) -> WindowResult:
    """Compute both AUCs and the bias over one window."""
    combined_auc = auc_in_window(matched.combined, window.start, window.end)
    real_auc = auc_in_window(matched.real, window.start, window.end)
    result = WindowResult(
        label=window.label,
        combined_auc=combined_auc,
        real_auc=real_auc,
        bias_percent=bias_percent(combined_auc, real_auc),
    )
    logger.debug(
        "%s [%g, %g]: combined=%.9f real=%.9f bias=%s",
        window.label, window.start, window.end, combined_auc, real_auc,
        '-' if result.bias_percent is None else f"{result.bias_percent:.9f}",
    )
    return result


def check_end_time(common_end_time: float, cutoff_b: float) -> None:
    """Ensure the cutoff_b-end window is non-empty.

    Raises:
        IncompatibleEndTimeError: If common_end_time <= cutoff_b.
    """
    if common_end_time <= cutoff_b:
        raise IncompatibleEndTimeError(
            f"Common end time ({common_end_time:g}) must be > {cutoff_b:g} "
            f"for {cutoff_b:g}-end computation"
        )


def build_report(
    real: CurveLike,
    combined: CurveLike,
    cutoff_a: float = 5.0,
    cutoff_b: float = 10.0,
) -> List[WindowResult]:
    """Match end times and compute AUC/bias for the four fixed windows.

    Args:
        real: Real (reference) curve.
        combined: Combined curve.
        cutoff_a: End of the first early window (minutes).
        cutoff_b: End of the second early window and start of the late one.

    Returns:
        Four WindowResults in report order.

    Raises:
        IncompatibleEndTimeError: If the common end time <= cutoff_b.
        InvalidWindowError: If a cutoff produces an empty window.
        EmptyCurveError: If either curve is empty.
    """
    matched = match_end_times(real, combined)
    check_end_time(matched.common_end_time, cutoff_b)
    return [
        evaluate_window(matched, window)
        for window in fixed_windows(matched.common_end_time, cutoff_a, cutoff_b)
    ]


class WindowAnalyzer:
    """Analyzer for a Real/Combined curve pair.

    Wraps the matching and window evaluation steps and packages the output
    of one compute run as an AUCReport.
    """

    def __init__(
        self,
        real: CurveLike,
        combined: CurveLike,
        config: Optional[AnalysisConfig] = None,
        warnings: Sequence[str] = (),
    ):
        """Initialize window analyzer.

        Args:
            real: Real curve, normally from the parser.
            combined: Combined curve, normally from the parser.
            config: Optional configuration. Uses defaults if None.
            warnings: Parser warnings to carry into the report.
        """
        self.real: Curve = as_curve(real)
        self.combined: Curve = as_curve(combined)
        self.config = config or AnalysisConfig()
        self.warnings = tuple(warnings)
        self._matched: Optional[MatchedCurvePair] = None

    @property
    def cutoff_a(self) -> float:
        return self.config.windows.cutoff_a

    @property
    def cutoff_b(self) -> float:
        return self.config.windows.cutoff_b

    @property
    def matched(self) -> MatchedCurvePair:
        """Get the end-time matched curves (computed on first access)."""
        if self._matched is None:
            self._matched = match_end_times(self.real, self.combined)
        return self._matched

    def windows(self) -> List[Window]:
        """Get the report windows for the matched end time."""
        return fixed_windows(self.matched.common_end_time, self.cutoff_a, self.cutoff_b)

    def results(self) -> List[WindowResult]:
        """Compute the four report rows."""
        check_end_time(self.matched.common_end_time, self.cutoff_b)
        return [evaluate_window(self.matched, window) for window in self.windows()]

    def report(self) -> AUCReport:
        """Compute the full report for this curve pair."""
        results = self.results()
        return AUCReport(
            matched=self.matched,
            results=tuple(results),
            cutoff_a=self.cutoff_a,
            cutoff_b=self.cutoff_b,
            warnings=self.warnings,
        )
