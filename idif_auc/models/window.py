"""
Window and result dataclasses for the AUC report.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from idif_auc.models.curve import MatchedCurvePair


@dataclass(frozen=True)
class Window:
    """A named closed interval [start, end] over which AUC is computed."""
    label: str
    start: float
    end: float


@dataclass(frozen=True)
class WindowResult:
    """AUC of both curves over one window.

    bias_percent is None when real_auc is 0; it is displayed as "-".
    """
    label: str
    combined_auc: float
    real_auc: float
    bias_percent: Optional[float]

    @property
    def has_bias(self) -> bool:
        return self.bias_percent is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'label': self.label,
            'combined_auc': self.combined_auc,
            'real_auc': self.real_auc,
            'bias_percent': self.bias_percent,
        }


@dataclass(frozen=True)
class AUCReport:
    """Everything one compute run produces."""
    matched: MatchedCurvePair
    results: Tuple[WindowResult, ...]
    cutoff_a: float
    cutoff_b: float
    warnings: Tuple[str, ...] = ()

    @property
    def common_end_time(self) -> float:
        return self.matched.common_end_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            'common_end_time': self.common_end_time,
            'cutoff_a': self.cutoff_a,
            'cutoff_b': self.cutoff_b,
            'results': [r.to_dict() for r in self.results],
            'warnings': list(self.warnings),
        }
