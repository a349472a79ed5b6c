"""Report generation for AUC results."""

from idif_auc.reports.generator import ReportGenerator

__all__ = ["ReportGenerator"]
