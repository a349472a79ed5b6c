"""
Report Generator - Text, TSV and structured report generation.
"""

from typing import Optional, Dict, Any, Sequence
from datetime import datetime

import numpy as np
import pandas as pd

from idif_auc.config import AnalysisConfig
from idif_auc.models.window import WindowResult, AUCReport

COLUMNS = ['Label', 'IDIF_AUC', 'Real_AUC', '%Bias_vs_Real']
MISSING_BIAS = '-'


class ReportGenerator:
    """Generate AUC reports for display and export.

    The table always keeps the row order of the results it is given.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize report generator.

        Args:
            config: Optional configuration.
        """
        self.config = config or AnalysisConfig()

    def to_dataframe(self, results: Sequence[WindowResult]) -> pd.DataFrame:
        """Convert results to a DataFrame with one row per window.

        Undefined bias values become NaN.
        """
        return pd.DataFrame({
            COLUMNS[0]: [r.label for r in results],
            COLUMNS[1]: np.array([r.combined_auc for r in results], dtype=float),
            COLUMNS[2]: np.array([r.real_auc for r in results], dtype=float),
            COLUMNS[3]: np.array(
                [r.bias_percent if r.has_bias else np.nan for r in results],
                dtype=float,
            ),
        })

    def to_tsv(self, results: Sequence[WindowResult], precision: Optional[int] = None) -> str:
        """Serialize results as tab-separated rows for pasting into a spreadsheet.

        Args:
            results: Report rows.
            precision: Decimal digits for every number. Defaults to
                output.export_precision (9).

        Returns:
            "label\\tidif\\treal\\tbias" lines without a header; undefined
            bias is written as "-".
        """
        if precision is None:
            precision = self.config.output.export_precision
        df = self.to_dataframe(results)
        tsv = df.to_csv(
            sep='\t',
            header=False,
            index=False,
            float_format=f'%.{precision}f',
            na_rep=MISSING_BIAS,
            lineterminator='\n',
        )
        return tsv.rstrip('\n')

    def format_bias(self, bias: Optional[float]) -> str:
        if bias is None:
            return MISSING_BIAS
        return f"{bias:.{self.config.output.bias_precision}f}"

    def generate_text_report(self, report: AUCReport) -> str:
        """Generate a human-readable results table.

        Args:
            report: Output of one compute run.

        Returns:
            Formatted text report.
        """
        out = self.config.output
        rows = [COLUMNS] + [
            [
                r.label,
                f"{r.combined_auc:.{out.decimal_places}f}",
                f"{r.real_auc:.{out.decimal_places}f}",
                self.format_bias(r.bias_percent),
            ]
            for r in report.results
        ]
        widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]

        lines = []
        lines.append("=" * 60)
        lines.append("IDIF AUC REPORT")
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
        lines.append("=" * 60)
        lines.append("")
        lines.append(
            f"Matched end time: {report.common_end_time:.{out.end_time_precision}f} min"
        )
        lines.append(f"Cutoffs: {report.cutoff_a:g} min, {report.cutoff_b:g} min")
        lines.append("")

        for i, row in enumerate(rows):
            lines.append("  ".join(
                cell.ljust(w) if j == 0 else cell.rjust(w)
                for j, (cell, w) in enumerate(zip(row, widths))
            ).rstrip())
            if i == 0:
                lines.append("  ".join("-" * w for w in widths))
        lines.append("")

        if report.warnings:
            lines.append("Warnings:")
            for warning in report.warnings:
                lines.append(f"  - {warning}")
            lines.append("")

        lines.append("=" * 60)

        return "\n".join(lines)

    def generate_summary_dict(self, report: AUCReport) -> Dict[str, Any]:
        """Generate structured summary dictionary.

        Args:
            report: Output of one compute run.

        Returns:
            Dictionary with summary data, JSON serializable.
        """
        summary = {
            'generated_at': datetime.now().isoformat(),
        }
        summary.update(report.to_dict())
        return summary
