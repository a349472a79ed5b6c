"""
Unit Tests for report generation.
"""

import json
import math

import pytest

from idif_auc.analyzers.windows import WindowAnalyzer
from idif_auc.config import AnalysisConfig
from idif_auc.models.curve import Curve
from idif_auc.models.window import WindowResult
from idif_auc.reports.generator import ReportGenerator


@pytest.fixture
def report():
    real = Curve.from_pairs([(0, 0), (5, 0), (10, 10), (20, 10)], label="Real")
    combined = Curve.from_pairs([(0, 0), (5, 2), (10, 10), (20, 10)], label="Combined")
    return WindowAnalyzer(real, combined, warnings=["Real: Times were not monotonic; sorted to fix."]).report()


class TestTsvExport:
    """Tab-separated export."""

    def test_rows(self, report):
        tsv = ReportGenerator().to_tsv(report.results)
        lines = tsv.split("\n")
        assert lines == [
            "Combined\t135.000000000\t125.000000000\t8.000000000",
            "0-5 min\t5.000000000\t0.000000000\t-",
            "0-10 min\t35.000000000\t25.000000000\t40.000000000",
            "10-end\t100.000000000\t100.000000000\t0.000000000",
        ]

    def test_custom_precision(self, report):
        tsv = ReportGenerator().to_tsv(report.results, precision=2)
        assert tsv.split("\n")[1] == "0-5 min\t5.00\t0.00\t-"

    def test_all_bias_undefined(self):
        results = [WindowResult("Combined", 1.0, 0.0, None)]
        assert ReportGenerator().to_tsv(results) == "Combined\t1.000000000\t0.000000000\t-"

    def test_identical_negative_curves_export_unsigned_zero_bias(self):
        curve = Curve.from_pairs([(0, -1), (20, -1)])
        report = WindowAnalyzer(curve, curve).report()
        tsv = ReportGenerator().to_tsv(report.results)
        assert tsv.split("\n")[0] == "Combined\t-20.000000000\t-20.000000000\t0.000000000"


class TestDataFrame:
    """DataFrame view of the results."""

    def test_columns_and_nan_bias(self, report):
        df = ReportGenerator().to_dataframe(report.results)
        assert list(df.columns) == ['Label', 'IDIF_AUC', 'Real_AUC', '%Bias_vs_Real']
        assert list(df['Label']) == ["Combined", "0-5 min", "0-10 min", "10-end"]
        assert math.isnan(df['%Bias_vs_Real'].iloc[1])
        assert df['IDIF_AUC'].iloc[0] == pytest.approx(135.0)

    def test_has_bias_drives_nan(self):
        results = [
            WindowResult("Combined", 2.0, 1.0, 100.0),
            WindowResult("0-5 min", 1.0, 0.0, None),
        ]
        assert results[0].has_bias
        assert not results[1].has_bias
        bias = ReportGenerator().to_dataframe(results)["%Bias_vs_Real"]
        assert bias.iloc[0] == pytest.approx(100.0)
        assert math.isnan(bias.iloc[1])


class TestTextReport:
    """Human-readable report."""

    def test_contents(self, report):
        text = ReportGenerator().generate_text_report(report)
        assert "Matched end time: 20.000000 min" in text
        assert "135.0000" in text
        assert "8.000000000" in text
        assert "Times were not monotonic" in text
        row = next(line for line in text.splitlines() if line.startswith("0-5 min"))
        assert row.split()[-1] == "-"

    def test_decimal_places_from_config(self, report):
        config = AnalysisConfig()
        config.output.decimal_places = 1
        text = ReportGenerator(config).generate_text_report(report)
        assert "135.0 " in text or "135.0\n" in text
        assert "135.0000" not in text


class TestSummaryDict:
    """Structured summary."""

    def test_json_serializable(self, report):
        summary = ReportGenerator().generate_summary_dict(report)
        data = json.loads(json.dumps(summary))
        assert data['common_end_time'] == 20
        assert data['results'][1]['bias_percent'] is None
        assert [r['label'] for r in data['results']][0] == "Combined"
        assert 'generated_at' in data
