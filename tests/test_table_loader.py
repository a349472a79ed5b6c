"""
Unit Tests for the tabular curve loader.
"""

import pytest

from idif_auc.errors import StartTimeError
from idif_auc.loaders.table import CurveTableLoader
from idif_auc.models.curve import Point


class TestCurveTableLoader:
    """CSV/TSV loading."""

    def test_known_headers(self, tmp_path):
        path = tmp_path / "real.csv"
        path.write_text("Sample,Time (min),Activity (Bq/ml)\nA,0,0\nB,5,10\nC,10,0\n")

        result = CurveTableLoader(path).to_curve(label="Real")

        assert [(p.time, p.activity) for p in result.curve] == [(0, 0), (5, 10), (10, 0)]
        assert result.curve.label == "Real"

    def test_unknown_headers_use_first_two_columns(self, tmp_path):
        path = tmp_path / "curve.csv"
        path.write_text("x,y\n0,1\nbad,2\n5,3\n")

        loader = CurveTableLoader(path)

        assert loader.to_points() == [Point(0, 1), Point(5, 3)]
        assert list(loader.df.columns) == ['time', 'activity']

    def test_headerless_file(self, tmp_path):
        path = tmp_path / "curve.csv"
        path.write_text("0,1\n5,2\n10,3\n")

        assert CurveTableLoader(path).to_points() == [Point(0, 1), Point(5, 2), Point(10, 3)]

    def test_tab_separated(self, tmp_path):
        path = tmp_path / "curve.tsv"
        path.write_text("Time\tActivity\n5\t2\n0\t1\n5\t4\n")

        result = CurveTableLoader(path).to_curve()

        assert [(p.time, p.activity) for p in result.curve] == [(0, 1), (5, 4)]
        assert len(result.warnings) == 2

    def test_validation_applies(self, tmp_path):
        path = tmp_path / "late.csv"
        path.write_text("Time,Activity\n1,1\n2,2\n")
        with pytest.raises(StartTimeError):
            CurveTableLoader(path).to_curve()

    def test_single_column(self, tmp_path):
        path = tmp_path / "one.csv"
        path.write_text("Time\n0\n1\n")
        with pytest.raises(ValueError, match="Could not find"):
            CurveTableLoader(path).load()
