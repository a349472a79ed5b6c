"""
Tabular curve loader.

Reads CSV/TSV exports with a header row (scanner or blood-sampling
spreadsheets) into a standardized time/activity DataFrame.
"""

import pandas as pd
from pathlib import Path
from typing import List, Union

from idif_auc.loaders.text import ParseResult, build_curve, parse_number
from idif_auc.models.curve import Point


class CurveTableLoader:
    """Loader for delimited time-activity tables.

    .tsv/.tab files are read as tab separated, everything else as comma
    separated. Time and activity columns are located by header name; if no
    known header is present the first two columns are used.
    """

    TAB_SUFFIXES = ('.tsv', '.tab')

    # Known column name variations
    TIME_COLUMNS = [
        'Time (min)',
        'Time[min]',
        'time_min',
        'Time',
        'time',
        't',
    ]

    ACTIVITY_COLUMNS = [
        'Activity (Bq/ml)',
        'Activity[Bq/ml]',
        'activity_bq_ml',
        'Activity',
        'activity',
        'Value',
    ]

    def __init__(self, filepath: Union[str, Path]):
        """Initialize loader with file path.

        Args:
            filepath: Path to CSV/TSV file.
        """
        self.filepath = Path(filepath)
        self._df: pd.DataFrame = None

    def load(self) -> pd.DataFrame:
        """Load and parse the table.

        Rows keep their file order; sorting and duplicate handling happen in
        normalization so that they are reported as warnings.

        Returns:
            DataFrame with columns: time, activity

        Raises:
            ValueError: If the file has fewer than two columns.
        """
        sep = '\t' if self.filepath.suffix.lower() in self.TAB_SUFFIXES else ','
        df = pd.read_csv(self.filepath, sep=sep, encoding='utf-8-sig')

        # Clean column names (remove whitespace)
        df.columns = [str(c).strip() for c in df.columns]

        # Headerless file: the first data row was taken as the header
        if len(df.columns) >= 2 and all(parse_number(c) is not None for c in df.columns[:2]):
            df = pd.read_csv(self.filepath, sep=sep, header=None, encoding='utf-8-sig')
            df.columns = [str(c) for c in df.columns]

        if len(df.columns) < 2:
            raise ValueError(
                f"Could not find time and activity columns in {self.filepath.name}. "
                f"Found columns: {list(df.columns)}"
            )

        time_col = self._find_column(df, self.TIME_COLUMNS) or df.columns[0]
        activity_col = self._find_column(df, self.ACTIVITY_COLUMNS)
        if activity_col is None:
            activity_col = next(c for c in df.columns if c != time_col)

        df = pd.DataFrame({
            'time': pd.to_numeric(df[time_col], errors='coerce'),
            'activity': pd.to_numeric(df[activity_col], errors='coerce'),
        })

        # Drop rows with missing values
        df = df.dropna(subset=['time', 'activity']).reset_index(drop=True)

        self._df = df
        return self._df

    def _find_column(self, df: pd.DataFrame, candidates: list) -> str:
        """Find matching column name from candidates.

        Args:
            df: DataFrame to search.
            candidates: List of possible column names.

        Returns:
            Matching column name or None.
        """
        for candidate in candidates:
            if candidate in df.columns:
                return candidate
        return None

    @property
    def df(self) -> pd.DataFrame:
        """Get loaded DataFrame (loads on first access)."""
        if self._df is None:
            self._df = self.load()
        return self._df

    def to_points(self) -> List[Point]:
        """Get rows as points, in file order."""
        return [
            Point(float(t), float(a))
            for t, a in zip(self.df['time'], self.df['activity'])
        ]

    def to_curve(self, label: str = "") -> ParseResult:
        """Normalize and validate the table into an analysis-ready curve."""
        return build_curve(self.to_points(), label=label)
