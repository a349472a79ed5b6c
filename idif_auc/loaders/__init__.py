"""Curve loaders for pasted text and delimited table files."""

from idif_auc.loaders.text import (
    LineFormat,
    ParseResult,
    ParsedCurves,
    normalize,
    parse,
    parse_raw,
    parse_curves,
    parse_interleaved,
    parse_text_input,
)
from idif_auc.loaders.table import CurveTableLoader

__all__ = [
    "LineFormat",
    "ParseResult",
    "ParsedCurves",
    "normalize",
    "parse",
    "parse_raw",
    "parse_curves",
    "parse_interleaved",
    "parse_text_input",
    "CurveTableLoader",
]
