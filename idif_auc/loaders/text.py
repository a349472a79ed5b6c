"""
Pasted-text curve parser.

Turns delimited text (spreadsheet pastes, exported tables) into normalized,
validated curves. Each line contributes one (time, activity) point taken
from its first two numeric tokens; everything else on the line is ignored.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from idif_auc.errors import InsufficientPointsError, StartTimeError
from idif_auc.models.curve import Curve, Point

logger = logging.getLogger(__name__)

# Leading float literal, matched the way spreadsheet values are usually
# read: "12.5", "-3e-2", ".5", "5min" -> 5. Anything else is not a number.
_NUMBER_PREFIX = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

MIN_POINTS = 2


class LineFormat(str, Enum):
    """How numbers on a line map onto curves."""
    SEPARATE = "separate"        # one curve per text block, 2 numbers per line
    INTERLEAVED = "interleaved"  # one block, Real (t, a) then Combined (t, a)


@dataclass(frozen=True)
class ParseResult:
    """A validated curve plus the non-fatal warnings raised while building it."""
    curve: Curve
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedCurves:
    """Real and Combined curves parsed for one compute run."""
    real: Curve
    combined: Curve
    warnings: Tuple[str, ...] = ()


def parse_number(token: str) -> Optional[float]:
    """Parse the leading numeric part of a token.

    Returns None when the token does not start with a number, or when the
    literal overflows to infinity.
    """
    match = _NUMBER_PREFIX.match(token.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def split_fields(line: str) -> List[str]:
    """Split a trimmed line on tabs, falling back to runs of whitespace."""
    parts = line.split('\t')
    if len(parts) < 2:
        parts = line.split()
    return parts


def extract_numbers(line: str) -> List[float]:
    """Return every numeric token on a line, in order."""
    numbers = []
    for part in split_fields(line.strip()):
        value = parse_number(part)
        if value is not None:
            numbers.append(value)
    return numbers


def iter_numeric_rows(text: str) -> Iterator[List[float]]:
    """Yield the numeric tokens of each line holding at least two numbers."""
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        numbers = extract_numbers(line)
        if len(numbers) >= 2:
            yield numbers


def parse_raw(text: str) -> List[Point]:
    """Extract points for display or editing without validating them.

    Points keep their input order; nothing is sorted, deduplicated or
    checked against the start-time rule.
    """
    return [Point(numbers[0], numbers[1]) for numbers in iter_numeric_rows(text)]


def _format_time(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def _curve_name(label: str) -> str:
    return f"{label} curve" if label else "Curve"


def normalize(
    points: Sequence[Point],
    warnings: Optional[List[str]] = None,
    label: str = "",
) -> Curve:
    """Sort points by time and drop duplicate times.

    When a time appears more than once, the activity from its last
    occurrence in the input wins. Duplicates and out-of-order input are
    reported through ``warnings`` (and the log), never raised.

    Args:
        points: Points in input order.
        warnings: Optional list that receives warning messages.
        label: Label for the resulting curve.

    Returns:
        Curve with strictly increasing times.
    """
    if warnings is None:
        warnings = []
    points = list(points)

    seen = set()
    duplicate_times = []
    for p in points:
        if p.time in seen:
            duplicate_times.append(p.time)
        seen.add(p.time)
    if duplicate_times:
        message = (
            f"Found duplicate times: {', '.join(_format_time(t) for t in duplicate_times)}. "
            f"Keeping last occurrence."
        )
        if label:
            message = f"{label}: {message}"
        warnings.append(message)
        logger.warning(message)

    # sorted() is stable, so later duplicates overwrite earlier ones below
    by_time = {}
    for p in sorted(points, key=lambda p: p.time):
        by_time[p.time] = p.activity
    deduped = [Point(t, by_time[t]) for t in sorted(by_time)]

    was_monotonic = all(
        cur.time >= prev.time for prev, cur in zip(points, points[1:])
    )
    if not was_monotonic:
        message = "Times were not monotonic; sorted to fix."
        if label:
            message = f"{label}: {message}"
        warnings.append(message)
        logger.warning(message)

    return Curve(tuple(deduped), label=label)


def build_curve(points: Sequence[Point], label: str = "") -> ParseResult:
    """Normalize and validate extracted points into an analysis-ready curve.

    Raises:
        InsufficientPointsError: Fewer than 2 points.
        StartTimeError: The normalized curve does not start at time 0.
    """
    if len(points) < MIN_POINTS:
        raise InsufficientPointsError(
            f"Insufficient {_curve_name(label)} points: found {len(points)}, "
            f"need at least {MIN_POINTS}"
        )

    warnings: List[str] = []
    curve = normalize(points, warnings, label=label)

    if curve.start_time != 0:
        raise StartTimeError(f"{_curve_name(label)} must start at time 0")

    logger.debug(
        "Parsed %s: %d points, %g to %g min",
        _curve_name(label), len(curve), curve.start_time, curve.end_time,
    )
    return ParseResult(curve=curve, warnings=tuple(warnings))


def parse(text: str, label: str = "") -> ParseResult:
    """Parse one curve from its own block of text.

    Args:
        text: Lines of tab- or whitespace-separated tokens.
        label: Curve name used in warnings and error messages.

    Returns:
        ParseResult with the normalized curve and any warnings.

    Raises:
        InsufficientPointsError: Fewer than 2 numeric points.
        StartTimeError: The first normalized time is not 0.
    """
    return build_curve(parse_raw(text), label=label)


def parse_curves(real_text: str, combined_text: str) -> ParsedCurves:
    """Parse the Real and Combined curves from separate text blocks."""
    real = parse(real_text, label="Real")
    combined = parse(combined_text, label="Combined")
    return ParsedCurves(
        real=real.curve,
        combined=combined.curve,
        warnings=real.warnings + combined.warnings,
    )


def parse_interleaved(text: str) -> ParsedCurves:
    """Parse both curves from one block with four numbers per line.

    Numbers 1-2 of each line feed the Real curve and numbers 3-4 feed the
    Combined curve. Lines with only two numbers extend the Real curve alone.
    """
    real_points = []
    combined_points = []
    for numbers in iter_numeric_rows(text):
        real_points.append(Point(numbers[0], numbers[1]))
        if len(numbers) >= 4:
            combined_points.append(Point(numbers[2], numbers[3]))

    # Both counts are checked before either curve is normalized
    for label, points in (("Real", real_points), ("Combined", combined_points)):
        if len(points) < MIN_POINTS:
            raise InsufficientPointsError(
                f"Insufficient {label} curve points: found {len(points)}, "
                f"need at least {MIN_POINTS}"
            )

    real = build_curve(real_points, label="Real")
    combined = build_curve(combined_points, label="Combined")
    return ParsedCurves(
        real=real.curve,
        combined=combined.curve,
        warnings=real.warnings + combined.warnings,
    )


def parse_text_input(
    text: str,
    combined_text: Optional[str] = None,
    line_format: LineFormat = LineFormat.SEPARATE,
) -> ParsedCurves:
    """Dispatch to the parser for the selected line format.

    For LineFormat.SEPARATE, ``text`` holds the Real curve and
    ``combined_text`` the Combined curve. For LineFormat.INTERLEAVED only
    ``text`` is read.
    """
    line_format = LineFormat(line_format)
    if line_format is LineFormat.INTERLEAVED:
        return parse_interleaved(text)
    if combined_text is None:
        raise ValueError("Separate line format needs a Combined curve text block")
    return parse_curves(text, combined_text)
