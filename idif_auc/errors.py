"""
Error taxonomy for the AUC pipeline.

Every error is terminal for the computation that raised it. Messages are
human-readable and meant to be shown to the user as-is.
"""


class AUCError(ValueError):
    """Base class for all curve and report errors."""


class InsufficientPointsError(AUCError):
    """Fewer than 2 numeric points were parsed for a curve."""


class StartTimeError(AUCError):
    """A normalized curve does not start at time 0."""


class EmptyCurveError(AUCError):
    """Interpolation or clipping was attempted on a zero-length curve."""


class InvalidWindowError(AUCError):
    """An AUC window has start >= end."""


class IncompatibleEndTimeError(AUCError):
    """The common end time does not exceed the second cutoff."""
