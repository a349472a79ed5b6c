"""
Curve dataclasses.

Points and curves are immutable. Every transform in the pipeline returns a
new Curve instead of editing one in place.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Dict, Any, List

import numpy as np


@dataclass(frozen=True)
class Point:
    """A single (time, activity) sample. Time is in minutes."""
    time: float
    activity: float

    def to_dict(self) -> Dict[str, float]:
        return {'time': self.time, 'activity': self.activity}


@dataclass(frozen=True)
class Curve:
    """Ordered sequence of points with strictly increasing times.

    The type only guarantees ordering. Analysis-ready curves (at least two
    points, first time 0) are produced by the text parser and the table
    loader; clipped and matched curves may start anywhere.
    """
    points: Tuple[Point, ...] = ()
    label: str = ""

    def __post_init__(self):
        points = tuple(self.points)
        for prev, cur in zip(points, points[1:]):
            if not cur.time > prev.time:
                raise ValueError(
                    f"Curve times must be strictly increasing "
                    f"(got {prev.time} followed by {cur.time})"
                )
        object.__setattr__(self, 'points', points)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]], label: str = "") -> 'Curve':
        """Build a curve from (time, activity) pairs that are already sorted."""
        return cls(tuple(Point(float(t), float(a)) for t, a in pairs), label=label)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def times(self) -> np.ndarray:
        """Sample times as a float array."""
        return np.array([p.time for p in self.points], dtype=float)

    @property
    def activities(self) -> np.ndarray:
        """Activity values as a float array."""
        return np.array([p.activity for p in self.points], dtype=float)

    @property
    def start_time(self) -> float:
        return self.points[0].time

    @property
    def end_time(self) -> float:
        return self.points[-1].time

    def with_points(self, points: Iterable[Point]) -> 'Curve':
        """Return a new curve with the same label and the given points."""
        return Curve(tuple(points), label=self.label)

    def to_list(self) -> List[Dict[str, float]]:
        """Convert to a list of dictionaries for serialization."""
        return [p.to_dict() for p in self.points]


@dataclass(frozen=True)
class MatchedCurvePair:
    """Real and Combined curves conformed to a shared final sample time."""
    real: Curve
    combined: Curve
    common_end_time: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'common_end_time': self.common_end_time,
            'real': self.real.to_list(),
            'combined': self.combined.to_list(),
        }


def as_curve(points) -> Curve:
    """Accept a Curve or any sorted sequence of Points."""
    if isinstance(points, Curve):
        return points
    return Curve(tuple(points))
