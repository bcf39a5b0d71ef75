"""
Curve segments that make up a track
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from coaster.errors import EvaluationFailure, InvalidSegmentSequence
from coaster.state import Point


class Evaluation(NamedTuple):
    """Outcome of sampling a curve: a finite value or a captured failure"""

    x: float
    value: float
    error: Optional[BaseException] = None
    label: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and bool(np.isfinite(self.value))

    def unwrap(self) -> float:
        """
        Return the sampled value, or raise the typed failure

        Raises:
            EvaluationFailure: If the function raised or returned NaN/inf
        """
        if self.error is not None:
            raise EvaluationFailure(self.x, self.error, self.label) from self.error
        if not np.isfinite(self.value):
            raise EvaluationFailure(self.x, None, self.label)
        return self.value


@dataclass(frozen=True)
class CurveSegment:
    """One piece of the track: y = func(x) over the closed range [low, high]"""

    func: Callable[[float], float]
    low: float
    high: float
    label: str = ""  # Source expression, for messages only

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise InvalidSegmentSequence(
                f"Segment {self.label!r} has unordered range [{self.low}, {self.high}]"
            )

    def evaluate(self, x: float) -> Evaluation:
        """
        Sample the curve without raising

        Args:
            x: Horizontal position

        Returns:
            Evaluation holding either the value or the error the function raised
        """
        try:
            value = float(self.func(x))
        except Exception as exc:
            return Evaluation(x, float("nan"), exc, self.label)
        return Evaluation(x, value, None, self.label)

    def height(self, x: float) -> float:
        """Track height at x, raising EvaluationFailure when not evaluable"""
        return self.evaluate(x).unwrap()

    def contains(self, x: float) -> bool:
        return self.low <= x <= self.high

    def entry_point(self) -> Point:
        """Start of the segment: (low, func(low))"""
        return Point(self.low, self.height(self.low))


def check_segments(segments: Sequence[CurveSegment]) -> Tuple[CurveSegment, ...]:
    """
    Freeze a segment sequence for simulation

    Args:
        segments: Ordered curve segments

    Returns:
        Tuple of the same segments

    Raises:
        InvalidSegmentSequence: If no segments are given
    """
    segments = tuple(segments)
    if not segments:
        raise InvalidSegmentSequence("At least one curve segment is required")
    return segments
