"""
Main trajectory simulator: cached position queries and sampling
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from coaster.analysis import TrajectoryAnalyzer
from coaster.cache import TrajectoryCache
from coaster.integrator import StepIntegrator, initial_vector
from coaster.params import SimulationParams
from coaster.reference import reference_trajectory
from coaster.segment import CurveSegment, check_segments
from coaster.state import Vector

logger = logging.getLogger(__name__)


def step_index(time: float, time_slice: float) -> int:
    """
    Step index of the slice containing `time`

    Raises:
        ValueError: If time is negative or not finite
    """
    if not np.isfinite(time) or time < 0:
        raise ValueError(f"time must be a non-negative finite number, got {time}")
    return int(np.floor(time / time_slice))


def get_position(
    segments: Sequence[CurveSegment],
    time: float,
    cache: Optional[TrajectoryCache] = None,
    params: Optional[SimulationParams] = None,
) -> Vector:
    """
    State of the sliding mass at `time`

    Integration resumes from the highest cached step at or below the target
    step. Only the first segment is ever integrated on; traversal into later
    segments is not supported.

    Args:
        segments: Ordered curve segments, non-empty
        time: Elapsed time (s), non-negative
        cache: Samples for this curve set; None integrates from scratch
        params: Simulation parameters, defaults when None

    Returns:
        State sample at the step containing `time`

    Raises:
        EvaluationFailure: If a segment cannot be evaluated at a sampled x
        InvalidSegmentSequence: If segments is empty
    """
    segments = check_segments(segments)
    params = params or SimulationParams()
    cache = cache if cache is not None else TrajectoryCache()
    target = step_index(time, params.time_slice)

    with cache.lock:
        hit = cache.get(target)
        if hit is not None:
            return hit

        segment = segments[0]
        if not len(cache):
            cache.append(0, initial_vector(segment))
        index, vec = cache.latest(target)
        logger.debug("Resuming trajectory at step %d for target step %d", index, target)

        integrator = StepIntegrator(params)
        for idx in range(index + 1, target + 1):
            vec = integrator.step(vec, segment)
            cache.append(idx, vec)
            if len(segments) > 1 and not cache.boundary_warned and vec.origin.x > segment.high:
                cache.boundary_warned = True
                logger.warning(
                    "Left the first segment at x=%.4f (step %d); multi-segment traversal "
                    "is not supported, continuing on the first segment",
                    vec.origin.x,
                    idx,
                )
        return vec


class TrackSimulator:
    """Simulates a mass sliding along a track and owns its trajectory cache"""

    def __init__(
        self, segments: Sequence[CurveSegment], params: Optional[SimulationParams] = None
    ) -> None:
        """
        Initialize simulator

        Args:
            segments: Ordered curve segments describing the track
            params: Simulation parameters
        """
        self.params = params or SimulationParams()
        self.segments = check_segments(segments)
        self.cache = TrajectoryCache()
        self.analyzer = TrajectoryAnalyzer(self.segments[0], self.params)

    def replace_segments(self, segments: Sequence[CurveSegment]) -> None:
        """Swap in an edited curve set; cached samples are discarded"""
        self.segments = check_segments(segments)
        self.cache.invalidate()
        self.analyzer = TrajectoryAnalyzer(self.segments[0], self.params)

    def position(self, time: float) -> Vector:
        return get_position(self.segments, time, self.cache, self.params)

    def simulate(
        self, duration: float = 5.0, interval: float = 1 / 32
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Sample the trajectory on a fixed time grid

        Args:
            duration: Last sampled time (s), inclusive
            interval: Time between samples (s)

        Returns:
            Tuple of (time_array, state_history) where each state row is
            [x, y, angle, magnitude, line]
        """
        t = np.arange(0.0, duration + interval / 2, interval)
        states = np.zeros((len(t), 5))
        for i, time in enumerate(t):
            states[i] = self.position(float(time)).to_array()
        return t, states

    def reference(self, t: np.ndarray) -> np.ndarray:
        """Exact on-track solution for the first segment (see reference_trajectory)"""
        return reference_trajectory(self.segments[0], t, self.params)

    def analyze(self, t: np.ndarray, states: np.ndarray, compare_reference: bool = False) -> dict:
        """
        Analyze sampled results

        Args:
            t: Time array
            states: State history from simulate()
            compare_reference: Also measure the error against the exact solution

        Returns:
            Dictionary with analysis results
        """
        reference = self.reference(t) if compare_reference else None
        return self.analyzer.analyze(t, states, reference)
