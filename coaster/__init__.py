"""
Curve Track Trajectory Simulation

This package simulates a point mass sliding under gravity along a track made
of user-defined curve segments, producing time-parameterized samples
(position, heading, speed, contact) for animation.
"""

from coaster.cache import TrajectoryCache
from coaster.errors import (
    ConfigurationError,
    EvaluationFailure,
    InvalidSegmentSequence,
    SimulationError,
)
from coaster.geometry import normalize_angle
from coaster.params import SimulationParams
from coaster.segment import CurveSegment, Evaluation
from coaster.simulator import TrackSimulator, get_position
from coaster.state import Point, Vector
from coaster.track_analysis import run_track_analysis, slope_segment

__all__ = [
    "ConfigurationError",
    "CurveSegment",
    "Evaluation",
    "EvaluationFailure",
    "InvalidSegmentSequence",
    "Point",
    "SimulationError",
    "SimulationParams",
    "TrackSimulator",
    "TrajectoryCache",
    "Vector",
    "get_position",
    "normalize_angle",
    "run_track_analysis",
    "slope_segment",
]
