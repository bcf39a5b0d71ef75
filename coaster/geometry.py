"""
Local track geometry: tangent and normal directions of a curve
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from coaster.params import SimulationParams
    from coaster.segment import CurveSegment

HALF_PI = np.pi / 2
TWO_PI = np.pi * 2


def normalize_angle(angle: float) -> float:
    """
    Fold an angle into (-pi, pi]

    Args:
        angle: Any real angle (rad)

    Returns:
        Equivalent angle in (-pi, pi]
    """
    result = float(np.mod(angle, TWO_PI))
    if result > np.pi:
        result -= TWO_PI
    return result


def tangent_angle(segment: "CurveSegment", x: float, epsilon: float = 1e-10) -> float:
    """
    Finite-difference tangent direction of a segment at x

    Args:
        segment: Curve to sample
        x: Horizontal position
        epsilon: Forward step used for the difference

    Returns:
        Tangent angle in (-pi, pi]
    """
    y = segment.height(x)
    y2 = segment.height(x + epsilon)
    return normalize_angle(np.arctan2(y2 - y, epsilon))


@dataclass(frozen=True)
class PointData:
    """Tangent and normal angles at a point of the track"""

    tangent: float
    normal: float


class GeometryEstimator:
    """Estimates local track direction"""

    def __init__(self, params: "SimulationParams") -> None:
        self.params = params

    def point_data(self, segment: "CurveSegment", x: float) -> PointData:
        """
        Tangent and normal of the track at x

        The normal is the tangent rotated by +pi/2. Evaluation failures of
        the segment propagate unchanged.
        """
        tangent = tangent_angle(segment, x, self.params.tangent_epsilon)
        normal = normalize_angle(tangent + HALF_PI)
        return PointData(tangent, normal)
