"""
Exact on-track motion used as a yardstick for the step integrator
"""

from typing import Optional

import numpy as np
from scipy.integrate import odeint

from coaster.geometry import tangent_angle
from coaster.params import SimulationParams
from coaster.segment import CurveSegment


def reference_trajectory(
    segment: CurveSegment,
    t: np.ndarray,
    params: Optional[SimulationParams] = None,
    epsilon: float = 1e-6,
) -> np.ndarray:
    """
    Integrate the bead-on-a-wire equations along one segment

    The mass never leaves the curve here:
        dx/dt = v * cos(theta(x))
        dv/dt = -friction * gravity * sin(theta(x))
    where v is the signed speed along the curve and theta the tangent angle.
    Starts at rest on the segment's low end.

    Args:
        segment: Curve to follow
        t: Increasing time array starting at 0 (s)
        params: Simulation parameters (gravity, friction)
        epsilon: Finite-difference step for the tangent angle

    Returns:
        Array [N x 3] with columns [x, y, speed]
    """
    params = params or SimulationParams()
    accel = params.friction * params.gravity

    def dynamics(state: np.ndarray, _t: float) -> np.ndarray:
        x, v = state
        theta = tangent_angle(segment, x, epsilon)
        return np.array([v * np.cos(theta), -accel * np.sin(theta)])

    solution = odeint(dynamics, np.array([segment.low, 0.0]), t)
    x = solution[:, 0]
    y = np.array([segment.height(float(xi)) for xi in x])
    return np.column_stack([x, y, np.abs(solution[:, 1])])
