"""
Fixed time-slice step integrator
"""

from typing import Tuple

import numpy as np

from coaster.contact import ContactResolver
from coaster.dynamics import ForceModel, ForceVectors
from coaster.geometry import GeometryEstimator, normalize_angle
from coaster.params import SimulationParams
from coaster.segment import CurveSegment
from coaster.state import Point, Vector


def initial_vector(segment: CurveSegment) -> Vector:
    """State at time 0: at rest on the start of the segment, in contact"""
    return Vector(segment.entry_point(), 0.0, 0.0, True)


class StepIntegrator:
    """Advances a state sample by one time slice"""

    def __init__(self, params: SimulationParams) -> None:
        """
        Initialize step integrator

        Args:
            params: Simulation parameters
        """
        self.params = params
        self.geometry = GeometryEstimator(params)
        self.force_model = ForceModel(params)
        self.contact = ContactResolver(params)

    def displacement(self, forces: ForceVectors) -> Tuple[float, float]:
        """Semi-implicit displacement over one slice: A*dt² + V*dt per axis"""
        dt = self.params.time_slice
        dt2 = self.params.time_slice_squared
        return forces.ax * dt2 + forces.vx * dt, forces.ay * dt2 + forces.vy * dt

    def step(self, vec: Vector, segment: CurveSegment) -> Vector:
        """
        Integrate one time slice

        Args:
            vec: Current state sample
            segment: Track segment the body moves on

        Returns:
            State sample one time slice later

        Raises:
            EvaluationFailure: If the segment cannot be evaluated at a sampled x
        """
        point = self.geometry.point_data(segment, vec.origin.x)
        forces = self.force_model.calculate_forces(vec, point.normal, point.tangent)
        xd, yd = self.displacement(forces)

        x, y, over_the_line = self.contact.resolve(segment, vec.origin, xd, yd)

        angle = normalize_angle(np.arctan2(y - vec.origin.y, x - vec.origin.x))
        magnitude = vec.origin.distance_to(x, y) / self.params.time_slice
        return Vector(Point(x, y), angle, magnitude, over_the_line)
