"""
Force model for a mass sliding on, or flying above, the track
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from coaster.params import SimulationParams
    from coaster.state import Vector


@dataclass(frozen=True)
class ForceVectors:
    """Acceleration and velocity components for one step"""

    ax: float
    ay: float
    vx: float
    vy: float


class ForceModel:
    """Converts track geometry and current velocity into step components"""

    def __init__(self, params: "SimulationParams") -> None:
        """
        Initialize force model

        Args:
            params: Simulation parameters (gravity, friction)
        """
        self.params = params

    def calculate_forces(self, vec: "Vector", normal: float, tangent: float) -> ForceVectors:
        """
        Acceleration and velocity components at the current state

        Args:
            vec: Current state sample
            normal: Track normal angle at the current x (rad)
            tangent: Track tangent angle at the current x (rad)

        Returns:
            ForceVectors for this step
        """
        # A free body feels the full weight, a riding body only its tangential share
        normal_force = np.cos(normal) if vec.line else 1.0
        accel = self.params.friction * self.params.gravity * normal_force

        if vec.line:
            ax = accel * np.cos(tangent)
            ay = accel * np.sin(tangent)
        else:
            ax = 0.0
            ay = -accel

        vx = vec.magnitude * np.cos(vec.angle)
        vy = vec.magnitude * np.sin(vec.angle)
        return ForceVectors(float(ax), float(ay), float(vx), float(vy))
