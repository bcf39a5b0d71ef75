"""
Simulation state representation
"""

from dataclasses import dataclass

import numpy as np

from coaster.geometry import normalize_angle


@dataclass(frozen=True)
class Point:
    """Position in track coordinates"""

    x: float
    y: float

    def distance_to(self, x: float, y: float) -> float:
        return float(np.hypot(self.x - x, self.y - y))


@dataclass(frozen=True)
class Vector:
    """State sample of the sliding mass"""

    origin: Point
    angle: float  # Direction of travel (rad), in (-pi, pi]
    magnitude: float  # Speed: step distance / time slice
    line: bool  # True while riding the track, False in free flight

    def __post_init__(self) -> None:
        # Only out-of-range angles are folded, in-range values are kept bit-exact
        if not -np.pi < self.angle <= np.pi:
            object.__setattr__(self, "angle", normalize_angle(self.angle))

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    def to_array(self) -> np.ndarray:
        """
        Flatten the sample for array storage

        Returns:
            Array [x, y, angle, magnitude, line]
        """
        return np.array([self.origin.x, self.origin.y, self.angle, self.magnitude, float(self.line)])
