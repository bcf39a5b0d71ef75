"""
Contact resolution between the sliding mass and the track surface
"""

from typing import Tuple, TYPE_CHECKING

import numpy as np

from coaster.geometry import normalize_angle

if TYPE_CHECKING:
    from coaster.params import SimulationParams
    from coaster.segment import CurveSegment
    from coaster.state import Point


class ContactResolver:
    """Decides whether a step ends on the track and where it lands"""

    def __init__(self, params: "SimulationParams") -> None:
        self.params = params

    @staticmethod
    def is_over_the_line(candidate_y: float, track_y: float) -> bool:
        """True when the free candidate would end up below the track surface"""
        return candidate_y < track_y

    @staticmethod
    def landing_offset(origin: "Point", xd: float, yd: float, track_y: float) -> float:
        """
        Horizontal correction for a candidate that sank below the track

        The displacement is reflected across the chord from the origin to the
        track point at the candidate x and the two ends are bisected. On a
        straight track this is the orthogonal projection of the displacement
        onto the track.

        Args:
            origin: Position at the start of the step
            xd: Raw horizontal displacement
            yd: Raw vertical displacement
            track_y: Track height at the candidate x

        Returns:
            Offset to add to the candidate x
        """
        angle_func = normalize_angle(np.arctan2(track_y - origin.y, xd))
        angle_vect = normalize_angle(np.arctan2(yd, xd))
        angle_delta = angle_vect - angle_func
        magnitude = np.hypot(xd, yd)
        return float(magnitude * np.sin(angle_func) * np.sin(angle_delta))

    def resolve(
        self, segment: "CurveSegment", origin: "Point", xd: float, yd: float
    ) -> Tuple[float, float, bool]:
        """
        Resolve the end position of a step

        Args:
            segment: Track segment the body moves on
            origin: Position at the start of the step
            xd: Raw horizontal displacement
            yd: Raw vertical displacement

        Returns:
            Tuple of (x, y, over_the_line)
        """
        x = origin.x + xd
        candidate_y = origin.y + yd
        track_y = segment.height(x)

        over_the_line = self.is_over_the_line(candidate_y, track_y)
        if not over_the_line:
            # Off the track, the free-flight candidate stands
            return x, candidate_y, False

        x += self.landing_offset(origin, xd, yd, track_y)
        return x, segment.height(x), True
