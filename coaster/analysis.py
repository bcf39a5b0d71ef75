"""
Trajectory analysis functions
"""

from typing import Any, Dict, Optional

import numpy as np

from coaster.params import SimulationParams
from coaster.segment import CurveSegment


class TrajectoryAnalyzer:
    """Summarizes sampled trajectories: speed, contact, track fidelity, energy"""

    def __init__(self, segment: CurveSegment, params: SimulationParams) -> None:
        """
        Initialize trajectory analyzer

        Args:
            segment: Segment the trajectory was integrated on
            params: Simulation parameters
        """
        self.segment = segment
        self.params = params

    def analyze(
        self, t: np.ndarray, states: np.ndarray, reference: Optional[np.ndarray] = None
    ) -> Dict[str, Any]:
        """
        Analyze sampled results

        Args:
            t: Time array
            states: State history [N x 5] with [x, y, angle, magnitude, line]
            reference: Optional exact solution [N x 3] with [x, y, speed]

        Returns:
            Dictionary with analysis results
        """
        x = states[:, 0]
        y = states[:, 1]
        speed = states[:, 3]
        line = states[:, 4] > 0.5

        track_y = np.array([self.segment.height(float(xi)) for xi in x])
        track_deviation = np.abs(y - track_y)

        # A flight phase starts whenever contact is lost between samples
        flight_phases = int(np.sum(line[:-1] & ~line[1:])) if len(line) > 1 else 0

        # Specific mechanical energy, exact motion keeps it constant
        energy = self.params.gravity * y + 0.5 * speed**2
        energy_drift = float(np.max(np.abs(energy - energy[0]))) if len(energy) > 0 else 0.0

        results: Dict[str, Any] = {
            "duration": float(t[-1]) if len(t) > 0 else 0.0,
            "max_speed": float(np.max(speed)),
            "final_speed": float(speed[-1]),
            "mean_speed": float(np.mean(speed)),
            "horizontal_distance": float(x[-1] - x[0]),
            "height_drop": float(y[0] - np.min(y)),
            "contact_fraction": float(np.mean(line)),
            "flight_phases": flight_phases,
            "max_track_deviation": float(np.max(track_deviation)),
            "left_segment": bool(np.any(x > self.segment.high)),
            "energy_drift": energy_drift,
        }

        if reference is not None:
            results["reference_position_error"] = float(
                np.max(np.hypot(x - reference[:, 0], y - reference[:, 1]))
            )
            results["reference_speed_error"] = float(np.max(np.abs(speed - reference[:, 2])))

        return results
