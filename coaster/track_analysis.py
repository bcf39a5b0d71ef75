"""
Batch analysis over several tracks
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np

from coaster.params import SimulationParams
from coaster.segment import CurveSegment
from coaster.simulator import TrackSimulator


def slope_segment(angle_deg: float, low: float = 0.0, high: float = 10.0) -> CurveSegment:
    """
    Straight incline through the origin

    Args:
        angle_deg: Inclination in degrees, negative slopes downhill to the right
        low: Start of the domain
        high: End of the domain

    Returns:
        CurveSegment for y = tan(angle) * x
    """
    slope = float(np.tan(np.radians(angle_deg)))
    return CurveSegment(lambda x: slope * x, low, high, label=f"{slope:g} * x")


def run_track_analysis(
    tracks: Dict[str, Sequence[CurveSegment]],
    duration: float = 5.0,
    interval: float = 1 / 32,
    params: Optional[SimulationParams] = None,
    compare_reference: bool = False,
) -> Dict[str, Dict[str, Any]]:
    """
    Run simulation for multiple tracks

    Args:
        tracks: Track name to ordered curve segments
        duration: Simulated time per track (s)
        interval: Sampling interval (s)
        params: Simulation parameters shared by all tracks
        compare_reference: Include the error against the exact on-track solution

    Returns:
        Dictionary with results for each track
    """
    results: Dict[str, Dict[str, Any]] = {}

    for name, segments in tracks.items():
        simulator = TrackSimulator(segments, params)
        t, states = simulator.simulate(duration=duration, interval=interval)
        analysis = simulator.analyze(t, states, compare_reference=compare_reference)

        results[name] = {
            "time": t,
            "state": states,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results
