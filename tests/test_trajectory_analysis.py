"""
Unit tests for trajectory analysis and the reference solution.

Tests TrajectoryAnalyzer summaries and the exact on-track ODE solution used to
measure the integrator's error.
"""

import math

import numpy as np
import pytest

from coaster import CurveSegment, SimulationParams, TrackSimulator
from coaster.analysis import TrajectoryAnalyzer
from coaster.reference import reference_trajectory


class TestReferenceTrajectory:
    """Test suite for the exact on-track solution"""

    @pytest.fixture
    def slope(self) -> CurveSegment:
        """45° downhill track y = -x over [0, 10]"""
        return CurveSegment(lambda x: -x, 0.0, 10.0)

    def test_starts_at_rest_on_entry(self, slope: CurveSegment) -> None:
        """Test that the reference starts at the segment's low end at rest"""
        ref = reference_trajectory(slope, np.array([0.0, 0.1]))

        assert ref.shape == (2, 3)
        assert ref[0, 0] == 0.0
        assert ref[0, 2] == 0.0

    def test_constant_slope_kinematics(self, slope: CurveSegment) -> None:
        """Test uniform acceleration g*sin(45°) along a straight incline"""
        ref = reference_trajectory(slope, np.array([0.0, 0.25, 0.5]))

        accel = 9.8 * math.sin(math.pi / 4)
        assert abs(ref[2, 2] - accel * 0.5) < 1e-4
        assert abs(ref[2, 0] - 0.5 * accel * math.cos(math.pi / 4) * 0.25) < 1e-4
        assert abs(ref[2, 1] + ref[2, 0]) < 1e-9

    def test_flat_track_stays_at_rest(self) -> None:
        """Test that nothing moves on a horizontal track"""
        flat = CurveSegment(lambda x: 0.0, 0.0, 10.0)

        ref = reference_trajectory(flat, np.linspace(0.0, 1.0, 5))

        assert np.all(ref[:, 2] == 0.0)


class TestTrajectoryAnalyzer:
    """Test suite for trajectory analysis"""

    @pytest.fixture
    def params(self) -> SimulationParams:
        """Create default simulation parameters for testing"""
        return SimulationParams()

    @pytest.fixture
    def slope_results(self, params: SimulationParams) -> dict:
        """Simulate and analyze one second on a 45° downhill"""
        simulator = TrackSimulator([CurveSegment(lambda x: -x, 0.0, 10.0)], params)
        t, states = simulator.simulate(duration=1.0)
        return {
            "states": states,
            "analysis": simulator.analyze(t, states, compare_reference=True),
        }

    def test_results_contain_required_keys(self, slope_results: dict) -> None:
        """Test that analysis returns all summary metrics"""
        analysis = slope_results["analysis"]

        for key in [
            "duration",
            "max_speed",
            "final_speed",
            "mean_speed",
            "horizontal_distance",
            "height_drop",
            "contact_fraction",
            "flight_phases",
            "max_track_deviation",
            "left_segment",
            "energy_drift",
            "reference_position_error",
            "reference_speed_error",
        ]:
            assert key in analysis

    def test_speed_statistics(self, slope_results: dict) -> None:
        """Test that speed statistics reflect the sampled magnitudes"""
        analysis = slope_results["analysis"]
        states = slope_results["states"]

        assert analysis["max_speed"] == float(np.max(states[:, 3]))
        assert analysis["final_speed"] == float(states[-1, 3])

    def test_body_follows_track(self, slope_results: dict) -> None:
        """Test that the sampled path stays on the track surface"""
        analysis = slope_results["analysis"]

        assert analysis["max_track_deviation"] < 1e-6
        assert 0.0 <= analysis["contact_fraction"] <= 1.0
        assert analysis["height_drop"] > 0
        assert analysis["horizontal_distance"] > 0
        assert analysis["left_segment"] is False

    def test_close_to_reference_solution(self, slope_results: dict) -> None:
        """Test that the step integrator tracks the exact solution on a straight incline"""
        analysis = slope_results["analysis"]

        assert analysis["reference_position_error"] < 0.01
        assert analysis["reference_speed_error"] < 0.05

    def test_energy_roughly_conserved(self, slope_results: dict) -> None:
        """Test that specific energy drift stays small on a straight incline"""
        assert slope_results["analysis"]["energy_drift"] < 0.1

    def test_flight_phases_counted(self, params: SimulationParams) -> None:
        """Test that each loss of contact counts as one flight phase"""
        flat = CurveSegment(lambda x: 0.0, 0.0, 10.0)
        analyzer = TrajectoryAnalyzer(flat, params)
        line = np.array([1.0, 0.0, 0.0, 1.0, 0.0, 1.0])
        states = np.zeros((6, 5))
        states[:, 4] = line
        t = np.arange(6) / 32

        analysis = analyzer.analyze(t, states)

        assert analysis["flight_phases"] == 2
        assert abs(analysis["contact_fraction"] - 0.5) < 1e-12
        assert "reference_speed_error" not in analysis

    def test_flat_track_barely_moves(self, params: SimulationParams) -> None:
        """Test that a resting body on flat track neither moves nor drops"""
        simulator = TrackSimulator([CurveSegment(lambda x: 0.0, 0.0, 10.0)], params)
        t, states = simulator.simulate(duration=0.5)

        analysis = simulator.analyze(t, states)

        assert analysis["max_speed"] < 1e-9
        assert analysis["horizontal_distance"] < 1e-9
        assert analysis["height_drop"] == 0.0
