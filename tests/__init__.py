"""
Test suite for the Curve Track Trajectory Simulation.

This package contains unit tests organized by component:
- test_simulation_params.py: Tests for SimulationParams
- test_geometry.py: Tests for angle normalization and tangent estimation
- test_segment.py: Tests for curve segments and evaluation results
- test_forces.py: Tests for the force model
- test_contact.py: Tests for contact resolution
- test_integrator.py: Tests for single integration steps
- test_cache.py: Tests for the trajectory cache and get_position
- test_simulation.py: Tests for TrackSimulator sampling and scenarios
- test_trajectory_analysis.py: Tests for trajectory analysis and the reference solution
- test_integration.py: Integration tests for batch track analysis
"""
