"""
Exceptions raised by the trajectory integrator
"""

from typing import Optional


class SimulationError(Exception):
    """Base exception for trajectory simulation errors."""
    pass


class ConfigurationError(SimulationError):
    """Raised when simulation parameters are invalid."""
    pass


class InvalidSegmentSequence(SimulationError):
    """Raised for an empty segment list or a segment with low > high."""
    pass


class EvaluationFailure(SimulationError):
    """Raised when a curve segment cannot be evaluated at a sampled x."""

    def __init__(self, x: float, cause: Optional[BaseException] = None, label: str = "") -> None:
        self.x = x
        self.cause = cause
        self.label = label
        where = f" of segment {label!r}" if label else ""
        if cause is None:
            message = f"Non-finite value{where} at x={x!r}"
        else:
            message = f"Evaluation{where} failed at x={x!r}: {cause}"
        super().__init__(message)
