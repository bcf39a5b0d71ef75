"""
Simulation parameters
"""

from dataclasses import dataclass

from coaster.errors import ConfigurationError


@dataclass
class SimulationParams:
    """Physical and numerical parameters of the trajectory integrator"""

    gravity: float = 9.8  # distance units / s²
    friction: float = 1.0  # Multiplier on the tangential acceleration
    time_slice: float = 1 / 1024  # s, simulated time per integration step
    tangent_epsilon: float = 1e-10  # x step for the finite-difference tangent
    time_slice_squared: float = 0.0  # Will be calculated

    def __post_init__(self) -> None:
        """Validate and calculate derived parameters"""
        if self.time_slice <= 0:
            raise ConfigurationError(f"time_slice must be positive, got {self.time_slice}")
        if self.tangent_epsilon <= 0:
            raise ConfigurationError(
                f"tangent_epsilon must be positive, got {self.tangent_epsilon}"
            )
        self.time_slice_squared = self.time_slice * self.time_slice
