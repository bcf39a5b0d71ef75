"""
Trajectory cache: memoized state samples by step index
"""

import logging
import threading
from typing import List, Optional, Tuple

from coaster.state import Vector

logger = logging.getLogger(__name__)


class TrajectoryCache:
    """
    Dense, append-only store of state samples

    Index n holds the state after n time slices, index 0 is the initial
    state. Samples are derived from the curve shape, so the owner must call
    invalidate() whenever the segments change.
    """

    def __init__(self) -> None:
        self._samples: List[Vector] = []
        self.lock = threading.RLock()
        self.steps_computed = 0  # Integrated steps written, for the cache lifetime
        self.boundary_warned = False

    def __len__(self) -> int:
        return len(self._samples)

    def __contains__(self, index: int) -> bool:
        return 0 <= index < len(self._samples)

    @property
    def frontier(self) -> int:
        """Highest cached step index, -1 when empty"""
        return len(self._samples) - 1

    def get(self, index: int) -> Optional[Vector]:
        if index in self:
            return self._samples[index]
        return None

    def latest(self, index: int) -> Tuple[int, Vector]:
        """
        Highest cached sample at or below index

        Raises:
            LookupError: If the cache is empty
        """
        if not self._samples:
            raise LookupError("Trajectory cache is empty")
        resume = min(index, self.frontier)
        return resume, self._samples[resume]

    def append(self, index: int, vector: Vector) -> None:
        """
        Store the sample for the next step index

        Args:
            index: Step index, must equal len(self)
            vector: State after `index` steps
        """
        if index != len(self._samples):
            raise ValueError(f"Expected step index {len(self._samples)}, got {index}")
        self._samples.append(vector)
        if index > 0:
            self.steps_computed += 1

    def invalidate(self) -> None:
        """Drop every sample, e.g. after the curve segments were edited"""
        with self.lock:
            logger.debug("Invalidating trajectory cache with %d samples", len(self._samples))
            self._samples.clear()
            self.boundary_warned = False
