"""
One-shot phase barrier separating the map phase from the reduce phase.
All mappers and reducers arrive exactly once; nobody continues until everyone has.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PhaseBarrier:
    """Single-use rendezvous for a fixed number of worker threads"""

    def __init__(self, parties: int, action: Optional[Callable[[], None]] = None):
        """
        Initialize the barrier

        Args:
            parties: Number of workers that must arrive (mappers + reducers)
            action: Optional callable run once, by the last arriving thread,
                before any waiter is released
        """
        if parties < 1:
            raise ValueError(f"parties must be >= 1, got {parties}")
        self.parties = parties
        self._action = action
        self._arrived = 0
        self._crossed = False
        self._lock = threading.Lock()
        self._barrier = threading.Barrier(parties, action=self._on_release)

    def _on_release(self):
        self._crossed = True
        logger.debug(f"Phase barrier released after {self.parties} arrivals")
        if self._action is not None:
            self._action()

    def wait(self) -> int:
        """
        Block until all parties have arrived

        No timeout: a worker that never arrives stalls every other worker.

        Returns:
            Arrival slot in [0, parties), as returned by threading.Barrier.wait

        Raises:
            RuntimeError: If called more times than there are parties
        """
        with self._lock:
            if self._arrived >= self.parties:
                raise RuntimeError("Phase barrier already crossed, it can only be used once")
            self._arrived += 1
        return self._barrier.wait()

    @property
    def arrived(self) -> int:
        """Number of workers that have reached the barrier"""
        with self._lock:
            return self._arrived

    @property
    def crossed(self) -> bool:
        """True once all parties have arrived and been released"""
        return self._crossed
