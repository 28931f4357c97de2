"""
Work queue shared by all mappers.
A single counter over the input file list; each claim hands out the next unclaimed index.
"""

import threading
from typing import Optional


class WorkQueue:
    """Lock-protected fetch-and-increment counter over file indexes"""

    def __init__(self, size: int):
        """
        Initialize the work queue

        Args:
            size: Number of input files (valid indexes are 0..size-1)
        """
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self.size = size
        self._next_index = 0
        self._lock = threading.Lock()

    def claim_next(self) -> Optional[int]:
        """
        Claim the next unprocessed file index

        Returns:
            The claimed index, or None once every index has been handed out.
            Never blocks.
        """
        with self._lock:
            index = self._next_index
            self._next_index += 1
        if index >= self.size:
            return None
        return index

    @property
    def claims_issued(self) -> int:
        """Number of in-bounds indexes handed out so far"""
        with self._lock:
            return min(self._next_index, self.size)

    def exhausted(self) -> bool:
        """True once every index has been claimed"""
        return self.claims_issued == self.size
