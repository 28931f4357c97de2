#!/usr/bin/env python3
"""
Map Task Executor
Claims input files from the shared work queue, tokenizes them and builds
a private word -> file id index, then publishes it and waits at the phase barrier
"""

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Set

from wordindex.coordinator.phase_barrier import PhaseBarrier
from wordindex.coordinator.work_queue import WorkQueue
from wordindex.worker.tokenizer import FileTokens

logger = logging.getLogger(__name__)

PartialMap = Dict[str, Set[int]]


class MapExecutor:
    """Executes one mapper's claim loop"""

    def __init__(self, worker_id: int, files: List[str], work_queue: WorkQueue,
                 partial_maps: List[Optional[PartialMap]], barrier: PhaseBarrier,
                 tokenize: Callable[[str], Iterable[str]] = FileTokens):
        """
        Initialize the map executor

        Args:
            worker_id: Mapper index, also its slot in partial_maps
            files: Input file paths; position + 1 is the file id
            work_queue: Shared queue the mapper claims file indexes from
            partial_maps: Shared slot list, one entry per mapper
            barrier: Phase barrier separating map and reduce phases
            tokenize: Callable returning the normalized words of a path
                (a restartable FileTokens sequence by default)
        """
        self.worker_id = worker_id
        self.files = files
        self.work_queue = work_queue
        self.partial_maps = partial_maps
        self.barrier = barrier
        self.tokenize = tokenize
        self.files_claimed = 0
        self.files_failed = 0

    def execute(self) -> dict:
        """
        Execute the map task

        The mapper always arrives at the barrier, even after an unexpected
        error, so the reducers are not left waiting.

        Returns:
            Dictionary with 'success', 'execution_time_ms', 'error_message',
            'worker_id', 'files_claimed', 'files_failed' and 'unique_words'
        """
        start_time = time.time()
        result = {
            'worker_id': self.worker_id,
            'success': True,
            'error_message': '',
            'unique_words': 0,
        }

        try:
            logger.info(f"Map task {self.worker_id}: Starting claim loop")
            partial = self._run_claim_loop()

            # publish; never touched again by this mapper
            self.partial_maps[self.worker_id] = partial
            result['unique_words'] = len(partial)
            logger.info(
                f"Map task {self.worker_id}: Processed {self.files_claimed} files "
                f"({self.files_failed} failed), {len(partial)} unique words"
            )
        except Exception as e:
            logger.exception(f"Map task {self.worker_id} failed: {e}")
            result['success'] = False
            result['error_message'] = str(e)
        finally:
            self.barrier.wait()

        result['files_claimed'] = self.files_claimed
        result['files_failed'] = self.files_failed
        result['execution_time_ms'] = int((time.time() - start_time) * 1000)
        return result

    def _run_claim_loop(self) -> PartialMap:
        """
        Claim and index files until the work queue is exhausted

        Returns:
            This mapper's partial map
        """
        partial: PartialMap = {}

        while True:
            file_index = self.work_queue.claim_next()
            if file_index is None:
                break
            self.files_claimed += 1

            path = self.files[file_index]
            words = self._extract_words(path)
            if words is None:
                self.files_failed += 1
                continue

            file_id = file_index + 1
            for word in words:
                partial.setdefault(word, set()).add(file_id)
            logger.debug(f"Map task {self.worker_id}: Indexed {len(words)} distinct words from {path} as file {file_id}")

        return partial

    def _extract_words(self, path: str) -> Optional[Set[str]]:
        """
        Read the distinct words of one file

        Returns:
            Set of words, or None if the file couldn't be read
        """
        try:
            return set(self.tokenize(path))
        except OSError as e:
            logger.error(f"Map task {self.worker_id}: Error opening file {path}: {e}")
            return None
