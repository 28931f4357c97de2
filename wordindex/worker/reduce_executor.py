#!/usr/bin/env python3
"""
Reduce Task Executor
Waits for the map phase to finish, merges the entries of its letter partition
from every mapper's partial map, sorts them and writes the letter artifacts
"""

import logging
import time
from typing import Dict, List, Optional, Set, Tuple

from wordindex.common.partition import letters_for_reducer, owns_word
from wordindex.coordinator.phase_barrier import PhaseBarrier
from wordindex.worker.map_executor import PartialMap
from wordindex.worker.output_writer import OutputWriter

logger = logging.getLogger(__name__)


def sort_key(entry: Tuple[str, List[int]]):
    """Most files first, then alphabetical"""
    word, file_ids = entry
    return (-len(file_ids), word)


class ReduceExecutor:
    """Executes one reducer's merge, sort and write sequence"""

    def __init__(self, reducer_id: int, num_reducers: int,
                 partial_maps: List[Optional[PartialMap]], barrier: PhaseBarrier,
                 writer: OutputWriter):
        """
        Initialize the reduce executor

        Args:
            reducer_id: Index r in [0, num_reducers)
            num_reducers: Total number of reducers M
            partial_maps: Shared slot list filled by the mappers
            barrier: Phase barrier; crossed before any partial map is read
            writer: Output writer for the letter artifacts
        """
        self.reducer_id = reducer_id
        self.num_reducers = num_reducers
        self.partial_maps = partial_maps
        self.barrier = barrier
        self.writer = writer
        self.letters = letters_for_reducer(reducer_id, num_reducers)

    def execute(self) -> dict:
        """
        Execute the reduce task

        Returns:
            Dictionary with 'success', 'execution_time_ms', 'error_message',
            'reducer_id', 'letters', 'unique_words', 'artifacts_written'
            and 'artifacts_failed'
        """
        start_time = time.time()
        result = {
            'reducer_id': self.reducer_id,
            'letters': self.letters,
            'unique_words': 0,
            'artifacts_written': [],
            'artifacts_failed': [],
        }

        try:
            if not self.letters:
                logger.warning(
                    f"Reduce task {self.reducer_id}: No letters assigned "
                    f"({self.num_reducers} reducers for 26 letters)"
                )

            self.barrier.wait()

            merged = self.merge()
            logger.info(f"Reduce task {self.reducer_id}: Merged {len(merged)} unique words")

            sorted_results = self.sort(merged)

            written, failed = self.writer.write(sorted_results, self.reducer_id, self.num_reducers)
            result['unique_words'] = len(sorted_results)
            result['artifacts_written'] = written
            result['artifacts_failed'] = failed

            execution_time = int((time.time() - start_time) * 1000)
            logger.info(
                f"Reduce task {self.reducer_id}: Wrote {len(written)} artifacts "
                f"({len(failed)} failed) in {execution_time}ms"
            )
            result.update(success=True, execution_time_ms=execution_time, error_message='')

        except Exception as e:
            execution_time = int((time.time() - start_time) * 1000)
            logger.exception(f"Reduce task {self.reducer_id} failed: {e}")
            result.update(success=False, execution_time_ms=execution_time, error_message=str(e))

        return result

    def merge(self) -> Dict[str, Set[int]]:
        """
        Union every partial map entry belonging to this reducer's letters

        Only called after the barrier, when the partial maps are read-only.

        Returns:
            Word -> set of file ids
        """
        merged: Dict[str, Set[int]] = {}
        for partial in self.partial_maps:
            # slot stays empty if its mapper failed
            if partial is None:
                continue
            for word, file_ids in partial.items():
                if owns_word(word, self.reducer_id, self.num_reducers):
                    merged.setdefault(word, set()).update(file_ids)
        return merged

    @staticmethod
    def sort(merged: Dict[str, Set[int]]) -> List[Tuple[str, List[int]]]:
        """Convert to (word, ascending ids) pairs ordered by descending file count, then word"""
        entries = [(word, sorted(file_ids)) for word, file_ids in merged.items()]
        entries.sort(key=sort_key)
        return entries
