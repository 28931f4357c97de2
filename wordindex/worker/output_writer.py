"""
Output Writer
Renders a reducer's sorted entries into one artifact per assigned letter
"""

import logging
import os
from typing import Iterable, List, Sequence, Tuple

from wordindex.common.partition import letters_for_reducer

logger = logging.getLogger(__name__)

Entry = Tuple[str, Sequence[int]]


def format_entry(word: str, file_ids: Iterable[int]) -> str:
    """Render one index line, file ids ascending: word:[1 3 7]"""
    ids = ' '.join(str(file_id) for file_id in sorted(file_ids))
    return f"{word}:[{ids}]"


class OutputWriter:
    """Writes <letter>.txt artifacts into an output directory"""

    def __init__(self, output_dir: str):
        """
        Initialize the writer

        Args:
            output_dir: Directory for the 26 letter artifacts, created if missing
        """
        self.output_dir = output_dir
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            # each artifact open will fail and be reported on its own
            logger.error(f"Error creating output directory {output_dir}: {e}")

    def artifact_path(self, letter: str) -> str:
        return os.path.join(self.output_dir, f"{letter}.txt")

    def write(self, entries: List[Entry], reducer_id: int,
              num_reducers: int) -> Tuple[List[str], List[str]]:
        """
        Write the artifacts owned by one reducer

        Every assigned letter gets a file, even when no word starts with it.
        A letter whose file can't be written is logged and skipped.

        Args:
            entries: (word, file ids) pairs already in final sort order
            reducer_id: Reducer doing the writing
            num_reducers: Total number of reducers M

        Returns:
            (paths written, letters that failed)
        """
        by_letter = {letter: [] for letter in letters_for_reducer(reducer_id, num_reducers)}
        for word, file_ids in entries:
            # words outside this reducer's letters are ignored
            if word[0] in by_letter:
                by_letter[word[0]].append((word, file_ids))

        written = []
        failed = []
        for letter, letter_entries in by_letter.items():
            path = self.artifact_path(letter)
            try:
                with open(path, 'w', encoding='utf-8') as f:
                    for word, file_ids in letter_entries:
                        f.write(format_entry(word, file_ids) + '\n')
            except OSError as e:
                logger.error(f"Reduce task {reducer_id}: Error writing output file {path}: {e}")
                failed.append(letter)
                continue
            logger.debug(f"Reduce task {reducer_id}: Wrote {len(letter_entries)} entries to {path}")
            written.append(path)

        return written, failed
