"""
Performance metrics collection for indexing jobs.
"""

import json
import time
from dataclasses import asdict, dataclass

import psutil


@dataclass
class JobMetrics:
    """Metrics for a single indexing run."""

    job_id: str
    num_mappers: int
    num_reducers: int
    start_time: float = 0.0
    map_phase_end: float = 0.0
    reduce_phase_end: float = 0.0
    end_time: float = 0.0
    files_listed: int = 0
    files_claimed: int = 0
    files_indexed: int = 0
    files_failed: int = 0
    unique_words: int = 0
    artifacts_written: int = 0
    artifacts_failed: int = 0
    peak_memory_bytes: int = 0

    @property
    def total_time_seconds(self) -> float:
        """Total job execution time in seconds."""
        return self.end_time - self.start_time

    @property
    def map_phase_time_seconds(self) -> float:
        """Time from job start until the phase barrier released."""
        return self.map_phase_end - self.start_time

    @property
    def reduce_phase_time_seconds(self) -> float:
        """Time from barrier release until the last reducer finished."""
        return self.reduce_phase_end - self.map_phase_end

    def start(self):
        """Mark the start of the job."""
        self.start_time = time.time()
        self.sample_memory()

    def end_map_phase(self):
        """Mark the barrier release."""
        self.map_phase_end = time.time()
        self.sample_memory()

    def end_reduce_phase(self):
        """Mark the end of the reduce phase."""
        self.reduce_phase_end = time.time()
        self.sample_memory()

    def finish(self):
        """Mark the end of the job."""
        self.end_time = time.time()
        self.sample_memory()

    def sample_memory(self):
        """Record resident memory if it exceeds the previous peak."""
        rss = psutil.Process().memory_info().rss
        self.peak_memory_bytes = max(self.peak_memory_bytes, rss)

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        data = asdict(self)
        data['total_time_seconds'] = self.total_time_seconds
        data['map_phase_time_seconds'] = self.map_phase_time_seconds
        data['reduce_phase_time_seconds'] = self.reduce_phase_time_seconds
        return data

    def save_to_file(self, filepath: str):
        """Save metrics to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        """One-line human readable summary."""
        return (
            f"Job {self.job_id}: {self.files_indexed}/{self.files_listed} files indexed "
            f"({self.files_claimed} claimed), "
            f"{self.unique_words} unique words, {self.artifacts_written} artifacts written "
            f"in {self.total_time_seconds:.2f}s "
            f"(map {self.map_phase_time_seconds:.2f}s, reduce {self.reduce_phase_time_seconds:.2f}s)"
        )
