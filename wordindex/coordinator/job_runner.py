#!/usr/bin/env python3
"""
Job Runner for the word indexer
Spawns the mapper and reducer threads, wires the shared state between them
and tracks job status and results
"""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from wordindex.common.config import JobConfig
from wordindex.common.manifest import read_manifest
from wordindex.coordinator.metrics import JobMetrics
from wordindex.coordinator.phase_barrier import PhaseBarrier
from wordindex.coordinator.work_queue import WorkQueue
from wordindex.worker.map_executor import MapExecutor, PartialMap
from wordindex.worker.output_writer import OutputWriter
from wordindex.worker.reduce_executor import ReduceExecutor

logger = logging.getLogger(__name__)


class JobStatus(Enum):
    """Status of an indexing job"""
    PENDING = "pending"
    MAP_PHASE = "map_phase"
    REDUCE_PHASE = "reduce_phase"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class JobResult:
    """Outcome of a finished job"""
    job_id: str
    status: JobStatus
    map_results: List[dict] = field(default_factory=list)
    reduce_results: List[dict] = field(default_factory=list)
    metrics: Optional[JobMetrics] = None

    @property
    def succeeded(self) -> bool:
        return self.status == JobStatus.COMPLETED

    @property
    def artifacts(self) -> List[str]:
        """Paths of every artifact written, sorted"""
        return sorted(path for r in self.reduce_results for path in r.get('artifacts_written', []))


class IndexJob:
    """Runs one batch: N mappers and M reducers meeting at a single barrier"""

    def __init__(self, config: JobConfig):
        """
        Initialize the job

        Args:
            config: Job configuration; validated here so errors surface
                before any thread is created

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config.validate()
        self.config = config
        self.status = JobStatus.PENDING
        self.metrics = JobMetrics(
            job_id=config.job_id,
            num_mappers=config.num_mappers,
            num_reducers=config.num_reducers,
        )
        self.map_results: List[dict] = []
        self.reduce_results: List[dict] = []
        self.lock = threading.Lock()

    def run(self) -> JobResult:
        """
        Run the job to completion

        Returns:
            JobResult with per-worker results and metrics

        Raises:
            ManifestError: If the manifest can't be read (no thread is started)
        """
        files = read_manifest(self.config.manifest_path)
        num_mappers = self.config.num_mappers
        num_reducers = self.config.num_reducers

        work_queue = WorkQueue(len(files))
        partial_maps: List[Optional[PartialMap]] = [None] * num_mappers
        barrier = PhaseBarrier(self.config.num_workers, action=self._on_map_phase_end)
        writer = OutputWriter(self.config.output_dir)

        self.metrics.files_listed = len(files)
        self.metrics.start()
        self._set_status(JobStatus.MAP_PHASE)
        logger.info(
            f"Job {self.config.job_id} started: {len(files)} files, "
            f"{num_mappers} mappers, {num_reducers} reducers"
        )

        threads = []
        for worker_id in range(num_mappers):
            executor = MapExecutor(worker_id, files, work_queue, partial_maps, barrier)
            threads.append(threading.Thread(
                target=self._run_worker, args=(executor, self.map_results),
                name=f"mapper-{worker_id}",
            ))
        for reducer_id in range(num_reducers):
            executor = ReduceExecutor(reducer_id, num_reducers, partial_maps, barrier, writer)
            threads.append(threading.Thread(
                target=self._run_worker, args=(executor, self.reduce_results),
                name=f"reducer-{reducer_id}",
            ))

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.metrics.end_reduce_phase()
        return self._finish(work_queue)

    def _run_worker(self, executor, results: List[dict]):
        """Thread target: execute one worker and record its result"""
        try:
            result = executor.execute()
        except Exception as e:
            # barrier broken under a worker; report instead of dying silently
            logger.exception(f"{threading.current_thread().name} crashed: {e}")
            result = {'success': False, 'execution_time_ms': 0, 'error_message': str(e)}
        with self.lock:
            results.append(result)

    def _on_map_phase_end(self):
        """Barrier action, run once by the last thread to arrive"""
        self.metrics.end_map_phase()
        self._set_status(JobStatus.REDUCE_PHASE)
        logger.info(f"Job {self.config.job_id} map phase complete, starting REDUCE phase")

    def _set_status(self, status: JobStatus):
        with self.lock:
            self.status = status

    def _finish(self, work_queue: WorkQueue) -> JobResult:
        """Aggregate worker results into metrics and final status"""
        with self.lock:
            map_results = sorted(self.map_results, key=lambda r: r.get('worker_id', -1))
            reduce_results = sorted(self.reduce_results, key=lambda r: r.get('reducer_id', -1))

        m = self.metrics
        m.files_claimed = work_queue.claims_issued
        m.files_failed = sum(r.get('files_failed', 0) for r in map_results)
        m.files_indexed = sum(r.get('files_claimed', 0) for r in map_results) - m.files_failed

        worker_claims = sum(r.get('files_claimed', 0) for r in map_results)
        if worker_claims != m.files_claimed or not work_queue.exhausted():
            logger.warning(
                f"Job {self.config.job_id}: work queue issued {m.files_claimed}/{m.files_listed} "
                f"claims but mappers report {worker_claims}"
            )
        m.unique_words = sum(r.get('unique_words', 0) for r in reduce_results)
        m.artifacts_written = sum(len(r.get('artifacts_written', [])) for r in reduce_results)
        m.artifacts_failed = sum(len(r.get('artifacts_failed', [])) for r in reduce_results)
        m.finish()

        failures = [r for r in map_results + reduce_results if not r['success']]
        if failures:
            self._set_status(JobStatus.FAILED)
            logger.error(f"Job {self.config.job_id} failed: {failures[0]['error_message']}")
        else:
            self._set_status(JobStatus.COMPLETED)
            logger.info(m.summary())

        if self.config.metrics_file:
            try:
                m.save_to_file(self.config.metrics_file)
            except OSError as e:
                logger.error(f"Error writing metrics file {self.config.metrics_file}: {e}")

        return JobResult(
            job_id=self.config.job_id,
            status=self.status,
            map_results=map_results,
            reduce_results=reduce_results,
            metrics=m,
        )


def run_job(config: JobConfig) -> JobResult:
    """Convenience wrapper: build and run an IndexJob"""
    return IndexJob(config).run()
