"""
Inverted word index built by mapper and reducer threads meeting at a single phase barrier.
"""

from wordindex.common.config import JobConfig
from wordindex.coordinator.job_runner import IndexJob, JobResult, JobStatus, run_job

__version__ = "0.1.0"

__all__ = ["IndexJob", "JobConfig", "JobResult", "JobStatus", "run_job"]
