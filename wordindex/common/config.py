"""
Job configuration.
Worker counts come from the command line, directories can default from the environment.
"""

import os
import uuid
from dataclasses import dataclass, field
from typing import Optional

from wordindex.common.errors import ConfigurationError

# Configuration from environment
OUTPUT_DIR = os.getenv('WORDINDEX_OUTPUT_DIR', '.')
LOG_LEVEL = os.getenv('WORDINDEX_LOG_LEVEL', 'INFO')


def _new_job_id() -> str:
    return f"index-{uuid.uuid4().hex[:8]}"


@dataclass
class JobConfig:
    """Settings for a single indexing run"""
    num_mappers: int
    num_reducers: int
    manifest_path: str
    output_dir: str = OUTPUT_DIR
    metrics_file: Optional[str] = None
    job_id: str = field(default_factory=_new_job_id)

    @property
    def num_workers(self) -> int:
        """Total thread count, also the barrier party count"""
        return self.num_mappers + self.num_reducers

    def validate(self):
        """
        Check structural validity before any worker is spawned

        Raises:
            ConfigurationError: If a worker count is below 1 or the manifest path is empty
        """
        if not isinstance(self.num_mappers, int) or self.num_mappers < 1:
            raise ConfigurationError(f"Number of mappers must be >= 1, got {self.num_mappers}")
        if not isinstance(self.num_reducers, int) or self.num_reducers < 1:
            raise ConfigurationError(f"Number of reducers must be >= 1, got {self.num_reducers}")
        if not self.manifest_path:
            raise ConfigurationError("Manifest path is required")
