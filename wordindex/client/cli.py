#!/usr/bin/env python3
"""
Word Index CLI
Builds an inverted index over the files listed in a manifest, writing a.txt .. z.txt
"""

import argparse
import logging
import sys

from wordindex.common.config import LOG_LEVEL, OUTPUT_DIR, JobConfig
from wordindex.common.errors import ConfigurationError
from wordindex.coordinator.job_runner import run_job

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordindex',
        description='Build an inverted word index with mapper and reducer threads',
    )
    parser.add_argument('num_mappers', type=int, help='Number of mapper threads')
    parser.add_argument('num_reducers', type=int, help='Number of reducer threads')
    parser.add_argument('manifest', help='File listing the input count followed by the input paths')
    parser.add_argument('--output-dir', default=OUTPUT_DIR,
                        help='Directory for the letter files (default: %(default)s)')
    parser.add_argument('--metrics-file', default=None,
                        help='Write job metrics as JSON to this path')
    parser.add_argument('--log-level', default=LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: %(default)s)')
    return parser


def main(argv=None) -> int:
    """Run the indexer, returning a process exit code"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = JobConfig(
        num_mappers=args.num_mappers,
        num_reducers=args.num_reducers,
        manifest_path=args.manifest,
        output_dir=args.output_dir,
        metrics_file=args.metrics_file,
    )

    try:
        result = run_job(config)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    if not result.succeeded:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
