"""
Manifest reader.
A manifest holds the number of input files followed by that many paths,
all whitespace separated.
"""

import logging
from typing import List

from wordindex.common.errors import ManifestError

logger = logging.getLogger(__name__)


def read_manifest(manifest_path: str) -> List[str]:
    """
    Read the list of input file paths from a manifest

    Args:
        manifest_path: Path to the manifest file

    Returns:
        Input file paths in manifest order (position = file index)

    Raises:
        ManifestError: If the manifest can't be opened, the count is invalid,
            or fewer paths than announced are listed
    """
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            tokens = f.read().split()
    except OSError as e:
        raise ManifestError(f"Error opening manifest {manifest_path}: {e}") from e

    if not tokens:
        raise ManifestError(f"Manifest {manifest_path} is empty")

    try:
        num_files = int(tokens[0])
    except ValueError:
        raise ManifestError(f"Manifest {manifest_path}: invalid file count {tokens[0]!r}") from None

    if num_files < 0:
        raise ManifestError(f"Manifest {manifest_path}: negative file count {num_files}")

    paths = tokens[1:]
    if len(paths) < num_files:
        raise ManifestError(
            f"Manifest {manifest_path}: expected {num_files} files, found {len(paths)}"
        )
    if len(paths) > num_files:
        logger.warning(f"Manifest {manifest_path}: ignoring {len(paths) - num_files} extra entries")

    logger.info(f"Read {num_files} input files from {manifest_path}")
    return paths[:num_files]
