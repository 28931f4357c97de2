"""
Error types raised by the indexer before any worker thread is spawned.
Per-file and per-artifact I/O failures are plain OSErrors handled inside workers.
"""


class WordIndexError(Exception):
    """Base class for indexer errors"""


class ConfigurationError(WordIndexError):
    """Invalid job configuration (worker counts, invocation shape)"""


class ManifestError(ConfigurationError):
    """Manifest file missing or malformed"""
