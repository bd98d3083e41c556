"""Exception hierarchy for the indexer."""

from __future__ import annotations


class IndexerError(Exception):
    """Base class for every error that aborts an indexing run."""


class ConfigError(IndexerError):
    """Bad root directory or malformed source map."""


class ScanError(IndexerError):
    """A directory could not be listed or a file could not be read."""
