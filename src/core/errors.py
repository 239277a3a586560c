"""svmfetch exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SvmFetchError(Exception):
    """Base exception for all svmfetch failures."""


class SvmFetchConfigError(SvmFetchError):
    """Raised for invalid runtime configuration."""


class CatalogError(SvmFetchError):
    """Raised for invalid or inconsistent dataset catalogs."""


class UnsupportedDatasetError(SvmFetchError):
    """Raised when a dataset name is not present in the catalog."""


class DatasetTransportError(SvmFetchError):
    """Raised when downloading a dataset archive fails."""


class DatasetExtractionError(SvmFetchError):
    """Raised when an archive decompressor fails."""


class DatasetParseError(SvmFetchError):
    """Raised for malformed LIBSVM records or out-of-bounds indices."""


class CacheFilesystemError(SvmFetchError):
    """Raised when the cache root cannot be created or written."""
