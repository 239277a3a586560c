"""Public SDK surface for svmfetch.

This module provides a stable import path for library users.
It re-exports the client and typed models, and offers module-level
shortcuts that build a client from the process environment.
"""

from __future__ import annotations

from catalog.dataset_catalog import DatasetCatalog
from client.dataset_client import DatasetClient
from core.config import SvmFetchConfig
from core.errors import (
    CacheFilesystemError,
    CatalogError,
    DatasetExtractionError,
    DatasetParseError,
    DatasetTransportError,
    SvmFetchConfigError,
    SvmFetchError,
    UnsupportedDatasetError,
)
from core.types import DatasetDescriptor, FeatureMatrix, LabelContainer, LoadOptions

__all__ = [
    "CacheFilesystemError",
    "CatalogError",
    "DatasetCatalog",
    "DatasetClient",
    "DatasetDescriptor",
    "DatasetExtractionError",
    "DatasetParseError",
    "DatasetTransportError",
    "LoadOptions",
    "SvmFetchConfig",
    "SvmFetchConfigError",
    "SvmFetchError",
    "UnsupportedDatasetError",
    "list_datasets",
    "load_dataset",
    "print_catalog",
]


def list_datasets() -> DatasetCatalog:
    """Return the catalog of available datasets."""
    return DatasetClient().list_datasets()


def print_catalog() -> None:
    """Print the available datasets with their kind and declared shape."""
    DatasetClient().print_catalog()


def load_dataset(
    name: str,
    dense: bool = False,
    force_refresh: bool = False,
    normalize: bool = False,
    verbose: bool = True,
) -> tuple[FeatureMatrix, LabelContainer]:
    """Load a dataset, downloading and decompressing it on first use.

    Datasets are cached under ``LIBSVMDATA_HOME`` when set, otherwise
    under ``~/data/libsvm``.

    Args:
        name: Dataset name, see :func:`print_catalog`.
        dense: Return a dense ndarray instead of a CSC matrix.
        force_refresh: Re-download even when the file is cached.
        normalize: Scale columns to unit norm; regression labels too.
        verbose: Print progress lines.

    Returns:
        ``(matrix, labels)`` pair.

    Example:
        >>> matrix, labels = load_dataset("a1a")  # doctest: +SKIP
        >>> matrix.shape  # doctest: +SKIP
        (1605, 123)
    """
    return DatasetClient().load_dataset(
        name,
        dense=dense,
        force_refresh=force_refresh,
        normalize=normalize,
        verbose=verbose,
    )
