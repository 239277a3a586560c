"""Immutable dataset catalog.

This module wraps catalog descriptors in a read-only mapping that
is built once and injected into the loading client.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from catalog.builtin_datasets import builtin_descriptors
from catalog.catalog_io import read_catalog_file
from core.errors import CatalogError, UnsupportedDatasetError
from core.types import DatasetDescriptor


class DatasetCatalog(Mapping[str, DatasetDescriptor]):
    """Read-only mapping from dataset name to descriptor."""

    def __init__(self, descriptors: Iterable[DatasetDescriptor]) -> None:
        """Build a catalog, rejecting duplicate names.

        Args:
            descriptors: Catalog entries in display order.

        Raises:
            CatalogError: If two descriptors share a name.
        """
        entries: dict[str, DatasetDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in entries:
                raise CatalogError(
                    f"Duplicate dataset name '{descriptor.name}' in catalog. "
                    "Dataset names must be unique."
                )
            entries[descriptor.name] = descriptor
        self._entries = entries

    @classmethod
    def builtin(cls) -> "DatasetCatalog":
        """Return the catalog of datasets hosted by the LIBSVM repository."""
        return cls(builtin_descriptors())

    @classmethod
    def from_file(cls, catalog_path: Path) -> "DatasetCatalog":
        """Load a catalog from a YAML file.

        Args:
            catalog_path: Path to the YAML catalog.

        Returns:
            Catalog built from the file entries.

        Raises:
            CatalogError: If the file is missing or malformed.
        """
        return cls(read_catalog_file(catalog_path))

    def __getitem__(self, name: str) -> DatasetDescriptor:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def require(self, name: str) -> DatasetDescriptor:
        """Return the descriptor for a dataset name.

        Args:
            name: Dataset identifier.

        Returns:
            Matching descriptor.

        Raises:
            UnsupportedDatasetError: If the name is not in the catalog.
        """
        descriptor = self._entries.get(name)
        if descriptor is None:
            raise UnsupportedDatasetError(
                f"The dataset '{name}' is not supported. "
                "List the available datasets with list_datasets() or print_catalog()."
            )
        return descriptor
