"""Python SDK for LIBSVM dataset loading.

This module exposes the catalog and the load pipeline over an
injected configuration and an immutable dataset catalog.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from catalog.catalog_report import print_catalog
from catalog.dataset_catalog import DatasetCatalog
from core.config import SvmFetchConfig
from core.logging_config import get_logger
from core.types import FeatureMatrix, LabelContainer, LoadOptions
from fetch.acquire import DatasetAcquirer
from libsvm_format.libsvm_reader import parse_libsvm_file
from libsvm_format.normalization import normalize_columns

_LOGGER = get_logger(__name__)


class DatasetClient:
    """Primary SDK entry point for dataset loading."""

    def __init__(
        self,
        config: SvmFetchConfig | None = None,
        catalog: DatasetCatalog | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration, read from the
                environment when omitted.
            catalog: Optional dataset catalog. Defaults to the file named
                by the configuration, or the built-in table.
        """
        self._config = config or SvmFetchConfig.from_env()
        self._catalog = catalog if catalog is not None else _default_catalog(self._config)
        self._acquirer = DatasetAcquirer(self._catalog, self._config)

    @property
    def catalog(self) -> DatasetCatalog:
        """Return the immutable catalog used by this client."""
        return self._catalog

    def list_datasets(self) -> DatasetCatalog:
        """Return the catalog of loadable datasets."""
        return self._catalog

    def print_catalog(self) -> None:
        """Print name, kind, and declared shape of every dataset."""
        print_catalog(self._catalog)

    def fetch(self, name: str, force_refresh: bool = False, verbose: bool = True) -> Path:
        """Download and decompress a dataset without parsing it.

        Args:
            name: Dataset identifier.
            force_refresh: Re-download even when cached.
            verbose: Print acquisition status lines.

        Returns:
            Local parseable file path.

        Raises:
            UnsupportedDatasetError: If the name is not in the catalog.
            DatasetTransportError: If the download fails.
            DatasetExtractionError: If decompression fails.
        """
        descriptor = self._catalog.require(name)
        return self._acquirer.ensure_local(descriptor, force_refresh, verbose)

    def load(
        self,
        name: str,
        options: LoadOptions | None = None,
    ) -> tuple[FeatureMatrix, LabelContainer]:
        """Load a dataset as a feature matrix and labels.

        Args:
            name: Dataset identifier.
            options: Load options, defaults to a sparse, non-normalized load.

        Returns:
            ``(matrix, labels)`` sized from the catalog's declared shape.

        Raises:
            UnsupportedDatasetError: If the name is not in the catalog.
            DatasetTransportError: If the download fails.
            DatasetExtractionError: If decompression fails.
            DatasetParseError: If the file content is malformed.
        """
        load_options = options or LoadOptions()
        descriptor = self._catalog.require(name)
        local_path = self._acquirer.ensure_local(
            descriptor,
            force_refresh=load_options.force_refresh,
            verbose=load_options.verbose,
        )
        if load_options.verbose:
            print("Loading the dataset file...")
        matrix, labels = parse_libsvm_file(local_path, descriptor, dense=load_options.dense)
        if load_options.normalize:
            matrix, labels = normalize_columns(matrix, labels, descriptor.kind)
        _LOGGER.info(
            "dataset_loaded",
            dataset_name=name,
            path=str(local_path),
            shape=list(matrix.shape),
            dense=load_options.dense,
            normalized=load_options.normalize,
        )
        return matrix, labels

    def load_dataset(
        self,
        name: str,
        dense: bool = False,
        force_refresh: bool = False,
        normalize: bool = False,
        verbose: bool = True,
    ) -> tuple[FeatureMatrix, LabelContainer]:
        """Keyword form of :meth:`load`."""
        options = LoadOptions(
            dense=dense,
            force_refresh=force_refresh,
            normalize=normalize,
            verbose=verbose,
        )
        return self.load(name, options)

    def with_data_root(self, data_root: str) -> "DatasetClient":
        """Clone the client with a different cache root.

        Args:
            data_root: New cache root path.

        Returns:
            New SDK client sharing this client's catalog.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        return DatasetClient(replace(self._config, data_root=resolved_root), self._catalog)


def _default_catalog(config: SvmFetchConfig) -> DatasetCatalog:
    if config.catalog_path is not None:
        return DatasetCatalog.from_file(config.catalog_path)
    return DatasetCatalog.builtin()
