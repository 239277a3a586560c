"""Local dataset acquisition.

This module ensures a decompressed copy of a catalog dataset exists
in the cache root, downloading and extracting only when needed.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from core.config import SvmFetchConfig, resolve_cache_root
from core.errors import UnsupportedDatasetError
from core.logging_config import get_logger
from core.types import CacheLocation, DatasetDescriptor
from fetch.cache_layout import build_cache_location
from fetch.download import build_dataset_url, download_file
from fetch.extraction import extract_archive

_LOGGER = get_logger(__name__)


class DatasetAcquirer:
    """Download-and-extract policy over a flat cache directory."""

    def __init__(
        self,
        catalog: Mapping[str, DatasetDescriptor],
        config: SvmFetchConfig,
    ) -> None:
        self._catalog = catalog
        self._config = config

    def ensure_local(
        self,
        descriptor: DatasetDescriptor,
        force_refresh: bool = False,
        verbose: bool = True,
    ) -> Path:
        """Return the path of a parseable local copy of a dataset.

        Args:
            descriptor: Catalog entry to acquire.
            force_refresh: Re-download even when the archive is cached.
            verbose: Print a status line for each acquisition step.

        Returns:
            Decompressed file path, or the archive path when the remote
            file is not compressed.

        Raises:
            UnsupportedDatasetError: If the dataset is not in the catalog.
            DatasetTransportError: If the download fails.
            DatasetExtractionError: If decompression fails.
            CacheFilesystemError: If the cache root cannot be created.
        """
        if self._catalog.get(descriptor.name) != descriptor:
            raise UnsupportedDatasetError(
                f"The dataset '{descriptor.name}' is not supported. "
                "List the available datasets with list_datasets() or print_catalog()."
            )
        cache_root = resolve_cache_root(self._config.data_root)
        location = build_cache_location(descriptor, cache_root)
        downloaded = self._download_if_needed(descriptor, location, force_refresh, verbose)
        if not location.is_compressed:
            return location.archive_path
        if force_refresh and downloaded and location.decompressed_path.exists():
            location.decompressed_path.unlink()
        self._extract_if_needed(descriptor, location, verbose)
        return location.decompressed_path

    def _download_if_needed(
        self,
        descriptor: DatasetDescriptor,
        location: CacheLocation,
        force_refresh: bool,
        verbose: bool,
    ) -> bool:
        if location.archive_path.exists() and not force_refresh:
            _report(verbose, f"The dataset {descriptor.name} is already downloaded")
            return False
        if location.archive_path.exists():
            _report(verbose, f"Replacing the dataset {descriptor.name}...")
        else:
            _report(verbose, f"Downloading the dataset {descriptor.name}...")
        url = build_dataset_url(self._config.base_url, descriptor.kind, descriptor.remote_file)
        _LOGGER.info("dataset_download_started", dataset_name=descriptor.name, url=url)
        byte_count = download_file(
            descriptor.name,
            url,
            location.archive_path,
            timeout=self._config.download_timeout,
        )
        _LOGGER.info(
            "dataset_download_completed",
            dataset_name=descriptor.name,
            archive_path=str(location.archive_path),
            byte_count=byte_count,
        )
        return True

    def _extract_if_needed(
        self,
        descriptor: DatasetDescriptor,
        location: CacheLocation,
        verbose: bool,
    ) -> None:
        if location.decompressed_path.exists():
            return
        _report(verbose, f"Extracting the dataset {descriptor.name}...")
        extract_archive(location.archive_path, location.decompressed_path)
        _LOGGER.info(
            "dataset_extracted",
            dataset_name=descriptor.name,
            archive_path=str(location.archive_path),
            decompressed_path=str(location.decompressed_path),
        )


def _report(verbose: bool, message: str) -> None:
    """Print a human-readable status line when verbose."""
    if verbose:
        print(message)
