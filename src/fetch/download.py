"""HTTP download helpers for dataset archives."""

from __future__ import annotations

from pathlib import Path

import requests

from core.constants import DOWNLOAD_CHUNK_SIZE
from core.errors import CacheFilesystemError, DatasetTransportError


def build_dataset_url(base_url: str, kind: str, remote_file: str) -> str:
    """Return ``<base_url>/<kind>/<remote_file>``."""
    return f"{base_url.rstrip('/')}/{kind}/{remote_file}"


def download_file(
    dataset_name: str,
    url: str,
    destination: Path,
    timeout: float | None = None,
) -> int:
    """Stream a remote file to disk, overwriting any existing copy.

    Args:
        dataset_name: Dataset identifier for error context.
        url: Remote file URL.
        destination: Local output path.
        timeout: Optional per-request timeout in seconds.

    Returns:
        Number of bytes written.

    Raises:
        DatasetTransportError: If the request fails or returns an error status.
        CacheFilesystemError: If the destination cannot be written.
    """
    bytes_written = 0
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with destination.open("wb") as output_file:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    output_file.write(chunk)
                    bytes_written += len(chunk)
    except requests.RequestException as error:
        destination.unlink(missing_ok=True)
        raise DatasetTransportError(
            f"Failed to download dataset '{dataset_name}' from {url}: {error}. "
            "Check network access and retry with force_refresh."
        ) from error
    except OSError as error:
        destination.unlink(missing_ok=True)
        raise CacheFilesystemError(
            f"Failed to write dataset '{dataset_name}' to {destination}: {error}. "
            "Check that the cache root exists and is writable."
        ) from error
    return bytes_written
