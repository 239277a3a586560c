"""Cache path derivation for catalog entries."""

from __future__ import annotations

from pathlib import Path

from core.constants import COMPRESSED_SUFFIXES
from core.types import CacheLocation, DatasetDescriptor


def compression_suffix(file_name: str) -> str | None:
    """Return the archive suffix of a file name, if any.

    Args:
        file_name: Remote or local file name.

    Returns:
        One of ``.tar.xz``, ``.bz2``, ``.xz``, or None when uncompressed.
    """
    for suffix in COMPRESSED_SUFFIXES:
        if file_name.endswith(suffix):
            return suffix
    return None


def decompressed_file_name(file_name: str) -> str:
    """Strip the archive suffix from a file name.

    Args:
        file_name: Remote file name, e.g. ``rcv1_train.binary.bz2``.

    Returns:
        File name of the decompressed sibling, unchanged when the
        file is not an archive.
    """
    suffix = compression_suffix(file_name)
    if suffix is None:
        return file_name
    return file_name[: -len(suffix)]


def build_cache_location(descriptor: DatasetDescriptor, cache_root: Path) -> CacheLocation:
    """Derive local cache paths for a dataset.

    Args:
        descriptor: Catalog entry.
        cache_root: Resolved cache root directory.

    Returns:
        Archive and decompressed paths under the cache root.
    """
    archive_path = cache_root / descriptor.remote_file
    return CacheLocation(
        root_dir=cache_root,
        archive_path=archive_path,
        decompressed_path=cache_root / decompressed_file_name(descriptor.remote_file),
    )
