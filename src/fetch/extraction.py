"""Archive extraction through external decompressors.

Every command keeps the original archive next to the decompressed
output so later loads can skip both download and extraction.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from core.errors import DatasetExtractionError
from fetch.cache_layout import compression_suffix


def build_extraction_command(archive_path: Path) -> list[str]:
    """Return the decompressor command for an archive.

    Args:
        archive_path: Local ``.bz2``, ``.xz``, or ``.tar.xz`` file.

    Returns:
        Command argument vector.

    Raises:
        DatasetExtractionError: If the archive format is not supported.
    """
    suffix = compression_suffix(archive_path.name)
    if suffix == ".bz2":
        return ["bzip2", "-d", "-k", str(archive_path)]
    if suffix == ".xz":
        return ["xz", "-d", "-k", str(archive_path)]
    if suffix == ".tar.xz":
        return ["tar", "-xJf", str(archive_path), "-C", str(archive_path.parent)]
    raise DatasetExtractionError(
        f"Unsupported archive format for {archive_path}. "
        "Expected a .bz2, .xz, or .tar.xz file."
    )


def extract_archive(archive_path: Path, decompressed_path: Path) -> None:
    """Decompress an archive into its sibling, keeping the archive.

    Args:
        archive_path: Local archive file.
        decompressed_path: Expected decompressed output path.

    Raises:
        DatasetExtractionError: If the tool is missing, exits non-zero,
            or does not produce the expected output.
    """
    command = build_extraction_command(archive_path)
    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except FileNotFoundError as error:
        raise DatasetExtractionError(
            f"Failed to extract {archive_path}: '{command[0]}' is not installed. "
            f"Install {command[0]} and retry."
        ) from error
    except subprocess.CalledProcessError as error:
        raise DatasetExtractionError(
            f"Failed to extract {archive_path}: {command[0]} exited with status "
            f"{error.returncode}: {error.stderr.strip()}. "
            "Retry with force_refresh if the archive is corrupt."
        ) from error
    if not decompressed_path.is_file():
        raise DatasetExtractionError(
            f"Extraction of {archive_path} did not produce {decompressed_path}. "
            "Check the archive contents."
        )
