"""Unit tests for archive extraction."""

from __future__ import annotations

import bz2
import lzma
import shutil
import subprocess
import tarfile
from pathlib import Path

import pytest

from core.errors import DatasetExtractionError
from fetch.extraction import build_extraction_command, extract_archive

_CONTENT = b"1 1:0.5 3:2\n-1 2:1\n"


def test_build_extraction_command_keeps_bzip2_archive(tmp_path: Path) -> None:
    """bzip2 should run in keep-original mode."""
    command = build_extraction_command(tmp_path / "a.bz2")

    assert command[:3] == ["bzip2", "-d", "-k"]


def test_build_extraction_command_extracts_tarball_into_cache_dir(tmp_path: Path) -> None:
    """Tarballs should be unpacked next to the archive."""
    command = build_extraction_command(tmp_path / "a.tar.xz")

    assert command == ["tar", "-xJf", str(tmp_path / "a.tar.xz"), "-C", str(tmp_path)]


def test_build_extraction_command_rejects_unknown_format(tmp_path: Path) -> None:
    """Unsupported suffixes should raise an extraction error."""
    with pytest.raises(DatasetExtractionError):
        build_extraction_command(tmp_path / "a.zip")


@pytest.mark.skipif(shutil.which("bzip2") is None, reason="bzip2 is not installed")
def test_extract_archive_bzip2_keeps_original(tmp_path: Path) -> None:
    """bzip2 extraction should produce the sibling and keep the archive."""
    archive_path = tmp_path / "toy.bz2"
    archive_path.write_bytes(bz2.compress(_CONTENT))

    extract_archive(archive_path, tmp_path / "toy")

    assert (tmp_path / "toy").read_bytes() == _CONTENT and archive_path.exists()


@pytest.mark.skipif(shutil.which("xz") is None, reason="xz is not installed")
def test_extract_archive_xz_keeps_original(tmp_path: Path) -> None:
    """xz extraction should produce the sibling and keep the archive."""
    archive_path = tmp_path / "toy.xz"
    archive_path.write_bytes(lzma.compress(_CONTENT))

    extract_archive(archive_path, tmp_path / "toy")

    assert (tmp_path / "toy").read_bytes() == _CONTENT and archive_path.exists()


@pytest.mark.skipif(
    shutil.which("tar") is None or shutil.which("xz") is None,
    reason="tar with xz support is not installed",
)
def test_extract_archive_tar_xz_unpacks_member(tmp_path: Path) -> None:
    """Tarball members should be unpacked into the cache root."""
    member_path = tmp_path / "staging" / "toy"
    member_path.parent.mkdir()
    member_path.write_bytes(_CONTENT)
    archive_path = tmp_path / "toy.tar.xz"
    with tarfile.open(archive_path, "w:xz") as archive:
        archive.add(member_path, arcname="toy")

    extract_archive(archive_path, tmp_path / "toy")

    assert (tmp_path / "toy").read_bytes() == _CONTENT and archive_path.exists()


def test_extract_archive_raises_when_tool_is_missing(tmp_path: Path, monkeypatch) -> None:
    """A missing decompressor should raise an extraction error."""

    def _missing_tool(*args: object, **kwargs: object) -> None:
        raise FileNotFoundError("bzip2")

    monkeypatch.setattr("fetch.extraction.subprocess.run", _missing_tool)

    with pytest.raises(DatasetExtractionError, match="not installed"):
        extract_archive(tmp_path / "toy.bz2", tmp_path / "toy")


def test_extract_archive_raises_for_non_zero_exit(tmp_path: Path, monkeypatch) -> None:
    """A failing decompressor should raise with its exit status."""

    def _failing_tool(command: list[str], **kwargs: object) -> None:
        raise subprocess.CalledProcessError(2, command, stderr="bzip2: data integrity error\n")

    monkeypatch.setattr("fetch.extraction.subprocess.run", _failing_tool)

    with pytest.raises(DatasetExtractionError, match="status 2"):
        extract_archive(tmp_path / "toy.bz2", tmp_path / "toy")


def test_extract_archive_raises_when_output_is_missing(tmp_path: Path, monkeypatch) -> None:
    """Successful exits without the expected file should still fail."""
    monkeypatch.setattr("fetch.extraction.subprocess.run", lambda *args, **kwargs: None)

    with pytest.raises(DatasetExtractionError, match="did not produce"):
        extract_archive(tmp_path / "toy.bz2", tmp_path / "toy")
