"""Unit tests for the download-and-extract policy."""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog.dataset_catalog import DatasetCatalog
from core.config import SvmFetchConfig
from core.errors import UnsupportedDatasetError
from fetch.acquire import DatasetAcquirer
from tests.dataset_fixtures import make_descriptor


class _Recorder:
    """Fake downloader and extractor that count calls."""

    def __init__(self) -> None:
        self.downloads: list[str] = []
        self.extractions: list[Path] = []

    def download(
        self,
        dataset_name: str,
        url: str,
        destination: Path,
        timeout: float | None = None,
    ) -> int:
        self.downloads.append(url)
        destination.write_bytes(b"archive")
        return 7

    def extract(self, archive_path: Path, decompressed_path: Path) -> None:
        self.extractions.append(archive_path)
        decompressed_path.write_text("1 1:1\n", encoding="utf-8")


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> _Recorder:
    fake = _Recorder()
    monkeypatch.setattr("fetch.acquire.download_file", fake.download)
    monkeypatch.setattr("fetch.acquire.extract_archive", fake.extract)
    return fake


def _acquirer(tmp_path: Path, *descriptors) -> DatasetAcquirer:
    config = SvmFetchConfig(data_root=tmp_path, base_url="http://host/datasets")
    return DatasetAcquirer(DatasetCatalog(descriptors), config)


def test_ensure_local_downloads_missing_plain_file(tmp_path: Path, recorder: _Recorder) -> None:
    """Absent uncompressed files should be downloaded from <base>/<kind>/<file>."""
    descriptor = make_descriptor("a1a", kind="binary")

    local_path = _acquirer(tmp_path, descriptor).ensure_local(descriptor, verbose=False)

    assert (local_path, recorder.downloads) == (
        tmp_path / "a1a",
        ["http://host/datasets/binary/a1a"],
    )


def test_ensure_local_extracts_compressed_archive(tmp_path: Path, recorder: _Recorder) -> None:
    """Compressed archives should be extracted and the sibling returned."""
    descriptor = make_descriptor("yeast", kind="multilabel", remote_file="yeast.svm.bz2")

    local_path = _acquirer(tmp_path, descriptor).ensure_local(descriptor, verbose=False)

    assert (local_path, recorder.extractions) == (
        tmp_path / "yeast.svm",
        [tmp_path / "yeast.svm.bz2"],
    )


def test_ensure_local_is_idempotent(tmp_path: Path, recorder: _Recorder) -> None:
    """A second call should neither download nor extract again."""
    descriptor = make_descriptor("toy", remote_file="toy.xz")
    acquirer = _acquirer(tmp_path, descriptor)
    acquirer.ensure_local(descriptor, verbose=False)

    acquirer.ensure_local(descriptor, verbose=False)

    assert (len(recorder.downloads), len(recorder.extractions)) == (1, 1)


def test_ensure_local_reuses_existing_decompressed_copy(
    tmp_path: Path,
    recorder: _Recorder,
) -> None:
    """A cached archive with its sibling should not touch any tool."""
    descriptor = make_descriptor("toy", remote_file="toy.bz2")
    (tmp_path / "toy.bz2").write_bytes(b"archive")
    (tmp_path / "toy").write_text("1 1:1\n", encoding="utf-8")

    local_path = _acquirer(tmp_path, descriptor).ensure_local(descriptor, verbose=False)

    assert (local_path, recorder.downloads, recorder.extractions) == (tmp_path / "toy", [], [])


def test_ensure_local_keeps_sibling_when_only_archive_is_missing(
    tmp_path: Path,
    recorder: _Recorder,
) -> None:
    """A deleted archive should be downloaded again without re-extracting its sibling."""
    descriptor = make_descriptor("toy", remote_file="toy.bz2")
    (tmp_path / "toy").write_text("2 3:4\n", encoding="utf-8")

    _acquirer(tmp_path, descriptor).ensure_local(descriptor, verbose=False)

    assert (
        len(recorder.downloads),
        recorder.extractions,
        (tmp_path / "toy").read_text(encoding="utf-8"),
    ) == (1, [], "2 3:4\n")


def test_ensure_local_force_refresh_redownloads_and_reextracts(
    tmp_path: Path,
    recorder: _Recorder,
) -> None:
    """Forced refresh should replace the archive and its stale sibling."""
    descriptor = make_descriptor("toy", remote_file="toy.bz2")
    (tmp_path / "toy.bz2").write_bytes(b"old")
    (tmp_path / "toy").write_text("stale\n", encoding="utf-8")

    _acquirer(tmp_path, descriptor).ensure_local(descriptor, force_refresh=True, verbose=False)

    assert (len(recorder.downloads), (tmp_path / "toy").read_text(encoding="utf-8")) == (
        1,
        "1 1:1\n",
    )


def test_ensure_local_prints_status_lines_when_verbose(
    tmp_path: Path,
    recorder: _Recorder,
    capsys,
) -> None:
    """Verbose mode should report download, replace, and cache hits."""
    descriptor = make_descriptor("toy")
    acquirer = _acquirer(tmp_path, descriptor)

    acquirer.ensure_local(descriptor)
    acquirer.ensure_local(descriptor)
    acquirer.ensure_local(descriptor, force_refresh=True)

    assert capsys.readouterr().out.splitlines() == [
        "Downloading the dataset toy...",
        "The dataset toy is already downloaded",
        "Replacing the dataset toy...",
    ]


def test_ensure_local_is_silent_when_not_verbose(
    tmp_path: Path,
    recorder: _Recorder,
    capsys,
) -> None:
    """Quiet mode should print nothing to stdout."""
    descriptor = make_descriptor("toy")

    _acquirer(tmp_path, descriptor).ensure_local(descriptor, verbose=False)

    assert capsys.readouterr().out == ""


def test_ensure_local_rejects_unknown_dataset_without_side_effects(
    tmp_path: Path,
    recorder: _Recorder,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Unknown datasets should fail before any filesystem or network access."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    acquirer = DatasetAcquirer(DatasetCatalog([make_descriptor("toy")]), SvmFetchConfig())

    with pytest.raises(UnsupportedDatasetError, match="ghost"):
        acquirer.ensure_local(make_descriptor("ghost"))

    assert (recorder.downloads, list(tmp_path.iterdir())) == ([], [])
