"""Shared typed models.

This module defines immutable data models used by the catalog,
fetch, parse, and client layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

import numpy as np
from scipy import sparse

DatasetKind = Literal["binary", "multiclass", "regression", "multilabel"]
FeatureMatrix = Union[np.ndarray, sparse.csc_matrix]
LabelContainer = Union[np.ndarray, list[list[float]]]


@dataclass(frozen=True)
class DatasetDescriptor:
    """Catalog entry describing one remote LIBSVM file.

    Attributes:
        name: Unique catalog key.
        remote_file: File name under the repository kind directory.
        kind: Dataset kind, also the remote directory segment.
        declared_rows: Number of examples used to size the matrix.
        declared_cols: Number of features used to size the matrix.
        declared_classes: Number of classes, None for regression.
    """

    name: str
    remote_file: str
    kind: DatasetKind
    declared_rows: int
    declared_cols: int
    declared_classes: int | None

    @property
    def is_multilabel(self) -> bool:
        """Return whether labels are comma-separated class lists."""
        return self.kind == "multilabel"

    @property
    def is_classification(self) -> bool:
        """Return whether labels are single class identifiers."""
        return self.kind in ("binary", "multiclass")


@dataclass(frozen=True)
class CacheLocation:
    """Local paths of one dataset inside the cache root.

    Attributes:
        root_dir: Cache root directory.
        archive_path: Downloaded file path.
        decompressed_path: Parsed file path, equal to archive_path
            when the remote file is not compressed.
    """

    root_dir: Path
    archive_path: Path
    decompressed_path: Path

    @property
    def is_compressed(self) -> bool:
        """Return whether the archive needs extraction before parsing."""
        return self.archive_path != self.decompressed_path


@dataclass(frozen=True)
class LoadOptions:
    """Dataset load options.

    Attributes:
        dense: Return a dense ndarray instead of a CSC matrix.
        force_refresh: Re-download even when the archive is cached.
        normalize: Scale columns (and regression labels) to unit norm.
        verbose: Print human-readable progress lines.
    """

    dense: bool = False
    force_refresh: bool = False
    normalize: bool = False
    verbose: bool = True
