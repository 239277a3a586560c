"""Unit-norm scaling of parsed datasets."""

from __future__ import annotations

import numpy as np
from scipy import sparse
from scipy.sparse import linalg as sparse_linalg

from core.logging_config import get_logger
from core.types import DatasetKind, FeatureMatrix, LabelContainer

_LOGGER = get_logger(__name__)


def normalize_columns(
    matrix: FeatureMatrix,
    labels: LabelContainer,
    kind: DatasetKind,
) -> tuple[FeatureMatrix, LabelContainer]:
    """Scale matrix columns, and regression labels, to unit L2 norm.

    Columns are rescaled in place. All-zero columns are left untouched.
    Only regression labels are rescaled, as one vector.

    Args:
        matrix: Dense ndarray or CSC matrix from the parser.
        labels: Label container parallel to the matrix rows.
        kind: Dataset kind.

    Returns:
        The scaled ``(matrix, labels)`` pair.
    """
    if sparse.issparse(matrix):
        matrix = _normalize_sparse_columns(sparse.csc_matrix(matrix))
    else:
        _normalize_dense_columns(matrix)
    if kind == "regression":
        labels = _normalize_vector(np.asarray(labels, dtype=np.float64))
    _LOGGER.info("dataset_normalized", kind=kind, shape=list(matrix.shape))
    return matrix, labels


def _normalize_dense_columns(matrix: np.ndarray) -> None:
    norms = np.linalg.norm(matrix, axis=0)
    nonzero = norms > 0
    matrix[:, nonzero] /= norms[nonzero]


def _normalize_sparse_columns(matrix: sparse.csc_matrix) -> sparse.csc_matrix:
    norms = np.asarray(sparse_linalg.norm(matrix, axis=0)).ravel()
    scale = np.where(norms > 0, norms, 1.0)
    # CSC stores each column's entries contiguously between indptr bounds.
    matrix.data /= np.repeat(scale, np.diff(matrix.indptr))
    return matrix


def _normalize_vector(vector: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vector)
    if norm == 0:
        return vector
    return vector / norm
