"""LIBSVM text decoding.

Each line reads ``label index:value index:value ...`` with 1-based
feature indices. The matrix is preallocated from the declared catalog
shape; row ``i`` of the output is line ``i + 1`` of the file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from scipy import sparse

from core.constants import FEATURE_SEPARATOR, LABEL_SEPARATOR, TOKEN_SEPARATOR
from core.errors import CacheFilesystemError, DatasetParseError
from core.logging_config import get_logger
from core.types import DatasetDescriptor, FeatureMatrix, LabelContainer

_LOGGER = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedLine:
    """One decoded LIBSVM record.

    Attributes:
        label: Scalar label, or class list for multilabel records.
        features: ``(zero_based_column, value)`` pairs; a repeated
            index keeps its last value.
    """

    label: float | list[float]
    features: tuple[tuple[int, float], ...]


def parse_libsvm_line(
    line: str,
    multilabel: bool,
    column_count: int | None = None,
    source: str = "<line>",
) -> ParsedLine:
    """Decode one LIBSVM line.

    Args:
        line: Record text without the trailing newline.
        multilabel: Parse the label as comma-separated class ids.
        column_count: Optional number of declared features; indices
            above it are rejected.
        source: Location used in error messages, e.g. ``file:12``.

    Returns:
        Decoded label and features.

    Raises:
        DatasetParseError: If a token is malformed or out of bounds.
    """
    tokens = line.split(TOKEN_SEPARATOR)
    label = _parse_label(tokens[0], multilabel, source)
    features: dict[int, float] = {}
    for token in tokens[1:]:
        if not token:
            continue
        column, value = _parse_feature(token, column_count, source)
        features[column] = value
    return ParsedLine(label=label, features=tuple(features.items()))


def parse_libsvm_file(
    path: Path,
    descriptor: DatasetDescriptor,
    dense: bool = False,
) -> tuple[FeatureMatrix, LabelContainer]:
    """Parse a LIBSVM file into a feature matrix and labels.

    Rows beyond the end of a short file stay zero, with ``0.0`` scalar
    labels or empty multilabel lists.

    Args:
        path: Decompressed dataset file.
        descriptor: Catalog entry providing kind and declared shape.
        dense: Build a dense ndarray instead of a CSC matrix.

    Returns:
        ``(matrix, labels)`` with ``declared_rows`` rows.

    Raises:
        DatasetParseError: If any line is malformed or the file has
            more lines than declared.
        CacheFilesystemError: If the file cannot be opened.
    """
    row_count = descriptor.declared_rows
    column_count = descriptor.declared_cols
    builder: _DenseBuilder | _SparseBuilder = (
        _DenseBuilder(row_count, column_count) if dense else _SparseBuilder(row_count, column_count)
    )
    labels: LabelContainer = (
        [[] for _ in range(row_count)] if descriptor.is_multilabel else np.zeros(row_count)
    )
    lines_read = 0
    try:
        with path.open("r", encoding="utf-8") as input_file:
            for row_index, raw_line in enumerate(input_file):
                source = f"{path}:{row_index + 1} (dataset '{descriptor.name}')"
                if row_index >= row_count:
                    raise DatasetParseError(
                        f"Failed to parse dataset '{descriptor.name}' at {source}: "
                        f"file has more than the declared {row_count} rows. "
                        "Fix the catalog dimensions or refresh the cached file."
                    )
                parsed = parse_libsvm_line(
                    raw_line.rstrip("\r\n"),
                    descriptor.is_multilabel,
                    column_count,
                    source,
                )
                labels[row_index] = parsed.label
                builder.add_row(row_index, parsed.features)
                lines_read += 1
    except UnicodeDecodeError as error:
        raise DatasetParseError(
            f"Failed to decode dataset '{descriptor.name}' at {path}: {error}. "
            "Retry with force_refresh if the cached file is corrupt."
        ) from error
    except OSError as error:
        raise CacheFilesystemError(
            f"Failed to read dataset '{descriptor.name}' at {path}: {error}. "
            "Check file permissions and retry."
        ) from error
    matrix = builder.build()
    _LOGGER.info(
        "dataset_parsed",
        dataset_name=descriptor.name,
        path=str(path),
        lines_read=lines_read,
        dense=dense,
    )
    return matrix, labels


class _DenseBuilder:
    """Scatter writes into a zero-filled ndarray."""

    def __init__(self, row_count: int, column_count: int) -> None:
        self._matrix = np.zeros((row_count, column_count))

    def add_row(self, row_index: int, features: tuple[tuple[int, float], ...]) -> None:
        for column, value in features:
            self._matrix[row_index, column] = value

    def build(self) -> np.ndarray:
        return self._matrix


class _SparseBuilder:
    """Collect coordinate triplets and assemble a CSC matrix."""

    def __init__(self, row_count: int, column_count: int) -> None:
        self._shape = (row_count, column_count)
        self._rows: list[int] = []
        self._columns: list[int] = []
        self._values: list[float] = []

    def add_row(self, row_index: int, features: tuple[tuple[int, float], ...]) -> None:
        for column, value in features:
            self._rows.append(row_index)
            self._columns.append(column)
            self._values.append(value)

    def build(self) -> sparse.csc_matrix:
        coordinates = (
            np.asarray(self._rows, dtype=np.int64),
            np.asarray(self._columns, dtype=np.int64),
        )
        return sparse.csc_matrix(
            (np.asarray(self._values, dtype=np.float64), coordinates),
            shape=self._shape,
        )


def _parse_label(token: str, multilabel: bool, source: str) -> float | list[float]:
    parts = token.split(LABEL_SEPARATOR) if multilabel else [token]
    try:
        values = [_to_float(part) for part in parts]
    except ValueError as error:
        raise DatasetParseError(
            f"Invalid label '{token}' at {source}: expected "
            f"{'comma-separated numbers' if multilabel else 'a number'}."
        ) from error
    return values if multilabel else values[0]


def _parse_feature(token: str, column_count: int | None, source: str) -> tuple[int, float]:
    index_text, separator, value_text = token.partition(FEATURE_SEPARATOR)
    if not separator:
        raise DatasetParseError(
            f"Invalid feature '{token}' at {source}: expected index:value."
        )
    try:
        index = _to_int(index_text)
        value = _to_float(value_text)
    except ValueError as error:
        raise DatasetParseError(
            f"Invalid feature '{token}' at {source}: expected integer index "
            "and numeric value."
        ) from error
    if index < 1 or (column_count is not None and index > column_count):
        raise DatasetParseError(
            f"Feature index out of bounds in '{token}' at {source}: expected "
            f"an index in 1..{column_count if column_count is not None else 'inf'}."
        )
    return index - 1, value


def _to_int(text: str) -> int:
    # ASCII digits only, no underscores or padding.
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _to_float(text: str) -> float:
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)
