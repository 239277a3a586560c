"""YAML catalog file parsing.

A catalog file maps dataset names to their remote file, kind,
declared dimensions, and class count::

    datasets:
      a1a:
        file: a1a
        type: binary
        dims: [1605, 123]
        classes: 2
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import cast

import yaml

from core.constants import SUPPORTED_DATASET_KINDS
from core.errors import CatalogError
from core.types import DatasetDescriptor, DatasetKind

_ENTRY_KEYS = frozenset({"file", "type", "dims", "classes"})


def read_catalog_file(catalog_path: Path) -> list[DatasetDescriptor]:
    """Read and validate catalog descriptors from YAML.

    Args:
        catalog_path: YAML catalog path.

    Returns:
        Descriptors in file order.

    Raises:
        CatalogError: If the file is missing, unreadable, or invalid.
    """
    if not catalog_path.exists():
        raise CatalogError(
            f"Dataset catalog not found at {catalog_path}. "
            "Provide an existing YAML catalog file."
        )
    try:
        payload = cast(object, yaml.safe_load(catalog_path.read_text(encoding="utf-8")))
    except OSError as error:
        raise CatalogError(
            f"Failed to read dataset catalog at {catalog_path}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise CatalogError(
            f"Failed to parse dataset catalog at {catalog_path}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    root = _expect_mapping(payload, f"catalog root in {catalog_path}")
    datasets = _expect_mapping(root.get("datasets"), f"'datasets' in {catalog_path}")
    return [_parse_entry(str(name), entry) for name, entry in datasets.items()]


def _parse_entry(name: str, entry: object) -> DatasetDescriptor:
    fields = _expect_mapping(entry, f"dataset '{name}'")
    unknown_keys = sorted(set(fields) - _ENTRY_KEYS)
    if unknown_keys:
        raise CatalogError(
            f"Invalid dataset '{name}': unknown keys {unknown_keys}. "
            f"Allowed keys: {sorted(_ENTRY_KEYS)}."
        )
    remote_file = fields.get("file")
    if not isinstance(remote_file, str) or not remote_file:
        raise CatalogError(f"Invalid dataset '{name}': 'file' must be a non-empty string.")
    kind = fields.get("type")
    if kind not in SUPPORTED_DATASET_KINDS:
        raise CatalogError(
            f"Invalid dataset '{name}': 'type' must be one of "
            f"{SUPPORTED_DATASET_KINDS}, got {kind!r}."
        )
    rows, cols = _parse_dims(name, fields.get("dims"))
    return DatasetDescriptor(
        name=name,
        remote_file=remote_file,
        kind=cast(DatasetKind, kind),
        declared_rows=rows,
        declared_cols=cols,
        declared_classes=_parse_classes(name, fields.get("classes")),
    )


def _parse_dims(name: str, value: object) -> tuple[int, int]:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(_is_positive_int(item) for item in value)
    ):
        raise CatalogError(
            f"Invalid dataset '{name}': 'dims' must be [rows, features] "
            f"with positive integers, got {value!r}."
        )
    return int(value[0]), int(value[1])


def _parse_classes(name: str, value: object) -> int | None:
    if value is None:
        return None
    if not _is_positive_int(value):
        raise CatalogError(
            f"Invalid dataset '{name}': 'classes' must be a positive integer "
            f"or null, got {value!r}."
        )
    return int(cast(int, value))


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    raise CatalogError(
        f"Invalid {context}: expected mapping, got {type(value).__name__}."
    )
