"""Tabular catalog report."""

from __future__ import annotations

from collections.abc import Mapping

from core.constants import CATALOG_TABLE_WIDTH
from core.types import DatasetDescriptor

_ROW_FORMAT = "{:<25} | {:<15} | {:<10} | {:<10} | {:<10}"


def format_catalog_table(catalog: Mapping[str, DatasetDescriptor]) -> str:
    """Render catalog entries as a fixed-width table.

    Args:
        catalog: Dataset catalog.

    Returns:
        Table text with one row per dataset; regression datasets
        report ``inf`` classes.
    """
    lines = [
        "=" * CATALOG_TABLE_WIDTH,
        _ROW_FORMAT.format("Dataset name", "Type", "Data", "Features", "Classes"),
        "-" * CATALOG_TABLE_WIDTH,
    ]
    for name, descriptor in catalog.items():
        classes = "inf" if descriptor.declared_classes is None else descriptor.declared_classes
        lines.append(
            _ROW_FORMAT.format(
                name,
                descriptor.kind,
                descriptor.declared_rows,
                descriptor.declared_cols,
                classes,
            )
        )
    lines.append("=" * CATALOG_TABLE_WIDTH)
    return "\n".join(lines)


def print_catalog(catalog: Mapping[str, DatasetDescriptor]) -> None:
    """Print the catalog table to stdout."""
    print(format_catalog_table(catalog))
