"""svmfetch CLI entry points.
This module exposes commands to list, fetch, and load LIBSVM datasets.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from scipy import sparse

from catalog.dataset_catalog import DatasetCatalog
from client.dataset_client import DatasetClient
from core.config import SvmFetchConfig
from core.types import LoadOptions


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="svmfetch", description="LIBSVM dataset fetcher")
    parser.add_argument("--data-root", help="Override LIBSVMDATA_HOME for this command")
    parser.add_argument("--catalog", help="Override LIBSVMDATA_CATALOG for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_list_command(subparsers)
    _add_fetch_command(subparsers)
    _add_load_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the svmfetch CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.data_root, args.catalog)
    if args.command == "list":
        client.print_catalog()
        return 0
    if args.command == "fetch":
        return _run_fetch_command(client, args)
    if args.command == "load":
        return _run_load_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None, catalog_file: str | None) -> DatasetClient:
    """Build SDK client with optional overrides.

    Args:
        data_root: Optional cache root override.
        catalog_file: Optional YAML catalog override.

    Returns:
        Configured SDK client.
    """
    config = SvmFetchConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    if catalog_file:
        catalog_path = Path(catalog_file).expanduser()
        return DatasetClient(config, DatasetCatalog.from_file(catalog_path))
    return DatasetClient(config)


def _run_fetch_command(client: DatasetClient, args: argparse.Namespace) -> int:
    """Handle fetch command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    local_path = client.fetch(args.dataset, force_refresh=args.replace, verbose=not args.quiet)
    print(local_path)
    return 0


def _run_load_command(client: DatasetClient, args: argparse.Namespace) -> int:
    """Handle load command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = LoadOptions(
        dense=args.dense,
        force_refresh=args.replace,
        normalize=args.normalize,
        verbose=not args.quiet,
    )
    matrix, labels = client.load(args.dataset, options)
    stored_entries = matrix.nnz if sparse.issparse(matrix) else int((matrix != 0).sum())
    print(f"rows={matrix.shape[0]}")
    print(f"cols={matrix.shape[1]}")
    print(f"stored_entries={stored_entries}")
    print(f"labels={len(labels)}")
    return 0


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="Print the dataset catalog")


def _add_fetch_command(subparsers: Any) -> None:
    """Register fetch subcommand."""
    parser = subparsers.add_parser("fetch", help="Download and decompress a dataset")
    parser.add_argument("dataset", help="Dataset name")
    parser.add_argument("--replace", action="store_true", help="Re-download a cached file")
    parser.add_argument("--quiet", action="store_true", help="Suppress status lines")


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Load a dataset and print its shape")
    parser.add_argument("dataset", help="Dataset name")
    parser.add_argument("--dense", action="store_true", help="Build a dense matrix")
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Scale columns (and regression labels) to unit norm",
    )
    parser.add_argument("--replace", action="store_true", help="Re-download a cached file")
    parser.add_argument("--quiet", action="store_true", help="Suppress status lines")
