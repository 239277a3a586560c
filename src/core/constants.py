"""Core constants used across svmfetch modules.

This module centralizes defaults, environment variable names,
and archive suffixes so business logic avoids magic literals.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_BASE_URL = "https://www.csie.ntu.edu.tw/~cjlin/libsvmtools/datasets"
DEFAULT_CACHE_SUBDIR = Path("data") / "libsvm"
CACHE_ROOT_ENV_VAR = "LIBSVMDATA_HOME"
BASE_URL_ENV_VAR = "LIBSVMDATA_BASE_URL"
CATALOG_ENV_VAR = "LIBSVMDATA_CATALOG"
DOWNLOAD_TIMEOUT_ENV_VAR = "LIBSVMDATA_DOWNLOAD_TIMEOUT"
DOWNLOAD_CHUNK_SIZE = 1 << 20
SUPPORTED_DATASET_KINDS = ("binary", "multiclass", "regression", "multilabel")
# Ordered longest-first so ".tar.xz" is matched before ".xz".
COMPRESSED_SUFFIXES = (".tar.xz", ".bz2", ".xz")
LABEL_SEPARATOR = ","
FEATURE_SEPARATOR = ":"
TOKEN_SEPARATOR = " "
CATALOG_TABLE_WIDTH = 82
