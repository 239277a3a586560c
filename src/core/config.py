"""Runtime configuration model for svmfetch.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    BASE_URL_ENV_VAR,
    CACHE_ROOT_ENV_VAR,
    CATALOG_ENV_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_CACHE_SUBDIR,
    DOWNLOAD_TIMEOUT_ENV_VAR,
)
from core.errors import CacheFilesystemError, SvmFetchConfigError


@dataclass(frozen=True)
class SvmFetchConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Optional cache root override, used verbatim when set.
        base_url: Root URL of the remote LIBSVM dataset repository.
        catalog_path: Optional YAML catalog replacing the built-in table.
        download_timeout: Optional per-request timeout in seconds.
    """

    data_root: Path | None = None
    base_url: str = DEFAULT_BASE_URL
    catalog_path: Path | None = None
    download_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "SvmFetchConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SvmFetchConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv(CACHE_ROOT_ENV_VAR)
        catalog_value = os.getenv(CATALOG_ENV_VAR)
        timeout_value = os.getenv(DOWNLOAD_TIMEOUT_ENV_VAR)
        return cls(
            data_root=Path(data_root_value) if data_root_value else None,
            base_url=os.getenv(BASE_URL_ENV_VAR, DEFAULT_BASE_URL).rstrip("/"),
            catalog_path=Path(catalog_value).expanduser() if catalog_value else None,
            download_timeout=_parse_timeout(timeout_value) if timeout_value else None,
        )


def resolve_cache_root(data_root: Path | None) -> Path:
    """Resolve the directory holding downloaded datasets.

    An explicit override is returned verbatim and the caller is
    responsible for its existence. Without one, ``~/data/libsvm`` is
    created on demand.

    Args:
        data_root: Optional override path.

    Returns:
        Cache root directory.

    Raises:
        CacheFilesystemError: If the default directory cannot be created.
    """
    if data_root is not None:
        return data_root
    default_root = Path.home() / DEFAULT_CACHE_SUBDIR
    try:
        default_root.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise CacheFilesystemError(
            f"Failed to create dataset cache at {default_root}: {error}. "
            f"Set {CACHE_ROOT_ENV_VAR} to a writable directory."
        ) from error
    return default_root


def _parse_timeout(raw_value: str) -> float:
    """Parse the download timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        SvmFetchConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise SvmFetchConfigError(
            f"Invalid {DOWNLOAD_TIMEOUT_ENV_VAR} value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {DOWNLOAD_TIMEOUT_ENV_VAR} to a numeric value."
        ) from error
    if timeout <= 0:
        raise SvmFetchConfigError(
            f"Invalid {DOWNLOAD_TIMEOUT_ENV_VAR} value: expected a positive "
            f"number, got '{raw_value}'. Unset it to disable the timeout."
        )
    return timeout
