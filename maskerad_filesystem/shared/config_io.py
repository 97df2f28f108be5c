"""Configuration I/O utilities for reading and writing TOML config files.

This module handles serialization/deserialization of FilesystemConfig to/from TOML format.
"""

import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from maskerad_filesystem.domain.config import (
    ApplicationConfig,
    FilesystemConfig,
    PoolConfig,
)

CONFIG_FILE_NAME = "filesystem.toml"


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to the TOML file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def config_data_to_filesystem_config(data: dict[str, Any]) -> FilesystemConfig:
    """Convert raw config data dictionary to FilesystemConfig.

    Args:
        data: Dictionary with config sections

    Returns:
        FilesystemConfig instance

    Raises:
        ValueError: If a section has unknown keys or invalid values
    """
    application_data = data.get("application", {})
    pool_data = data.get("pool", {})

    try:
        return FilesystemConfig(
            application=ApplicationConfig(**application_data),
            pool=PoolConfig(**pool_data),
        )
    except TypeError as e:
        # Unknown keys surface as unexpected keyword arguments
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(path: Path) -> FilesystemConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Parsed FilesystemConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    data = load_config_data(path)
    return config_data_to_filesystem_config(data)


def save_config(config: FilesystemConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: FilesystemConfig to save
        path: Destination path for the TOML file
    """
    pool: dict[str, Any] = {}
    # TOML has no null; an unset value is left out
    if config.pool.max_workers is not None:
        pool["max_workers"] = config.pool.max_workers

    data: dict[str, Any] = {
        "application": {
            "name": config.application.name,
            "author": config.application.author,
        },
        "pool": pool,
    }

    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)
