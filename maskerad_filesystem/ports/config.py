"""Configuration provider port.

Defines the interface for loading the filesystem configuration.
"""

from pathlib import Path
from typing import Protocol

from maskerad_filesystem.domain.config import FilesystemConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, path: Path) -> FilesystemConfig:
        """Load configuration from a file.

        Args:
            path: Path to the config file

        Returns:
            FilesystemConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
