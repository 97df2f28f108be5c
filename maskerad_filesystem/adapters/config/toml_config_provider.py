"""TOML-based configuration provider.

Loads the filesystem configuration from a TOML file owned by the host
application, falling back to built-in defaults when the file is missing or
invalid.
"""

import logging
from pathlib import Path

from maskerad_filesystem.domain.config import FilesystemConfig
from maskerad_filesystem.shared.config_io import load_config

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, path: Path) -> FilesystemConfig:
        """Load configuration, or defaults.

        Args:
            path: Path to the TOML config file

        Returns:
            FilesystemConfig with the file's values, or defaults
        """
        if not path.exists():
            logger.debug("No config at %s, using defaults", path)
            return FilesystemConfig.default()

        try:
            config = load_config(path)
        except (FileNotFoundError, ValueError) as e:
            logger.warning(
                "Failed to parse config at %s: %s. Using default configuration.",
                path,
                e,
            )
            return FilesystemConfig.default()

        logger.debug("Loaded config from %s", path)
        return config
