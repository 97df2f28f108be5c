"""Domain value objects.

Closed enumerations used to address storage roots and to classify assets.
"""

import os
from enum import Enum


class RootDir(Enum):
    """Symbolic base directory from which paths are resolved."""

    WORKING_DIRECTORY = "working_directory"
    USER_DATA_ROOT = "user_data_root"
    USER_CONFIG_ROOT = "user_config_root"
    USER_ENGINE_CONFIGURATION_ROOT = "user_engine_configuration_root"
    USER_LOG_ROOT = "user_log_root"
    USER_SAVE_ROOT = "user_save_root"


class FileExtension(Enum):
    """Supported asset file extensions.

    Values are the exact suffixes (without the dot) recognized on disk.
    """

    GLTF = "gltf"
    FLAC = "flac"
    OGG = "ogg"
    TGA = "tga"
    TOML = "toml"

    @classmethod
    def supported(cls) -> tuple[str, ...]:
        """Return the recognized suffixes in declaration order."""
        return tuple(member.value for member in cls)


# Either a root (used with a relative path) or an absolute path
Target = RootDir | str | os.PathLike[str]
