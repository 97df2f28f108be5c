"""Root directory resolution.

Maps every RootDir to an absolute directory for the running platform and
application. Resolution is pure path computation: nothing is created on
disk, callers create the directories they need with mkdir.

The platform is chosen once, at construction time:
- Windows: %APPDATA% combined with the author and application name
- Darwin (macOS): not implemented, fails loudly
- Everything else is treated as Unix-like:
  config under ~/.config/<name>, data under ~/.local/share/<name>
"""

import logging
import os
import platform
from collections.abc import ItemsView, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from maskerad_filesystem.core.paths import join_root
from maskerad_filesystem.domain.entities import GameInfos
from maskerad_filesystem.domain.exceptions import (
    CreationError,
    EnvironmentVariableError,
    FileIOError,
    GameDirectoryError,
    UnsupportedPlatformError,
)
from maskerad_filesystem.domain.value_objects import RootDir

logger = logging.getLogger(__name__)

LOGS_DIR_NAME = "maskerad_logs"
ENGINE_CONFIGURATION_DIR_NAME = "maskerad_configuration"
SAVES_DIR_NAME = "game_saves"


def _require_env(environ: Mapping[str, str], name: str) -> str:
    """Read a required environment variable.

    Raises:
        EnvironmentVariableError: If the variable is not set.
    """
    try:
        return environ[name]
    except KeyError as e:
        raise EnvironmentVariableError.missing(name, e) from e


class PlatformLayout:
    """Strategy producing the config and data base directories."""

    system = "generic"

    def bases(self, environ: Mapping[str, str], infos: GameInfos) -> tuple[Path, Path]:
        """Return (config base, data base) for the application."""
        raise NotImplementedError


class WindowsLayout(PlatformLayout):
    system = "Windows"

    def bases(self, environ: Mapping[str, str], infos: GameInfos) -> tuple[Path, Path]:
        appdata = _require_env(environ, "APPDATA")
        # Segments are joined with a literal apostrophe, not a path separator.
        base = Path(f"{appdata}'{infos.author}'{infos.name}")
        return base, base


class MacOSLayout(PlatformLayout):
    system = "Darwin"

    def bases(self, environ: Mapping[str, str], infos: GameInfos) -> tuple[Path, Path]:
        raise UnsupportedPlatformError(self.system)


class UnixLayout(PlatformLayout):
    system = "Unix"

    def bases(self, environ: Mapping[str, str], infos: GameInfos) -> tuple[Path, Path]:
        home = _require_env(environ, "HOME")
        config = Path(f"{home}/.config/{infos.name}")
        data = Path(f"{home}/.local/share/{infos.name}")
        return config, data


def select_layout(system: str | None = None) -> PlatformLayout:
    """Pick the layout for a platform name as returned by platform.system().

    Args:
        system: Platform name; detected when None.

    Returns:
        The layout strategy for that platform.
    """
    if system is None:
        system = platform.system()
    if system == "Windows":
        return WindowsLayout()
    if system == "Darwin":
        return MacOSLayout()
    return UnixLayout()


class GameDirectories:
    """Read-only mapping from RootDir to an absolute directory.

    Built once with new() and shared by reference afterwards. Every RootDir
    has an entry after successful construction; a failure during
    construction raises and no instance is produced.
    """

    def __init__(self, directories: Mapping[RootDir, Path]) -> None:
        self._directories = MappingProxyType(dict(directories))

    @classmethod
    def new(
        cls,
        game_name: str,
        game_author: str,
        *,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> "GameDirectories":
        """Resolve the directories for an application.

        Args:
            game_name: Application name.
            game_author: Application author.
            environ: Environment to read variables from (default: os.environ).
            system: Platform name override (default: platform.system()).

        Returns:
            Fully populated GameDirectories.

        Raises:
            EnvironmentVariableError: If HOME (Unix-like) or APPDATA (Windows)
                is not set.
            CreationError: If game_name or game_author is empty.
            FileIOError: If the current directory cannot be read.
            UnsupportedPlatformError: On macOS.
        """
        try:
            infos = GameInfos(game_name, game_author)
        except ValueError as e:
            raise CreationError(str(e), cause=e) from e
        return cls.from_game_infos(infos, environ=environ, system=system)

    @classmethod
    def from_game_infos(
        cls,
        infos: GameInfos,
        *,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> "GameDirectories":
        """Resolve the directories for an application identity.

        See new() for arguments and errors.
        """
        if environ is None:
            environ = os.environ
        layout = select_layout(system)
        user_config, user_data = layout.bases(environ, infos)

        try:
            current = Path.cwd()
        except OSError as e:
            raise FileIOError.from_os_error(
                e, f"Could not read the current working directory: {e}"
            ) from e

        directories = {
            RootDir.WORKING_DIRECTORY: current,
            RootDir.USER_DATA_ROOT: user_data,
            RootDir.USER_CONFIG_ROOT: user_config,
            RootDir.USER_ENGINE_CONFIGURATION_ROOT: user_config / ENGINE_CONFIGURATION_DIR_NAME,
            RootDir.USER_LOG_ROOT: user_config / LOGS_DIR_NAME,
            RootDir.USER_SAVE_ROOT: user_data / SAVES_DIR_NAME,
        }
        for root, path in directories.items():
            logger.debug("Resolved %s (%s) to %s", root.name, layout.system, path)
        return cls(directories)

    def path(self, root_dir: RootDir) -> Path:
        """Return the directory associated with a root.

        Raises:
            GameDirectoryError: If the root has no resolved path.
        """
        try:
            return self._directories[root_dir]
        except KeyError:
            raise GameDirectoryError(
                f"The associated path for {root_dir} could not be found !"
            ) from None

    def construct_path_from_root(self, root_dir: RootDir, path: str) -> Path:
        """Join a relative path onto a root.

        Uses native join semantics: separators inside path nest, an empty
        path yields the root itself, and an absolute path replaces the root.

        Raises:
            GameDirectoryError: If the root has no resolved path.
        """
        return join_root(self.path(root_dir), path)

    def items(self) -> ItemsView[RootDir, Path]:
        """Return (root, path) pairs."""
        return self._directories.items()

    def __iter__(self) -> Iterator[RootDir]:
        return iter(self._directories)

    def __len__(self) -> int:
        return len(self._directories)

    def __repr__(self) -> str:
        entries = ", ".join(f"{root.name}={path}" for root, path in self.items())
        return f"GameDirectories({entries})"
