"""Local file system adapter.

Implements the FileSystem port on the host file system. Paths are resolved
through the GameDirectories built at construction time, then handed to the
operations in core.operations.
"""

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import BinaryIO

from maskerad_filesystem.core import io, operations, pool_io
from maskerad_filesystem.core.directories import GameDirectories
from maskerad_filesystem.core.extensions import get_extension
from maskerad_filesystem.core.io import Buffer
from maskerad_filesystem.core.paths import resolve_location
from maskerad_filesystem.domain.config import FilesystemConfig
from maskerad_filesystem.domain.entities import FileMetadata, GameInfos
from maskerad_filesystem.domain.exceptions import FileSystemError
from maskerad_filesystem.domain.open_options import OpenOptions
from maskerad_filesystem.domain.value_objects import FileExtension, RootDir, Target
from maskerad_filesystem.ports.pool import WorkerPool

logger = logging.getLogger(__name__)

# Roots materialized by ensure_root_directories()
MANAGED_ROOTS = (
    RootDir.USER_SAVE_ROOT,
    RootDir.USER_LOG_ROOT,
    RootDir.USER_ENGINE_CONFIGURATION_ROOT,
)


class LocalFileSystem:
    """Root-scoped file system on the local disk.

    Every path-taking method accepts either ``(root, relative)`` or a single
    absolute path:

        fs.create(RootDir.USER_LOG_ROOT, "session/log.txt")
        fs.open(Path("/tmp/existing.txt"))

    The instance holds no open handles; the objects returned by open(),
    create() and append() belong to the caller.
    """

    def __init__(self, game_infos: GameInfos, directories: GameDirectories) -> None:
        self._game_infos = game_infos
        self._directories = directories

    @classmethod
    def new(
        cls,
        game_infos: GameInfos,
        *,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> "LocalFileSystem":
        """Resolve the game directories and build the file system.

        No directory is created; see ensure_root_directories().

        Raises:
            EnvironmentVariableError: If a required variable is missing.
            FileIOError: If the current directory cannot be read.
            UnsupportedPlatformError: On macOS.
        """
        directories = GameDirectories.from_game_infos(
            game_infos, environ=environ, system=system
        )
        return cls(game_infos, directories)

    @classmethod
    def from_config(
        cls,
        config: FilesystemConfig,
        *,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> "LocalFileSystem":
        """Build the file system for the application named in a config.

        See new() for errors.
        """
        application = config.application
        return cls.new(
            GameInfos(application.name, application.author),
            environ=environ,
            system=system,
        )

    @property
    def directories(self) -> GameDirectories:
        return self._directories

    def application_info(self) -> GameInfos:
        return self._game_infos

    def path(self, root_dir: RootDir) -> Path:
        return self._directories.path(root_dir)

    def construct_path_from_root(self, root_dir: RootDir, path: str) -> Path:
        return self._directories.construct_path_from_root(root_dir, path)

    def get_absolute_path(self, target: Target, path: str = "") -> Path:
        return resolve_location(self._directories, target, path)

    def get_file_extension(self, path: str | os.PathLike[str]) -> FileExtension:
        return get_extension(path)

    def ensure_root_directories(self) -> None:
        """Create the save, log and engine configuration roots.

        Raises:
            FileIOError: If a directory cannot be created.
        """
        for root in MANAGED_ROOTS:
            self.mkdir(root)

    # Opening ------------------------------------------------------------

    def open(self, target: Target, path: str = "") -> BinaryIO:
        return operations.open_reader(self.get_absolute_path(target, path))

    def create(self, target: Target, path: str = "") -> BinaryIO:
        return operations.create_writer(self.get_absolute_path(target, path))

    def append(self, target: Target, path: str = "") -> BinaryIO:
        return operations.append_writer(self.get_absolute_path(target, path))

    def open_with_options(
        self, options: OpenOptions, target: Target, path: str = ""
    ) -> BinaryIO:
        return operations.open_with_options(self.get_absolute_path(target, path), options)

    # Directories and entries ---------------------------------------------

    def mkdir(self, target: Target, path: str = "") -> None:
        operations.mkdir(self.get_absolute_path(target, path))

    def rm(self, target: Target, path: str = "") -> None:
        operations.rm(self.get_absolute_path(target, path))

    def rmrf(self, target: Target, path: str = "") -> None:
        if not self.exists(target, path):
            return
        operations.rmrf(self.get_absolute_path(target, path))

    def exists(self, target: Target, path: str = "") -> bool:
        try:
            resolved = self.get_absolute_path(target, path)
        except FileSystemError as e:
            logger.debug("Treating unresolvable path as missing: %s", e.description)
            return False
        return operations.exists(resolved)

    def metadata(self, target: Target, path: str = "") -> FileMetadata:
        return operations.metadata(self.get_absolute_path(target, path))

    def read_dir(self, target: Target, path: str = "") -> Iterator[os.DirEntry[str]]:
        return operations.read_dir(self.get_absolute_path(target, path))

    # Buffered primitives -------------------------------------------------

    def read(self, reader: BinaryIO, buf: Buffer) -> int:
        return io.read(reader, buf)

    def read_to_end(self, reader: BinaryIO, buf: bytearray) -> int:
        return io.read_to_end(reader, buf)

    def read_to_string(self, reader: BinaryIO, encoding: str = "utf-8") -> str:
        return io.read_to_string(reader, encoding)

    def read_exact(self, reader: BinaryIO, buf: Buffer) -> None:
        io.read_exact(reader, buf)

    def write(self, writer: BinaryIO, data: bytes | Buffer) -> int:
        return io.write(writer, data)

    def write_all(self, writer: BinaryIO, data: bytes | Buffer) -> None:
        io.write_all(writer, data)

    def flush(self, writer: BinaryIO) -> None:
        io.flush(writer)

    # Pool-delegated primitives -------------------------------------------

    def pooled_read(self, reader: BinaryIO, buf: Buffer, pool: WorkerPool) -> int:
        return pool_io.pooled_read(reader, buf, pool)

    def pooled_read_to_end(
        self, reader: BinaryIO, buf: bytearray, pool: WorkerPool
    ) -> int:
        return pool_io.pooled_read_to_end(reader, buf, pool)

    def pooled_read_to_string(
        self, reader: BinaryIO, pool: WorkerPool, encoding: str = "utf-8"
    ) -> str:
        return pool_io.pooled_read_to_string(reader, pool, encoding)

    def pooled_read_exact(self, reader: BinaryIO, buf: Buffer, pool: WorkerPool) -> None:
        pool_io.pooled_read_exact(reader, buf, pool)

    def pooled_write(
        self, writer: BinaryIO, data: bytes | Buffer, pool: WorkerPool
    ) -> int:
        return pool_io.pooled_write(writer, data, pool)

    def pooled_write_all(
        self, writer: BinaryIO, data: bytes | Buffer, pool: WorkerPool
    ) -> None:
        pool_io.pooled_write_all(writer, data, pool)

    def __repr__(self) -> str:
        return f"LocalFileSystem({self._game_infos.name!r}, {self._directories!r})"
