"""File System port interface.

Defines the operation surface offered to the host application. Every
path-taking operation accepts either a RootDir with a path relative to it,
or a single absolute path.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Protocol

from maskerad_filesystem.domain.entities import FileMetadata, GameInfos
from maskerad_filesystem.domain.open_options import OpenOptions
from maskerad_filesystem.domain.value_objects import FileExtension, RootDir, Target


class FileSystem(Protocol):
    """Protocol for root-scoped file system operations."""

    def application_info(self) -> GameInfos:
        """Return the identity the directories were resolved for."""
        ...

    def path(self, root_dir: RootDir) -> Path:
        """Return the directory of a root.

        Raises:
            GameDirectoryError: If the root has no resolved path.
        """
        ...

    def get_absolute_path(self, target: Target, path: str = "") -> Path:
        """Resolve either calling convention to the path used by native calls."""
        ...

    def get_file_extension(self, path: str | os.PathLike[str]) -> FileExtension:
        """Classify a path by its suffix.

        Raises:
            ExtensionError: If the suffix is missing or unsupported.
        """
        ...

    def open(self, target: Target, path: str = "") -> BinaryIO:
        """Open an existing file for buffered reading.

        Raises:
            FileIOError: If the file is missing or unreadable.
        """
        ...

    def create(self, target: Target, path: str = "") -> BinaryIO:
        """Open a file for writing, creating or truncating it.

        Raises:
            FileIOError: On permission or path failure.
        """
        ...

    def append(self, target: Target, path: str = "") -> BinaryIO:
        """Open a file for appending, creating it if necessary.

        Raises:
            FileIOError: On permission or path failure.
        """
        ...

    def open_with_options(
        self, options: OpenOptions, target: Target, path: str = ""
    ) -> BinaryIO:
        """Open a file with explicit options.

        Raises:
            FileIOError: If the options are invalid or the open fails.
        """
        ...

    def mkdir(self, target: Target, path: str = "") -> None:
        """Create a directory and its ancestors; succeeds if it exists.

        Raises:
            FileIOError: If the directory cannot be created.
        """
        ...

    def rm(self, target: Target, path: str = "") -> None:
        """Remove a file or an empty directory.

        Raises:
            FileIOError: If missing or a non-empty directory.
        """
        ...

    def rmrf(self, target: Target, path: str = "") -> None:
        """Remove a file or directory tree; no-op if missing.

        Raises:
            FileIOError: If removal fails part way.
        """
        ...

    def exists(self, target: Target, path: str = "") -> bool:
        """Check whether the path exists. Never raises."""
        ...

    def metadata(self, target: Target, path: str = "") -> FileMetadata:
        """Return size and type information.

        Raises:
            FileIOError: If the path does not exist.
        """
        ...

    def read_dir(self, target: Target, path: str = "") -> Iterator[os.DirEntry[str]]:
        """List the immediate children of a directory.

        Raises:
            FileIOError: If the path is not a readable directory.
        """
        ...
