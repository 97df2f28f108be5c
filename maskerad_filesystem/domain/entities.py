"""Domain entities for the filesystem layer."""

import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class GameInfos:
    """Identity of the application whose directories are resolved.

    Attributes:
        name: Application name, used as the directory name under the
            user config and data locations.
        author: Application author, used by the Windows layout.

    Raises:
        ValueError: If name or author is empty.
    """

    name: str
    author: str

    def __post_init__(self) -> None:
        """Validate application identity."""
        if not self.name:
            raise ValueError("GameInfos name cannot be empty")
        if not self.author:
            raise ValueError("GameInfos author cannot be empty")


@dataclass(frozen=True)
class FileMetadata:
    """Metadata about a file or directory.

    Attributes:
        len: Size in bytes.
        is_dir: True for a directory.
        is_file: True for a regular file.
        is_read_only: True when no write permission bit is set.
    """

    len: int
    is_dir: bool
    is_file: bool
    is_read_only: bool

    @property
    def size(self) -> int:
        """Alias of len."""
        return self.len

    @classmethod
    def from_stat(cls, result: os.stat_result) -> "FileMetadata":
        """Build metadata from an os.stat() result."""
        mode = result.st_mode
        return cls(
            len=result.st_size,
            is_dir=stat.S_ISDIR(mode),
            is_file=stat.S_ISREG(mode),
            is_read_only=not mode & (stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH),
        )
