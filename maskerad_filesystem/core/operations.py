"""File and directory operations on resolved paths.

Every function takes the path passed to the native call, already produced
by core.paths, and lifts native failures into FileIOError. Handles returned
by the open functions are owned by the caller; close them (or use them as
context managers) when done.
"""

import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from maskerad_filesystem.domain.entities import FileMetadata
from maskerad_filesystem.domain.exceptions import FileIOError
from maskerad_filesystem.domain.open_options import OpenOptions

logger = logging.getLogger(__name__)


def open_with_options(path: Path, options: OpenOptions) -> BinaryIO:
    """Open a file with explicit options.

    Args:
        path: File to open.
        options: Requested access and creation behavior.

    Returns:
        A buffered binary file object.

    Raises:
        FileIOError: If the options are invalid or the native open fails.
    """
    try:
        flags = options.to_os_flags()
        mode = options.to_fdopen_mode()
        fd = os.open(path, flags, 0o666)
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e
    try:
        return os.fdopen(fd, mode)
    except OSError as e:
        os.close(fd)
        raise FileIOError.from_os_error(e) from e


def open_reader(path: Path) -> BinaryIO:
    """Open an existing file for buffered reading."""
    return open_with_options(path, OpenOptions().set_read(True))


def create_writer(path: Path) -> BinaryIO:
    """Open a file for writing, creating it or truncating it."""
    return open_with_options(
        path, OpenOptions().set_create(True).set_write(True).set_truncate(True)
    )


def append_writer(path: Path) -> BinaryIO:
    """Open a file for appending, creating it if necessary."""
    return open_with_options(
        path, OpenOptions().set_create(True).set_append(True).set_write(True)
    )


def mkdir(path: Path) -> None:
    """Create a directory and its missing ancestors.

    Succeeds when the directory already exists.
    """
    logger.debug("Creating directory %s", path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e


def rm(path: Path) -> None:
    """Remove a file or an empty directory.

    Raises:
        FileIOError: If the path is missing or is a non-empty directory.
    """
    logger.debug("Removing %s", path)
    try:
        if path.is_dir() and not path.is_symlink():
            path.rmdir()
        else:
            path.unlink()
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e


def rmrf(path: Path) -> None:
    """Remove a file or a whole directory tree.

    Does nothing when the path does not exist. Not transactional: a failure
    part way through can leave a partially removed tree.
    """
    if not exists(path):
        return
    logger.debug("Removing recursively %s", path)
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e


def exists(path: Path) -> bool:
    """Check whether the path exists. Never raises."""
    try:
        return path.exists()
    except (OSError, ValueError):
        return False


def metadata(path: Path) -> FileMetadata:
    """Fetch size and type information for a path.

    Raises:
        FileIOError: If the path does not exist.
    """
    try:
        return FileMetadata.from_stat(path.stat())
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e


def read_dir(path: Path) -> Iterator[os.DirEntry[str]]:
    """List the immediate children of a directory.

    The directory is opened eagerly, so a missing or non-directory path fails
    here. The returned iterator is single-pass; call again to re-list.

    Raises:
        FileIOError: If the directory cannot be opened.
    """
    try:
        scanner = os.scandir(path)
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e) from e
    return _iter_entries(scanner)


def _iter_entries(scanner: "os._ScandirIterator[str]") -> Iterator[os.DirEntry[str]]:
    with scanner:
        try:
            yield from scanner
        except OSError as e:
            raise FileIOError.from_os_error(e) from e
