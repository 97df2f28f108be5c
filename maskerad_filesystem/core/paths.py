"""Path join and resolution.

Two calling conventions are supported and never mixed:
- a RootDir plus a relative string, joined onto the root's directory
- an already absolute path, canonicalized before use
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from maskerad_filesystem.domain.exceptions import FileIOError, MiscellaneousError
from maskerad_filesystem.domain.value_objects import RootDir, Target

if TYPE_CHECKING:
    from maskerad_filesystem.core.directories import GameDirectories


def join_root(root: Path, relative: str) -> Path:
    """Join a relative path onto a root directory.

    An empty relative path yields the root itself, which lets callers
    operate on the root directory (e.g. mkdir it).
    """
    if not relative:
        return root
    return root / relative


def canonicalize(path: str | os.PathLike[str]) -> Path:
    """Resolve an existing absolute path.

    Symlinks and ``.``/``..`` segments are resolved and the path must exist.

    Raises:
        MiscellaneousError: If the path is not absolute.
        FileIOError: If the path cannot be resolved (e.g. does not exist).
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        raise MiscellaneousError(
            f"Expected an absolute path, got '{candidate}'",
            hint="Pass a RootDir with a relative path instead",
        )
    try:
        return candidate.resolve(strict=True)
    except (OSError, ValueError) as e:
        raise FileIOError.from_os_error(e, f"Could not canonicalize {candidate}: {e}") from e
    except RuntimeError as e:
        # Symlink loop on Python versions that do not raise OSError for it
        raise FileIOError.from_os_error(e, f"Could not canonicalize {candidate}: {e}") from e


def resolve_location(
    directories: "GameDirectories", target: Target, relative: str = ""
) -> Path:
    """Turn either calling convention into the path passed to native calls.

    Args:
        directories: Resolved game directories.
        target: A RootDir, or an absolute path.
        relative: Path relative to the root; must be empty with an absolute target.

    Returns:
        The path to operate on.

    Raises:
        GameDirectoryError: If the root has no resolved path.
        MiscellaneousError: If the conventions are mixed or the path is relative.
        FileIOError: If an absolute path cannot be canonicalized.
    """
    if isinstance(target, RootDir):
        return directories.construct_path_from_root(target, relative)
    if relative:
        raise MiscellaneousError(
            f"Cannot combine the absolute path '{target}' with the relative path '{relative}'",
            hint="Pass either a RootDir with a relative path, or a single absolute path",
        )
    return canonicalize(target)
