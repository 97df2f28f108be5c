"""Asset type detection from file suffixes."""

import os
from pathlib import PurePath

from maskerad_filesystem.domain.exceptions import ExtensionError
from maskerad_filesystem.domain.value_objects import FileExtension

_EXTENSIONS = {member.value: member for member in FileExtension}


def get_extension(path: str | os.PathLike[str]) -> FileExtension:
    """Map the suffix of a path to a FileExtension.

    Args:
        path: Path whose final component carries the extension.

    Returns:
        The matching FileExtension.

    Raises:
        ExtensionError: If the path has no extension or an unsupported one.
    """
    suffix = PurePath(path).suffix
    if not suffix or suffix == ".":
        raise ExtensionError(
            f"The path {path} doesn't have a valid extension ! No file name ? "
            "No embedded '.' ? Begins with a '.' but doesn't have other '.' within ?"
        )
    extension = suffix[1:]
    try:
        return _EXTENSIONS[extension]
    except KeyError:
        supported = ", ".join(FileExtension.supported())
        raise ExtensionError(
            f"The file extension {extension!r} at path {path} isn't a supported "
            f"file extension ({supported})."
        ) from None
