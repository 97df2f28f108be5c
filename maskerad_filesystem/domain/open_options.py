"""Open options for native file opening.

OpenOptions describes the read/write/create/append/truncate intent of an
open call. Unlike the mode strings accepted by open(), every flag can be
read back, and the combination is translated into os.open() flags plus the
matching os.fdopen() mode.
"""

import errno
import os
from dataclasses import dataclass
from typing import Self


@dataclass
class OpenOptions:
    """Mutable builder of open flags, all False by default.

    Setters return the same instance so calls can be chained:

        OpenOptions().set_create(True).set_write(True).set_truncate(True)
    """

    read: bool = False
    write: bool = False
    create: bool = False
    append: bool = False
    truncate: bool = False

    def set_read(self, read: bool) -> Self:
        """Open for reading."""
        self.read = read
        return self

    def set_write(self, write: bool) -> Self:
        """Open for writing."""
        self.write = write
        return self

    def set_create(self, create: bool) -> Self:
        """Create the file if it does not exist yet."""
        self.create = create
        return self

    def set_append(self, append: bool) -> Self:
        """Position every write at the end of the file."""
        self.append = append
        return self

    def set_truncate(self, truncate: bool) -> Self:
        """Truncate the file to 0 bytes after opening."""
        self.truncate = truncate
        return self

    def validate(self) -> None:
        """Reject combinations the native open call cannot express.

        Raises:
            OSError: With errno EINVAL for an invalid combination.
        """
        writable = self.write or self.append
        if not self.read and not writable:
            raise OSError(errno.EINVAL, "No access mode requested (read, write or append)")
        if self.truncate and self.append:
            raise OSError(errno.EINVAL, "Cannot truncate a file opened for appending")
        if (self.create or self.truncate) and not writable:
            raise OSError(errno.EINVAL, "Creating or truncating requires write access")

    def to_os_flags(self) -> int:
        """Translate into flags for os.open().

        Raises:
            OSError: With errno EINVAL for an invalid combination.
        """
        self.validate()
        writable = self.write or self.append

        if self.read and writable:
            flags = os.O_RDWR
        elif writable:
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY

        if self.create:
            flags |= os.O_CREAT
        if self.append:
            flags |= os.O_APPEND
        if self.truncate:
            flags |= os.O_TRUNC
        # Windows translates line endings unless asked not to
        flags |= getattr(os, "O_BINARY", 0)
        return flags

    def to_fdopen_mode(self) -> str:
        """Return the binary mode string matching to_os_flags()."""
        self.validate()
        if self.append:
            return "a+b" if self.read else "ab"
        if self.write:
            return "r+b" if self.read else "wb"
        return "rb"
