"""Buffered read/write primitives.

Thin pass-throughs to the file objects returned by the open functions,
lifting native failures into FileIOError. read_exact and write_all never
report a short transfer as success.
"""

from typing import BinaryIO

from maskerad_filesystem.domain.exceptions import FileIOError

Buffer = bytearray | memoryview


def read(reader: BinaryIO, buf: Buffer) -> int:
    """Read up to len(buf) bytes into buf, returning the count (0 at end)."""
    try:
        count = reader.readinto(buf)  # type: ignore[attr-defined]
    except OSError as e:
        raise FileIOError.from_os_error(e) from e
    return count or 0


def read_to_end(reader: BinaryIO, buf: bytearray) -> int:
    """Append everything left in reader to buf, returning the byte count."""
    try:
        data = reader.read()
    except OSError as e:
        raise FileIOError.from_os_error(e) from e
    buf.extend(data)
    return len(data)


def read_to_string(reader: BinaryIO, encoding: str = "utf-8") -> str:
    """Read everything left in reader and decode it.

    Raises:
        FileIOError: On native failure or if the data is not valid text.
    """
    try:
        data = reader.read()
    except OSError as e:
        raise FileIOError.from_os_error(e) from e
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise FileIOError.from_os_error(e, f"Stream did not contain valid {encoding}: {e}") from e


def read_exact(reader: BinaryIO, buf: Buffer) -> None:
    """Fill buf completely.

    Raises:
        FileIOError: If the end of the file is reached first (caused by EOFError).
    """
    view = memoryview(buf).cast("B")
    filled = 0
    while filled < len(view):
        count = read(reader, view[filled:])
        if count == 0:
            eof = EOFError(f"failed to fill whole buffer: got {filled} of {len(view)} bytes")
            raise FileIOError.from_os_error(eof) from eof
        filled += count


def write(writer: BinaryIO, data: bytes | Buffer) -> int:
    """Write data, returning the number of bytes accepted."""
    try:
        count = writer.write(data)
    except OSError as e:
        raise FileIOError.from_os_error(e) from e
    return count or 0


def write_all(writer: BinaryIO, data: bytes | Buffer) -> None:
    """Write all of data.

    Raises:
        FileIOError: If the writer fails or stops accepting bytes.
    """
    view = memoryview(data).cast("B")
    written = 0
    while written < len(view):
        count = write(writer, view[written:])
        if count == 0:
            stalled = OSError(f"failed to write whole buffer: wrote {written} of {len(view)} bytes")
            raise FileIOError.from_os_error(stalled) from stalled
        written += count


def flush(writer: BinaryIO) -> None:
    """Flush buffered bytes to the operating system."""
    try:
        writer.flush()
    except OSError as e:
        raise FileIOError.from_os_error(e) from e
