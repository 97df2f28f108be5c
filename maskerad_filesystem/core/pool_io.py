"""Pool-delegated counterparts of the read/write primitives.

Each call hands the synchronous primitive to a worker pool and blocks until
it completes, returning the same result or raising the same error. Calls
issued one after another from a thread therefore keep their order.
"""

from typing import BinaryIO

from maskerad_filesystem.core import io
from maskerad_filesystem.core.io import Buffer
from maskerad_filesystem.ports.pool import WorkerPool


def pooled_read(reader: BinaryIO, buf: Buffer, pool: WorkerPool) -> int:
    """Run read() on the pool."""
    return pool.install(io.read, reader, buf)


def pooled_read_to_end(reader: BinaryIO, buf: bytearray, pool: WorkerPool) -> int:
    """Run read_to_end() on the pool and return the number of bytes appended."""
    return pool.install(io.read_to_end, reader, buf)


def pooled_read_to_string(
    reader: BinaryIO, pool: WorkerPool, encoding: str = "utf-8"
) -> str:
    """Run read_to_string() on the pool."""
    return pool.install(io.read_to_string, reader, encoding)


def pooled_read_exact(reader: BinaryIO, buf: Buffer, pool: WorkerPool) -> None:
    """Run read_exact() on the pool."""
    pool.install(io.read_exact, reader, buf)


def pooled_write(writer: BinaryIO, data: bytes | Buffer, pool: WorkerPool) -> int:
    """Run write() on the pool and return the number of bytes written."""
    return pool.install(io.write, writer, data)


def pooled_write_all(writer: BinaryIO, data: bytes | Buffer, pool: WorkerPool) -> None:
    """Run write_all() on the pool."""
    pool.install(io.write_all, writer, data)
