"""Worker pool port interface.

Defines the "submit a task, block for its result" contract used by the
pool-delegated I/O operations. This is not asynchronous I/O: the calling
thread waits, other work submitted to the pool may proceed meanwhile.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class WorkerPool(Protocol):
    """Protocol for a bounded pool of worker threads."""

    def install(self, fn: Callable[..., T], *args: Any) -> T:
        """Run fn(*args) on a pool thread and wait for it.

        Args:
            fn: Callable to execute.
            *args: Positional arguments for fn.

        Returns:
            The value returned by fn.

        Raises:
            Exception: Whatever fn raised, unchanged.
        """
        ...
