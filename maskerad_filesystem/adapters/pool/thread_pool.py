"""Thread pool adapter.

Implements the WorkerPool port on top of concurrent.futures.ThreadPoolExecutor.
"""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Self, TypeVar

from maskerad_filesystem.core.hardware import default_worker_count
from maskerad_filesystem.domain.exceptions import MiscellaneousError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ThreadWorkerPool:
    """Bounded pool of worker threads.

    install() submits a task and blocks the calling thread until it
    finishes. Called from one of the pool's own workers, it runs the task
    inline instead of queueing it behind the caller. There is no
    cancellation and no timeout.

    Thread Safety:
        install() may be called from any number of threads; tasks beyond
        max_workers wait in the executor's queue.

    Example:
        with ThreadWorkerPool(max_workers=2) as pool:
            data = pool.install(reader.read)
    """

    def __init__(self, max_workers: int | None = None) -> None:
        """Initialize the pool.

        Args:
            max_workers: Number of threads; derived from the CPU count when None.

        Raises:
            ValueError: If max_workers is not positive.
        """
        if max_workers is None:
            max_workers = default_worker_count()
        if max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.max_workers = max_workers
        self._local = threading.local()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="maskerad-fs",
            initializer=self._mark_worker,
        )
        self._shutdown = False
        self._lock = threading.Lock()
        logger.debug("Started worker pool with %d threads", max_workers)

    def install(self, fn: Callable[..., T], *args: Any) -> T:
        """Run fn(*args) on a pool thread and wait for the result.

        Raises:
            MiscellaneousError: If the pool has been shut down.
            Exception: Whatever fn raised, unchanged.
        """
        if getattr(self._local, "is_worker", False):
            return fn(*args)
        with self._lock:
            if self._shutdown:
                raise MiscellaneousError("Cannot submit work to a shut down worker pool")
            future = self._executor.submit(fn, *args)
        return future.result()

    def _mark_worker(self) -> None:
        self._local.is_worker = True

    def shutdown(self) -> None:
        """Wait for running tasks and stop the threads.

        Safe to call multiple times.
        """
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
        self._executor.shutdown(wait=True)
        logger.debug("Worker pool shut down")

    def __enter__(self) -> Self:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        """Exit context manager, shutting the pool down."""
        self.shutdown()
        return False
