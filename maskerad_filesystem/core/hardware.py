"""Hardware detection used to size the worker pool.

The pool only runs blocking file I/O, so it is sized from the number of
logical CPUs with an upper bound, as concurrent.futures does for its own
default.
"""

from dataclasses import dataclass

import psutil

# Upper bound on pool threads when the size is derived automatically
MAX_DEFAULT_WORKERS = 32
# Extra threads above the CPU count, since workers mostly wait on disk
IO_HEADROOM = 4


@dataclass
class CPUResources:
    """CPU information for pool sizing."""

    logical_cores: int
    physical_cores: int | None


def detect_cpu_resources() -> CPUResources:
    """Detect the CPU core counts.

    Returns:
        CPUResources; logical_cores is at least 1.
    """
    logical = psutil.cpu_count(logical=True) or 1
    physical = psutil.cpu_count(logical=False)
    return CPUResources(logical_cores=logical, physical_cores=physical)


def default_worker_count(resources: CPUResources | None = None) -> int:
    """Recommend a worker count for the I/O pool.

    Args:
        resources: CPU resources (auto-detected if None)

    Returns:
        min(MAX_DEFAULT_WORKERS, logical cores + IO_HEADROOM)
    """
    if resources is None:
        resources = detect_cpu_resources()
    return min(MAX_DEFAULT_WORKERS, resources.logical_cores + IO_HEADROOM)
