"""Config domain models for the filesystem layer.

Configuration is stored in a TOML file owned by the host application and
describes the application identity plus the worker pool used by the
pool-delegated I/O operations.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ApplicationConfig:
    """Application identity used to resolve user directories.

    Attributes:
        name: Application name (directory name under config/data roots)
        author: Application author

    Raises:
        ValueError: If name or author is empty.
    """

    name: str = "maskerad"
    author: str = "maskerad"

    def __post_init__(self) -> None:
        """Validate application config after initialization."""
        if not self.name:
            raise ValueError("application name cannot be empty")
        if not self.author:
            raise ValueError("application author cannot be empty")


@dataclass(frozen=True)
class PoolConfig:
    """Configuration for the worker pool.

    Attributes:
        max_workers: Number of pool threads. None derives it from the CPU count.

    Raises:
        ValueError: If max_workers is set and not positive.
    """

    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate pool config after initialization."""
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")


@dataclass(frozen=True)
class FilesystemConfig:
    """Complete filesystem configuration.

    Attributes:
        application: Application identity
        pool: Worker pool configuration
    """

    application: ApplicationConfig = field(default_factory=ApplicationConfig)
    pool: PoolConfig = field(default_factory=PoolConfig)

    @staticmethod
    def default() -> "FilesystemConfig":
        """Create a config with all default values."""
        return FilesystemConfig(
            application=ApplicationConfig(),
            pool=PoolConfig(),
        )
