"""Factory for building the file system and its worker pool from configuration.

Keeps host applications free from direct adapter imports: they load a
FilesystemConfig and ask the factory for the objects they need.
"""

from collections.abc import Mapping
from pathlib import Path

from maskerad_filesystem.adapters.config.toml_config_provider import TomlConfigProvider
from maskerad_filesystem.adapters.fs.local import LocalFileSystem
from maskerad_filesystem.adapters.pool.thread_pool import ThreadWorkerPool
from maskerad_filesystem.domain.config import FilesystemConfig
from maskerad_filesystem.ports.config import ConfigProvider


class FileSystemFactory:
    """Factory for LocalFileSystem and ThreadWorkerPool instances.

    Args:
        config: FilesystemConfig with application and pool settings.
    """

    def __init__(self, config: FilesystemConfig) -> None:
        """Initialize factory with configuration.

        Args:
            config: Configuration containing application and pool settings.
        """
        self._config = config

    @classmethod
    def from_config_file(
        cls, path: Path, provider: ConfigProvider | None = None
    ) -> "FileSystemFactory":
        """Load configuration from a file and build a factory.

        Args:
            path: Path to the TOML config file.
            provider: Config provider (default: TomlConfigProvider).
        """
        if provider is None:
            provider = TomlConfigProvider()
        return cls(provider.load(path))

    @property
    def config(self) -> FilesystemConfig:
        return self._config

    def create_filesystem(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        system: str | None = None,
    ) -> LocalFileSystem:
        """Resolve directories for the configured application.

        Raises:
            EnvironmentVariableError: If a required variable is missing.
            FileIOError: If the current directory cannot be read.
            UnsupportedPlatformError: On macOS.
        """
        return LocalFileSystem.from_config(self._config, environ=environ, system=system)

    def create_worker_pool(self) -> ThreadWorkerPool:
        """Create the pool used by the pool-delegated operations.

        The caller owns the pool and must shut it down (or use it as a
        context manager).
        """
        return ThreadWorkerPool(max_workers=self._config.pool.max_workers)
