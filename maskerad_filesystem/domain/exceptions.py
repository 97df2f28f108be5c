"""Domain exceptions for the maskerad filesystem layer.

Every failure the library reports is a FileSystemError carrying one
FSErrorKind. Native failures (OSError, missing environment variables) are
translated at the boundary and keep the original exception as their cause,
so callers and loggers can inspect the root of the problem.
"""

from enum import Enum


class FSErrorKind(Enum):
    """Closed set of failure kinds."""

    GAME_DIRECTORY = "Game directory error"
    CREATION = "Creation error"
    IO = "I/O error"
    ENVIRONMENT = "Environment variable error"
    MISCELLANEOUS = "Miscellaneous error"
    EXTENSION = "Extension error"


class FileSystemError(Exception):
    """Base exception for all filesystem errors.

    Attributes:
        kind: The failure kind.
        description: Human-readable description of the failure.
        cause: The original exception, when the failure wraps one.
        hint: Optional actionable suggestion.
    """

    kind: FSErrorKind = FSErrorKind.MISCELLANEOUS

    def __init__(
        self,
        description: str,
        cause: BaseException | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(description)
        self.description = description
        self.cause = cause
        self.hint = hint
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        msg = (
            f"Error while dealing with the file system: "
            f"{self.kind.value}: {self.description}"
        )
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


class GameDirectoryError(FileSystemError):
    """Raised when a root has no resolved path."""

    kind = FSErrorKind.GAME_DIRECTORY


class CreationError(FileSystemError):
    """Raised when an object cannot be created."""

    kind = FSErrorKind.CREATION


class FileIOError(FileSystemError):
    """Raised when a native I/O call fails."""

    kind = FSErrorKind.IO

    @classmethod
    def from_os_error(
        cls, error: BaseException, description: str | None = None
    ) -> "FileIOError":
        """Wrap a native error, keeping it as the cause.

        Args:
            error: The original exception (usually an OSError).
            description: Optional description; defaults to the generic
                I/O message followed by the native message.

        Returns:
            A FileIOError chained to the original error.
        """
        if description is None:
            description = f"Error while doing I/O operations: {error}"
        return cls(description, cause=error)


class EnvironmentVariableError(FileSystemError):
    """Raised when a required environment variable is missing."""

    kind = FSErrorKind.ENVIRONMENT

    @classmethod
    def missing(cls, name: str, error: KeyError) -> "EnvironmentVariableError":
        """Build the error for a variable absent from the environment."""
        return cls(
            f"Error while dealing with environment variable {name}: not present",
            cause=error,
            hint=f"Set {name} before constructing the game directories",
        )


class MiscellaneousError(FileSystemError):
    """Raised for failures that fit no other kind."""

    kind = FSErrorKind.MISCELLANEOUS


class ExtensionError(FileSystemError):
    """Raised when a path has a missing or unsupported file extension."""

    kind = FSErrorKind.EXTENSION


class UnsupportedPlatformError(NotImplementedError):
    """Raised when directory resolution is attempted on an unsupported OS.

    Fatal: this is not a FileSystemError and callers should not catch it.
    """

    def __init__(self, system: str) -> None:
        super().__init__(
            f"Game directory resolution is not implemented for {system}"
        )
        self.system = system
