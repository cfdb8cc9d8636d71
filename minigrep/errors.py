"""Error types."""

from pathlib import Path


class MinigrepError(Exception):
    """Base class for all minigrep errors."""


class ConfigError(MinigrepError):
    """Invalid command-line arguments or environment."""


class MissingQueryError(ConfigError):
    """No query string was given."""

    def __init__(self) -> None:
        """Set the user-facing message."""
        super().__init__("Didn't get a query string")


class MissingFilePathError(ConfigError):
    """No file path was given."""

    def __init__(self) -> None:
        """Set the user-facing message."""
        super().__init__("Didn't get a file path")


class InvalidLogLevelError(ConfigError):
    """Unknown log level in the environment."""

    def __init__(self, value: str) -> None:
        """Keep the rejected value."""
        super().__init__(f"Unknown log level: {value!r}")
        self.value = value


class FileReadError(MinigrepError):
    """The target file could not be read."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        """Wrap the underlying I/O or decoding error."""
        super().__init__(str(cause))
        self.path = Path(path)
        self.cause = cause
