"""
Exceptions raised by DropWatch

Exception hierarchy:
    DropWatchError (base)
    ├── ConfigError
    ├── SetupError
    └── IngestError
        ├── ReadError
        └── DeleteError
"""


class DropWatchError(Exception):
    """Base exception for DropWatch"""
    pass


class ConfigError(DropWatchError):
    """
    Raised when configuration values are invalid

    Examples:
    - Unknown text encoding
    - Non-positive polling interval
    """
    pass


class SetupError(DropWatchError):
    """
    Raised when a watch session cannot be established

    Examples:
    - Watched directory does not exist
    - Reading the drop file at startup failed
    - A session is already running on this watcher
    """
    pass


class IngestError(DropWatchError):
    """Base class for failures while ingesting the drop file"""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class ReadError(IngestError):
    """Raised when the drop file cannot be read or decoded. The file is left in place."""
    pass


class DeleteError(IngestError):
    """Raised when the drop file could not be removed after it was read"""
    pass
