"""
Custom exception hierarchy for the photo renamer.

Configuration problems abort a run before any file is touched; naming and
file operation problems are recorded per file and the batch carries on.
"""


class PhotoRenamerError(Exception):
    """Base exception for all photo renamer errors."""
    pass


class ConfigurationError(PhotoRenamerError):
    """Raised when arguments or the environment make a run impossible."""
    pass


class ExifToolNotFoundError(ConfigurationError):
    """Raised when the exiftool executable cannot be found."""
    pass


class MetadataExtractionError(PhotoRenamerError):
    """Raised when metadata cannot be extracted from a file."""
    pass


class NamingError(PhotoRenamerError):
    """Raised when no unique filename can be derived from a file's metadata."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class FileOperationError(PhotoRenamerError):
    """Raised when a move/copy/symlink operation fails."""
    pass
