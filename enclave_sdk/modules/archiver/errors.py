"""
Error classes for archive creation.

Each failure mode of the archiver has its own type because each has a
different remedy:
- ArchiveSourceNotFoundError / InvalidArchiveSourceError: fix the input path
- ArchiveSizeExceededError: shrink the input
- WorkspaceUnavailableError / CompressionFailedError: environment problem, may be retried by the caller
- CompressionIncompleteError / EmptyArchiveError / ArchiveIntegrityError: internal anomaly, report it

The archiver never retries and never collapses one kind into another.
"""


class ArchiveError(Exception):
    """Base exception for archive creation."""
    pass


class ArchiveSourceNotFoundError(ArchiveError):
    """The file or folder to archive does not exist."""
    pass


class InvalidArchiveSourceError(ArchiveError):
    """The path exists but must not be archived (filesystem root)."""
    pass


class WorkspaceUnavailableError(ArchiveError):
    """The temporary compression directory could not be created."""
    pass


class CompressionFailedError(ArchiveError):
    """Writing the gzip tar archive raised an error."""
    pass


class CompressionIncompleteError(ArchiveError):
    """Compression returned but the archive is not at the expected path."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ArchiveSizeExceededError(ArchiveError):
    """The compressed archive reaches or exceeds the transfer limit."""

    def __init__(self, message: str, size: int, limit: int):
        super().__init__(message)
        self.size = size
        self.limit = limit


class EmptyArchiveError(ArchiveError):
    """Compression produced a zero-byte archive."""
    pass


class ArchiveIntegrityError(ArchiveError):
    """Bytes read back differ in length from the size on disk."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
