"""
Archiver Module - Black Box Interface

Purpose: Turn a local file or folder into an upload-ready .tgz byte stream
Interface: TgzArchiver.create_archive(), create_archive_sync()
Hidden: Workspace handling, tar/gzip details, post-compression checks

Can be replaced with any GenericTgzArchiver implementation.
"""

from .archiver import (
    COMPRESSION_EXTENSION,
    GRPC_DATA_TRANSFER_LIMIT,
    ArchiveResult,
    GenericTgzArchiver,
    TgzArchiver,
)
from .errors import (
    ArchiveError,
    ArchiveIntegrityError,
    ArchiveSizeExceededError,
    ArchiveSourceNotFoundError,
    CompressionFailedError,
    CompressionIncompleteError,
    EmptyArchiveError,
    InvalidArchiveSourceError,
    WorkspaceUnavailableError,
)
from .workspace import COMPRESSION_TEMP_FOLDER_PREFIX, compression_workspace

__all__ = [
    "COMPRESSION_EXTENSION",
    "COMPRESSION_TEMP_FOLDER_PREFIX",
    "GRPC_DATA_TRANSFER_LIMIT",
    "ArchiveResult",
    "GenericTgzArchiver",
    "TgzArchiver",
    "compression_workspace",
    "ArchiveError",
    "ArchiveIntegrityError",
    "ArchiveSizeExceededError",
    "ArchiveSourceNotFoundError",
    "CompressionFailedError",
    "CompressionIncompleteError",
    "EmptyArchiveError",
    "InvalidArchiveSourceError",
    "WorkspaceUnavailableError",
]
