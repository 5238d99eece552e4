"""
Tgz Archiver - packages a local file or folder for upload.

The API container accepts uploads as a single gRPC message, so the
archive must fit under the message limit. The limit is enforced here,
at the producer, so an oversized payload never reaches the transport.

Pipeline:
1. Validate the source path (exists, not the filesystem root)
2. Create a scratch workspace (removed again on every exit path)
3. Write <basename>.tgz with paths relative to the source's parent
4. Check the archive: present, under the limit, non-empty, fully read
"""

import asyncio
import logging
import os
import tarfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from enclave_sdk.config.provider import DEFAULT_TRANSFER_LIMIT_BYTES, ArchiverConfig

from .errors import (
    ArchiveIntegrityError,
    ArchiveSizeExceededError,
    ArchiveSourceNotFoundError,
    CompressionFailedError,
    CompressionIncompleteError,
    EmptyArchiveError,
    InvalidArchiveSourceError,
)
from .workspace import compression_workspace

logger = logging.getLogger("enclave_sdk.archiver")

COMPRESSION_EXTENSION = ".tgz"
GRPC_DATA_TRANSFER_LIMIT = DEFAULT_TRANSFER_LIMIT_BYTES

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ArchiveResult:
    """Compressed archive ready for transfer."""

    data: bytes
    filename: str

    @property
    def size(self) -> int:
        return len(self.data)


class GenericTgzArchiver(Protocol):
    """Protocol for archivers - allows swappable implementations."""

    async def create_archive(self, source_path: PathLike) -> ArchiveResult:
        """
        Compress a file or folder into a .tgz byte stream.

        Args:
            source_path: File or directory to archive

        Returns:
            ArchiveResult holding the compressed bytes
        """
        ...


class TgzArchiver:
    """Builds gzip tar archives bounded by the gRPC transfer limit."""

    def __init__(
        self,
        transfer_limit_bytes: int = GRPC_DATA_TRANSFER_LIMIT,
        temp_dir: Optional[str] = None,
    ):
        """
        Initialize archiver.

        Args:
            transfer_limit_bytes: Archives must be strictly smaller than this
            temp_dir: Parent directory for compression workspaces (system default if None)
        """
        if transfer_limit_bytes <= 0:
            raise ValueError(f"transfer_limit_bytes must be positive, got {transfer_limit_bytes}")
        self.transfer_limit_bytes = transfer_limit_bytes
        self.temp_dir = temp_dir

    @classmethod
    def from_config(cls, config: ArchiverConfig) -> "TgzArchiver":
        """Create an archiver from an ArchiverConfig."""
        return cls(transfer_limit_bytes=config.transfer_limit_bytes, temp_dir=config.temp_dir)

    async def create_archive(self, source_path: PathLike) -> ArchiveResult:
        """
        Compress source_path without blocking the event loop.

        Each call runs in its own worker thread with its own workspace,
        so concurrent calls do not interfere.
        """
        return await asyncio.to_thread(self.create_archive_sync, source_path)

    def create_archive_sync(self, source_path: PathLike) -> ArchiveResult:
        """
        Compress a file or folder into a .tgz byte stream.

        Args:
            source_path: File or directory to archive

        Returns:
            ArchiveResult with the archive bytes and file name

        Raises:
            ArchiveSourceNotFoundError: source_path does not exist
            InvalidArchiveSourceError: source_path is the filesystem root
            WorkspaceUnavailableError: scratch directory could not be created
            CompressionFailedError: writing the archive raised
            CompressionIncompleteError: archive missing after compression
            ArchiveSizeExceededError: archive reaches the transfer limit
            EmptyArchiveError: archive is zero bytes
            ArchiveIntegrityError: read size differs from size on disk
        """
        source = Path(source_path)
        if not source.exists():
            raise ArchiveSourceNotFoundError(
                f"The file or folder you want to upload does not exist: '{source}'"
            )

        resolved = source.resolve()
        if resolved.parent == resolved:
            raise InvalidArchiveSourceError(f"Cannot archive the root directory '{resolved}'")

        # Named after the path as given; symlinks are not followed for the name
        archive_name = Path(os.path.abspath(source)).name
        dest_filename = archive_name + COMPRESSION_EXTENSION

        with compression_workspace(self.temp_dir) as workspace:
            dest_filepath = workspace / dest_filename
            self._compress(resolved, dest_filepath, archive_name)

            if not dest_filepath.exists():
                raise CompressionIncompleteError(
                    f"Your files were compressed but could not be found at '{dest_filepath}'",
                    path=str(dest_filepath),
                )

            size = dest_filepath.stat().st_size
            if size >= self.transfer_limit_bytes:
                raise ArchiveSizeExceededError(
                    f"The files you are trying to upload compress to {size} bytes, which reaches "
                    f"or exceeds the {self.transfer_limit_bytes} byte transfer limit. Please reduce "
                    f"the total file size so it compresses below the limit.",
                    size=size,
                    limit=self.transfer_limit_bytes,
                )

            if size <= 0:
                raise EmptyArchiveError(
                    f"Something went wrong during compression of '{source}': "
                    f"the compressed file size is 0 bytes"
                )

            data = self._read_archive(dest_filepath)
            if len(data) != size:
                raise ArchiveIntegrityError(
                    f"Something went wrong while reading the compressed file '{dest_filename}': "
                    f"the file size of {size} bytes and read size of {len(data)} bytes are not equal",
                    expected=size,
                    actual=len(data),
                )

        logger.debug(f"Archived '{resolved}' into {dest_filename} ({size} bytes)")
        return ArchiveResult(data=data, filename=dest_filename)

    def _compress(self, source: Path, dest_filepath: Path, arcname: str) -> None:
        """Write source into a gzip tar at dest_filepath, with members rooted at arcname."""
        try:
            with tarfile.open(dest_filepath, "w:gz") as tar:
                tar.add(source, arcname=arcname)
        except Exception as e:
            if str(e):
                message = f"Failed to compress '{source}' to '{dest_filepath}': {e}"
            else:
                message = (
                    f"A {type(e).__name__} with no message was raised when compressing "
                    f"'{source}' to '{dest_filepath}'"
                )
            raise CompressionFailedError(message) from e

    def _read_archive(self, dest_filepath: Path) -> bytes:
        """Read the finished archive back into memory."""
        return dest_filepath.read_bytes()
