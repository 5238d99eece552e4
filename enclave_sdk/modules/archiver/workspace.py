"""Scoped scratch directories for compression."""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .errors import WorkspaceUnavailableError

logger = logging.getLogger("enclave_sdk.archiver")

# Recognizable in a temp-dir listing
COMPRESSION_TEMP_FOLDER_PREFIX = "temp-tgz-archiver-compression-"


@contextmanager
def compression_workspace(temp_dir: Optional[str] = None) -> Iterator[Path]:
    """
    Create a uniquely named scratch directory and remove it on exit.

    Args:
        temp_dir: Parent directory for the workspace (system default if None)

    Yields:
        Path to the new, empty workspace

    Raises:
        WorkspaceUnavailableError: If the directory cannot be created
    """
    try:
        workspace = Path(tempfile.mkdtemp(prefix=COMPRESSION_TEMP_FOLDER_PREFIX, dir=temp_dir))
    except OSError as e:
        raise WorkspaceUnavailableError(
            f"Failed to create temporary directory for file compression: {e}"
        ) from e

    logger.debug(f"Created compression workspace {workspace}")
    try:
        yield workspace
    finally:
        shutil.rmtree(workspace, ignore_errors=True)
        logger.debug(f"Removed compression workspace {workspace}")
