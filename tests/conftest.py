"""
Shared pytest fixtures for enclave SDK tests.

This module provides common fixtures including:
- Source trees on disk for the archiver
- A scratch temp directory so workspace cleanup can be asserted
- A stub API container client for service handle tests
"""

import io
import os
import sys
import tarfile
from typing import Dict
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from enclave_sdk.modules.api.models import ExecCommandResponse, PortSpec, TransportProtocol


# =============================================================================
# Archive Helpers
# =============================================================================

def unpack_archive(data: bytes) -> Dict[str, bytes]:
    """Return {member name: file contents} for every regular file in a .tgz buffer."""
    contents = {}
    with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as tar:
        for member in tar.getmembers():
            if member.isfile():
                contents[member.name] = tar.extractfile(member).read()
    return contents


@pytest.fixture
def source_dir(tmp_path):
    """A directory holding a single 10-byte text file."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "hello.txt").write_bytes(b"0123456789")
    return src


@pytest.fixture
def scratch_dir(tmp_path):
    """Parent directory for compression workspaces."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    return scratch


# =============================================================================
# API Container Client Stub
# =============================================================================

@pytest.fixture
def stub_client():
    """API container client whose exec_command answers (0, 'hi\\n')."""
    client = AsyncMock()
    client.exec_command = AsyncMock(
        return_value=ExecCommandResponse(exit_code=0, log_output="hi\n")
    )
    return client


@pytest.fixture
def http_port():
    return PortSpec(number=8080, transport_protocol=TransportProtocol.TCP, maybe_application_protocol="http")


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: Tests that write multi-megabyte fixtures"
    )
