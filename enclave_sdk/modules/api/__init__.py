"""
API Module - Black Box Interface

Purpose: Talk to the enclave's API container
Interface: Wire models, HttpApiContainerClient.exec_command()
Hidden: URL layout, headers, JSON encoding

The client can be replaced with any ApiContainerClient implementation
(gRPC, in-process stub) without affecting the service handles.
"""

from .client import HttpApiContainerClient
from .models import (
    ExecCommandRequest,
    ExecCommandResponse,
    PortSpec,
    ServiceInfo,
    TransportProtocol,
)

__all__ = [
    "HttpApiContainerClient",
    "ExecCommandRequest",
    "ExecCommandResponse",
    "PortSpec",
    "ServiceInfo",
    "TransportProtocol",
]
