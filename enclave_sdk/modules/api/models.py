"""
Enclave SDK wire models.

These models define the structure of the data exchanged with the
enclave's API container.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Enums


class TransportProtocol(str, Enum):
    """Transport protocol of a service port."""

    TCP = "TCP"
    SCTP = "SCTP"
    UDP = "UDP"


# Service Models


class PortSpec(BaseModel):
    """A port exposed by a service."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Port number", ge=1, le=65535)
    transport_protocol: TransportProtocol = Field(
        default=TransportProtocol.TCP, description="Transport protocol"
    )
    maybe_application_protocol: Optional[str] = Field(
        None, description="Application protocol, e.g. 'http' or 'grpc'"
    )


class ServiceInfo(BaseModel):
    """Identity and addressing of a service registered in an enclave."""

    service_id: str = Field(..., description="Logical service identifier", min_length=1)
    service_guid: str = Field(..., description="Globally unique service identifier", min_length=1)
    private_ip_address: str = Field(..., description="IP address inside the enclave")
    private_ports: Dict[str, PortSpec] = Field(default_factory=dict)
    maybe_public_ip_address: Optional[str] = Field(
        None, description="IP address reachable from the host, if any"
    )
    maybe_public_ports: Dict[str, PortSpec] = Field(default_factory=dict)


# Request Models


class ExecCommandRequest(BaseModel):
    """Request to run a command inside a service."""

    service_id: str = Field(..., description="Target service identifier")
    # Contents are the remote side's concern: empty vectors and shell
    # metacharacters are passed through as-is.
    command_args: List[str] = Field(default_factory=list, description="Command argument vector")


# Response Models


class ExecCommandResponse(BaseModel):
    """Result of a command run inside a service."""

    exit_code: int
    log_output: str = ""
