"""
Service handle for a service running in an enclave.

A ServiceContext is a read-only view of a service's identity and
addressing plus one delegated operation, exec_command. Handles are not
revalidated: if the service has been removed, exec_command fails with
whatever error the client raises.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from enclave_sdk.modules.api.models import ExecCommandRequest, PortSpec, ServiceInfo

from .interfaces import ApiContainerClient

logger = logging.getLogger("enclave_sdk.services")


class ServiceContext:
    """Immutable handle to a service, with remote command execution."""

    def __init__(
        self,
        client: ApiContainerClient,
        service_id: str,
        service_guid: str,
        private_ip_address: str,
        private_ports: Mapping[str, PortSpec],
        public_ip_address: Optional[str],
        public_ports: Mapping[str, PortSpec],
    ):
        self._client = client
        self._service_id = service_id
        self._service_guid = service_guid
        self._private_ip_address = private_ip_address
        self._private_ports = MappingProxyType(dict(private_ports))
        self._public_ip_address = public_ip_address
        self._public_ports = MappingProxyType(dict(public_ports))

    @classmethod
    def from_service_info(cls, client: ApiContainerClient, info: ServiceInfo) -> "ServiceContext":
        """Build a handle from the API container's description of a service."""
        return cls(
            client=client,
            service_id=info.service_id,
            service_guid=info.service_guid,
            private_ip_address=info.private_ip_address,
            private_ports=info.private_ports,
            public_ip_address=info.maybe_public_ip_address,
            public_ports=info.maybe_public_ports,
        )

    @property
    def service_id(self) -> str:
        return self._service_id

    @property
    def service_guid(self) -> str:
        return self._service_guid

    @property
    def private_ip_address(self) -> str:
        return self._private_ip_address

    @property
    def private_ports(self) -> Mapping[str, PortSpec]:
        return self._private_ports

    @property
    def maybe_public_ip_address(self) -> Optional[str]:
        return self._public_ip_address

    @property
    def public_ports(self) -> Mapping[str, PortSpec]:
        return self._public_ports

    async def exec_command(self, command: Sequence[str]) -> Tuple[int, str]:
        """
        Run a command inside this service.

        Args:
            command: Argument vector, e.g. ["echo", "hi"]

        Returns:
            Tuple of (exit_code, combined log output)

        Errors raised by the client propagate unchanged.
        """
        request = ExecCommandRequest(service_id=self._service_id, command_args=list(command))
        logger.debug(f"exec_command on {self._service_id}: {request.command_args}")

        response = await self._client.exec_command(request)
        return response.exit_code, response.log_output

    def __repr__(self) -> str:
        return f"ServiceContext(service_id={self._service_id}, service_guid={self._service_guid})"
