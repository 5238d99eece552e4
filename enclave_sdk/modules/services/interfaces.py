"""Remote client interfaces following Black Box Design principles."""
from typing import Protocol

from enclave_sdk.modules.api.models import ExecCommandRequest, ExecCommandResponse


class ApiContainerClient(Protocol):
    """Protocol for the API container client - allows swappable implementations."""

    async def exec_command(self, request: ExecCommandRequest) -> ExecCommandResponse:
        """
        Run a command inside a service.

        Args:
            request: Target service and command argument vector

        Returns:
            ExecCommandResponse with exit code and combined output
        """
        ...
