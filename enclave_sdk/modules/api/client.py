"""
HTTP client for the enclave API container.

Implements the ApiContainerClient protocol over JSON/HTTP with httpx.
Transport and HTTP status errors are raised as httpx exceptions and are
never reinterpreted here.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from enclave_sdk.config.provider import (
    DEFAULT_API_CONTAINER_URL,
    DEFAULT_API_TIMEOUT_SECONDS,
    ApiContainerConfig,
)

from .models import ExecCommandRequest, ExecCommandResponse

logger = logging.getLogger("enclave_sdk.api")


class HttpApiContainerClient:
    """API container client speaking JSON over HTTP."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_CONTAINER_URL,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: Base URL of the API container
            api_key: Optional key sent as X-Api-Key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: ApiContainerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HttpApiContainerClient":
        """Create a client from an ApiContainerConfig."""
        return cls(
            api_url=config.url,
            api_key=config.api_key,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-Api-Key"] = self.api_key
        return headers

    async def exec_command(self, request: ExecCommandRequest) -> ExecCommandResponse:
        """
        Run a command in a service via the API container.

        Args:
            request: Target service and command argument vector

        Returns:
            ExecCommandResponse with exit code and combined output

        Raises:
            httpx.HTTPError: Transport failure or non-2xx response
            pydantic.ValidationError: Response body is not an exec result
        """
        url = f"{self.api_url}/services/{quote(request.service_id, safe='')}/exec"
        logger.debug(f"Executing {request.command_args} on service {request.service_id}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(
                url,
                json={"command_args": request.command_args},
                headers=self._headers(),
            )
            response.raise_for_status()
            return ExecCommandResponse.model_validate(response.json())
