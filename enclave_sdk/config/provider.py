"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

# 3.999 MB: one kilobyte of headroom under the 4 MB gRPC message limit
DEFAULT_TRANSFER_LIMIT_BYTES = 3999000
DEFAULT_API_CONTAINER_URL = "http://localhost:7443"
DEFAULT_API_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ArchiverConfig:
    """Archiver configuration."""
    transfer_limit_bytes: int = DEFAULT_TRANSFER_LIMIT_BYTES
    temp_dir: Optional[str] = None


@dataclass(frozen=True)
class ApiContainerConfig:
    """API container connection configuration."""
    url: str = DEFAULT_API_CONTAINER_URL
    timeout_seconds: float = DEFAULT_API_TIMEOUT_SECONDS
    api_key: Optional[str] = None


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_archiver_config(self) -> ArchiverConfig:
        """Get archiver configuration."""
        ...

    def get_api_container_config(self) -> ApiContainerConfig:
        """Get API container configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_archiver_config(self) -> ArchiverConfig:
        """Get archiver configuration from environment variables."""
        limit_env = os.getenv("ENCLAVE_SDK_TRANSFER_LIMIT", str(DEFAULT_TRANSFER_LIMIT_BYTES))
        try:
            transfer_limit = int(limit_env)
        except ValueError:
            raise ValueError(
                f"ENCLAVE_SDK_TRANSFER_LIMIT must be an integer number of bytes, got '{limit_env}'"
            )
        if transfer_limit <= 0:
            raise ValueError(
                f"ENCLAVE_SDK_TRANSFER_LIMIT must be positive, got {transfer_limit}"
            )

        return ArchiverConfig(
            transfer_limit_bytes=transfer_limit,
            temp_dir=os.getenv("ENCLAVE_SDK_TEMP_DIR") or None,
        )

    def get_api_container_config(self) -> ApiContainerConfig:
        """Get API container configuration from environment variables."""
        return ApiContainerConfig(
            url=os.getenv("ENCLAVE_API_CONTAINER_URL", DEFAULT_API_CONTAINER_URL).rstrip("/"),
            timeout_seconds=float(os.getenv("ENCLAVE_API_TIMEOUT", str(DEFAULT_API_TIMEOUT_SECONDS))),
            api_key=os.getenv("ENCLAVE_API_KEY") or None,
        )
