"""Configuration records and providers for the enclave SDK."""

from .provider import (
    ApiContainerConfig,
    ArchiverConfig,
    ConfigProvider,
    EnvConfigProvider,
)

__all__ = ["ApiContainerConfig", "ArchiverConfig", "ConfigProvider", "EnvConfigProvider"]
