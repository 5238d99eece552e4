"""
Services Module - Black Box Interface

Purpose: Handles to services running in an enclave
Interface: ServiceContext getters, ServiceContext.exec_command()
Hidden: Request construction, response unpacking

The remote client is injected, so any ApiContainerClient works.
"""

from .interfaces import ApiContainerClient
from .service_context import ServiceContext

__all__ = ["ApiContainerClient", "ServiceContext"]
