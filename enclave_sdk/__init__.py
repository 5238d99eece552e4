"""
Enclave SDK - client-side core for enclave test environments

Packages local files for upload and runs commands on remote services
through the enclave's API container.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- archiver: Local path to size-bounded .tgz byte stream
- api: Wire models and the HTTP API container client
- services: Service handles with remote command execution
"""

__version__ = "0.1.0"
