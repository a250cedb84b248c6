"""
PORTS - Interfaces the outer layers implement

A "port" is an abstract interface that defines WHAT the core needs,
without specifying HOW it's done.

- credential_store.py → durable credential checkpoint (Redis, in-memory)
- transport.py        → Controller / View used by the client mirror
"""

from chatcore.domain.ports.credential_store import CredentialStore
from chatcore.domain.ports.transport import Controller, View

__all__ = [
    "CredentialStore",
    "Controller",
    "View",
]
