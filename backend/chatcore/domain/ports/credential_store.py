"""
Credential Store Port - Durable checkpoint of user credentials.
Implementations:
- chatcore/infrastructure/persistence/redis_credential_store.py
- chatcore/infrastructure/persistence/in_memory_credential_store.py

Documents are plain mappings with the stable schema
{username, id, creation_ms, password_hash, salt}. Parsing them back into
domain objects is the caller's job, so a single bad document never poisons
load_all().
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class CredentialStore(ABC):
    @abstractmethod
    def save(self, document: Mapping[str, Any]) -> None:
        """Checkpoint one document. Raises PersistenceError on failure."""
        ...

    @abstractmethod
    def load_all(self) -> list[Mapping[str, Any]]:
        """Return every checkpointed document. Raises PersistenceError on outage."""
        ...
