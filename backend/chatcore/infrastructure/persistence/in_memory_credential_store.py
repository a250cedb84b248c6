"""
In-memory Credential Store.

Keeps checkpoint documents in a dict keyed by username. Used when no Redis is
configured (CREDENTIAL_BACKEND=memory) and as the store in tests.
"""

import threading
from typing import Any, Mapping

from chatcore.domain.ports.credential_store import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    def __init__(self):
        self._documents: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def save(self, document: Mapping[str, Any]) -> None:
        with self._lock:
            self._documents[document["username"]] = dict(document)

    def load_all(self) -> list[Mapping[str, Any]]:
        with self._lock:
            return [dict(document) for document in self._documents.values()]
