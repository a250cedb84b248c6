import os
import sys
from typing import Any, Mapping

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from chatcore.application.entity_model import EntityModel
from chatcore.application.transport import LocalController, LocalView
from chatcore.client.session_cache import SessionCache
from chatcore.domain.exceptions import PersistenceError
from chatcore.domain.ports.credential_store import CredentialStore
from chatcore.domain.value_objects.identifier import Identifier
from chatcore.infrastructure.persistence import InMemoryCredentialStore
from chatcore.infrastructure.security.credential_vault import CredentialVault

SERVER_ID = Identifier(7)


def fast_vault() -> CredentialVault:
    """Vault with a cheap scrypt cost so tests stay quick."""
    return CredentialVault(n=2**4, r=8, p=1)


class StaticCredentialStore(CredentialStore):
    """Serves a fixed list of raw documents, records saves."""

    def __init__(self, documents: list[Any]):
        self.documents = list(documents)
        self.saved: list[Mapping[str, Any]] = []

    def save(self, document: Mapping[str, Any]) -> None:
        self.saved.append(dict(document))

    def load_all(self) -> list[Any]:
        return list(self.documents)


class FailingCredentialStore(CredentialStore):
    """Every call fails as if the store were down."""

    def save(self, document: Mapping[str, Any]) -> None:
        raise PersistenceError("store is down")

    def load_all(self) -> list[Mapping[str, Any]]:
        raise PersistenceError("store is down")


@pytest.fixture()
def store():
    return InMemoryCredentialStore()


@pytest.fixture()
def model(store):
    """A fresh EntityModel checkpointing into an in-memory store."""
    return EntityModel(store, fast_vault(), server_id=SERVER_ID)


@pytest.fixture()
def controller(model):
    return LocalController.from_model(model)


@pytest.fixture()
def view(model):
    return LocalView.from_model(model)


@pytest.fixture()
def session(controller, view):
    """A client-side session talking to the model in-process."""
    return SessionCache(controller, view)
