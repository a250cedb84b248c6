"""
Tests for the dishka container and the application factory.

Only the in-memory backend is exercised; nothing here opens a Redis connection.
"""

import pytest

from chatcore.app import create_app
from chatcore.application.entity_model import EntityModel
from chatcore.config.settings import TestingConfig
from chatcore.domain.ports.credential_store import CredentialStore
from chatcore.domain.ports.transport import Controller, View
from chatcore.infrastructure.persistence import InMemoryCredentialStore
from chatcore.setup.ioc import create_container


@pytest.fixture()
def container():
    container = create_container("memory", TestingConfig)
    yield container
    container.close()


def test_memory_backend_provides_in_memory_store(container):
    assert isinstance(container.get(CredentialStore), InMemoryCredentialStore)


def test_model_is_shared_across_requests(container):
    with container() as request:
        controller = request.get(Controller)
        user = controller.new_user("alice", "pw")

    with container() as request:
        view = request.get(View)
        assert view.get_users_excluding(set()) == [user]
        assert view.match_password("alice", "pw") is True

    assert container.get(EntityModel) is container.get(EntityModel)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        create_container("postgres", TestingConfig)


def test_create_app_restores_into_an_empty_model(monkeypatch):
    monkeypatch.setattr("chatcore.app.setup_logging", lambda *args, **kwargs: None)
    container = create_app("testing")
    try:
        model = container.get(EntityModel)
        assert len(model.user_by_id()) == 0
    finally:
        container.close()
