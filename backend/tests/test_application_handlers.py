"""
Unit tests for the command / query handlers behind LocalController and LocalView.

Run with: pytest tests/test_application_handlers.py -v
"""

import logging

from chatcore.application.commands.users import CreateUserCommand, CreateUserHandler
from chatcore.application.entity_model import EntityModel
from chatcore.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from chatcore.domain.value_objects.identifier import Identifier
from conftest import SERVER_ID, FailingCredentialStore, fast_vault

UNKNOWN = Identifier(999, SERVER_ID)


class TestController:
    def test_new_user_returns_the_user(self, controller, model):
        user = controller.new_user("alice", "pw")

        assert user is not None
        assert model.user_by_id().first(user.id) is user

    def test_new_user_rejects_duplicates_with_none(self, controller):
        controller.new_user("alice", "pw")

        assert controller.new_user("ALICE", "pw") is None

    def test_new_user_rejects_empty_name_with_none(self, controller):
        assert controller.new_user("", "pw") is None

    def test_new_conversation_needs_a_known_owner(self, controller, view):
        assert controller.new_conversation("Lunch", UNKNOWN) is None
        assert view.get_conversations() == []

    def test_new_conversation(self, controller, view):
        owner = controller.new_user("alice", "pw")

        conversation = controller.new_conversation("Lunch", owner.id)

        assert conversation.owner == owner.id
        assert conversation.title == "Lunch"
        assert view.get_conversations() == [conversation]

    def test_new_message_needs_a_known_author(self, controller):
        owner = controller.new_user("alice", "pw")
        conversation = controller.new_conversation("Lunch", owner.id)

        assert controller.new_message(UNKNOWN, conversation.id, "hi") is None

    def test_new_message_needs_a_known_conversation(self, controller, view):
        owner = controller.new_user("alice", "pw")

        assert controller.new_message(owner.id, UNKNOWN, "hi") is None
        assert view.get_messages(UNKNOWN) == []


class TestView:
    def test_messages_are_filtered_by_conversation(self, controller, view):
        alice = controller.new_user("alice", "pw")
        lunch = controller.new_conversation("Lunch", alice.id)
        dinner = controller.new_conversation("Dinner", alice.id)

        first = controller.new_message(alice.id, lunch.id, "first")
        controller.new_message(alice.id, dinner.id, "elsewhere")
        second = controller.new_message(alice.id, lunch.id, "second")

        assert view.get_messages(lunch.id) == [first, second]

    def test_users_excluding(self, controller, view):
        alice = controller.new_user("alice", "pw")
        bob = controller.new_user("bob", "pw")

        assert view.get_users_excluding(set()) == [alice, bob]
        assert view.get_users_excluding({alice.id}) == [bob]
        assert view.get_users_excluding([alice.id, bob.id]) == []

    def test_match_password(self, controller, view):
        controller.new_user("alice", "pw")

        assert view.match_password("alice", "pw") is True
        assert view.match_password("alice", "nope") is False
        assert view.match_password("nobody", "pw") is False

    def test_generation_changes_when_users_change(self, controller, view):
        before = view.get_user_generation()
        assert view.get_user_generation() == before

        controller.new_user("alice", "pw")

        assert view.get_user_generation() != before

    def test_conversation_limit(self, controller, model):
        alice = controller.new_user("alice", "pw")
        for title in ["a", "b", "c"]:
            controller.new_conversation(title, alice.id)

        handler = ListConversationsHandler(model)

        assert len(handler.execute(ListConversationsQuery(limit=2))) == 2
        assert len(handler.execute(ListConversationsQuery())) == 3


class TestCreateUserHandler:
    def test_checkpoint_failure_still_returns_the_user(self):
        model = EntityModel(FailingCredentialStore(), fast_vault(), server_id=SERVER_ID)
        handler = CreateUserHandler(model)

        user = handler.execute(CreateUserCommand(name="alice", password="pw"))

        assert user is not None
        assert model.user_by_text().first("alice") is user

    def test_command_repr_hides_the_password(self):
        command = CreateUserCommand(name="alice", password="hunter2")

        assert "hunter2" not in repr(command)

    def test_checkpoint_failure_is_logged_as_an_error(self, caplog):
        model = EntityModel(FailingCredentialStore(), fast_vault(), server_id=SERVER_ID)
        handler = CreateUserHandler(model)

        with caplog.at_level(logging.ERROR):
            handler.execute(CreateUserCommand(name="alice", password="pw"))

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "alice" in errors[0].getMessage()
