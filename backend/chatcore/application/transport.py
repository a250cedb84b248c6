"""
In-process transport - Controller and View served straight from the handlers.

The client mirror depends only on the Controller / View ports; these
implementations answer them from the local EntityModel through the CQRS
handlers, the same way a network server would after decoding a request.
"""

from collections.abc import Iterable
from typing import Optional

from chatcore.application.commands.conversations import (
    CreateConversationCommand,
    CreateConversationHandler,
)
from chatcore.application.commands.messages import AddMessageCommand, AddMessageHandler
from chatcore.application.commands.users import CreateUserCommand, CreateUserHandler
from chatcore.application.entity_model import EntityModel
from chatcore.application.queries.conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from chatcore.application.queries.messages import ListMessagesQuery, ListMessagesHandler
from chatcore.application.queries.users import (
    GetUserGenerationHandler,
    GetUserGenerationQuery,
    GetUsersExcludingHandler,
    GetUsersExcludingQuery,
    MatchPasswordHandler,
    MatchPasswordQuery,
)
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.user import User
from chatcore.domain.ports.transport import Controller, View
from chatcore.domain.value_objects.identifier import Identifier


class LocalController(Controller):
    def __init__(
        self,
        create_user: CreateUserHandler,
        create_conversation: CreateConversationHandler,
        add_message: AddMessageHandler,
    ):
        self._create_user = create_user
        self._create_conversation = create_conversation
        self._add_message = add_message

    @classmethod
    def from_model(cls, model: EntityModel) -> "LocalController":
        return cls(
            CreateUserHandler(model),
            CreateConversationHandler(model),
            AddMessageHandler(model),
        )

    def new_user(self, name: str, password: str) -> Optional[User]:
        return self._create_user.execute(CreateUserCommand(name=name, password=password))

    def new_conversation(self, title: str, owner: Identifier) -> Optional[Conversation]:
        return self._create_conversation.execute(
            CreateConversationCommand(owner=owner, title=title)
        )

    def new_message(
        self, author: Identifier, conversation: Identifier, content: str
    ) -> Optional[Message]:
        return self._add_message.execute(
            AddMessageCommand(author=author, conversation=conversation, content=content)
        )


class LocalView(View):
    def __init__(
        self,
        users_excluding: GetUsersExcludingHandler,
        match_password: MatchPasswordHandler,
        user_generation: GetUserGenerationHandler,
        list_conversations: ListConversationsHandler,
        list_messages: ListMessagesHandler,
    ):
        self._users_excluding = users_excluding
        self._match_password = match_password
        self._user_generation = user_generation
        self._list_conversations = list_conversations
        self._list_messages = list_messages

    @classmethod
    def from_model(cls, model: EntityModel) -> "LocalView":
        return cls(
            GetUsersExcludingHandler(model),
            MatchPasswordHandler(model),
            GetUserGenerationHandler(model),
            ListConversationsHandler(model),
            ListMessagesHandler(model),
        )

    def get_users_excluding(self, ids: Iterable[Identifier]) -> list[User]:
        return self._users_excluding.execute(GetUsersExcludingQuery(ids=frozenset(ids)))

    def match_password(self, name: str, password: str) -> bool:
        return self._match_password.execute(
            MatchPasswordQuery(name=name, password=password)
        )

    def get_user_generation(self) -> Identifier:
        return self._user_generation.execute(GetUserGenerationQuery())

    def get_conversations(self) -> list[Conversation]:
        return self._list_conversations.execute(ListConversationsQuery())

    def get_messages(self, conversation: Identifier) -> list[Message]:
        return self._list_messages.execute(ListMessagesQuery(conversation=conversation))
