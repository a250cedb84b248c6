"""
Transport Ports - The client's view of the chat server.

Controller carries writes, View carries reads. The client mirror only ever
talks to the server through these two interfaces.
Implementation: chatcore/application/transport.py (in-process)
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.user import User
from chatcore.domain.value_objects.identifier import Identifier


class Controller(ABC):
    @abstractmethod
    def new_user(self, name: str, password: str) -> Optional[User]: ...

    @abstractmethod
    def new_conversation(
        self, title: str, owner: Identifier
    ) -> Optional[Conversation]: ...

    @abstractmethod
    def new_message(
        self, author: Identifier, conversation: Identifier, content: str
    ) -> Optional[Message]: ...


class View(ABC):
    @abstractmethod
    def get_users_excluding(self, ids: Iterable[Identifier]) -> list[User]: ...

    @abstractmethod
    def match_password(self, name: str, password: str) -> bool: ...

    @abstractmethod
    def get_user_generation(self) -> Identifier: ...

    @abstractmethod
    def get_conversations(self) -> list[Conversation]: ...

    @abstractmethod
    def get_messages(self, conversation: Identifier) -> list[Message]: ...
