"""Add Message Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.message import Message
from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddMessageCommand(Command[Optional[Message]]):
    author: Identifier
    conversation: Identifier
    content: str


class AddMessageHandler(CommandHandler[Optional[Message]]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, command: AddMessageCommand) -> Optional[Message]:
        if self._model.user_by_id().first(command.author) is None:
            logger.warning(f"[AddMessage] Unknown author {command.author}")
            return None
        if self._model.conversation_by_id().first(command.conversation) is None:
            logger.warning(f"[AddMessage] Unknown conversation {command.conversation}")
            return None

        message = Message(
            id=self._model.new_id(),
            conversation=command.conversation,
            author=command.author,
            content=command.content,
            creation=Timestamp.now(),
        )
        self._model.add_message(message)
        return message
