"""
Create Conversation Command.

- Command: @dataclass(frozen=True) holding input data
- Handler: receives the EntityModel via __init__ (DI)
- Returns: the new Conversation, or None when the owner is unknown
"""

import logging
from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[Optional[Conversation]]):
    owner: Identifier
    title: str


class CreateConversationHandler(CommandHandler[Optional[Conversation]]):
    _model: EntityModel

    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, command: CreateConversationCommand) -> Optional[Conversation]:
        if self._model.user_by_id().first(command.owner) is None:
            logger.warning(
                f"[CreateConversation] Unknown owner {command.owner} for {command.title!r}"
            )
            return None

        conversation = Conversation(
            id=self._model.new_id(),
            owner=command.owner,
            title=command.title,
            creation=Timestamp.now(),
        )
        self._model.add_conversation(conversation)
        logger.info(f"[CreateConversation] {conversation.title!r} {conversation.id}")
        return conversation
