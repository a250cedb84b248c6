"""List Messages Query - messages of one conversation in posting order."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.message import Message
from chatcore.domain.value_objects.identifier import Identifier


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    conversation: Identifier


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, query: ListMessagesQuery) -> list[Message]:
        return [
            message
            for message in self._model.message_by_time().all()
            if message.conversation == query.conversation
        ]
