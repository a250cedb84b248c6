"""List Conversations Query."""

from dataclasses import dataclass
from typing import Optional

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.conversation import Conversation


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    limit: Optional[int] = None


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        """Conversations oldest first, optionally capped at query.limit."""
        conversations = list(self._model.conversation_by_time().all())
        if query.limit is not None:
            return conversations[: query.limit]
        return conversations
