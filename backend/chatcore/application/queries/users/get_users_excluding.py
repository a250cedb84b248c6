"""Get Users Excluding Query - the user directory minus a set of ids."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.user import User
from chatcore.domain.value_objects.identifier import Identifier


@dataclass(frozen=True)
class GetUsersExcludingQuery(Query[list[User]]):
    ids: frozenset[Identifier] = frozenset()


class GetUsersExcludingHandler(QueryHandler[list[User]]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, query: GetUsersExcludingQuery) -> list[User]:
        """Users in id order, skipping any id in query.ids."""
        return [
            user for user in self._model.user_by_id().all() if user.id not in query.ids
        ]
