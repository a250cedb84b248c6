"""Get User Generation Query - version stamp of the user directory."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.value_objects.identifier import Identifier


@dataclass(frozen=True)
class GetUserGenerationQuery(Query[Identifier]):
    pass


class GetUserGenerationHandler(QueryHandler[Identifier]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, query: GetUserGenerationQuery) -> Identifier:
        return self._model.user_generation()
