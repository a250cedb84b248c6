"""Match Password Query."""

from dataclasses import dataclass, field

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.entity_model import EntityModel


@dataclass(frozen=True)
class MatchPasswordQuery(Query[bool]):
    name: str
    password: str = field(repr=False)


class MatchPasswordHandler(QueryHandler[bool]):
    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, query: MatchPasswordQuery) -> bool:
        # Unknown user and wrong password both answer False
        return self._model.match_password(query.name, query.password)
