"""
Command / Query base classes.

A command changes the EntityModel, a query only reads it. Each is a frozen
dataclass paired with a handler whose execute() returns the typed result:

    @dataclass(frozen=True)
    class ListMessagesQuery(Query[list[Message]]):
        conversation: Identifier

    class ListMessagesHandler(QueryHandler[list[Message]]):
        def execute(self, query: ListMessagesQuery) -> list[Message]:
            ...

Handlers run synchronously against the in-memory model.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

R = TypeVar("R")


class Command(ABC, Generic[R]):
    """Input for a state-changing use case."""


class CommandHandler(ABC, Generic[R]):
    @abstractmethod
    def execute(self, command: Command[R]) -> R: ...


class Query(ABC, Generic[R]):
    """Input for a read-only use case."""


class QueryHandler(ABC, Generic[R]):
    @abstractmethod
    def execute(self, query: Query[R]) -> R: ...
