"""Message-related queries."""

from chatcore.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
]
