"""Conversation-related queries."""

from chatcore.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
]
