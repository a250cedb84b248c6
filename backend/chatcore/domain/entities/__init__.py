"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique hierarchical Identifier
- Is immutable once created (frozen dataclass)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.user import User

__all__ = [
    "Conversation",
    "Message",
    "User",
]
