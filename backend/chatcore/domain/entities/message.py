"""
Message Entity - A single message posted to a conversation.
"""

from dataclasses import dataclass

from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp


@dataclass(frozen=True)
class Message:
    id: Identifier
    conversation: Identifier
    author: Identifier
    content: str
    creation: Timestamp
