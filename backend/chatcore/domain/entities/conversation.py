"""
Conversation Entity - A titled chat session started by a user.
"""

from dataclasses import dataclass

from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp


@dataclass(frozen=True)
class Conversation:
    id: Identifier
    owner: Identifier
    title: str
    creation: Timestamp
