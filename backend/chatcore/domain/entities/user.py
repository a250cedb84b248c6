"""
User Entity - A registered chat participant.
"""

from dataclasses import dataclass

from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp


@dataclass(frozen=True)
class User:
    id: Identifier
    name: str
    creation: Timestamp

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("User name cannot be empty")
