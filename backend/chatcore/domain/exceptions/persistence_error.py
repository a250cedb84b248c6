"""
Persistence errors - Failures of the durable credential store.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chatcore.domain.entities.user import User


class PersistenceError(Exception):
    """The credential store could not be reached or rejected the operation."""

    def __init__(self, message: str = "Credential store unavailable"):
        super().__init__(message)


class CheckpointError(PersistenceError):
    """
    A new user was committed in memory but its credentials were not checkpointed.

    The in-memory insert stands; `user` is the committed entity.
    """

    def __init__(self, user: "User", cause: Exception):
        super().__init__(f"Checkpoint failed for user {user.name}: {cause}")
        self.user = user
        self.cause = cause
