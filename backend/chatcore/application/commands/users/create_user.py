"""
Create User Command.

Validation failures (empty or taken name) come back as None so the transport
can answer "no user". A failed checkpoint still returns the user, since it
exists in memory and the transport contract is User or None. The outage is
logged at ERROR.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.entity_model import EntityModel
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import CheckpointError, DomainValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateUserCommand(Command[Optional[User]]):
    name: str
    password: str = field(repr=False)


class CreateUserHandler(CommandHandler[Optional[User]]):
    _model: EntityModel

    def __init__(self, model: EntityModel):
        self._model = model

    def execute(self, command: CreateUserCommand) -> Optional[User]:
        try:
            return self._model.add_user(command.name, command.password)
        except DomainValidationError as e:
            logger.warning(f"[CreateUser] Rejected {command.name!r}: {e.message}")
            return None
        except CheckpointError as e:
            logger.error(f"[CreateUser] {e}; user kept in memory only")
            return e.user
