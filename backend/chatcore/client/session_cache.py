"""
Session Cache - Client-side mirror of the user directory.

refresh() pulls the whole directory through the View and rebuilds both local
indices from scratch; directories are small enough that patching them
incrementally is not worth the bookkeeping.

Session state machine:
    SIGNED_OUT --sign_in_user (ok)--> SIGNED_IN
    SIGNED_IN  --sign_out_user------> SIGNED_OUT
    SIGNED_IN  --sign_in_user (ok)--> SIGNED_IN as the new user
    any failed sign_in_user leaves the state untouched
"""

import logging
from enum import Enum
from typing import Optional

from chatcore.domain.entities.user import User
from chatcore.domain.ports.transport import Controller, View
from chatcore.domain.services.ordered_index import OrderedIndex, OrderedValues
from chatcore.domain.value_objects.identifier import Identifier

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    SIGNED_OUT = "signed_out"
    SIGNED_IN = "signed_in"


class SessionCache:
    def __init__(self, controller: Controller, view: View):
        self._controller = controller
        self._view = view
        self._current: Optional[User] = None
        self._users_by_id: dict[Identifier, User] = {}
        self._users_by_name: OrderedIndex[str, User] = OrderedIndex(str.casefold)

    # ==================== DIRECTORY ====================

    def refresh(self) -> None:
        users_by_id: dict[Identifier, User] = {}
        users_by_name: OrderedIndex[str, User] = OrderedIndex(str.casefold)

        for user in self._view.get_users_excluding(set()):
            users_by_id[user.id] = user
            users_by_name.insert(user.name, user)

        self._users_by_id = users_by_id
        self._users_by_name = users_by_name
        logger.debug(f"[Session] Directory refreshed: {len(users_by_id)} users")

    def is_valid_name(self, name: str) -> bool:
        if not name or not name.strip():
            return False
        return self._users_by_name.first(name) is None

    def lookup(self, user_id: Identifier) -> Optional[User]:
        user = self._users_by_id.get(user_id)
        if user is None:
            logger.warning(f"[Session] lookup() failed on ID: {user_id}")
        return user

    def get_name(self, user_id: Identifier) -> Optional[str]:
        user = self.lookup(user_id)
        return user.name if user is not None else None

    def users(self) -> OrderedValues[User]:
        """Cached users in case-insensitive name order."""
        return self._users_by_name.all()

    def all_usernames(self) -> frozenset[str]:
        """Every username known to the server, so sign-in can fail fast."""
        self.refresh()
        return frozenset(user.name for user in self._users_by_id.values())

    def describe_user(self, name: str) -> str:
        user = self._users_by_name.first(name)
        if user is None:
            return "Null user"
        return f" User: {user.name}\n   Id: {user.id}\n   created: {user.creation}\n"

    def add_user(self, name: str, password: str) -> Optional[User]:
        if not self.is_valid_name(name):
            reason = "username already exists" if name and name.strip() else "bad input value"
            logger.warning(f"[Session] User not created - {reason}: {name!r}")
            return None

        user = self._controller.new_user(name, password)
        if user is None:
            logger.warning(f"[Session] User not created - server failure: {name!r}")
            return None

        logger.info(f'[Session] New user complete, Name= "{user.name}" UUID={user.id}')
        self.refresh()
        return user

    # ==================== SESSION ====================

    @property
    def state(self) -> SessionState:
        return SessionState.SIGNED_IN if self._current is not None else SessionState.SIGNED_OUT

    @property
    def current(self) -> Optional[User]:
        return self._current

    def has_current(self) -> bool:
        return self._current is not None

    def sign_in_user(self, name: str, password: str) -> bool:
        """Switch the session to `name`; returns True only when authentication succeeds."""
        self.refresh()

        user = self._users_by_name.first(name)
        if user is None or not self._view.match_password(user.name, password):
            logger.info(f"[Session] Sign in failed for {name!r}")
            return False

        self._current = user
        logger.info(f"[Session] Sign in as {user.name} successful")
        return True

    def sign_out_user(self) -> bool:
        had_current = self.has_current()
        self._current = None
        return had_current
