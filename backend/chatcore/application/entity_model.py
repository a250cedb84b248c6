"""
Entity Model - The in-memory store every user, conversation and message passes through.

Each entity type is kept in three OrderedIndex instances:
- by id:   Identifier order
- by time: creation Timestamp order
- by text: case-insensitive name / title / content order

All three reference the same entity instance. One RLock guards the whole
model: every insert touches three indices, so readers take the same lock and
never observe a half-finished insert.

Users additionally get credentials in the CredentialVault and a checkpoint in
the CredentialStore. Password hashing and the checkpoint both run outside the
model lock. A checkpoint failure never rolls back the in-memory insert; it
surfaces as CheckpointError carrying the committed user.
"""

import logging
import threading
from typing import Generic, Optional, TypeVar

from pydantic import ValidationError

from chatcore.application.dto.credential import CredentialDocument
from chatcore.config.settings import Config
from chatcore.domain.entities.conversation import Conversation
from chatcore.domain.entities.message import Message
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import (
    CheckpointError,
    DomainValidationError,
    DuplicateNameError,
    PersistenceError,
)
from chatcore.domain.ports.credential_store import CredentialStore
from chatcore.domain.services.identifier_generator import IdentifierGenerator
from chatcore.domain.services.ordered_index import OrderedIndex, OrderedValues
from chatcore.domain.value_objects.identifier import Identifier
from chatcore.domain.value_objects.timestamp import Timestamp
from chatcore.infrastructure.security.credential_vault import (
    CredentialRecord,
    CredentialVault,
)

logger = logging.getLogger(__name__)

GENERATION_HIGH = 2**31 - 1

K = TypeVar("K")
V = TypeVar("V")


class IndexReader(Generic[K, V]):
    """Read-only view of one index that takes the model lock on every read."""

    def __init__(self, index: OrderedIndex[K, V], lock: threading.RLock):
        self._index = index
        self._lock = lock

    def first(self, key: K) -> Optional[V]:
        with self._lock:
            return self._index.first(key)

    def all(self) -> OrderedValues[V]:
        return OrderedValues(self._snapshot)

    def _snapshot(self) -> list[V]:
        with self._lock:
            return list(self._index.all())

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)


def _text_order(text: str) -> str:
    return text.casefold()


class EntityModel:
    def __init__(
        self,
        credential_store: CredentialStore,
        vault: Optional[CredentialVault] = None,
        server_id: Optional[Identifier] = None,
        id_low: Optional[int] = None,
        id_high: Optional[int] = None,
        generation_high: Optional[int] = None,
    ):
        self._store = credential_store
        self._vault = vault if vault is not None else CredentialVault()
        self._lock = threading.RLock()

        root = server_id if server_id is not None else Identifier(Config.SERVER_ID)
        self._ids = IdentifierGenerator(
            root,
            id_low if id_low is not None else Config.ID_LOW,
            id_high if id_high is not None else Config.ID_HIGH,
        )
        self._generations = IdentifierGenerator(
            None, 1, generation_high if generation_high is not None else GENERATION_HIGH
        )
        self._user_generation = self._generations.make()

        self._user_by_id: OrderedIndex[Identifier, User] = OrderedIndex()
        self._user_by_time: OrderedIndex[Timestamp, User] = OrderedIndex()
        self._user_by_text: OrderedIndex[str, User] = OrderedIndex(_text_order)

        self._conversation_by_id: OrderedIndex[Identifier, Conversation] = OrderedIndex()
        self._conversation_by_time: OrderedIndex[Timestamp, Conversation] = OrderedIndex()
        self._conversation_by_text: OrderedIndex[str, Conversation] = OrderedIndex(
            _text_order
        )

        self._message_by_id: OrderedIndex[Identifier, Message] = OrderedIndex()
        self._message_by_time: OrderedIndex[Timestamp, Message] = OrderedIndex()
        self._message_by_text: OrderedIndex[str, Message] = OrderedIndex(_text_order)

        self._readers = {
            name: IndexReader(getattr(self, f"_{name}"), self._lock)
            for name in (
                "user_by_id",
                "user_by_time",
                "user_by_text",
                "conversation_by_id",
                "conversation_by_time",
                "conversation_by_text",
                "message_by_id",
                "message_by_time",
                "message_by_text",
            )
        }

    # ==================== USERS ====================

    def add_user(self, name: str, password: str) -> User:
        """
        Create a user, register its credentials and checkpoint them.

        Raises:
            DomainValidationError: empty name
            DuplicateNameError: name already taken (ignoring case)
            GenerationExhaustedError: no identifiers left
            CheckpointError: user committed in memory, checkpoint failed
        """
        if not name or not name.strip():
            raise DomainValidationError("User name cannot be empty")

        with self._lock:
            self._check_new_name(name)
        record = self._vault.derive(name, password)

        with self._lock:
            # a concurrent add may have taken the name while we hashed
            self._check_new_name(name)
            generation = self._generations.make()
            user = User(id=self._ids.make(), name=name, creation=Timestamp.now())
            self._vault.restore(record)
            self._insert_user(user)
            self._user_generation = generation

        logger.info(f"[Model] Added user {user.name} {user.id}")
        self._checkpoint(user, record)
        return user

    def _check_new_name(self, name: str) -> None:
        if self._user_by_text.first(name) is not None or name in self._vault:
            raise DuplicateNameError(name)

    def _insert_user(self, user: User) -> None:
        self._user_by_id.insert(user.id, user)
        self._user_by_time.insert(user.creation, user)
        self._user_by_text.insert(user.name, user)

    def _checkpoint(self, user: User, record: CredentialRecord) -> None:
        document = CredentialDocument(
            username=user.name,
            id=str(user.id),
            creation_ms=user.creation.in_ms(),
            password_hash=record.password_hash,
            salt=record.salt,
        )
        try:
            self._store.save(document.model_dump())
        except PersistenceError as e:
            logger.warning(f"[Model] Checkpoint failed for {user.name}: {e}")
            raise CheckpointError(user, e) from e

    def match_password(self, name: str, attempt: str) -> bool:
        """Hashes `attempt` without holding the model lock."""
        return self._vault.match_password(name, attempt)

    def user_generation(self) -> Identifier:
        with self._lock:
            return self._user_generation

    def user_by_id(self) -> IndexReader[Identifier, User]:
        return self._readers["user_by_id"]

    def user_by_time(self) -> IndexReader[Timestamp, User]:
        return self._readers["user_by_time"]

    def user_by_text(self) -> IndexReader[str, User]:
        return self._readers["user_by_text"]

    # ==================== CONVERSATIONS ====================

    def new_id(self) -> Identifier:
        """Mint an identifier for a conversation or message."""
        with self._lock:
            return self._ids.make()

    def add_conversation(self, conversation: Conversation) -> None:
        with self._lock:
            self._conversation_by_id.insert(conversation.id, conversation)
            self._conversation_by_time.insert(conversation.creation, conversation)
            self._conversation_by_text.insert(conversation.title, conversation)

    def conversation_by_id(self) -> IndexReader[Identifier, Conversation]:
        return self._readers["conversation_by_id"]

    def conversation_by_time(self) -> IndexReader[Timestamp, Conversation]:
        return self._readers["conversation_by_time"]

    def conversation_by_text(self) -> IndexReader[str, Conversation]:
        return self._readers["conversation_by_text"]

    # ==================== MESSAGES ====================

    def add_message(self, message: Message) -> None:
        with self._lock:
            self._message_by_id.insert(message.id, message)
            self._message_by_time.insert(message.creation, message)
            self._message_by_text.insert(message.content, message)

    def message_by_id(self) -> IndexReader[Identifier, Message]:
        return self._readers["message_by_id"]

    def message_by_time(self) -> IndexReader[Timestamp, Message]:
        return self._readers["message_by_time"]

    def message_by_text(self) -> IndexReader[str, Message]:
        return self._readers["message_by_text"]

    # ==================== RESTORE ====================

    def restore_from_persistence(self) -> int:
        """
        Rebuild users and credentials from every checkpointed document.

        Unparseable or duplicate documents are logged and skipped. A store
        outage (PersistenceError from load_all) propagates.

        Returns:
            Number of users restored
        """
        documents = self._store.load_all()
        restored = 0

        with self._lock:
            generation = self._generations.make() if documents else None
            for raw in documents:
                try:
                    document = CredentialDocument.model_validate(raw)
                    user = User(
                        id=Identifier.parse(document.id),
                        name=document.username,
                        creation=Timestamp.from_ms(document.creation_ms),
                    )
                    record = CredentialRecord(
                        username=document.username,
                        salt=document.salt,
                        password_hash=document.password_hash,
                    )
                except (ValidationError, ValueError) as e:
                    logger.warning(f"[Model] Skipping unparseable credential record: {e}")
                    continue

                if (
                    self._user_by_id.first(user.id) is not None
                    or self._user_by_text.first(user.name) is not None
                ):
                    logger.warning(f"[Model] Skipping duplicate user {user.name} {user.id}")
                    continue

                try:
                    self._vault.restore(record)
                except (DomainValidationError, ValueError) as e:
                    logger.warning(f"[Model] Skipping credentials for {user.name}: {e}")
                    continue

                self._insert_user(user)
                self._ids.reserve(user.id)
                restored += 1

            if restored:
                self._user_generation = generation

        logger.info(f"[Model] Restored {restored} of {len(documents)} users")
        return restored
