"""
Redis Credential Store.

Implements the CredentialStore port on a single Redis HASH:
- Key: Config.REDIS_CREDENTIALS_KEY (default "chat:users")
- Field: username
- Value: JSON document {username, id, creation_ms, password_hash, salt}

One field per username gives exactly one checkpoint per user.

Error Handling:
- redis.RedisError is translated into PersistenceError for the caller
- A field holding invalid JSON is logged and skipped by load_all()
"""

import json
import logging
from typing import Any, Mapping, Optional

from redis import Redis, RedisError

from chatcore.config.settings import Config
from chatcore.domain.exceptions.persistence_error import PersistenceError
from chatcore.domain.ports.credential_store import CredentialStore

logger = logging.getLogger(__name__)


class RedisCredentialStore(CredentialStore):
    def __init__(self, redis: Redis, key: Optional[str] = None):
        self._redis = redis
        self._key = key or Config.REDIS_CREDENTIALS_KEY

    def save(self, document: Mapping[str, Any]) -> None:
        username = document["username"]
        try:
            self._redis.hset(self._key, username, json.dumps(dict(document)))
        except RedisError as e:
            raise PersistenceError(f"Redis write failed for {username}: {e}") from e
        logger.debug(f"[Redis] Checkpointed credentials for {username}")

    def load_all(self) -> list[Mapping[str, Any]]:
        try:
            entries = self._redis.hgetall(self._key)
        except RedisError as e:
            raise PersistenceError(f"Redis read failed for {self._key}: {e}") from e

        documents = []
        for field_name, raw in entries.items():
            try:
                documents.append(json.loads(raw))
            except (TypeError, ValueError) as e:
                logger.warning(f"[Redis] Skipping undecodable entry {field_name}: {e}")
        logger.info(f"[Redis] Loaded {len(documents)} credential documents")
        return documents
