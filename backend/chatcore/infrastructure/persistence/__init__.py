"""
Persistence Layer - CredentialStore implementations.
"""

from chatcore.infrastructure.persistence.redis_client import (
    create_redis_client,
    close_redis_client,
)
from chatcore.infrastructure.persistence.redis_credential_store import (
    RedisCredentialStore,
)
from chatcore.infrastructure.persistence.in_memory_credential_store import (
    InMemoryCredentialStore,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "RedisCredentialStore",
    "InMemoryCredentialStore",
]
