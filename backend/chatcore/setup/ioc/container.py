"""
Dishka DI Container Setup.

- Registers the model, vault, credential store, handlers and transport
- Maps abstract ports to concrete implementations
- Manages lifecycle (Scope.APP = one per process, Scope.REQUEST = per request)

Flow:
  Container → provides → RedisCredentialStore → to → EntityModel
                                  ↓
                        uses CredentialStore port
  EntityModel → handlers → LocalController / LocalView → SessionCache

The credential store comes from a separate provider so the in-memory
backend never opens a Redis connection.
"""

from collections.abc import Iterable
from typing import Optional

from dishka import Container, Provider, Scope, make_container, provide
from redis import Redis

from chatcore.application.commands.conversations import CreateConversationHandler
from chatcore.application.commands.messages import AddMessageHandler
from chatcore.application.commands.users import CreateUserHandler
from chatcore.application.entity_model import EntityModel
from chatcore.application.queries.conversations import ListConversationsHandler
from chatcore.application.queries.messages import ListMessagesHandler
from chatcore.application.queries.users import (
    GetUserGenerationHandler,
    GetUsersExcludingHandler,
    MatchPasswordHandler,
)
from chatcore.application.transport import LocalController, LocalView
from chatcore.config.settings import Config
from chatcore.domain.ports.credential_store import CredentialStore
from chatcore.domain.ports.transport import Controller, View
from chatcore.domain.value_objects.identifier import Identifier
from chatcore.infrastructure.persistence import (
    InMemoryCredentialStore,
    RedisCredentialStore,
    close_redis_client,
    create_redis_client,
)
from chatcore.infrastructure.security.credential_vault import CredentialVault


class RedisStoreProvider(Provider):
    """Credential store backed by Redis."""

    @provide(scope=Scope.APP)
    def get_redis(self) -> Iterable[Redis]:
        """
        Provide Redis client (singleton, app-scoped).

        - Connected (and pinged) once at first use
        - Closed when the container closes
        """
        client = create_redis_client()
        yield client
        close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_credential_store(self, redis: Redis) -> CredentialStore:
        return RedisCredentialStore(redis)


class MemoryStoreProvider(Provider):
    """Credential store kept in process memory."""

    @provide(scope=Scope.APP)
    def get_credential_store(self) -> CredentialStore:
        return InMemoryCredentialStore()


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== CORE ====================

    @provide(scope=Scope.APP)
    def get_vault(self) -> CredentialVault:
        return CredentialVault(
            n=self._config.SCRYPT_N,
            r=self._config.SCRYPT_R,
            p=self._config.SCRYPT_P,
            salt_bytes=self._config.SALT_BYTES,
        )

    @provide(scope=Scope.APP)
    def get_model(
        self, credential_store: CredentialStore, vault: CredentialVault
    ) -> EntityModel:
        """
        Provide the EntityModel (singleton, app-scoped).

        - One model per process; every request shares its indices
        - The credential store is injected, never looked up globally
        """
        return EntityModel(
            credential_store,
            vault,
            server_id=Identifier(self._config.SERVER_ID),
            id_low=self._config.ID_LOW,
            id_high=self._config.ID_HIGH,
        )

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_user_handler(self, model: EntityModel) -> CreateUserHandler:
        return CreateUserHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_create_conversation_handler(
        self, model: EntityModel
    ) -> CreateConversationHandler:
        return CreateConversationHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_add_message_handler(self, model: EntityModel) -> AddMessageHandler:
        return AddMessageHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_users_excluding_handler(self, model: EntityModel) -> GetUsersExcludingHandler:
        return GetUsersExcludingHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_match_password_handler(self, model: EntityModel) -> MatchPasswordHandler:
        return MatchPasswordHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_user_generation_handler(self, model: EntityModel) -> GetUserGenerationHandler:
        return GetUserGenerationHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, model: EntityModel
    ) -> ListConversationsHandler:
        return ListConversationsHandler(model)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(self, model: EntityModel) -> ListMessagesHandler:
        return ListMessagesHandler(model)

    # ==================== TRANSPORT ====================

    @provide(scope=Scope.REQUEST)
    def get_controller(
        self,
        create_user: CreateUserHandler,
        create_conversation: CreateConversationHandler,
        add_message: AddMessageHandler,
    ) -> Controller:
        """
        Provide the Controller port.

        - Return type is ABSTRACT (Controller)
        - Implementation is CONCRETE (LocalController)
        """
        return LocalController(create_user, create_conversation, add_message)

    @provide(scope=Scope.REQUEST)
    def get_view(
        self,
        users_excluding: GetUsersExcludingHandler,
        match_password: MatchPasswordHandler,
        user_generation: GetUserGenerationHandler,
        list_conversations: ListConversationsHandler,
        list_messages: ListMessagesHandler,
    ) -> View:
        return LocalView(
            users_excluding,
            match_password,
            user_generation,
            list_conversations,
            list_messages,
        )


def create_container(
    backend: Optional[str] = None, config: type[Config] = Config
) -> Container:
    """
    Create and configure the DI container.

    Args:
        backend: "redis" or "memory", defaults to config.CREDENTIAL_BACKEND
        config: Config class to read settings from

    - Call this ONCE at app startup
    """
    backend = (backend or config.CREDENTIAL_BACKEND).lower()
    if backend == "redis":
        store_provider: Provider = RedisStoreProvider()
    elif backend == "memory":
        store_provider = MemoryStoreProvider()
    else:
        raise ValueError(f"Unknown credential backend: {backend}")
    return make_container(AppProvider(config), store_provider)
