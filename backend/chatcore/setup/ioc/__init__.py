from chatcore.setup.ioc.container import (
    AppProvider,
    MemoryStoreProvider,
    RedisStoreProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "MemoryStoreProvider",
    "RedisStoreProvider",
    "create_container",
]
