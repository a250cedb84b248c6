"""
Redis Client Factory.

Creates the Redis client the credential store checkpoints into.
Socket timeouts bound every call so the chat core never waits on Redis
longer than Config.REDIS_SOCKET_TIMEOUT.
"""

import logging
from typing import Optional

import redis
from redis import Redis
from chatcore.config.settings import Config

logger = logging.getLogger(__name__)


def create_redis_client(url: Optional[str] = None) -> Redis:
    """
    Create Redis client with connection pool.

    Args:
        url: Redis URL, defaults to Config.REDIS_URL

    Returns:
        Redis: Connected Redis client

    Raises:
        redis.ConnectionError: If Redis is not reachable

    Note:
        - Uses connection pooling (automatic with from_url)
        - decode_responses=True for automatic string decoding
        - Tests connection with ping() before returning
    """
    url = url or Config.REDIS_URL
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=Config.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=Config.REDIS_SOCKET_TIMEOUT,
    )

    # Test connection
    client.ping()
    logger.info(f"[Redis] Connected to {url}")

    return client


def close_redis_client(client: Redis) -> None:
    """
    Close Redis client connection.

    Note:
        Should be called on application shutdown.
    """
    if client:
        client.close()
        logger.info("[Redis] Connection closed")
