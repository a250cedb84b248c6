"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Credential persistence: "redis" or "memory"
    CREDENTIAL_BACKEND = os.getenv("CREDENTIAL_BACKEND", "redis").lower()

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))
    REDIS_CREDENTIALS_KEY: str = os.getenv("REDIS_CREDENTIALS_KEY", "chat:users")

    # Identifiers
    # Every entity id is minted under this server root: [UUID:<SERVER_ID>.<n>]
    SERVER_ID: int = int(os.getenv("SERVER_ID", "1"))
    ID_LOW: int = int(os.getenv("ID_LOW", "1"))
    ID_HIGH: int = int(os.getenv("ID_HIGH", str(2**31 - 1)))

    # Password hashing (scrypt)
    SCRYPT_N: int = int(os.getenv("SCRYPT_N", str(2**14)))
    SCRYPT_R: int = int(os.getenv("SCRYPT_R", "8"))
    SCRYPT_P: int = int(os.getenv("SCRYPT_P", "1"))
    SALT_BYTES: int = int(os.getenv("SALT_BYTES", "16"))


class DevelopmentConfig(Config):
    """Development configuration"""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing configuration"""

    CREDENTIAL_BACKEND = "memory"
    # Cheap KDF so the suite stays fast
    SCRYPT_N = 2**4


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("CHATCORE_ENV", "development")
    return config.get(env, config["default"])
