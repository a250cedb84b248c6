"""
Application factory.
Sets up logging, builds the DI container and restores checkpointed users.
"""

import logging
from typing import Optional

from dishka import Container

from chatcore.application.entity_model import EntityModel
from chatcore.config.logging_config import setup_logging
from chatcore.config.settings import get_config
from chatcore.domain.exceptions import PersistenceError
from chatcore.setup.ioc import create_container

logger = logging.getLogger(__name__)


def create_app(config_name: Optional[str] = None, backend: Optional[str] = None) -> Container:
    """
    Build a ready-to-serve container.

    Args:
        config_name: Environment name ('development', 'production', 'testing')
        backend: Credential backend override ('redis' or 'memory')

    Returns:
        The dishka container; the caller closes it on shutdown
    """
    config = get_config(config_name)
    setup_logging(config.LOG_LEVEL, config.LOG_FILE, config.LOG_FORMAT)

    container = create_container(backend, config)
    model = container.get(EntityModel)

    # Restore is best effort: an unreachable store leaves an empty directory
    try:
        model.restore_from_persistence()
    except PersistenceError as e:
        logger.error(f"[App] Credential restore failed, starting empty: {e}")

    return container
