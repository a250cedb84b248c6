"""
DTOs - Data Transfer Objects

- credential.py → CredentialDocument (checkpoint schema shared with stores)

Note: These are different from domain entities.
DTOs cross the persistence boundary, entities carry business logic.
"""

from chatcore.application.dto.credential import CredentialDocument

__all__ = [
    "CredentialDocument",
]
