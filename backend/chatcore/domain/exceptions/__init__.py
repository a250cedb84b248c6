"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and translated by the
application layer into "no result" answers for the transport.
"""

from chatcore.domain.exceptions.validation_error import (
    DomainValidationError,
    DuplicateNameError,
    CredentialExistsError,
)
from chatcore.domain.exceptions.generation_exhausted import GenerationExhaustedError
from chatcore.domain.exceptions.persistence_error import (
    PersistenceError,
    CheckpointError,
)

__all__ = [
    "DomainValidationError",
    "DuplicateNameError",
    "CredentialExistsError",
    "GenerationExhaustedError",
    "PersistenceError",
    "CheckpointError",
]
