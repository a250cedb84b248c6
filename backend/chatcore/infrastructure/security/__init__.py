"""
Security - Password hashing and verification.
"""

from chatcore.infrastructure.security.credential_vault import (
    CredentialRecord,
    CredentialVault,
)

__all__ = [
    "CredentialRecord",
    "CredentialVault",
]
