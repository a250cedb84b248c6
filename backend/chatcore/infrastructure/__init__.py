"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: CredentialStore implementations (Redis, in-memory)
- security/: Password hashing (CredentialVault)
"""
