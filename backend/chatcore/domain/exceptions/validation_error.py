"""
DomainValidationError - Raised when a business rule is violated.
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateNameError(DomainValidationError):
    """A user with the same name (ignoring case) already exists."""

    def __init__(self, name: str):
        super().__init__(f"User name already taken: {name}")
        self.name = name


class CredentialExistsError(DomainValidationError):
    """Credentials are already registered for this username."""

    def __init__(self, username: str):
        super().__init__(f"Credentials already registered for: {username}")
        self.username = username
