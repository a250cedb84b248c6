"""User commands."""

from .create_user import CreateUserCommand, CreateUserHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
]
