"""User-related queries."""

from chatcore.application.queries.users.get_users_excluding import (
    GetUsersExcludingQuery,
    GetUsersExcludingHandler,
)
from chatcore.application.queries.users.match_password import (
    MatchPasswordQuery,
    MatchPasswordHandler,
)
from chatcore.application.queries.users.get_user_generation import (
    GetUserGenerationQuery,
    GetUserGenerationHandler,
)

__all__ = [
    "GetUsersExcludingQuery",
    "GetUsersExcludingHandler",
    "MatchPasswordQuery",
    "MatchPasswordHandler",
    "GetUserGenerationQuery",
    "GetUserGenerationHandler",
]
