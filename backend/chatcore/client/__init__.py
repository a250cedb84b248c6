"""
CLIENT - Local mirror of the server's user directory and the signed-in session.
"""

from chatcore.client.session_cache import SessionCache, SessionState

__all__ = [
    "SessionCache",
    "SessionState",
]
