# builder_server/core/auth.py

"""
Caller identity.

Clients identify themselves by sending the user id they received from
/api/login on every request. Handlers only ever see an ``AuthContext``,
so the way it is resolved can change without touching them.
"""

from dataclasses import dataclass
from builder_server.core.errors import AuthenticationError


NOT_AUTHENTICATED = "User not authenticated"


@dataclass(frozen=True)
class AuthContext:
    user_id: str


def require_user(user_id: str | None) -> AuthContext:
    # Presence only; the id is not checked against the users table.
    if not user_id:
        raise AuthenticationError(NOT_AUTHENTICATED)
    return AuthContext(user_id=user_id)
