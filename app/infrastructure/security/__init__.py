"""Security: JWT verification of the acting user."""

from app.infrastructure.security.jwt import (
    create_access_token,
    get_user_id_from_token,
    verify_token,
)

__all__ = [
    "create_access_token",
    "get_user_id_from_token",
    "verify_token",
]
