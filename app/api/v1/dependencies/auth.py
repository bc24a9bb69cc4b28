"""Authentication dependencies: resolve the calling user from the bearer token."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import get_user_id_from_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str | None:
    """Return the user id from a valid bearer token, or None when no token was sent."""
    if credentials is None:
        return None
    try:
        return get_user_id_from_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e


async def get_current_user_id(
    user_id: Annotated[str | None, Depends(get_current_user_id_optional)],
) -> str:
    """Require an authenticated user. Raises AuthenticationException (401) otherwise."""
    if not user_id:
        raise AuthenticationException("Not authenticated")
    return user_id
