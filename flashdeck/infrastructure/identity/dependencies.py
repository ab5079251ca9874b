"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flashdeck.domain.identity.entities import AuthContext
from flashdeck.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> AuthContext:
    """
    Build the caller's context from the bearer token.

    A missing or invalid token yields an anonymous context; operations that
    need an identity reject it themselves.
    """
    if credentials is None:
        return AuthContext.anonymous()
    return verify_access_token(credentials.credentials) or AuthContext.anonymous()


CurrentAuthContext = Annotated[AuthContext, Depends(get_auth_context)]
