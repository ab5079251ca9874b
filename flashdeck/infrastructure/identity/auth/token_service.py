"""Bearer token creation and verification."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

import jwt
import structlog
from jwt import InvalidTokenError

from flashdeck.config import get_settings
from flashdeck.domain.identity.entities import AuthContext

logger = structlog.get_logger(__name__)

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES


def create_access_token(identity: str, entitlements: Iterable[str] = ()) -> str:
    """
    Create an access token the way the identity provider issues them.

    Used by tests and local tooling; production tokens come from the provider.
    """
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": identity,
        "entitlements": sorted(set(entitlements)),
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> AuthContext | None:
    """Verify an access token and return the caller's context if valid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError as e:
        logger.info("access_token_rejected", reason=str(e))
        return None

    if payload.get("type", "access") != "access":
        return None
    identity = payload.get("sub")
    if not isinstance(identity, str) or not identity:
        return None

    entitlements = payload.get("entitlements") or []
    if not isinstance(entitlements, list):
        return None
    return AuthContext(
        identity=identity,
        entitlements=frozenset(str(name) for name in entitlements),
    )
