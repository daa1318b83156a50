"""JWT token utilities.

Access tokens are minted by the hosted store's auth service. The ``sub``
claim is the user's profile ID.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from skillsphere.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    exp: datetime
    email: str | None = None
    role: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a token shaped like the store's access tokens.

    Used by local tooling and tests; production tokens come from the store.

    Args:
        user_id: Profile ID (becomes ``sub``)
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
