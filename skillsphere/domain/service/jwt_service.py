"""JWT token domain service."""

from uuid import UUID

import logfire

from skillsphere.config import AuthSettings
from skillsphere.domain.value import UserId
from skillsphere.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying store-issued access tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id(self, token: str) -> UserId:
        """Verify a token and return the user it belongs to.

        Raises:
            JWTError: If the token is invalid or its subject is not a UUID
        """
        payload = self.verify_token(token)
        try:
            return UserId(UUID(payload.sub))
        except ValueError:
            raise JWTError("Invalid token subject")
