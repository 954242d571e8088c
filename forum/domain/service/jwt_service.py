"""Caller identification from access tokens."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the member behind an `auth_token` cookie.

    Tokens are issued by the identity service. A token that verifies is
    trusted; its user ID becomes the voter, author or editor of a request.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token rejected", error=str(e))
            raise

    def authenticated_user_id(self, token: str | None) -> str | None:
        """User ID of the caller, or None for anonymous requests.

        A missing, malformed or expired token all count as anonymous.

        Args:
            token: Raw token from the auth cookie, if any

        Returns:
            User ID string, or None
        """
        if not token:
            return None
        try:
            return str(self.verify_token(token).user_id)
        except JWTError:
            return None
