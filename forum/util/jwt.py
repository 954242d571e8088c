"""Access token encoding and verification."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: UUID
    username: str
    role: str = "user"
    exp: datetime


class JWTError(Exception):
    """Token is malformed, badly signed or expired."""


def create_token(
    user_id: str, username: str, role: str, settings: AuthSettings
) -> str:
    """Sign an access token valid for `settings.jwt_expiry_days`.

    The forum normally only verifies tokens; signing exists for tooling and
    tests that need to act as a given member.
    """
    expires = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "username": username, "role": role, "exp": expires}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired or invalid
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as exc:
        raise JWTError("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise JWTError("Invalid token") from exc

    # A correctly signed token can still carry claims this API does not accept
    try:
        return TokenPayload(**claims)
    except ValidationError as exc:
        raise JWTError("Token claims are invalid") from exc
