"""JWT token utilities.

Access tokens are issued by the identity provider; ``create_token`` mirrors
its claim layout so tests and local tooling can mint compatible tokens.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field

from study.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str = Field(validation_alias="sub")
    email: str | None = None
    role: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a JWT token in the identity provider's format.

    Args:
        user_id: User ID (becomes the ``sub`` claim)
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
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_in,
    }

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
        return TokenPayload.model_validate(payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValueError:
        # Signature checked out but claims are malformed (e.g. no subject)
        raise JWTError("Invalid token payload")
