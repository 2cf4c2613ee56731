"""Access token domain service."""

import logfire

from study.config import AuthSettings
from study.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies access tokens minted by the identity provider."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def decode(self, token: str) -> TokenPayload:
        """Decode a token, raising JWTError when it does not verify."""
        return verify_token(token, self.auth_settings)

    def authenticate(self, token: str | None) -> str | None:
        """Resolve a token to the caller's user ID.

        Missing, expired and forged tokens all resolve to None; callers decide
        whether anonymity is acceptable.
        """
        if not token:
            return None

        try:
            payload = self.decode(token)
        except JWTError as e:
            logfire.info("Token rejected", reason=str(e))
            return None

        logfire.debug("Token accepted", user_id=payload.user_id)
        return payload.user_id
