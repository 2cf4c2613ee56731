"""Request authentication.

Every route except health checks depends on ``CurrentUserId``. The token is
read from the ``Authorization: Bearer`` header, falling back to the
``auth_token`` cookie set by the web client.
"""

from typing import Annotated

from fastapi import Cookie, Depends, Header, HTTPException, Request, status

from study.domain.service import JWTService


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token from the Authorization header, else the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def require_user_id(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
) -> str:
    """Return the authenticated user ID or fail with 401.

    Raises:
        HTTPException: If the token is missing or invalid
    """
    user_id = jwt_service.authenticate(extract_token(authorization, auth_token))
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


async def current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str:
    # Request container is attached by the dishka middleware
    jwt_service = await request.state.dishka_container.get(JWTService)
    return require_user_id(jwt_service, authorization, auth_token)


CurrentUserId = Annotated[str, Depends(current_user_id)]
