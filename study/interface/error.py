"""Interface layer error mapping."""

import logfire
from fastapi import HTTPException, status

from study.adapter.error import StorageError
from study.domain.error import (
    InvalidUploadError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_error(error: Exception, action: str) -> HTTPException:
    """Translate a domain or adapter error into an HTTP error.

    Args:
        error: Error raised by a use case
        action: What the request tried to do, for logs

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action} failed - not authorized", error=str(error))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to modify this resource",
        )
    if isinstance(error, InvalidUploadError):
        logfire.warn(f"{action} failed - upload rejected", error=str(error))
        code = (
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
            if error.too_large
            else status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
        )
        return HTTPException(status_code=code, detail=error.reason)
    if isinstance(error, StorageError):
        logfire.error(f"{action} failed - storage error", error=str(error))
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="File storage is unavailable",
        )
    if isinstance(error, ValueError):
        logfire.warn(f"{action} failed - invalid request", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"Unexpected error: {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed: {action}",
    )
