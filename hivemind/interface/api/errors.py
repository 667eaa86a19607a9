"""Domain error to HTTP error mapping."""

from fastapi import HTTPException, status

from hivemind.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    StorageFailureError,
)

# Seconds a client should wait before retrying a failed storage operation
RETRY_AFTER_SECONDS = 1


def to_http_error(error: DomainError, *, read: bool = False) -> HTTPException:
    """Translate a domain error into the HTTP error reported to the caller.

    Missing entities are reported as 400 on mutations, where they are a
    problem with the request, and 404 on reads.

    Args:
        error: Domain error raised by a use case
        read: Whether the failing operation was a read

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND if read else status.HTTP_400_BAD_REQUEST
        return HTTPException(status_code=code, detail=str(error))

    if isinstance(error, NotAuthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, StorageFailureError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(error),
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )

    # Conflicts, validation failures and edits of deleted items
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def bad_request(error: ValueError) -> HTTPException:
    """Malformed identifiers and values rejected while building a request."""
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
