"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from board.domain.error import (
    AuthenticationRequiredError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException a route should raise.

    Validation and any other domain error become 400.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, AuthenticationRequiredError):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_400_BAD_REQUEST

    logfire.warn(
        "Domain error", error=str(error), error_type=type(error).__name__, status=code
    )
    return HTTPException(status_code=code, detail=str(error))
