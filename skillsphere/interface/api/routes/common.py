"""Helpers shared by route modules."""

from fastapi import HTTPException, status

from skillsphere.application.engine import ErrorKind
from skillsphere.domain.service import JWTService
from skillsphere.util.jwt import JWTError

_STATUS_BY_ERROR = {
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TRANSIENT: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.SUBSCRIPTION: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def authenticate(jwt_service: JWTService, authorization: str | None) -> str:
    """Resolve the caller's user ID from an ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        return str(jwt_service.get_user_id(token))
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


def raise_for_error(error: ErrorKind | None, message: str | None) -> None:
    """Turn a failed engine outcome into the matching HTTP error."""
    raise HTTPException(
        status_code=_STATUS_BY_ERROR.get(error, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=message or "Request failed",
    )
