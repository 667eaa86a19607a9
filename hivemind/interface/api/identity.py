"""Caller identity resolution for routes."""

from fastapi import HTTPException, status

from hivemind.domain.service import JWTService
from hivemind.domain.value import CallerIdentity


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def require_caller(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    action: str,
) -> CallerIdentity:
    """Resolve the caller or abort the request.

    The cookie wins when both the cookie and the header are present.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        authorization: Authorization header value
        action: What the caller was trying to do, for the error message

    Returns:
        Identity of the caller

    Raises:
        HTTPException: 401 if no valid token was presented
    """
    identity = jwt_service.get_identity_from_token(
        auth_token or bearer_token(authorization)
    )
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return identity
