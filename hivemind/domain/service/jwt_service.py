"""JWT token domain service."""

from uuid import UUID

import logfire

from hivemind.config import AuthSettings
from hivemind.domain.value import AccountId, CallerIdentity, Username
from hivemind.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service resolving caller identity from JWT tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: str, username: str) -> str:
        """Create JWT token for an account.

        Args:
            account_id: Account ID
            username: Account username

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_token", account_id=account_id, username=username
        ):
            token = create_token(account_id, username, self.auth_settings)
            logfire.info("JWT token created", account_id=account_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", account_id=payload.account_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_identity_from_token(self, token: str | None) -> CallerIdentity | None:
        """Resolve the caller's identity without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller identity if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return CallerIdentity(
                account_id=AccountId(UUID(payload.account_id)),
                username=Username(payload.username),
            )
        except (JWTError, ValueError) as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
