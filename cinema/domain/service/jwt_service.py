"""JWT token domain service."""

from uuid import UUID

import logfire

from cinema.config import AuthSettings
from cinema.domain.value import Actor, UserId, UserRole
from cinema.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, role: UserRole = UserRole.MEMBER, email: str | None = None
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            role: User role
            email: User email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, role.value, email, self.auth_settings)

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
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_actor_from_token(self, token: str | None) -> Actor | None:
        """Resolve the acting identity from a JWT without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Actor if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Actor(
                user_id=UserId(UUID(payload.user_id)),
                role=UserRole(payload.role),
                email=payload.email,
            )
        except (JWTError, ValueError) as e:
            # Invalid token or malformed claims, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
