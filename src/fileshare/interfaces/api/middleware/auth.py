"""Auth middleware - resolves the acting principal from the bearer token."""

import logging
from dataclasses import dataclass

import falcon.asgi

logger = logging.getLogger(__name__)


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    req.context.user is None when no principal can be resolved; there is no
    anonymous fallback. With trust_bearer_subject and no Keycloak provider the
    token itself is taken as the principal id (development setups).
    """

    def __init__(self, keycloak_provider=None, trust_bearer_subject: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_bearer_subject = trust_bearer_subject

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            return

        token = auth[7:].strip()
        if not token:
            return

        if self._keycloak:
            user = self._keycloak.decode_token(token)
            if user:
                req.context.user = RequestUser(
                    user_id=user.user_id,
                    email=user.email,
                    username=user.username,
                )
            else:
                logger.debug("Bearer token rejected by Keycloak")
            return

        if self._trust_bearer_subject:
            req.context.user = RequestUser(user_id=token, username=f"user_{token}")
