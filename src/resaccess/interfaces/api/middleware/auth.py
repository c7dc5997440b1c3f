"""Auth middleware - resolves the requesting identity for each request."""

import logging

import falcon.asgi

from resaccess.application.use_cases.identity.resolve_identity import IdentityResolver
from resaccess.domain.entities import ANONYMOUS

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.identity.

    No Authorization header means anonymous. A rejected token leaves the
    identity unset so resources answer 401.
    """

    def __init__(self, identity_resolver: IdentityResolver, keycloak_provider=None) -> None:
        self._resolver = identity_resolver
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract identity from Authorization header."""
        auth = req.get_header("Authorization")
        if not auth:
            req.context.identity = ANONYMOUS
            return

        req.context.identity = None
        if not auth.startswith("Bearer ") or not self._keycloak:
            return

        user = self._keycloak.decode_token(auth[7:])
        if not user:
            logger.debug("Rejected bearer token")
            return
        req.context.identity = await self._resolver.resolve(user.subject, user.realm_roles)
