# chirpy/services/auth/service.py
from __future__ import annotations

import hmac
import logging

from chirpy.infra.jwt import parse_bearer_header
from chirpy.services._shared.base import BaseService, ServiceContext
from chirpy.services._shared.errors import AuthError, AuthFailure
from chirpy.services._shared.ports import ACCESS_SCOPE, REFRESH_SCOPE, TokenProvider
from chirpy.services.auth.dto import AccessTokenOut, LoginIn, RevokedTokenOut, SessionOut
from chirpy.services.identity import IdentityService
from chirpy.services.tokens import RefreshTokenService
from chirpy.storage import JSONDocumentStore

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Session lifecycle service (login / refresh / revoke).

    Tokens are issued and verified through a pluggable :class:`TokenProvider`;
    refresh tokens are additionally checked against the server-side revocation
    table kept by :class:`RefreshTokenService`.
    """

    def __init__(
        self,
        *,
        store: JSONDocumentStore,
        token_provider: TokenProvider,
        webhook_api_key: str = "",
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param store: Document store shared by the whole process.
        :param token_provider: Adapter for issuing/verifying JWTs.
        :param webhook_api_key: Shared key expected from the billing webhook.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(store=store, ctx=ctx)
        self.tokens = token_provider
        self.webhook_api_key = webhook_api_key
        self.identity = IdentityService(store=store, ctx=self.ctx)
        self.refresh_tokens = RefreshTokenService(store=store, ctx=self.ctx)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> SessionOut:
        """
        Authenticate credentials and open a session.

        The refresh token is saved before anything is returned, so a session
        handed to the caller is always refreshable.

        :param dto: Login input.
        :returns: User data plus access and refresh tokens.
        :raises AuthError: ``INVALID_CREDENTIALS`` on any mismatch.
        :raises StorageError: If the refresh token could not be saved.
        """
        user = self.identity.authenticate(dto.email, dto.password)

        access = self.tokens.issue(user.id, ACCESS_SCOPE)
        refresh = self.tokens.issue(user.id, REFRESH_SCOPE)
        self.refresh_tokens.save(refresh)

        log.info("auth.login", extra={"user_id": user.id})
        return SessionOut(user=user, access_token=access, refresh_token=refresh)

    # ------------------------------------------------------------------ #
    # Refresh / revoke
    # ------------------------------------------------------------------ #

    def refresh(self, authorization: str | None) -> AccessTokenOut:
        """
        Mint a new access token from a refresh token.

        A well-formed, unexpired refresh token is still rejected when it was
        never saved or has been revoked.

        :param authorization: Raw ``Authorization`` header value.
        :raises AuthError: On any header, token or revocation failure.
        """
        token = parse_bearer_header(authorization)
        user_id = self.tokens.verify(token, REFRESH_SCOPE)
        if not self.refresh_tokens.check(token):
            raise AuthError(AuthFailure.REVOKED_TOKEN)
        return AccessTokenOut(access_token=self.tokens.issue(user_id, ACCESS_SCOPE))

    def revoke(self, authorization: str | None) -> RevokedTokenOut:
        """
        Revoke the presented refresh token.

        No existence check; revoking twice or revoking an unsaved token succeeds.

        :param authorization: Raw ``Authorization`` header value.
        :raises AuthError: If the header or token is invalid.
        """
        token = parse_bearer_header(authorization)
        user_id = self.tokens.verify(token, REFRESH_SCOPE)
        self.refresh_tokens.revoke(token)
        log.info("auth.revoke", extra={"user_id": user_id})
        return RevokedTokenOut(revoked_token=token)

    # ------------------------------------------------------------------ #
    # Guards used by the delivery layer
    # ------------------------------------------------------------------ #

    def authenticate_access(self, authorization: str | None) -> int:
        """
        Resolve the caller's user id from an access token.

        Refresh tokens are rejected here (``WRONG_SCOPE``).
        """
        token = parse_bearer_header(authorization)
        return self.tokens.verify(token, ACCESS_SCOPE)

    def verify_webhook_key(self, authorization: str | None) -> None:
        """
        Check the billing webhook's ``Authorization: ApiKey <key>`` header.

        :raises AuthError: ``INVALID_API_KEY`` if no key is configured or the
            presented key differs.
        """
        presented = parse_bearer_header(authorization)
        expected = self.webhook_api_key
        if not expected or not hmac.compare_digest(presented.encode(), expected.encode()):
            raise AuthError(AuthFailure.INVALID_API_KEY)
