"""Access token OAuth2 do Google via troca de JWT (service account).

Fluxo: assina localmente um JWT RS256 com o e-mail da service account e
o escopo desejado, troca no endpoint de token e cacheia o access token
pela validade declarada pelo servidor (`expires_in`).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import TYPE_CHECKING, Any

import httpx

from app.infra.credentials.cache import DEFAULT_RENEWAL_MARGIN, CredentialCache
from app.infra.crypto.constants import JWT_ALG_RS256
from app.infra.crypto.jwt import encode_signed_jwt
from app.infra.crypto.keys import load_rsa_private_key
from app.services.error_normalizer import ProviderErrorDetails, as_text, raise_normalized
from utils.errors import CredentialError

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import rsa

    from app.infra.http.client import HttpClient
    from app.protocols.clock import ClockProtocol

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"
FIREBASE_MESSAGING_SCOPE = "https://www.googleapis.com/auth/firebase.messaging"
ASSERTION_LIFETIME_SECONDS = 3600


def parse_google_oauth_error(body: Any) -> ProviderErrorDetails:
    """Extrai `error` / `error_description` do endpoint de token."""
    if not isinstance(body, Mapping):
        return ProviderErrorDetails(message=as_text(body) or None)
    return ProviderErrorDetails(
        code=as_text(body.get("error")),
        message=as_text(body.get("error_description") or body.get("error")),
    )


class GoogleAccessTokenProvider:
    """Troca JWT de service account por access token, com cache."""

    def __init__(
        self,
        *,
        client_email: str,
        private_key_pem: str,
        http_client: HttpClient,
        scope: str = FIREBASE_MESSAGING_SCOPE,
        token_url: str = GOOGLE_TOKEN_URL,
        clock: ClockProtocol | None = None,
        margin: timedelta = DEFAULT_RENEWAL_MARGIN,
    ) -> None:
        self._client_email = client_email
        self._private_key_pem = private_key_pem
        self._http_client = http_client
        self._scope = scope
        self._token_url = token_url
        self._cache = CredentialCache(clock=clock, margin=margin)
        self._private_key: rsa.RSAPrivateKey | None = None

    @property
    def cache(self) -> CredentialCache:
        return self._cache

    def build_assertion(self) -> str:
        """JWT RS256 assinado que será trocado pelo access token."""
        if self._private_key is None:
            self._private_key = load_rsa_private_key(self._private_key_pem)
        issued_at = int(self._cache.clock.now().timestamp())
        return encode_signed_jwt(
            {"alg": JWT_ALG_RS256, "typ": "JWT"},
            {
                "iss": self._client_email,
                "scope": self._scope,
                "aud": self._token_url,
                "iat": issued_at,
                "exp": issued_at + ASSERTION_LIFETIME_SECONDS,
            },
            self._private_key,
        )

    async def get_token(self) -> str:
        """Access token em cache ou recém-trocado.

        Raises:
            CredentialError: Chave inválida ou resposta sem access_token.
            ConnectorError: Endpoint de token recusou a troca.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        assertion = self.build_assertion()
        try:
            response = await self._http_client.post(
                self._token_url,
                data={"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": assertion},
            )
        except httpx.HTTPError as exc:
            logger.warning("google_token_exchange_failed", extra={"error_type": type(exc).__name__})
            raise_normalized(
                exc,
                parser=parse_google_oauth_error,
                fallback_message="Google token exchange failed",
            )

        data = response.json()
        access_token = data.get("access_token") if isinstance(data, Mapping) else None
        if not access_token:
            raise CredentialError("Google token endpoint returned no access_token")

        expires_in = int(data.get("expires_in") or ASSERTION_LIFETIME_SECONDS)
        expires_at = self._cache.clock.now() + timedelta(seconds=expires_in)
        self._cache.replace(access_token, expires_at)
        logger.debug("google_access_token_refreshed", extra={"expires_in": expires_in})
        return access_token

    def clear(self) -> None:
        self._cache.clear()


__all__ = [
    "FIREBASE_MESSAGING_SCOPE",
    "GOOGLE_TOKEN_URL",
    "JWT_BEARER_GRANT_TYPE",
    "GoogleAccessTokenProvider",
    "parse_google_oauth_error",
]
