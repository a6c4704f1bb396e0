"""Token de provedor APNs (JWT ES256 assinado localmente)."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from app.infra.credentials.cache import DEFAULT_RENEWAL_MARGIN, CredentialCache
from app.infra.crypto.constants import JWT_ALG_ES256
from app.infra.crypto.jwt import encode_signed_jwt
from app.infra.crypto.keys import load_ec_private_key

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import ec

    from app.protocols.clock import ClockProtocol

logger = logging.getLogger(__name__)

# APNs aceita tokens com até 60 min; renovamos antes disso.
APNS_TOKEN_LIFETIME = timedelta(minutes=50)


class ApnsTokenProvider:
    """Gera e cacheia o JWT `{alg, kid}` / `{iss, iat}` do APNs."""

    def __init__(
        self,
        *,
        key_id: str,
        team_id: str,
        private_key_pem: str,
        clock: ClockProtocol | None = None,
        lifetime: timedelta = APNS_TOKEN_LIFETIME,
        margin: timedelta = DEFAULT_RENEWAL_MARGIN,
    ) -> None:
        self._key_id = key_id
        self._team_id = team_id
        self._private_key_pem = private_key_pem
        self._lifetime = lifetime
        self._cache = CredentialCache(clock=clock, margin=margin)
        self._private_key: ec.EllipticCurvePrivateKey | None = None

    @property
    def cache(self) -> CredentialCache:
        return self._cache

    def get_token(self) -> str:
        """Token em cache ou um novo, assinado agora.

        Raises:
            CredentialError: Chave inválida ou falha de assinatura.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        if self._private_key is None:
            self._private_key = load_ec_private_key(self._private_key_pem)

        now = self._cache.clock.now()
        token = encode_signed_jwt(
            {"alg": JWT_ALG_ES256, "kid": self._key_id},
            {"iss": self._team_id, "iat": int(now.timestamp())},
            self._private_key,
        )
        self._cache.replace(token, now + self._lifetime)
        logger.debug("apns_token_generated", extra={"key_id": self._key_id})
        return token

    def clear(self) -> None:
        self._cache.clear()


__all__ = ["APNS_TOKEN_LIFETIME", "ApnsTokenProvider"]
