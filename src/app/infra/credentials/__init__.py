"""Credenciais de curta duração com cache por conector."""

from .apns_token import APNS_TOKEN_LIFETIME, ApnsTokenProvider
from .cache import DEFAULT_RENEWAL_MARGIN, CredentialCache, CredentialCacheEntry, is_reusable
from .google_oauth import (
    FIREBASE_MESSAGING_SCOPE,
    GOOGLE_TOKEN_URL,
    GoogleAccessTokenProvider,
    parse_google_oauth_error,
)

__all__ = [
    "APNS_TOKEN_LIFETIME",
    "DEFAULT_RENEWAL_MARGIN",
    "FIREBASE_MESSAGING_SCOPE",
    "GOOGLE_TOKEN_URL",
    "ApnsTokenProvider",
    "CredentialCache",
    "CredentialCacheEntry",
    "GoogleAccessTokenProvider",
    "is_reusable",
    "parse_google_oauth_error",
]
