"""Primitivas HMAC-SHA256 / SHA-256 usadas na assinatura de requisições."""

from __future__ import annotations

import hashlib
import hmac


def hmac_sha256(key: bytes, message: str) -> bytes:
    """HMAC-SHA256 de `message` (UTF-8) com `key`."""
    return hmac.new(key, message.encode("utf-8"), hashlib.sha256).digest()


def sha256_hex(payload: bytes) -> str:
    """Hash SHA-256 em hexadecimal minúsculo."""
    return hashlib.sha256(payload).hexdigest()
