"""Carregamento de chaves privadas PEM (EC para APNs, RSA para Google)."""

from __future__ import annotations

from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from utils.errors import CredentialError


def _normalize_pem(private_key_pem: str) -> bytes:
    # Chaves vindas de env costumam ter "\n" literal no lugar de quebra de linha.
    return private_key_pem.replace("\\n", "\n").strip().encode("utf-8")


def load_private_key(private_key_pem: str, passphrase: str | None = None) -> Any:
    """Carrega chave privada em formato PEM.

    Args:
        private_key_pem: Chave privada PEM (PKCS#8 ou tradicional).
        passphrase: Senha da chave (opcional).

    Returns:
        Objeto de chave privada da lib cryptography.

    Raises:
        CredentialError: Se a chave for inválida.
    """
    if not private_key_pem or not private_key_pem.strip():
        raise CredentialError("Private key is empty")

    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None
    try:
        return serialization.load_pem_private_key(
            _normalize_pem(private_key_pem),
            password=passphrase_bytes,
        )
    except (ValueError, TypeError) as exc:
        raise CredentialError(f"Invalid private key: {exc}", cause=exc) from exc


def load_ec_private_key(private_key_pem: str) -> ec.EllipticCurvePrivateKey:
    """Carrega chave EC (P-256) exigida pelo ES256."""
    key = load_private_key(private_key_pem)
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise CredentialError("ES256 requires an elliptic-curve private key")
    return key


def load_rsa_private_key(private_key_pem: str) -> rsa.RSAPrivateKey:
    """Carrega chave RSA exigida pelo RS256."""
    key = load_private_key(private_key_pem)
    if not isinstance(key, rsa.RSAPrivateKey):
        raise CredentialError("RS256 requires an RSA private key")
    return key
