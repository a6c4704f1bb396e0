"""Montagem e assinatura de JWT compacto (ES256 / RS256).

Formato: base64url(header) + "." + base64url(claims) + "." +
base64url(assinatura), sem padding. A assinatura é feita sobre os bytes
UTF-8 do token não assinado.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from app.infra.crypto.constants import ES256_COORDINATE_SIZE, JWT_ALG_ES256, JWT_ALG_RS256
from utils.errors import CredentialError


def base64url_encode(raw: bytes) -> str:
    """Base64 URL-safe sem padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def base64url_decode(value: str) -> bytes:
    """Inverso de `base64url_encode` (aceita ausência de padding)."""
    padded = value + ("=" * (-len(value) % 4))
    return base64.urlsafe_b64decode(padded)


def _encode_segment(data: Mapping[str, Any]) -> str:
    return base64url_encode(json.dumps(data, separators=(",", ":")).encode("utf-8"))


def build_unsigned_token(header: Mapping[str, Any], claims: Mapping[str, Any]) -> str:
    """`base64url(header).base64url(claims)`."""
    return f"{_encode_segment(header)}.{_encode_segment(claims)}"


def sign_es256(private_key: ec.EllipticCurvePrivateKey, signing_input: bytes) -> bytes:
    """Assinatura ECDSA P-256/SHA-256 no formato JWS (r || s, 64 bytes).

    A lib devolve DER; o JWS exige os inteiros r e s concatenados com
    tamanho fixo.
    """
    der_signature = private_key.sign(signing_input, ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der_signature)
    return r.to_bytes(ES256_COORDINATE_SIZE, "big") + s.to_bytes(ES256_COORDINATE_SIZE, "big")


def sign_rs256(private_key: rsa.RSAPrivateKey, signing_input: bytes) -> bytes:
    """Assinatura RSASSA-PKCS1-v1_5 com SHA-256."""
    return private_key.sign(signing_input, padding.PKCS1v15(), hashes.SHA256())


def encode_signed_jwt(
    header: Mapping[str, Any],
    claims: Mapping[str, Any],
    private_key: Any,
) -> str:
    """Monta e assina o JWT conforme `header["alg"]`.

    Raises:
        CredentialError: Algoritmo não suportado ou falha de assinatura.
    """
    algorithm = header.get("alg")
    unsigned = build_unsigned_token(header, claims)
    signing_input = unsigned.encode("utf-8")
    try:
        if algorithm == JWT_ALG_ES256:
            signature = sign_es256(private_key, signing_input)
        elif algorithm == JWT_ALG_RS256:
            signature = sign_rs256(private_key, signing_input)
        else:
            raise CredentialError(f"Unsupported JWT algorithm: {algorithm}")
    except (TypeError, ValueError, AttributeError, UnsupportedAlgorithm) as exc:
        raise CredentialError(f"JWT signing failed: {exc}", cause=exc) from exc
    return f"{unsigned}.{base64url_encode(signature)}"
