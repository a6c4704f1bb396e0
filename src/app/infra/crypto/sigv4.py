"""AWS Signature Version 4 (assinatura por requisição).

Sem estado: cada requisição gera nova assinatura a partir da hora atual,
então não existe nada a cachear. Usado pelos conectores SES e SNS.

Derivação:
1. canonical request (método, URI, query, headers, signed headers, hash do body)
2. string to sign (algoritmo, data, escopo, hash do canonical request)
3. chave de assinatura: kSecret -> kDate -> kRegion -> kService -> kSigning
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from urllib.parse import parse_qsl, quote, urlsplit

from app.infra.crypto.constants import AWS_SIGV4_ALGORITHM, AWS_SIGV4_TERMINATOR
from app.infra.crypto.signature import hmac_sha256, sha256_hex

_AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"
_DATE_STAMP_FORMAT = "%Y%m%d"
_UNRESERVED = "-_.~"


def _uri_encode(value: str, *, keep_slash: bool = False) -> str:
    safe = _UNRESERVED + ("/" if keep_slash else "")
    return quote(value, safe=safe)


def _canonical_query(query: str) -> str:
    pairs = parse_qsl(query, keep_blank_values=True)
    encoded = sorted((_uri_encode(key), _uri_encode(value)) for key, value in pairs)
    return "&".join(f"{key}={value}" for key, value in encoded)


def _normalize_header_value(value: str) -> str:
    return " ".join(value.strip().split())


def derive_signing_key(secret_access_key: str, date_stamp: str, region: str, service: str) -> bytes:
    """Cadeia HMAC kSecret -> kDate -> kRegion -> kService -> kSigning."""
    k_date = hmac_sha256(f"AWS4{secret_access_key}".encode("utf-8"), date_stamp)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    return hmac_sha256(k_service, AWS_SIGV4_TERMINATOR)


def sign_aws_request(
    *,
    method: str,
    url: str,
    region: str,
    service: str,
    access_key_id: str,
    secret_access_key: str,
    session_token: str | None = None,
    headers: Mapping[str, str] | None = None,
    body: bytes = b"",
    now: datetime | None = None,
) -> dict[str, str]:
    """Assina uma requisição e devolve os headers a enviar.

    Args:
        method: Método HTTP.
        url: URL completa (query incluída).
        region: Região AWS (ex: "us-east-1").
        service: Nome do serviço no escopo (ex: "ses", "sns").
        access_key_id: Access key.
        secret_access_key: Secret key.
        session_token: Token de sessão STS (opcional).
        headers: Headers extras que também entram na assinatura.
        body: Corpo exato que será enviado.
        now: Instante da assinatura (UTC); padrão é a hora atual.

    Returns:
        Headers de entrada + Host, X-Amz-Date, X-Amz-Security-Token
        (quando houver) e Authorization.
    """
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    amz_date = moment.strftime(_AMZ_DATE_FORMAT)
    date_stamp = moment.strftime(_DATE_STAMP_FORMAT)

    parts = urlsplit(url)
    signed: dict[str, str] = dict(headers or {})
    signed["Host"] = parts.netloc
    signed["X-Amz-Date"] = amz_date
    if session_token:
        signed["X-Amz-Security-Token"] = session_token

    canonical_headers_map = {
        name.lower(): _normalize_header_value(value) for name, value in signed.items()
    }
    signed_header_names = sorted(canonical_headers_map)
    canonical_headers = "".join(
        f"{name}:{canonical_headers_map[name]}\n" for name in signed_header_names
    )
    signed_headers = ";".join(signed_header_names)

    canonical_request = "\n".join(
        [
            method.upper(),
            _uri_encode(parts.path or "/", keep_slash=True),
            _canonical_query(parts.query),
            canonical_headers,
            signed_headers,
            sha256_hex(body),
        ]
    )

    scope = f"{date_stamp}/{region}/{service}/{AWS_SIGV4_TERMINATOR}"
    string_to_sign = "\n".join(
        [
            AWS_SIGV4_ALGORITHM,
            amz_date,
            scope,
            sha256_hex(canonical_request.encode("utf-8")),
        ]
    )

    signing_key = derive_signing_key(secret_access_key, date_stamp, region, service)
    signature = hmac_sha256(signing_key, string_to_sign).hex()

    signed["Authorization"] = (
        f"{AWS_SIGV4_ALGORITHM} Credential={access_key_id}/{scope}, "
        f"SignedHeaders={signed_headers}, Signature={signature}"
    )
    return signed


__all__ = ["derive_signing_key", "sign_aws_request"]
