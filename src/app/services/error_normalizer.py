"""Normalização de falhas heterogêneas para `ConnectorError`.

Cada provedor devolve erro num formato próprio; o conector só informa um
`ErrorParser` que sabe ler o corpo da resposta e extrair código/mensagem.
O restante (status HTTP, fallback 500, idempotência) é comum.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

import httpx

from utils.errors import ConnectorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProviderErrorDetails:
    """Código e mensagem extraídos do corpo de erro do provedor."""

    code: str | None = None
    message: str | None = None


ErrorParser = Callable[[Any], ProviderErrorDetails]


def read_error_body(response: httpx.Response) -> Any:
    """Lê o corpo de erro como JSON, caindo para texto cru."""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        return response.text


def normalize_error(
    exc: BaseException,
    *,
    parser: ErrorParser | None = None,
    fallback_message: str = "Unknown connector error",
) -> ConnectorError:
    """Converte qualquer falha capturada em `ConnectorError`.

    - `ConnectorError` já normalizado: devolvido sem alteração
    - resposta HTTP de erro: status da resposta + código/mensagem do parser
    - falha de transporte ou exceção inesperada: status 500
    """
    if isinstance(exc, ConnectorError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        body = read_error_body(exc.response)
        details = _safe_parse(parser, body)
        # str(exc) inclui a URL, que pode carregar tokens (ex: bot do Telegram).
        status_code = exc.response.status_code
        return ConnectorError(
            details.message or f"Request failed with status {status_code}",
            status_code=status_code,
            provider_code=details.code,
            provider_message=details.message,
            cause=exc,
        )

    return ConnectorError(
        str(exc) or fallback_message,
        status_code=500,
        cause=exc,
    )


def raise_normalized(
    exc: BaseException,
    *,
    parser: ErrorParser | None = None,
    fallback_message: str = "Unknown connector error",
) -> NoReturn:
    """Levanta a versão normalizada de `exc` (usar dentro de `except`)."""
    error = normalize_error(exc, parser=parser, fallback_message=fallback_message)
    if error is exc:
        raise error
    raise error from exc


def describe_failure(exc: BaseException, parser: ErrorParser | None = None) -> str:
    """Razão textual de uma falha de destino (usada no fan-out)."""
    error = normalize_error(exc, parser=parser)
    return error.provider_message or error.message or "Unknown error"


def _safe_parse(parser: ErrorParser | None, body: Any) -> ProviderErrorDetails:
    if parser is None:
        return ProviderErrorDetails()
    try:
        return parser(body)
    except (AttributeError, KeyError, IndexError, TypeError, ValueError):
        logger.debug("provider_error_body_unparsed")
        return ProviderErrorDetails()


def as_text(value: Any) -> str | None:
    """Converte código de erro numérico/str para str, preservando None."""
    if value is None:
        return None
    return str(value)


__all__ = [
    "ErrorParser",
    "ProviderErrorDetails",
    "as_text",
    "describe_failure",
    "normalize_error",
    "raise_normalized",
    "read_error_body",
]
