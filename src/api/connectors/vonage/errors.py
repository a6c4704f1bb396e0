"""Erros do Vonage SMS API.

O envio costuma responder 200 mesmo quando a mensagem é recusada: a
falha vem em `messages[0].status` diferente de "0".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.connectors.common import first_item
from app.services.error_normalizer import ProviderErrorDetails, as_text
from utils.errors import ConnectorError

VONAGE_SUCCESS_STATUS = "0"


def parse_vonage_error(body: Any) -> ProviderErrorDetails:
    """Erro HTTP: `messages[0]` ou o formato `{title, detail}`."""
    if not isinstance(body, Mapping):
        return ProviderErrorDetails()
    message = first_item(body.get("messages"))
    if isinstance(message, Mapping):
        return ProviderErrorDetails(
            code=as_text(message.get("status")),
            message=as_text(message.get("error-text")),
        )
    return ProviderErrorDetails(
        code=as_text(body.get("type")),
        message=as_text(body.get("detail") or body.get("title")),
    )


def rejected_message_error(message: Mapping[str, Any]) -> ConnectorError:
    """Mensagem recusada no corpo de uma resposta 200."""
    error_text = as_text(message.get("error-text"))
    return ConnectorError(
        error_text or "Unknown Vonage error",
        status_code=400,
        provider_code=as_text(message.get("status")),
        provider_message=error_text,
    )
