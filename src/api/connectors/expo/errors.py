"""Parsing de erros do Expo push service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.connectors.common import first_item
from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_expo_error(body: Any) -> ProviderErrorDetails:
    """Erro de requisição: `{"errors": [{code, message}]}`."""
    error = first_item(body.get("errors")) if isinstance(body, Mapping) else None
    if not isinstance(error, Mapping):
        return ProviderErrorDetails()
    return ProviderErrorDetails(
        code=as_text(error.get("code")),
        message=as_text(error.get("message")),
    )


def ticket_failure_reason(ticket: Mapping[str, Any]) -> str:
    """Razão de um ticket com `status: "error"`."""
    details = ticket.get("details")
    detail_error = details.get("error") if isinstance(details, Mapping) else None
    return ticket.get("message") or detail_error or "Expo push failed"
