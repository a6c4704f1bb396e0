"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_meta_error(response_data: Any) -> ProviderErrorDetails:
    """Extrai informações de erro do response da Meta.

    Formato: `{"error": {"message", "type", "code", "error_subcode", "fbtrace_id"}}`.

    Args:
        response_data: Corpo JSON (ou texto) da resposta de erro

    Returns:
        ProviderErrorDetails com `code` e `message` (vazios se o corpo
        não seguir o formato da Graph API)
    """
    error_obj = response_data.get("error") if isinstance(response_data, Mapping) else None
    if not isinstance(error_obj, Mapping):
        return ProviderErrorDetails()

    return ProviderErrorDetails(
        code=as_text(error_obj.get("code")),
        message=as_text(error_obj.get("message")),
    )


def meta_error_type(response_data: Any) -> str | None:
    """`error.type` (ex: OAuthException), útil só para logs."""
    error_obj = response_data.get("error") if isinstance(response_data, Mapping) else None
    if not isinstance(error_obj, Mapping):
        return None
    return as_text(error_obj.get("type"))
