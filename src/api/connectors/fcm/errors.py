"""Parsing do erro do FCM HTTP v1 (`{"error": {code, message, status}}`)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_fcm_error(body: Any) -> ProviderErrorDetails:
    """Extrai `error.code` / `error.message`."""
    error = body.get("error") if isinstance(body, Mapping) else None
    if not isinstance(error, Mapping):
        return ProviderErrorDetails()
    return ProviderErrorDetails(
        code=as_text(error.get("code")),
        message=as_text(error.get("message")),
    )
