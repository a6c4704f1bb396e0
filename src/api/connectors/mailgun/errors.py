"""Parsing do erro do Mailgun (`{"message": ...}` ou texto)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_mailgun_error(body: Any) -> ProviderErrorDetails:
    if isinstance(body, Mapping):
        return ProviderErrorDetails(message=as_text(body.get("message")))
    return ProviderErrorDetails(message=as_text(body) or None)
