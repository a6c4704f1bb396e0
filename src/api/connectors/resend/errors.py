"""Parsing do erro do Resend (`{"name", "message", "statusCode"}`)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_resend_error(body: Any) -> ProviderErrorDetails:
    if not isinstance(body, Mapping):
        return ProviderErrorDetails()
    return ProviderErrorDetails(
        code=as_text(body.get("name")),
        message=as_text(body.get("message")),
    )
