"""Parsing do erro JSON do SES v2."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_ses_error(body: Any) -> ProviderErrorDetails:
    """SES v2 devolve `{"message": ...}` e, às vezes, `Code`/`__type`."""
    if not isinstance(body, Mapping):
        return ProviderErrorDetails(message=as_text(body) or None)
    return ProviderErrorDetails(
        code=as_text(body.get("Code") or body.get("__type")),
        message=as_text(body.get("message") or body.get("Message")),
    )
