"""Parsing do corpo de erro do APNs (`{"reason": ...}`)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.services.error_normalizer import ProviderErrorDetails, as_text


def parse_apns_error(body: Any) -> ProviderErrorDetails:
    """`reason` é ao mesmo tempo código e mensagem (ex: BadDeviceToken)."""
    if not isinstance(body, Mapping):
        return ProviderErrorDetails()
    reason = as_text(body.get("reason"))
    return ProviderErrorDetails(code=reason, message=reason)
