"""Utilidades compartilhadas pelos conectores.

Não existe classe base: cada conector compõe estes helpers com os
serviços de `app.services` (transform, fan-out, normalização de erro).
"""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.domain.passthrough import MergedPayload
from app.infra.http import HttpClient, HttpClientConfig
from app.protocols.clock import SystemClock, to_iso8601
from utils.errors import MissingConfigurationError

if TYPE_CHECKING:
    import httpx

    from app.protocols.clock import ClockProtocol

JSON_HEADERS = {"Content-Type": "application/json"}


def build_http_client(
    *,
    http2: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpClient:
    """HttpClient com o timeout padrão dos settings base."""
    # Import local para evitar dependência circular
    from config.settings import get_base_settings

    config = HttpClientConfig(
        timeout_seconds=get_base_settings().http_timeout_seconds,
        http2=http2,
    )
    return HttpClient(config, transport=transport)


def ensure_configured(errors: list[str], label: str) -> None:
    """Levanta `MissingConfigurationError` se o settings tiver pendências."""
    if errors:
        raise MissingConfigurationError(f"{label} connector is not configured: {'; '.join(errors)}")


def sent_at(clock: ClockProtocol | None) -> str:
    """Timestamp ISO-8601 do envio."""
    return to_iso8601((clock or SystemClock()).now())


def basic_auth(username: str, password: str) -> str:
    """Valor do header `Authorization: Basic ...`."""
    raw = f"{username}:{password}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def format_sender(address: str, name: str | None) -> str:
    """`Nome <endereco>` quando há nome, senão só o endereço."""
    return f"{name} <{address}>" if name else address


def form_value(value: Any) -> str:
    """Serializa um valor do body para campo de formulário."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


def form_fields(body: Mapping[str, Any]) -> dict[str, str]:
    """Body mesclado como campos `application/x-www-form-urlencoded`."""
    return {str(key): form_value(value) for key, value in body.items() if value is not None}


def request_headers(base: Mapping[str, str], payload: MergedPayload) -> dict[str, str]:
    """Headers do conector com os do passthrough por cima."""
    return {**base, **payload.headers}


def first_item(value: Any) -> Any:
    """Primeiro elemento de uma lista JSON (ou None)."""
    if isinstance(value, list) and value:
        return value[0]
    return None


__all__ = [
    "JSON_HEADERS",
    "basic_auth",
    "build_http_client",
    "ensure_configured",
    "first_item",
    "form_fields",
    "form_value",
    "format_sender",
    "request_headers",
    "sent_at",
]
