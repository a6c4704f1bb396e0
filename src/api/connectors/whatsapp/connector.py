"""Conector WhatsApp Business (Cloud API via Graph API).

Envia mensagem de texto para `options.channel` (número em formato
internacional) a partir do `phone_number_id` configurado.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    JSON_HEADERS,
    build_http_client,
    ensure_configured,
    first_item,
    request_headers,
    sent_at,
)
from api.connectors.whatsapp.meta_errors import meta_error_type, parse_meta_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.services.error_normalizer import normalize_error, read_error_body
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    from app.domain.messages import ChatOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import WhatsAppBusinessSettings


class WhatsAppChatConnector:
    """Mensagem de texto via WhatsApp Business."""

    spec = ConnectorSpec(
        provider_id=ProviderId.WHATSAPP_BUSINESS,
        channel=ChannelType.CHAT,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.BEARER,
    )

    def __init__(
        self,
        settings: WhatsAppBusinessSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    @property
    def messages_url(self) -> str:
        settings = self._settings
        return f"{settings.api_base_url}/{settings.api_version}/{settings.phone_number_id}/messages"

    async def send(
        self,
        options: ChatOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        merged = transform_payload(
            {
                "messaging_product": "whatsapp",
                "to": options.channel,
                "type": "text",
                "text": {"body": options.content},
            },
            bridge_data,
            casing=self.spec.casing,
        )
        headers = request_headers(
            {**JSON_HEADERS, "Authorization": f"Bearer {self._settings.access_token}"},
            merged,
        )
        try:
            response = await self._http.post(
                self.messages_url,
                headers=headers,
                params=merged.query,
                json=merged.body,
            )
        except httpx.HTTPError as exc:
            error = normalize_error(exc, parser=parse_meta_error, fallback_message="Unknown WhatsApp error")
            error_type = (
                meta_error_type(read_error_body(exc.response))
                if isinstance(exc, httpx.HTTPStatusError)
                else None
            )
            log_meta_error(error, error_type, self._settings.phone_number_id)
            raise error from exc

        log_success(self._settings.phone_number_id, response.status_code)
        message = first_item(response.json().get("messages")) or {}
        return SendResult(id=message.get("id"), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_whatsapp_connector(
    settings: WhatsAppBusinessSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> WhatsAppChatConnector:
    """Factory com settings do ambiente.

    Args:
        settings: WhatsAppBusinessSettings opcional. Se None, carrega do ambiente.

    Returns:
        Conector configurado para WhatsApp Business.
    """
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_chat_settings

        settings = get_chat_settings().whatsapp
    ensure_configured(settings.validate(), "WhatsApp")
    return WhatsAppChatConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
