"""Conector Telegram Bot API (`sendMessage`).

A Bot API pode responder `{"ok": false, ...}`; isso é tratado como
recusa do provedor com o `error_code` informado.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    JSON_HEADERS,
    build_http_client,
    ensure_configured,
    request_headers,
    sent_at,
)
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.services.error_normalizer import ProviderErrorDetails, as_text, raise_normalized
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention
from utils.errors import ConnectorError

if TYPE_CHECKING:
    from app.domain.messages import ChatOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)


def parse_telegram_error(body: Any) -> ProviderErrorDetails:
    """`{"ok": false, "error_code": 400, "description": "..."}`."""
    if not isinstance(body, Mapping):
        return ProviderErrorDetails()
    return ProviderErrorDetails(
        code=as_text(body.get("error_code")),
        message=as_text(body.get("description")),
    )


def _error_status(body: Any) -> int:
    """`error_code` como status HTTP; 500 se ausente ou inválido."""
    code = body.get("error_code") if isinstance(body, Mapping) else None
    try:
        status = int(code)
    except (TypeError, ValueError):
        return 500
    return status if 400 <= status <= 599 else 500


class TelegramChatConnector:
    """Mensagem de bot para um chat (`options.channel` é o chat_id)."""

    spec = ConnectorSpec(
        provider_id=ProviderId.TELEGRAM,
        channel=ChannelType.CHAT,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.API_KEY,
    )

    def __init__(
        self,
        settings: TelegramSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    @property
    def send_url(self) -> str:
        return f"{self._settings.api_base_url}/bot{self._settings.bot_token}/sendMessage"

    async def send(
        self,
        options: ChatOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        merged = transform_payload(
            {"chat_id": options.channel, "text": options.content, "parse_mode": "HTML"},
            bridge_data,
            casing=self.spec.casing,
        )
        try:
            response = await self._http.post(
                self.send_url,
                headers=request_headers(JSON_HEADERS, merged),
                params=merged.query,
                json=merged.body,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_telegram_error, fallback_message="Unknown Telegram error")

        data = response.json()
        if not isinstance(data, Mapping) or not data.get("ok"):
            details = parse_telegram_error(data)
            raise ConnectorError(
                details.message or "Telegram API error",
                status_code=_error_status(data),
                provider_code=details.code,
                provider_message=details.message,
            )

        logger.info("telegram_message_sent")
        message_id = (data.get("result") or {}).get("message_id")
        return SendResult(id=as_text(message_id), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_telegram_connector(
    settings: TelegramSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> TelegramChatConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_chat_settings

        settings = get_chat_settings().telegram
    ensure_configured(settings.validate(), "Telegram")
    return TelegramChatConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
