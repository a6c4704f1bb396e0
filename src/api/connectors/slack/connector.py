"""Conector Slack (incoming webhook)."""

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
from utils.errors import MissingConfigurationError

if TYPE_CHECKING:
    from app.domain.messages import ChatOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


def parse_slack_error(body: Any) -> ProviderErrorDetails:
    """Webhooks respondem erro em texto puro (ex: `invalid_payload`)."""
    if isinstance(body, Mapping):
        return ProviderErrorDetails(message=as_text(body.get("error")))
    return ProviderErrorDetails(message=as_text(body) or None)


class SlackChatConnector:
    """Mensagem para um webhook do Slack; não há id de mensagem."""

    spec = ConnectorSpec(
        provider_id=ProviderId.SLACK,
        channel=ChannelType.CHAT,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.NONE,
    )

    def __init__(
        self,
        settings: SlackSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    async def send(
        self,
        options: ChatOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Posta `{text}` no webhook das opções ou dos settings.

        Raises:
            MissingConfigurationError: Nenhum webhook disponível (400).
        """
        webhook_url = options.webhook_url or self._settings.webhook_url
        if not webhook_url:
            raise MissingConfigurationError(
                "Missing webhook URL: provide webhook_url in options or settings"
            )

        merged = transform_payload({"text": options.content}, bridge_data, casing=self.spec.casing)
        try:
            await self._http.post(
                webhook_url,
                headers=request_headers(JSON_HEADERS, merged),
                params=merged.query,
                json=merged.body,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_slack_error, fallback_message="Unknown Slack error")

        logger.info("slack_message_sent")
        return SendResult(date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_slack_connector(
    settings: SlackSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> SlackChatConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_chat_settings

        settings = get_chat_settings().slack
    ensure_configured(settings.validate(), "Slack")
    return SlackChatConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
