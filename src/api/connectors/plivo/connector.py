"""Conector Plivo (JSON + basic auth)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    JSON_HEADERS,
    basic_auth,
    build_http_client,
    ensure_configured,
    first_item,
    request_headers,
    sent_at,
)
from api.connectors.plivo.errors import parse_plivo_error
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.services.error_normalizer import raise_normalized
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    from app.domain.messages import SmsOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import PlivoSettings

logger = logging.getLogger(__name__)

PLIVO_MESSAGE_URL = "https://api.plivo.com/v1/Account/{auth_id}/Message/"


class PlivoSmsConnector:
    """SMS via Plivo."""

    spec = ConnectorSpec(
        provider_id=ProviderId.PLIVO,
        channel=ChannelType.SMS,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.BASIC,
    )

    def __init__(
        self,
        settings: PlivoSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    async def send(
        self,
        options: SmsOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        merged = transform_payload(
            {
                "src": options.from_number or self._settings.from_number,
                "dst": options.to,
                "text": options.content,
            },
            bridge_data,
            casing=self.spec.casing,
        )
        headers = request_headers(
            {
                **JSON_HEADERS,
                "Authorization": basic_auth(self._settings.auth_id, self._settings.auth_token),
            },
            merged,
        )
        try:
            response = await self._http.post(
                PLIVO_MESSAGE_URL.format(auth_id=self._settings.auth_id),
                headers=headers,
                params=merged.query,
                json=merged.body,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_plivo_error, fallback_message="Unknown Plivo error")

        message_id = first_item(response.json().get("message_uuid"))
        logger.info("plivo_sms_sent")
        return SendResult(id=message_id, date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_plivo_connector(
    settings: PlivoSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> PlivoSmsConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_sms_settings

        settings = get_sms_settings().plivo
    ensure_configured(settings.validate(), "Plivo")
    return PlivoSmsConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
