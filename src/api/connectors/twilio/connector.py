"""Conector Twilio Messaging (formulário + basic auth)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    basic_auth,
    build_http_client,
    ensure_configured,
    form_fields,
    request_headers,
    sent_at,
)
from api.connectors.twilio.errors import parse_twilio_error
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
    from config.settings import TwilioSettings

logger = logging.getLogger(__name__)

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{account_sid}/Messages.json"


class TwilioSmsConnector:
    """SMS via Twilio."""

    spec = ConnectorSpec(
        provider_id=ProviderId.TWILIO,
        channel=ChannelType.SMS,
        casing=CasingConvention.PASCAL_CASE,
        auth=AuthStrategy.BASIC,
    )

    def __init__(
        self,
        settings: TwilioSettings,
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
                "to": options.to,
                "from": options.from_number or self._settings.from_number,
                "body": options.content,
            },
            bridge_data,
            casing=self.spec.casing,
        )
        headers = request_headers(
            {"Authorization": basic_auth(self._settings.account_sid, self._settings.auth_token)},
            merged,
        )
        try:
            response = await self._http.post(
                TWILIO_MESSAGES_URL.format(account_sid=self._settings.account_sid),
                headers=headers,
                params=merged.query,
                data=form_fields(merged.body),
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_twilio_error, fallback_message="Unknown Twilio error")

        logger.info("twilio_sms_sent")
        return SendResult(id=response.json().get("sid"), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_twilio_connector(
    settings: TwilioSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> TwilioSmsConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_sms_settings

        settings = get_sms_settings().twilio
    ensure_configured(settings.validate(), "Twilio")
    return TwilioSmsConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
