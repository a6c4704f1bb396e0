"""Conector Vonage (antigo Nexmo) SMS API.

Formulário com as credenciais no corpo. `api_key`/`api_secret` são
adicionados depois do casing porque a API só aceita esses nomes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    build_http_client,
    ensure_configured,
    first_item,
    form_fields,
    request_headers,
    sent_at,
)
from api.connectors.vonage.errors import (
    VONAGE_SUCCESS_STATUS,
    parse_vonage_error,
    rejected_message_error,
)
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
    from config.settings import VonageSettings

logger = logging.getLogger(__name__)

VONAGE_SMS_URL = "https://rest.nexmo.com/sms/json"


class VonageSmsConnector:
    """SMS via Vonage."""

    spec = ConnectorSpec(
        provider_id=ProviderId.NEXMO,
        channel=ChannelType.SMS,
        casing=CasingConvention.CAMEL_CASE,
        auth=AuthStrategy.API_KEY,
    )

    def __init__(
        self,
        settings: VonageSettings,
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
        """Envia e valida o status por mensagem.

        Raises:
            ConnectorError: HTTP de erro, ou status != "0" (400).
        """
        merged = transform_payload(
            {
                "to": options.to,
                "from": options.from_number or self._settings.from_number,
                "text": options.content,
            },
            bridge_data,
            casing=self.spec.casing,
        )
        fields = {
            "api_key": self._settings.api_key,
            "api_secret": self._settings.api_secret,
            **form_fields(merged.body),
        }
        try:
            response = await self._http.post(
                VONAGE_SMS_URL,
                headers=request_headers({}, merged),
                params=merged.query,
                data=fields,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_vonage_error, fallback_message="Unknown Vonage error")

        message = first_item(response.json().get("messages")) or {}
        if message.get("status") != VONAGE_SUCCESS_STATUS:
            logger.info("vonage_sms_rejected", extra={"status": message.get("status")})
            raise rejected_message_error(message)

        logger.info("vonage_sms_sent")
        return SendResult(id=message.get("message-id"), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_vonage_connector(
    settings: VonageSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> VonageSmsConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_sms_settings

        settings = get_sms_settings().vonage
    ensure_configured(settings.validate(), "Vonage")
    return VonageSmsConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
