"""Conector Amazon SNS (Publish direto para telefone) assinado com SigV4."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from api.connectors.common import build_http_client, ensure_configured, form_fields, sent_at
from api.connectors.sns.errors import extract_xml_tag, parse_sns_error
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.infra.crypto import sign_aws_request
from app.services.error_normalizer import raise_normalized
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    from app.domain.messages import SmsOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import SnsSettings

logger = logging.getLogger(__name__)

SNS_API_VERSION = "2010-03-31"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class SnsSmsConnector:
    """SMS via SNS."""

    spec = ConnectorSpec(
        provider_id=ProviderId.SNS,
        channel=ChannelType.SMS,
        casing=CasingConvention.PASCAL_CASE,
        auth=AuthStrategy.REQUEST_SIGNING,
    )

    def __init__(
        self,
        settings: SnsSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    @property
    def endpoint(self) -> str:
        return f"https://sns.{self._settings.region}.amazonaws.com/"

    async def send(
        self,
        options: SmsOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        merged = transform_payload(
            {
                "action": "Publish",
                "version": SNS_API_VERSION,
                "phone_number": options.to,
                "message": options.content,
            },
            bridge_data,
            casing=self.spec.casing,
        )
        serialized = urlencode(form_fields(merged.body)).encode("utf-8")
        signed_headers = sign_aws_request(
            method="POST",
            url=self.endpoint,
            region=self._settings.region,
            service="sns",
            access_key_id=self._settings.access_key_id,
            secret_access_key=self._settings.secret_access_key,
            session_token=self._settings.session_token,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=serialized,
            now=self._clock.now() if self._clock else None,
        )

        try:
            response = await self._http.post(
                self.endpoint,
                headers={**signed_headers, **merged.headers},
                content=serialized,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_sns_error, fallback_message="Unknown SNS error")

        logger.info("sns_sms_sent")
        return SendResult(
            id=extract_xml_tag(response.text, "MessageId") or "",
            date=sent_at(self._clock),
        )

    async def aclose(self) -> None:
        await self._http.aclose()


def create_sns_connector(
    settings: SnsSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> SnsSmsConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_sms_settings

        settings = get_sms_settings().sns
    ensure_configured(settings.validate(), "SNS")
    return SnsSmsConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
