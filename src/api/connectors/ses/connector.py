"""Conector Amazon SES (API v2, JSON) assinado com SigV4.

Sem anexos o e-mail vai como conteúdo `Simple`; com anexos é montada a
mensagem MIME completa e enviada como `Raw`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import build_http_client, ensure_configured, format_sender, sent_at
from api.connectors.ses.errors import parse_ses_error
from api.connectors.ses.mime import build_mime_message, encode_raw_message
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.infra.crypto import sign_aws_request
from app.services.error_normalizer import raise_normalized
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    from app.domain.messages import EmailOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import SesSettings

logger = logging.getLogger(__name__)

SES_SEND_PATH = "/v2/email/outbound-emails"
UTF8 = "UTF-8"


class SesEmailConnector:
    """E-mail via SES v2."""

    spec = ConnectorSpec(
        provider_id=ProviderId.SES,
        channel=ChannelType.EMAIL,
        casing=CasingConvention.PASCAL_CASE,
        auth=AuthStrategy.REQUEST_SIGNING,
    )

    def __init__(
        self,
        settings: SesSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    @property
    def endpoint(self) -> str:
        return f"https://email.{self._settings.region}.amazonaws.com{SES_SEND_PATH}"

    def build_request(self, options: EmailOptions) -> dict[str, Any]:
        """Corpo `SendEmail` antes do casing."""
        from_address = format_sender(
            options.from_address or self._settings.from_address,
            options.sender_name or self._settings.sender_name,
        )
        destination: dict[str, Any] = {"ToAddresses": list(options.to)}
        if options.cc:
            destination["CcAddresses"] = list(options.cc)
        if options.bcc:
            destination["BccAddresses"] = list(options.bcc)

        if options.attachments:
            mime = build_mime_message(options, from_address)
            content: dict[str, Any] = {"Raw": {"Data": encode_raw_message(mime)}}
        else:
            body: dict[str, Any] = {}
            if options.html:
                body["Html"] = {"Data": options.html, "Charset": UTF8}
            if options.text:
                body["Text"] = {"Data": options.text, "Charset": UTF8}
            content = {
                "Simple": {
                    "Subject": {"Data": options.subject, "Charset": UTF8},
                    "Body": body,
                }
            }

        request: dict[str, Any] = {
            "FromEmailAddress": from_address,
            "Destination": destination,
            "Content": content,
        }
        if options.reply_to:
            request["ReplyToAddresses"] = [options.reply_to]
        if self._settings.configuration_set_name:
            request["ConfigurationSetName"] = self._settings.configuration_set_name
        return request

    async def send(
        self,
        options: EmailOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Assina e envia; devolve o `MessageId` do SES."""
        merged = transform_payload(
            self.build_request(options),
            bridge_data,
            casing=self.spec.casing,
        )
        serialized = json.dumps(merged.body).encode("utf-8")
        now = self._clock.now() if self._clock else None
        signed_headers = sign_aws_request(
            method="POST",
            url=self.endpoint,
            region=self._settings.region,
            service="ses",
            access_key_id=self._settings.access_key_id,
            secret_access_key=self._settings.secret_access_key,
            session_token=self._settings.session_token,
            headers={"Content-Type": "application/json"},
            body=serialized,
            now=now,
        )

        try:
            response = await self._http.post(
                self.endpoint,
                headers={**signed_headers, **merged.headers},
                content=serialized,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_ses_error, fallback_message="Unknown SES error")

        message_id = response.json().get("MessageId")
        logger.info("ses_email_sent", extra={"recipients": len(options.to)})
        return SendResult(id=message_id, date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_ses_connector(
    settings: SesSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> SesEmailConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_email_settings

        settings = get_email_settings().ses
    ensure_configured(settings.validate(), "SES")
    return SesEmailConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
