"""Conector Mailgun.

Corpo em formulário (`application/x-www-form-urlencoded`); com anexos
vira `multipart/form-data`, um campo `attachment` por arquivo.
Headers MIME customizados viram campos `h:<Header>`.
"""

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
    format_sender,
    request_headers,
    sent_at,
)
from api.connectors.mailgun.errors import parse_mailgun_error
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.services.error_normalizer import raise_normalized
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    from app.domain.messages import EmailOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import MailgunSettings

logger = logging.getLogger(__name__)


class MailgunEmailConnector:
    """E-mail via Mailgun."""

    spec = ConnectorSpec(
        provider_id=ProviderId.MAILGUN,
        channel=ChannelType.EMAIL,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.BASIC,
    )

    def __init__(
        self,
        settings: MailgunSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    @property
    def messages_url(self) -> str:
        return f"{self._settings.base_url}/v3/{self._settings.domain}/messages"

    def build_payload(self, options: EmailOptions) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "from": format_sender(
                options.from_address or self._settings.from_address,
                options.sender_name or self._settings.sender_name,
            ),
            "to": ",".join(options.to),
            "subject": options.subject,
        }
        if options.html:
            payload["html"] = options.html
        if options.text:
            payload["text"] = options.text
        if options.cc:
            payload["cc"] = ",".join(options.cc)
        if options.bcc:
            payload["bcc"] = ",".join(options.bcc)
        return payload

    async def send(
        self,
        options: EmailOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        merged = transform_payload(
            self.build_payload(options),
            bridge_data,
            casing=self.spec.casing,
        )
        fields = form_fields(merged.body)
        # Campos `h:` ficam fora do casing.
        if options.reply_to:
            fields["h:Reply-To"] = options.reply_to
        for name, value in options.headers.items():
            fields[f"h:{name}"] = value

        files = [
            ("attachment", (attachment.filename, attachment.file, attachment.mime))
            for attachment in options.attachments
        ]
        headers = request_headers(
            {"Authorization": basic_auth(self._settings.username, self._settings.api_key)},
            merged,
        )
        try:
            response = await self._http.post(
                self.messages_url,
                headers=headers,
                params=merged.query,
                data=fields,
                files=files or None,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_mailgun_error, fallback_message="Unknown Mailgun error")

        logger.info(
            "mailgun_email_sent",
            extra={"recipients": len(options.to), "attachments": len(files)},
        )
        return SendResult(id=response.json().get("id"), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_mailgun_connector(
    settings: MailgunSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> MailgunEmailConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_email_settings

        settings = get_email_settings().mailgun
    ensure_configured(settings.validate(), "Mailgun")
    return MailgunEmailConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
