"""Conector Resend (JSON + bearer token)."""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.common import (
    JSON_HEADERS,
    build_http_client,
    ensure_configured,
    format_sender,
    request_headers,
    sent_at,
)
from api.connectors.resend.errors import parse_resend_error
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
    from config.settings import ResendSettings

logger = logging.getLogger(__name__)


class ResendEmailConnector:
    """E-mail via Resend."""

    spec = ConnectorSpec(
        provider_id=ProviderId.RESEND,
        channel=ChannelType.EMAIL,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.BEARER,
    )

    def __init__(
        self,
        settings: ResendSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    def build_payload(self, options: EmailOptions) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "from": format_sender(
                options.from_address or self._settings.from_address,
                options.sender_name or self._settings.sender_name,
            ),
            "to": list(options.to),
            "subject": options.subject,
        }
        if options.html:
            payload["html"] = options.html
        if options.text:
            payload["text"] = options.text
        if options.cc:
            payload["cc"] = list(options.cc)
        if options.bcc:
            payload["bcc"] = list(options.bcc)
        if options.reply_to:
            payload["reply_to"] = options.reply_to
        if options.attachments:
            payload["attachments"] = [
                {
                    "filename": attachment.filename,
                    "content": base64.b64encode(attachment.file).decode("ascii"),
                    "content_type": attachment.mime,
                }
                for attachment in options.attachments
            ]
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
        body = merged.body
        if options.headers:
            # Nomes de header MIME ficam fora do casing.
            body = {"headers": dict(options.headers), **body}
        headers = request_headers(
            {**JSON_HEADERS, "Authorization": f"Bearer {self._settings.api_key}"},
            merged,
        )
        try:
            response = await self._http.post(
                f"{self._settings.base_url}/emails",
                headers=headers,
                params=merged.query,
                json=body,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_resend_error, fallback_message="Unknown Resend error")

        logger.info("resend_email_sent", extra={"recipients": len(options.to)})
        return SendResult(id=response.json().get("id"), date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_resend_connector(
    settings: ResendSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> ResendEmailConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_email_settings

        settings = get_email_settings().resend
    ensure_configured(settings.validate(), "Resend")
    return ResendEmailConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
