"""Conector APNs (Apple Push Notification service, HTTP/2).

Um POST por device token em `/3/device/{token}`, todos concorrentes; o
id de cada entrega vem do header `apns-id`. A autenticação é o JWT ES256
do provedor, cacheado por conector.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.apns.errors import parse_apns_error
from api.connectors.common import build_http_client, ensure_configured, request_headers, sent_at
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.infra.credentials import ApnsTokenProvider
from app.services.fan_out import dispatch_fan_out
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention

if TYPE_CHECKING:
    import httpx

    from app.domain.messages import PushOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import ApnsSettings

logger = logging.getLogger(__name__)

APNS_PRODUCTION_HOST = "api.push.apple.com"
APNS_SANDBOX_HOST = "api.sandbox.push.apple.com"


class ApnsPushConnector:
    """Push via APNs, com fan-out por dispositivo."""

    spec = ConnectorSpec(
        provider_id=ProviderId.APNS,
        channel=ChannelType.PUSH,
        casing=CasingConvention.CAMEL_CASE,
        auth=AuthStrategy.SIGNED_TOKEN,
    )

    def __init__(
        self,
        settings: ApnsSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
        token_provider: ApnsTokenProvider | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock
        self._tokens = token_provider or ApnsTokenProvider(
            key_id=settings.key_id,
            team_id=settings.team_id,
            private_key_pem=settings.private_key,
            clock=clock,
        )

    @property
    def host(self) -> str:
        return APNS_PRODUCTION_HOST if self._settings.production else APNS_SANDBOX_HOST

    def build_payload(self, options: PushOptions) -> dict[str, Any]:
        """Payload `{aps: {...}, ...custom}` antes do casing."""
        overrides = options.overrides
        aps: dict[str, Any] = {
            "alert": {
                "title": overrides.title if overrides.title is not None else options.title,
                "body": overrides.body if overrides.body is not None else options.content,
            }
        }
        if overrides.sound is not None:
            aps["sound"] = overrides.sound
        if overrides.badge is not None:
            aps["badge"] = overrides.badge

        payload: dict[str, Any] = {"aps": aps}
        payload.update(options.payload)
        return payload

    async def send(
        self,
        options: PushOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Envia para todos os `options.target`.

        Raises:
            CredentialError: Chave .p8 inválida (antes de qualquer envio).
            MissingConfigurationError: Lista de destinos vazia.
            FanOutFailureError: Todos os dispositivos falharam.
        """
        jwt = self._tokens.get_token()
        merged = transform_payload(
            self.build_payload(options),
            bridge_data,
            casing=self.spec.casing,
        )
        headers = request_headers(
            {
                "authorization": f"bearer {jwt}",
                "apns-topic": self._settings.bundle_id,
                "apns-push-type": "alert",
                "content-type": "application/json",
            },
            merged,
        )

        async def send_to_device(device_token: str) -> str:
            response = await self._http.post(
                f"https://{self.host}/3/device/{device_token}",
                headers=headers,
                params=merged.query,
                json=merged.body,
            )
            return response.headers.get("apns-id", "")

        report = await dispatch_fan_out(
            options.target,
            send_to_device,
            label=self.spec.label,
            error_parser=parse_apns_error,
        )
        logger.info(
            "apns_push_sent",
            extra={"attempted": len(options.target), "failed": report.failed},
        )
        return SendResult(ids=report.ids, date=sent_at(self._clock))

    async def aclose(self) -> None:
        self._tokens.clear()
        await self._http.aclose()


def create_apns_connector(
    settings: ApnsSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> ApnsPushConnector:
    """Factory com settings do ambiente e cliente HTTP/2."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_push_settings

        settings = get_push_settings().apns
    ensure_configured(settings.validate(), "APNs")
    return ApnsPushConnector(
        settings,
        http_client=build_http_client(http2=True, transport=transport),
        clock=clock,
    )
