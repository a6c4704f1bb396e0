"""Conector FCM (Firebase Cloud Messaging, API HTTP v1).

Entrega por device token (um POST por token, em paralelo) ou por tópico,
quando o chamador informa `topic` no passthrough: nesse caso é um único
envio e a falha é o erro do FCM, não o agregado.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.common import (
    JSON_HEADERS,
    build_http_client,
    ensure_configured,
    request_headers,
    sent_at,
)
from api.connectors.fcm.errors import parse_fcm_error
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.infra.credentials import GoogleAccessTokenProvider
from app.services.fan_out import dispatch_fan_out, dispatch_group
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention
from utils.errors import MissingConfigurationError

if TYPE_CHECKING:
    import httpx

    from app.domain.messages import PushOptions, PushOverrides
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import FcmSettings

logger = logging.getLogger(__name__)

FCM_SEND_URL = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"


def stringify_data(payload: Mapping[str, Any]) -> dict[str, str]:
    """O campo `data` do FCM só aceita strings."""
    return {
        str(key): value if isinstance(value, str) else json.dumps(value)
        for key, value in payload.items()
    }


def trigger_fields(overrides: PushOverrides) -> dict[str, Any]:
    """Overrides preenchidos, com as chaves internas em snake_case."""
    candidates: dict[str, Any] = {
        "type": overrides.type,
        "android": overrides.android,
        "apns": overrides.apns,
        "fcm_options": overrides.fcm_options,
        "web_push": overrides.web_push,
        "data": overrides.data,
        "tag": overrides.tag,
        "body": overrides.body,
        "icon": overrides.icon,
        "color": overrides.color,
        "sound": overrides.sound,
        "title": overrides.title,
    }
    fields = {key: value for key, value in candidates.items() if value}
    if overrides.badge is not None:
        fields["badge"] = overrides.badge
    return fields


def build_message(
    resolved: Mapping[str, Any],
    options: PushOptions,
    *,
    token: str | None = None,
    topic: str | None = None,
) -> dict[str, Any]:
    """Monta o objeto `message` do FCM a partir do body resolvido."""
    title = resolved.get("title", options.title)
    content = resolved.get("body", options.content)
    data = resolved.get("data")
    custom = stringify_data(options.payload)

    message: dict[str, Any] = {}
    if token:
        message["token"] = token
    if topic:
        message["topic"] = topic

    if resolved.get("type") == "data":
        message["data"] = {"title": title, "body": content, **custom, **(data or {})}
    else:
        message["notification"] = {"title": title, "body": content}
        if data or custom:
            message["data"] = {**custom, **(data or {})}

    for source_key, target_key in (
        ("android", "android"),
        ("apns", "apns"),
        ("fcm_options", "fcm_options"),
        ("web_push", "webpush"),
    ):
        if resolved.get(source_key):
            message[target_key] = resolved[source_key]
    return message


class FcmPushConnector:
    """Push via FCM HTTP v1 com access token OAuth cacheado."""

    spec = ConnectorSpec(
        provider_id=ProviderId.FCM,
        channel=ChannelType.PUSH,
        casing=CasingConvention.SNAKE_CASE,
        auth=AuthStrategy.OAUTH_EXCHANGE,
    )

    def __init__(
        self,
        settings: FcmSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
        token_provider: GoogleAccessTokenProvider | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock
        self._tokens = token_provider or GoogleAccessTokenProvider(
            client_email=settings.client_email,
            private_key_pem=settings.private_key,
            http_client=http_client,
            clock=clock,
        )

    @property
    def send_url(self) -> str:
        return FCM_SEND_URL.format(project_id=self._settings.project_id)

    async def send(
        self,
        options: PushOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Envia por token (fan-out) ou por tópico (envio único).

        Raises:
            CredentialError: Falha ao assinar o JWT da service account.
            ConnectorError: Troca de token recusada ou envio por tópico falhou.
            MissingConfigurationError: Nenhum token e nenhum tópico.
            FanOutFailureError: Todos os tokens falharam.
        """
        merged = transform_payload(
            trigger_fields(options.overrides),
            bridge_data,
            casing=self.spec.casing,
        )
        topic = merged.body.get("topic")
        if not topic and not options.target:
            raise MissingConfigurationError(f"No targets provided for {self.spec.label} message")

        access_token = await self._tokens.get_token()
        headers = request_headers(
            {**JSON_HEADERS, "Authorization": f"Bearer {access_token}"},
            merged,
        )

        async def post_message(message: dict[str, Any]) -> str:
            response = await self._http.post(
                self.send_url,
                headers=headers,
                params=merged.query,
                json={"message": message},
            )
            return str(response.json().get("name", ""))

        if topic:
            report = await dispatch_group(
                lambda: post_message(build_message(merged.body, options, topic=topic)),
                label=self.spec.label,
                error_parser=parse_fcm_error,
            )
        else:
            report = await dispatch_fan_out(
                options.target,
                lambda token: post_message(build_message(merged.body, options, token=token)),
                label=self.spec.label,
                error_parser=parse_fcm_error,
            )
        logger.info(
            "fcm_push_sent",
            extra={"by_topic": bool(topic), "failed": report.failed},
        )
        return SendResult(ids=report.ids, date=sent_at(self._clock))

    async def aclose(self) -> None:
        self._tokens.clear()
        await self._http.aclose()


def create_fcm_connector(
    settings: FcmSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> FcmPushConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_push_settings

        settings = get_push_settings().fcm
    ensure_configured(settings.validate(), "FCM")
    return FcmPushConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
