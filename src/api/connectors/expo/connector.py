"""Conector Expo push.

Uma única chamada leva todas as mensagens; o Expo devolve um ticket por
mensagem, na mesma ordem, e a falha parcial é decidida por ticket.
"""

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
from api.connectors.expo.errors import parse_expo_error, ticket_failure_reason
from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.domain.results import SendResult
from app.services.error_normalizer import raise_normalized
from app.services.fan_out import TargetFailure, TargetOutcome, TargetSuccess, settle_outcomes
from app.services.transform_pipeline import transform_payload
from utils.casing import CasingConvention
from utils.errors import MissingConfigurationError

if TYPE_CHECKING:
    from app.domain.messages import PushOptions
    from app.infra.http import HttpClient
    from app.protocols.clock import ClockProtocol
    from config.settings import ExpoSettings

logger = logging.getLogger(__name__)

EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
MISSING_TICKET_REASON = "Expo push failed"


class ExpoPushConnector:
    """Push via Expo, lote numa chamada só."""

    spec = ConnectorSpec(
        provider_id=ProviderId.EXPO,
        channel=ChannelType.PUSH,
        casing=CasingConvention.CAMEL_CASE,
        auth=AuthStrategy.BEARER,
    )

    def __init__(
        self,
        settings: ExpoSettings,
        *,
        http_client: HttpClient,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._clock = clock

    def build_messages(self, options: PushOptions) -> list[dict[str, Any]]:
        """Uma mensagem por device token."""
        overrides = options.overrides
        messages: list[dict[str, Any]] = []
        for token in options.target:
            message: dict[str, Any] = {
                "to": token,
                "title": overrides.title if overrides.title is not None else options.title,
                "body": overrides.body if overrides.body is not None else options.content,
            }
            if options.payload:
                message["data"] = options.payload
            if overrides.sound is not None:
                message["sound"] = overrides.sound
            if overrides.badge is not None:
                message["badge"] = overrides.badge
            messages.append(message)
        return messages

    async def send(
        self,
        options: PushOptions,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult:
        """Envia o lote e classifica os tickets.

        Com um único destino, os campos do chamador e o passthrough são
        mesclados na mensagem; com vários, o lote segue como montado.

        Raises:
            MissingConfigurationError: Lista de destinos vazia.
            ConnectorError: A requisição inteira foi recusada.
            FanOutFailureError: Todos os tickets voltaram com erro.
        """
        if not options.target:
            raise MissingConfigurationError(f"No targets provided for {self.spec.label} message")

        messages = self.build_messages(options)
        single = len(messages) == 1
        merged = transform_payload(
            messages[0] if single else {},
            bridge_data,
            casing=self.spec.casing,
        )
        request_body: Any = merged.body if single else messages

        base_headers = {**JSON_HEADERS, "Accept": "application/json"}
        if self._settings.access_token:
            base_headers["Authorization"] = f"Bearer {self._settings.access_token}"

        try:
            response = await self._http.post(
                EXPO_PUSH_URL,
                headers=request_headers(base_headers, merged),
                params=merged.query,
                json=request_body,
            )
        except httpx.HTTPError as exc:
            raise_normalized(exc, parser=parse_expo_error, fallback_message="Unknown Expo error")

        tickets = response.json().get("data") or []
        if isinstance(tickets, Mapping):
            tickets = [tickets]
        if len(tickets) > len(options.target):
            logger.warning(
                "expo_extra_tickets_ignored",
                extra={"targets": len(options.target), "tickets": len(tickets)},
            )

        outcomes: list[TargetOutcome] = []
        for index, target in enumerate(options.target):
            ticket = tickets[index] if index < len(tickets) else None
            if not isinstance(ticket, Mapping):
                outcomes.append(TargetFailure(target=target, reason=MISSING_TICKET_REASON))
            elif ticket.get("status") == "ok":
                outcomes.append(TargetSuccess(target=target, id=str(ticket.get("id", ""))))
            else:
                outcomes.append(TargetFailure(target=target, reason=ticket_failure_reason(ticket)))

        report = settle_outcomes(outcomes, label=self.spec.label)
        return SendResult(ids=report.ids, date=sent_at(self._clock))

    async def aclose(self) -> None:
        await self._http.aclose()


def create_expo_connector(
    settings: ExpoSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: ClockProtocol | None = None,
) -> ExpoPushConnector:
    """Factory com settings do ambiente."""
    if settings is None:
        # Import local para evitar dependência circular
        from config.settings import get_push_settings

        settings = get_push_settings().expo
    ensure_configured(settings.validate(), "Expo")
    return ExpoPushConnector(
        settings,
        http_client=build_http_client(transport=transport),
        clock=clock,
    )
