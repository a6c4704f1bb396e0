"""Registro de conectores por `ProviderId`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from api.connectors.apns import ApnsPushConnector, create_apns_connector
from api.connectors.expo import ExpoPushConnector, create_expo_connector
from api.connectors.fcm import FcmPushConnector, create_fcm_connector
from api.connectors.mailgun import MailgunEmailConnector, create_mailgun_connector
from api.connectors.plivo import PlivoSmsConnector, create_plivo_connector
from api.connectors.resend import ResendEmailConnector, create_resend_connector
from api.connectors.ses import SesEmailConnector, create_ses_connector
from api.connectors.slack import SlackChatConnector, create_slack_connector
from api.connectors.sns import SnsSmsConnector, create_sns_connector
from api.connectors.telegram import TelegramChatConnector, create_telegram_connector
from api.connectors.twilio import TwilioSmsConnector, create_twilio_connector
from api.connectors.vonage import VonageSmsConnector, create_vonage_connector
from api.connectors.whatsapp import WhatsAppChatConnector, create_whatsapp_connector
from app.domain.channels import ChannelType, ProviderId
from app.domain.connector_spec import ConnectorSpec
from app.protocols.connector import ChannelConnectorProtocol


@dataclass(frozen=True, slots=True)
class RegisteredConnector:
    """Spec declarativa + factory de um provedor."""

    spec: ConnectorSpec
    factory: Callable[..., ChannelConnectorProtocol]


def _register(*entries: tuple[Any, Callable[..., Any]]) -> dict[ProviderId, RegisteredConnector]:
    registry: dict[ProviderId, RegisteredConnector] = {}
    for connector_type, factory in entries:
        spec: ConnectorSpec = connector_type.spec
        registry[spec.provider_id] = RegisteredConnector(spec=spec, factory=factory)
    return registry


CONNECTORS: dict[ProviderId, RegisteredConnector] = _register(
    (ApnsPushConnector, create_apns_connector),
    (FcmPushConnector, create_fcm_connector),
    (ExpoPushConnector, create_expo_connector),
    (SesEmailConnector, create_ses_connector),
    (ResendEmailConnector, create_resend_connector),
    (MailgunEmailConnector, create_mailgun_connector),
    (TwilioSmsConnector, create_twilio_connector),
    (PlivoSmsConnector, create_plivo_connector),
    (VonageSmsConnector, create_vonage_connector),
    (SnsSmsConnector, create_sns_connector),
    (SlackChatConnector, create_slack_connector),
    (TelegramChatConnector, create_telegram_connector),
    (WhatsAppChatConnector, create_whatsapp_connector),
)


def create_connector(provider_id: ProviderId | str, **kwargs: Any) -> ChannelConnectorProtocol:
    """Instancia o conector do provedor.

    Args:
        provider_id: ProviderId ou seu valor (ex: "nexmo").
        **kwargs: Repassados à factory (settings, transport, clock).

    Raises:
        ValueError: Provedor desconhecido.
        MissingConfigurationError: Settings incompletos.
    """
    return CONNECTORS[ProviderId(provider_id)].factory(**kwargs)


def providers_for_channel(channel: ChannelType | str) -> list[ProviderId]:
    """Provedores registrados para um canal, na ordem do registro."""
    wanted = ChannelType(channel)
    return [
        provider_id
        for provider_id, registered in CONNECTORS.items()
        if registered.spec.channel is wanted
    ]


__all__ = ["CONNECTORS", "RegisteredConnector", "create_connector", "providers_for_channel"]
