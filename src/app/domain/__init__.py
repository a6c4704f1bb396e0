"""Modelos de domínio compartilhados pelos conectores."""

from app.domain.channels import (
    AuthStrategy,
    ChannelType,
    CheckIntegrationCode,
    EmailEventStatus,
    ProviderId,
    PushEventStatus,
    SmsEventStatus,
)
from app.domain.connector_spec import ConnectorSpec
from app.domain.messages import (
    Attachment,
    ChatOptions,
    EmailOptions,
    PushOptions,
    PushOverrides,
    SmsOptions,
)
from app.domain.passthrough import PASSTHROUGH_KEY, MergedPayload, Passthrough
from app.domain.results import IntegrationCheckResult, SendResult

__all__ = [
    "PASSTHROUGH_KEY",
    "Attachment",
    "AuthStrategy",
    "ChannelType",
    "ChatOptions",
    "CheckIntegrationCode",
    "ConnectorSpec",
    "EmailEventStatus",
    "EmailOptions",
    "IntegrationCheckResult",
    "MergedPayload",
    "Passthrough",
    "ProviderId",
    "PushEventStatus",
    "PushOptions",
    "PushOverrides",
    "SendResult",
    "SmsEventStatus",
    "SmsOptions",
]
