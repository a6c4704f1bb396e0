"""Enums de canal, provedor e status usados por todos os conectores."""

from __future__ import annotations

from enum import Enum


class ChannelType(str, Enum):
    """Canal de entrega."""

    EMAIL = "email"
    SMS = "sms"
    CHAT = "chat"
    PUSH = "push"


class AuthStrategy(str, Enum):
    """Forma de autenticação exigida pelo provedor."""

    SIGNED_TOKEN = "signed_token"  # JWT assinado localmente (APNs)
    OAUTH_EXCHANGE = "oauth_exchange"  # JWT trocado por access token (FCM)
    REQUEST_SIGNING = "request_signing"  # AWS SigV4 (SES, SNS)
    BEARER = "bearer"
    BASIC = "basic"
    API_KEY = "api_key"
    NONE = "none"


class ProviderId(str, Enum):
    """Identificadores estáveis de cada conector."""

    SES = "ses"
    RESEND = "resend"
    MAILGUN = "mailgun"
    NEXMO = "nexmo"
    TWILIO = "twilio"
    PLIVO = "plivo"
    SNS = "sns"
    FCM = "fcm"
    EXPO = "expo"
    APNS = "apns"
    TELEGRAM = "telegram"
    SLACK = "slack"
    WHATSAPP_BUSINESS = "whatsapp-business"


class CheckIntegrationCode(str, Enum):
    """Resultado de uma verificação de integração."""

    INVALID_EMAIL = "invalid_email"
    BAD_CREDENTIALS = "bad_credentials"
    SUCCESS = "success"
    FAILED = "failed"


class EmailEventStatus(str, Enum):
    """Status de eventos de e-mail reportados pelos provedores."""

    OPENED = "opened"
    REJECTED = "rejected"
    SENT = "sent"
    DEFERRED = "deferred"
    DELIVERED = "delivered"
    BOUNCED = "bounced"
    DROPPED = "dropped"
    CLICKED = "clicked"
    BLOCKED = "blocked"
    SPAM = "spam"
    UNSUBSCRIBED = "unsubscribed"
    DELAYED = "delayed"
    COMPLAINT = "complaint"


class SmsEventStatus(str, Enum):
    """Status de eventos de SMS."""

    CREATED = "created"
    DELIVERED = "delivered"
    ACCEPTED = "accepted"
    QUEUED = "queued"
    SENDING = "sending"
    SENT = "sent"
    FAILED = "failed"
    UNDELIVERED = "undelivered"
    REJECTED = "rejected"


class PushEventStatus(str, Enum):
    """Status de eventos de push."""

    DELIVERED = "delivered"
    OPENED = "opened"
    DISMISSED = "dismissed"
    CLICKED = "clicked"
    FAILED = "failed"


__all__ = [
    "AuthStrategy",
    "ChannelType",
    "CheckIntegrationCode",
    "EmailEventStatus",
    "ProviderId",
    "PushEventStatus",
    "SmsEventStatus",
]
