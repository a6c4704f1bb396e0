"""Agregador de settings do pyloto-connectors.

Re-exporta as settings por família de canal.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-family settings
from config.settings.chat import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    ChatSettings,
    SlackSettings,
    TelegramSettings,
    WhatsAppBusinessSettings,
    get_chat_settings,
)
from config.settings.email import (
    EmailSettings,
    MailgunSettings,
    ResendSettings,
    SesSettings,
    get_email_settings,
)
from config.settings.push import (
    ApnsSettings,
    ExpoSettings,
    FcmSettings,
    PushSettings,
    get_push_settings,
)
from config.settings.sms import (
    PlivoSettings,
    SmsSettings,
    SnsSettings,
    TwilioSettings,
    VonageSettings,
    get_sms_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Push
    "ApnsSettings",
    # Base
    "BaseSettings",
    # Chat
    "ChatSettings",
    # Email
    "EmailSettings",
    "Environment",
    "ExpoSettings",
    "FcmSettings",
    "MailgunSettings",
    # SMS
    "PlivoSettings",
    "PushSettings",
    "ResendSettings",
    "SesSettings",
    "SlackSettings",
    "SmsSettings",
    "SnsSettings",
    "TelegramSettings",
    "TwilioSettings",
    "VonageSettings",
    "WhatsAppBusinessSettings",
    "get_base_settings",
    "get_chat_settings",
    "get_email_settings",
    "get_push_settings",
    "get_sms_settings",
]
