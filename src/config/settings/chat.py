"""Settings dos provedores de chat (Slack, Telegram, WhatsApp Business)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings.base.env import missing, read_env, read_optional_env

# Constantes do Graph API
GRAPH_API_VERSION: str = "v21.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"


class SlackSettings(BaseModel):
    """Slack incoming webhook (a URL também pode vir em cada envio)."""

    model_config = ConfigDict(extra="ignore")

    webhook_url: str | None = Field(default=None, description="Webhook padrão.")

    def validate(self) -> list[str]:
        return []


class TelegramSettings(BaseModel):
    """Telegram Bot API."""

    model_config = ConfigDict(extra="ignore")

    bot_token: str = Field(default="", description="Token do bot (BotFather).")
    api_base_url: str = Field(default=TELEGRAM_API_BASE_URL, description="URL base.")

    def validate(self) -> list[str]:
        return missing(self.bot_token, "TELEGRAM_BOT_TOKEN")


class WhatsAppBusinessSettings(BaseModel):
    """WhatsApp Business via Graph API (Cloud API)."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(default="", description="Token de acesso à Graph API.")
    phone_number_id: str = Field(default="", description="ID do número no Meta Business.")
    api_version: str = Field(default=GRAPH_API_VERSION, description="Versão da Graph API.")
    api_base_url: str = Field(default=GRAPH_API_BASE_URL, description="URL base da Graph API.")

    def validate(self) -> list[str]:
        return [
            *missing(self.access_token, "WHATSAPP_ACCESS_TOKEN"),
            *missing(self.phone_number_id, "WHATSAPP_PHONE_NUMBER_ID"),
        ]


class ChatSettings(BaseModel):
    """Agregado dos provedores de chat."""

    model_config = ConfigDict(extra="ignore")

    slack: SlackSettings = Field(default_factory=SlackSettings)
    telegram: TelegramSettings = Field(default_factory=TelegramSettings)
    whatsapp: WhatsAppBusinessSettings = Field(default_factory=WhatsAppBusinessSettings)


def _load_chat_from_env() -> ChatSettings:
    """Carrega ChatSettings a partir de variáveis de ambiente."""
    return ChatSettings(
        slack=SlackSettings(webhook_url=read_optional_env("SLACK_WEBHOOK_URL")),
        telegram=TelegramSettings(
            bot_token=read_env("TELEGRAM_BOT_TOKEN"),
            api_base_url=read_env("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        ),
        whatsapp=WhatsAppBusinessSettings(
            access_token=read_env("WHATSAPP_ACCESS_TOKEN"),
            phone_number_id=read_env("WHATSAPP_PHONE_NUMBER_ID"),
            api_version=read_env("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
            api_base_url=read_env("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        ),
    )


@lru_cache(maxsize=1)
def get_chat_settings() -> ChatSettings:
    """Retorna instância cacheada de ChatSettings."""
    return _load_chat_from_env()


__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "ChatSettings",
    "SlackSettings",
    "TelegramSettings",
    "WhatsAppBusinessSettings",
    "get_chat_settings",
]
