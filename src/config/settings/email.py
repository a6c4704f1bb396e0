"""Settings dos provedores de e-mail (SES, Resend, Mailgun)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings.base.env import missing, read_env, read_optional_env

MAILGUN_DEFAULT_BASE_URL = "https://api.mailgun.net"
RESEND_DEFAULT_BASE_URL = "https://api.resend.com"


class SesSettings(BaseModel):
    """Amazon SES (API v2), autenticado por SigV4."""

    model_config = ConfigDict(extra="ignore")

    region: str = Field(default="us-east-1", description="Região AWS do SES.")
    access_key_id: str = Field(default="", description="AWS access key.")
    secret_access_key: str = Field(default="", description="AWS secret key.")
    session_token: str | None = Field(default=None, description="Token STS (opcional).")
    from_address: str = Field(default="", description="Remetente padrão.")
    sender_name: str | None = Field(default=None, description="Nome do remetente padrão.")
    configuration_set_name: str | None = Field(
        default=None,
        description="Configuration set aplicado a todos os envios.",
    )

    def validate(self) -> list[str]:
        return [
            *missing(self.region, "SES_REGION"),
            *missing(self.access_key_id, "SES_ACCESS_KEY_ID"),
            *missing(self.secret_access_key, "SES_SECRET_ACCESS_KEY"),
            *missing(self.from_address, "SES_FROM_ADDRESS"),
        ]


class ResendSettings(BaseModel):
    """Resend (bearer token)."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(default="", description="API key do Resend.")
    from_address: str = Field(default="", description="Remetente padrão.")
    sender_name: str | None = Field(default=None, description="Nome do remetente padrão.")
    base_url: str = Field(default=RESEND_DEFAULT_BASE_URL, description="URL base da API.")

    def validate(self) -> list[str]:
        return [
            *missing(self.api_key, "RESEND_API_KEY"),
            *missing(self.from_address, "RESEND_FROM_ADDRESS"),
        ]


class MailgunSettings(BaseModel):
    """Mailgun (basic auth `api:<key>`)."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(default="", description="API key do Mailgun.")
    domain: str = Field(default="", description="Domínio de envio.")
    from_address: str = Field(default="", description="Remetente padrão.")
    sender_name: str | None = Field(default=None, description="Nome do remetente padrão.")
    username: str = Field(default="api", description="Usuário do basic auth.")
    base_url: str = Field(
        default=MAILGUN_DEFAULT_BASE_URL,
        description="URL base (ex: https://api.eu.mailgun.net).",
    )

    def validate(self) -> list[str]:
        return [
            *missing(self.api_key, "MAILGUN_API_KEY"),
            *missing(self.domain, "MAILGUN_DOMAIN"),
            *missing(self.from_address, "MAILGUN_FROM_ADDRESS"),
        ]


class EmailSettings(BaseModel):
    """Agregado dos provedores de e-mail."""

    model_config = ConfigDict(extra="ignore")

    ses: SesSettings = Field(default_factory=SesSettings)
    resend: ResendSettings = Field(default_factory=ResendSettings)
    mailgun: MailgunSettings = Field(default_factory=MailgunSettings)


def _load_email_from_env() -> EmailSettings:
    """Carrega EmailSettings a partir de variáveis de ambiente."""
    return EmailSettings(
        ses=SesSettings(
            region=read_env("SES_REGION", "us-east-1"),
            access_key_id=read_env("SES_ACCESS_KEY_ID"),
            secret_access_key=read_env("SES_SECRET_ACCESS_KEY"),
            session_token=read_optional_env("SES_SESSION_TOKEN"),
            from_address=read_env("SES_FROM_ADDRESS"),
            sender_name=read_optional_env("SES_SENDER_NAME"),
            configuration_set_name=read_optional_env("SES_CONFIGURATION_SET_NAME"),
        ),
        resend=ResendSettings(
            api_key=read_env("RESEND_API_KEY"),
            from_address=read_env("RESEND_FROM_ADDRESS"),
            sender_name=read_optional_env("RESEND_SENDER_NAME"),
            base_url=read_env("RESEND_BASE_URL", RESEND_DEFAULT_BASE_URL),
        ),
        mailgun=MailgunSettings(
            api_key=read_env("MAILGUN_API_KEY"),
            domain=read_env("MAILGUN_DOMAIN"),
            from_address=read_env("MAILGUN_FROM_ADDRESS"),
            sender_name=read_optional_env("MAILGUN_SENDER_NAME"),
            username=read_env("MAILGUN_USERNAME", "api"),
            base_url=read_env("MAILGUN_BASE_URL", MAILGUN_DEFAULT_BASE_URL),
        ),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_email_from_env()


__all__ = [
    "EmailSettings",
    "MailgunSettings",
    "ResendSettings",
    "SesSettings",
    "get_email_settings",
]
