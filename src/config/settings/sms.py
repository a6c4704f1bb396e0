"""Settings dos provedores de SMS (Twilio, Plivo, Vonage, SNS)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings.base.env import missing, read_env, read_optional_env


class TwilioSettings(BaseModel):
    """Twilio Messaging (basic auth `sid:token`)."""

    model_config = ConfigDict(extra="ignore")

    account_sid: str = Field(default="", description="Account SID.")
    auth_token: str = Field(default="", description="Auth token.")
    from_number: str = Field(default="", description="Número de origem padrão.")

    def validate(self) -> list[str]:
        return [
            *missing(self.account_sid, "TWILIO_ACCOUNT_SID"),
            *missing(self.auth_token, "TWILIO_AUTH_TOKEN"),
        ]


class PlivoSettings(BaseModel):
    """Plivo (basic auth `auth_id:token`)."""

    model_config = ConfigDict(extra="ignore")

    auth_id: str = Field(default="", description="Auth ID.")
    auth_token: str = Field(default="", description="Auth token.")
    from_number: str = Field(default="", description="Número de origem padrão.")

    def validate(self) -> list[str]:
        return [
            *missing(self.auth_id, "PLIVO_AUTH_ID"),
            *missing(self.auth_token, "PLIVO_AUTH_TOKEN"),
        ]


class VonageSettings(BaseModel):
    """Vonage/Nexmo SMS API (credenciais no corpo)."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(default="", description="API key.")
    api_secret: str = Field(default="", description="API secret.")
    from_number: str = Field(default="", description="Remetente padrão.")

    def validate(self) -> list[str]:
        return [
            *missing(self.api_key, "VONAGE_API_KEY"),
            *missing(self.api_secret, "VONAGE_API_SECRET"),
        ]


class SnsSettings(BaseModel):
    """Amazon SNS (Publish direto para telefone), autenticado por SigV4."""

    model_config = ConfigDict(extra="ignore")

    region: str = Field(default="us-east-1", description="Região AWS do SNS.")
    access_key_id: str = Field(default="", description="AWS access key.")
    secret_access_key: str = Field(default="", description="AWS secret key.")
    session_token: str | None = Field(default=None, description="Token STS (opcional).")

    def validate(self) -> list[str]:
        return [
            *missing(self.region, "SNS_REGION"),
            *missing(self.access_key_id, "SNS_ACCESS_KEY_ID"),
            *missing(self.secret_access_key, "SNS_SECRET_ACCESS_KEY"),
        ]


class SmsSettings(BaseModel):
    """Agregado dos provedores de SMS."""

    model_config = ConfigDict(extra="ignore")

    twilio: TwilioSettings = Field(default_factory=TwilioSettings)
    plivo: PlivoSettings = Field(default_factory=PlivoSettings)
    vonage: VonageSettings = Field(default_factory=VonageSettings)
    sns: SnsSettings = Field(default_factory=SnsSettings)


def _load_sms_from_env() -> SmsSettings:
    """Carrega SmsSettings a partir de variáveis de ambiente."""
    return SmsSettings(
        twilio=TwilioSettings(
            account_sid=read_env("TWILIO_ACCOUNT_SID"),
            auth_token=read_env("TWILIO_AUTH_TOKEN"),
            from_number=read_env("TWILIO_FROM_NUMBER"),
        ),
        plivo=PlivoSettings(
            auth_id=read_env("PLIVO_AUTH_ID"),
            auth_token=read_env("PLIVO_AUTH_TOKEN"),
            from_number=read_env("PLIVO_FROM_NUMBER"),
        ),
        vonage=VonageSettings(
            api_key=read_env("VONAGE_API_KEY"),
            api_secret=read_env("VONAGE_API_SECRET"),
            from_number=read_env("VONAGE_FROM_NUMBER"),
        ),
        sns=SnsSettings(
            region=read_env("SNS_REGION", "us-east-1"),
            access_key_id=read_env("SNS_ACCESS_KEY_ID"),
            secret_access_key=read_env("SNS_SECRET_ACCESS_KEY"),
            session_token=read_optional_env("SNS_SESSION_TOKEN"),
        ),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_sms_from_env()


__all__ = [
    "PlivoSettings",
    "SmsSettings",
    "SnsSettings",
    "TwilioSettings",
    "VonageSettings",
    "get_sms_settings",
]
