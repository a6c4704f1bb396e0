"""Settings dos provedores de push (APNs, FCM, Expo)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings.base.env import missing, parse_bool, read_env, read_optional_env


class ApnsSettings(BaseModel):
    """Credenciais de token (.p8) do Apple Push Notification service."""

    model_config = ConfigDict(extra="ignore")

    key_id: str = Field(default="", description="Key ID da chave .p8.")
    team_id: str = Field(default="", description="Team ID da conta Apple Developer.")
    private_key: str = Field(default="", description="Chave privada EC (PEM).")
    bundle_id: str = Field(default="", description="Bundle ID usado como apns-topic.")
    production: bool = Field(
        default=True,
        description="False usa o host sandbox.",
    )

    def validate(self) -> list[str]:
        return [
            *missing(self.key_id, "APNS_KEY_ID"),
            *missing(self.team_id, "APNS_TEAM_ID"),
            *missing(self.private_key, "APNS_PRIVATE_KEY"),
            *missing(self.bundle_id, "APNS_BUNDLE_ID"),
        ]


class FcmSettings(BaseModel):
    """Service account do Firebase Cloud Messaging (HTTP v1)."""

    model_config = ConfigDict(extra="ignore")

    project_id: str = Field(default="", description="ID do projeto Firebase.")
    client_email: str = Field(default="", description="E-mail da service account.")
    private_key: str = Field(default="", description="Chave privada RSA (PEM).")

    def validate(self) -> list[str]:
        return [
            *missing(self.project_id, "FCM_PROJECT_ID"),
            *missing(self.client_email, "FCM_CLIENT_EMAIL"),
            *missing(self.private_key, "FCM_PRIVATE_KEY"),
        ]


class ExpoSettings(BaseModel):
    """Expo push service; o access token é opcional."""

    model_config = ConfigDict(extra="ignore")

    access_token: str | None = Field(
        default=None,
        description="Token de acesso (enhanced push security).",
    )

    def validate(self) -> list[str]:
        return []


class PushSettings(BaseModel):
    """Agregado dos provedores de push."""

    model_config = ConfigDict(extra="ignore")

    apns: ApnsSettings = Field(default_factory=ApnsSettings)
    fcm: FcmSettings = Field(default_factory=FcmSettings)
    expo: ExpoSettings = Field(default_factory=ExpoSettings)


def _load_push_from_env() -> PushSettings:
    """Carrega PushSettings a partir de variáveis de ambiente."""
    return PushSettings(
        apns=ApnsSettings(
            key_id=read_env("APNS_KEY_ID"),
            team_id=read_env("APNS_TEAM_ID"),
            private_key=read_env("APNS_PRIVATE_KEY"),
            bundle_id=read_env("APNS_BUNDLE_ID"),
            production=parse_bool(read_env("APNS_PRODUCTION", "true")),
        ),
        fcm=FcmSettings(
            project_id=read_env("FCM_PROJECT_ID"),
            client_email=read_env("FCM_CLIENT_EMAIL"),
            private_key=read_env("FCM_PRIVATE_KEY"),
        ),
        expo=ExpoSettings(access_token=read_optional_env("EXPO_ACCESS_TOKEN")),
    )


@lru_cache(maxsize=1)
def get_push_settings() -> PushSettings:
    """Retorna instância cacheada de PushSettings."""
    return _load_push_from_env()


__all__ = [
    "ApnsSettings",
    "ExpoSettings",
    "FcmSettings",
    "PushSettings",
    "get_push_settings",
]
