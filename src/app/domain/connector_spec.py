"""Descrição declarativa de um conector.

Um conector não herda de uma classe base: ele carrega um `ConnectorSpec`
com as capacidades (canal, casing, autenticação) e compõe os serviços
compartilhados (transform, fan-out, normalização de erro).
"""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.channels import AuthStrategy, ChannelType, ProviderId
from utils.casing import CasingConvention


@dataclass(frozen=True, slots=True)
class ConnectorSpec:
    """Capacidades fixas de um conector."""

    provider_id: ProviderId
    channel: ChannelType
    casing: CasingConvention
    auth: AuthStrategy

    @property
    def label(self) -> str:
        """Nome curto usado em logs e mensagens de erro."""
        return _LABELS.get(self.provider_id, self.provider_id.value)


_LABELS: dict[ProviderId, str] = {
    ProviderId.APNS: "APNs",
    ProviderId.FCM: "FCM",
    ProviderId.EXPO: "Expo push",
    ProviderId.SES: "SES",
    ProviderId.SNS: "SNS",
    ProviderId.WHATSAPP_BUSINESS: "WhatsApp",
}


__all__ = ["ConnectorSpec"]
