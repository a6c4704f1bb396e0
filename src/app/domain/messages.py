"""Opções de envio por canal (endereçamento + conteúdo)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from app.domain.channels import ChannelType


@dataclass(frozen=True, slots=True)
class Attachment:
    """Arquivo anexado a um e-mail ou SMS."""

    mime: str
    file: bytes
    name: str | None = None
    channels: tuple[ChannelType, ...] = ()
    cid: str | None = None
    disposition: str | None = None

    @property
    def filename(self) -> str:
        """Nome do arquivo com fallback estável."""
        return self.name or "attachment"


@dataclass(frozen=True, slots=True)
class EmailOptions:
    """Envio de e-mail."""

    to: list[str]
    subject: str
    html: str
    from_address: str | None = None
    text: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    reply_to: str | None = None
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    sender_name: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    custom_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SmsOptions:
    """Envio de SMS para um único número."""

    to: str
    content: str
    from_number: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    custom_data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PushOverrides:
    """Ajustes opcionais de push definidos no passo do workflow."""

    type: Literal["notification", "data"] | None = None
    data: dict[str, str] | None = None
    tag: str | None = None
    body: str | None = None
    icon: str | None = None
    badge: int | None = None
    color: str | None = None
    sound: str | None = None
    title: str | None = None
    android: dict[str, Any] | None = None
    apns: dict[str, Any] | None = None
    fcm_options: dict[str, Any] | None = None
    web_push: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class PushOptions:
    """Envio de push para um ou mais device tokens."""

    target: list[str]
    title: str
    content: str
    payload: dict[str, Any] = field(default_factory=dict)
    overrides: PushOverrides = field(default_factory=PushOverrides)
    subscriber: dict[str, Any] = field(default_factory=dict)
    step: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ChatOptions:
    """Envio de mensagem de chat (webhook ou canal/destinatário)."""

    content: str
    webhook_url: str | None = None
    channel: str | None = None
    custom_data: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Attachment",
    "ChatOptions",
    "EmailOptions",
    "PushOptions",
    "PushOverrides",
    "SmsOptions",
]
