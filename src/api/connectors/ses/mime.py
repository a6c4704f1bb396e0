"""Mensagem MIME crua para envio de e-mail com anexos pelo SES."""

from __future__ import annotations

import base64
from email import policy
from email.message import EmailMessage
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.messages import Attachment, EmailOptions


def _add_attachment(message: EmailMessage, attachment: Attachment) -> None:
    maintype, _, subtype = attachment.mime.partition("/")
    disposition = attachment.disposition or ("inline" if attachment.cid else "attachment")
    message.add_attachment(
        attachment.file,
        maintype=maintype or "application",
        subtype=subtype or "octet-stream",
        filename=attachment.filename,
        disposition=disposition,
        cid=f"<{attachment.cid}>" if attachment.cid else None,
    )


def build_mime_message(options: EmailOptions, from_address: str) -> EmailMessage:
    """multipart/mixed com alternativa texto/HTML e os anexos."""
    message = EmailMessage()
    message["From"] = from_address
    message["To"] = ", ".join(options.to)
    if options.cc:
        message["Cc"] = ", ".join(options.cc)
    if options.bcc:
        message["Bcc"] = ", ".join(options.bcc)
    if options.reply_to:
        message["Reply-To"] = options.reply_to
    message["Subject"] = options.subject
    for name, value in options.headers.items():
        message[name] = value

    if options.text:
        message.set_content(options.text)
        message.add_alternative(options.html, subtype="html")
    else:
        message.set_content(options.html, subtype="html")

    for attachment in options.attachments:
        _add_attachment(message, attachment)
    return message


def encode_raw_message(message: EmailMessage) -> str:
    """Bytes MIME (linhas CRLF) em base64, como o SES espera em `Raw.Data`."""
    return base64.b64encode(message.as_bytes(policy=policy.SMTP)).decode("ascii")
