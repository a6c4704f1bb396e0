"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utils.errors import ConnectorError

logger = logging.getLogger(__name__)


def log_meta_error(
    error: ConnectorError,
    error_type: str | None,
    phone_number_id: str,
) -> None:
    """Loga erro da Meta sem expor destinatário nem token."""
    logger.warning(
        "whatsapp_send_failed",
        extra={
            "phone_number_id": phone_number_id,
            "status_code": error.status_code,
            "error_code": error.provider_code,
            "error_type": error_type,
        },
    )


def log_success(phone_number_id: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "whatsapp_send_succeeded",
        extra={
            "phone_number_id": phone_number_id,
            "status_code": status_code,
        },
    )
