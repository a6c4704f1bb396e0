"""Verificação de integração: tenta um envio e classifica o resultado."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.channels import CheckIntegrationCode
from app.domain.results import IntegrationCheckResult
from app.observability.correlation import correlation_scope
from app.services.error_normalizer import normalize_error

if TYPE_CHECKING:
    from app.protocols.connector import ChannelConnectorProtocol
    from utils.errors import ConnectorError

logger = logging.getLogger(__name__)

_BAD_CREDENTIAL_STATUSES = frozenset({401, 403})


async def check_integration(
    connector: ChannelConnectorProtocol,
    options: Any,
) -> IntegrationCheckResult:
    """Envia `options` e traduz o resultado para `IntegrationCheckResult`.

    401/403 indicam credencial inválida; qualquer outro erro é `failed`.
    Os logs do envio de teste compartilham um correlation_id.
    """
    with correlation_scope():
        try:
            await connector.send(options)
        except Exception as exc:
            return _failure_result(connector, normalize_error(exc))

    return IntegrationCheckResult(
        success=True,
        message="Integration successful",
        code=CheckIntegrationCode.SUCCESS,
    )


def _failure_result(
    connector: ChannelConnectorProtocol,
    error: ConnectorError,
) -> IntegrationCheckResult:
    code = (
        CheckIntegrationCode.BAD_CREDENTIALS
        if error.status_code in _BAD_CREDENTIAL_STATUSES
        else CheckIntegrationCode.FAILED
    )
    logger.info(
        "integration_check_failed",
        extra={
            "provider": connector.spec.provider_id.value,
            "status_code": error.status_code,
            "code": code.value,
        },
    )
    return IntegrationCheckResult(
        success=False,
        message=error.provider_message or error.message,
        code=code,
    )


__all__ = ["check_integration"]
