"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Mascaramento de campos de credencial
- Nível e nome do serviço vindos dos settings base

Uso:
    from config.logging import configure_logging_from_settings
    from app.observability import get_correlation_id

    configure_logging_from_settings(correlation_id_getter=get_correlation_id)
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter
from config.settings.base.core import DEFAULT_SERVICE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base.core import BaseSettings

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: `app.observability.get_correlation_id`).
        stream: Destino do handler (padrão: stderr).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]
    return handler


def configure_logging_from_settings(
    settings: BaseSettings | None = None,
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Handler:
    """`configure_logging` com nível e serviço dos settings base."""
    if settings is None:
        from config.settings.base.core import get_base_settings

        settings = get_base_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return configure_logging(
        level=level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
