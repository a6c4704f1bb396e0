"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização
    configure_logging(level="INFO", service_name="pyloto-connectors")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("fan_out_success", extra={"provider": "FCM", "attempted": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Logs estruturados, sem PII e sem credenciais.
"""

from config.logging.config import (
    VALID_LOG_LEVELS,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.filters import REDACTED, CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    # Filters
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    # Configuração principal
    "configure_logging",
    "configure_logging_from_settings",
    # Formatters
    "create_json_formatter",
    "get_logger",
]
