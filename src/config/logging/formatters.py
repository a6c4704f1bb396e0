"""Formatters de logging estruturado.

Define formatters para logs JSON com campos obrigatórios:
- correlation_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Conforme as regras do projeto: logs estruturados, sem PII nem segredos.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado, na ordem de saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via `extra` (provider, status_code, attempted...)
    entram como chaves adicionais do objeto JSON.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "WARNING",
            "logger": "app.services.fan_out",
            "message": "fan_out_partial_failure",
            "correlation_id": "abc-123",
            "service": "pyloto-connectors",
            "provider": "APNs",
            "attempted": 2,
            "failed": 1
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
