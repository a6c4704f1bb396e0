"""Leitura de variáveis de ambiente compartilhada pelos settings."""

from __future__ import annotations

import os


def read_env(key: str, default: str = "") -> str:
    """Valor da env sem espaços nas bordas."""
    return os.getenv(key, default).strip()


def read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def parse_bool(value: str) -> bool:
    """Converte texto de env em bool."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def missing(value: str | None, env_key: str) -> list[str]:
    """Mensagem de erro padrão para campo obrigatório vazio."""
    return [] if value else [f"{env_key} não configurado"]


__all__ = ["missing", "parse_bool", "read_env", "read_optional_env"]
