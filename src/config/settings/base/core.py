"""Settings base do pyloto-connectors.

Configurações comuns a todos os conectores.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base.env import parse_bool, read_env

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "pyloto-connectors"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        log_level: Nível de log raiz
        http_timeout_seconds: Timeout padrão das chamadas aos provedores
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = "INFO"
    http_timeout_seconds: float = 30.0

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.http_timeout_seconds <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS deve ser positivo")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(read_env("ENVIRONMENT", "development")),
        service_name=read_env("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=parse_bool(read_env("DEBUG", "false")),
        log_level=read_env("LOG_LEVEL", "INFO").upper(),
        http_timeout_seconds=float(read_env("HTTP_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
