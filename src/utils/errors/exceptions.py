"""Erro normalizado dos conectores e suas variações.

`ConnectorError` é o único formato de erro que atravessa a fronteira dos
conectores. As subclasses só nomeiam a categoria da falha; o formato
(message, status_code, provider_code, provider_message, cause) é o mesmo.
"""

from __future__ import annotations

DEFAULT_STATUS_CODE = 500


class ConnectorError(Exception):
    """Falha de envio normalizada, independente do provedor de origem.

    Attributes:
        message: Mensagem legível.
        status_code: Status HTTP (500 quando a origem não informa).
        provider_code: Código de erro do provedor, quando existir.
        provider_message: Mensagem original do provedor, quando existir.
        cause: Exceção original, quando existir.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider_code: str | None = None,
        provider_message: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else DEFAULT_STATUS_CODE
        self.provider_code = provider_code
        self.provider_message = provider_message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, object]:
        """Representação serializável (sem a causa)."""
        data: dict[str, object] = {
            "message": self.message,
            "status_code": self.status_code,
        }
        if self.provider_code is not None:
            data["provider_code"] = self.provider_code
        if self.provider_message is not None:
            data["provider_message"] = self.provider_message
        return data

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, provider_code={self.provider_code!r})"
        )


class MissingConfigurationError(ConnectorError):
    """Configuração ou endereçamento ausente, detectado antes de qualquer IO."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


class FanOutFailureError(ConnectorError):
    """Todos os destinos de um envio em fan-out falharam."""


class CredentialError(ConnectorError):
    """Falha ao derivar ou assinar credencial de curta duração."""
