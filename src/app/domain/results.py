"""Resultados devolvidos pelos conectores."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.channels import CheckIntegrationCode


@dataclass(frozen=True, slots=True)
class SendResult:
    """Resultado de envio bem-sucedido (total ou parcial).

    `id` é usado por conectores de destino único; `ids` por conectores
    com fan-out, onde cada posição traz o id do provedor ou a razão da
    falha daquele destino, na ordem em que os destinos foram enviados.
    """

    date: str
    id: str | None = None
    ids: list[str] | None = None

    def to_dict(self) -> dict[str, object]:
        """Formato `{id?, ids?, date}`."""
        data: dict[str, object] = {"date": self.date}
        if self.id is not None:
            data["id"] = self.id
        if self.ids is not None:
            data["ids"] = list(self.ids)
        return data


@dataclass(frozen=True, slots=True)
class IntegrationCheckResult:
    """Resultado de `check_integration`."""

    success: bool
    message: str
    code: CheckIntegrationCode


__all__ = ["IntegrationCheckResult", "SendResult"]
