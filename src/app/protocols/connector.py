"""Contrato mínimo de um conector de canal."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.connector_spec import ConnectorSpec
    from app.domain.results import SendResult

# Envio para um único destino: devolve o id do provedor ou levanta erro.
TargetSender = Callable[[str], Awaitable[str]]


class ChannelConnectorProtocol(Protocol):
    """Qualquer conector: spec declarativa + `send`."""

    @property
    def spec(self) -> ConnectorSpec: ...

    async def send(
        self,
        options: Any,
        bridge_data: Mapping[str, Any] | None = None,
    ) -> SendResult: ...

    async def aclose(self) -> None: ...
