"""Fan-out de envios: uma chamada lógica, N requisições ao provedor.

Todos os destinos são disparados de forma concorrente e o resultado só é
decidido depois que todos terminam (sucesso ou falha). Uma falha nunca
cancela os envios irmãos em andamento.

Política de agregação:
- pelo menos um sucesso: devolve a lista completa, na ordem de envio,
  com o id do provedor ou a razão da falha de cada destino
- nenhum sucesso: levanta `FanOutFailureError` com todas as razões
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.services.error_normalizer import ErrorParser, describe_failure, raise_normalized
from utils.errors import FanOutFailureError, MissingConfigurationError

if TYPE_CHECKING:
    from app.protocols.connector import TargetSender

logger = logging.getLogger(__name__)

FAILURE_SEPARATOR = "; "


@dataclass(frozen=True, slots=True)
class TargetSuccess:
    """Destino entregue ao provedor."""

    target: str
    id: str


@dataclass(frozen=True, slots=True)
class TargetFailure:
    """Destino recusado pelo provedor ou com falha de transporte."""

    target: str
    reason: str
    error: BaseException | None = None


TargetOutcome = TargetSuccess | TargetFailure


@dataclass(frozen=True, slots=True)
class FanOutReport:
    """Resultado agregado, um outcome por destino, na ordem submetida."""

    outcomes: tuple[TargetOutcome, ...]

    @property
    def ids(self) -> list[str]:
        """Lista plana: id em caso de sucesso, razão em caso de falha."""
        return [
            outcome.id if isinstance(outcome, TargetSuccess) else outcome.reason
            for outcome in self.outcomes
        ]

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if isinstance(outcome, TargetSuccess))

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded


async def dispatch_fan_out(
    targets: Sequence[str],
    send_one: TargetSender,
    *,
    label: str,
    error_parser: ErrorParser | None = None,
) -> FanOutReport:
    """Envia para cada destino em paralelo e classifica os resultados.

    Args:
        targets: Destinos (device tokens, números...). Não pode ser vazio.
        send_one: Envio para um destino; devolve o id ou levanta erro.
        label: Nome do provedor para mensagens (ex: "APNs").
        error_parser: Extrator do erro do provedor para as razões.

    Returns:
        FanOutReport com pelo menos um sucesso.

    Raises:
        MissingConfigurationError: Nenhum destino informado.
        FanOutFailureError: Todos os destinos falharam.
    """
    if not targets:
        raise MissingConfigurationError(f"No targets provided for {label} message")

    results = await asyncio.gather(
        *(send_one(target) for target in targets),
        return_exceptions=True,
    )

    outcomes: list[TargetOutcome] = []
    for target, result in zip(targets, results, strict=True):
        if isinstance(result, BaseException):
            outcomes.append(
                TargetFailure(
                    target=target,
                    reason=describe_failure(result, error_parser),
                    error=result,
                )
            )
        else:
            outcomes.append(TargetSuccess(target=target, id=result))

    return settle_outcomes(outcomes, label=label)


def settle_outcomes(outcomes: Sequence[TargetOutcome], *, label: str) -> FanOutReport:
    """Aplica a regra "pelo menos um sucesso" a outcomes já coletados.

    Usado diretamente por provedores que aceitam o lote numa chamada só
    e devolvem o resultado por destino (ex: tickets do Expo).

    Raises:
        FanOutFailureError: Nenhum outcome de sucesso.
    """
    report = FanOutReport(outcomes=tuple(outcomes))
    attempted = len(report.outcomes)

    if report.succeeded == 0:
        logger.warning(
            "fan_out_total_failure",
            extra={"provider": label, "attempted": attempted},
        )
        raise FanOutFailureError(
            f"All {attempted} {label} message(s) failed to send",
            status_code=500,
            provider_message=FAILURE_SEPARATOR.join(report.ids),
        )

    if report.failed:
        logger.warning(
            "fan_out_partial_failure",
            extra={
                "provider": label,
                "attempted": attempted,
                "failed": report.failed,
            },
        )
    else:
        logger.debug(
            "fan_out_success",
            extra={"provider": label, "attempted": attempted},
        )
    return report


async def dispatch_group(
    send_once: Callable[[], Awaitable[str]],
    *,
    label: str,
    error_parser: ErrorParser | None = None,
) -> FanOutReport:
    """Envio único para endereçamento em grupo (ex: tópico).

    Sempre produz exatamente um outcome; em caso de falha levanta o erro
    normalizado do provedor (e não o agregado de fan-out).
    """
    try:
        message_id = await send_once()
    except Exception as exc:
        raise_normalized(exc, parser=error_parser, fallback_message=f"Unknown {label} error")
    return FanOutReport(outcomes=(TargetSuccess(target="group", id=message_id),))


__all__ = [
    "FAILURE_SEPARATOR",
    "FanOutReport",
    "TargetFailure",
    "TargetOutcome",
    "TargetSuccess",
    "dispatch_fan_out",
    "dispatch_group",
    "settle_outcomes",
]
