"""Cache de credencial de curta duração, exclusivo de um conector.

A entrada é imutável: renovar significa substituir a entrada inteira.
Uma credencial só é reutilizada enquanto expira depois de `agora + margem`;
dentro da margem ela é tratada como vencida e regenerada.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from app.protocols.clock import SystemClock

if TYPE_CHECKING:
    from app.protocols.clock import ClockProtocol

DEFAULT_RENEWAL_MARGIN = timedelta(minutes=5)


@dataclass(frozen=True, slots=True)
class CredentialCacheEntry:
    """Credencial derivada e seu instante de expiração."""

    value: str
    expires_at: datetime


def is_reusable(
    entry: CredentialCacheEntry | None,
    now: datetime,
    margin: timedelta = DEFAULT_RENEWAL_MARGIN,
) -> bool:
    """True se a entrada ainda vale depois da margem (comparação estrita)."""
    return entry is not None and entry.expires_at > now + margin


class CredentialCache:
    """Slot único de credencial de um conector.

    Refresh concorrente não é deduplicado: duas corridas podem gerar
    credenciais válidas e a última substituição vence.
    """

    def __init__(
        self,
        clock: ClockProtocol | None = None,
        margin: timedelta = DEFAULT_RENEWAL_MARGIN,
    ) -> None:
        self._clock = clock or SystemClock()
        self._margin = margin
        self._entry: CredentialCacheEntry | None = None

    @property
    def clock(self) -> ClockProtocol:
        return self._clock

    @property
    def entry(self) -> CredentialCacheEntry | None:
        return self._entry

    def get(self) -> str | None:
        """Valor em cache se ainda reutilizável, senão None."""
        if is_reusable(self._entry, self._clock.now(), self._margin):
            return self._entry.value  # type: ignore[union-attr]
        return None

    def replace(self, value: str, expires_at: datetime) -> CredentialCacheEntry:
        """Substitui a entrada atual por uma nova."""
        self._entry = CredentialCacheEntry(value=value, expires_at=expires_at)
        return self._entry

    def clear(self) -> None:
        """Descarta a credencial (teardown do conector)."""
        self._entry = None


__all__ = [
    "DEFAULT_RENEWAL_MARGIN",
    "CredentialCache",
    "CredentialCacheEntry",
    "is_reusable",
]
