"""Fonte de tempo injetável (expiração de credenciais e timestamps)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Retorna o instante atual com timezone."""

    def now(self) -> datetime: ...


class SystemClock:
    """Relógio real em UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


def to_iso8601(moment: datetime) -> str:
    """Formata como `YYYY-MM-DDTHH:MM:SS.mmmZ` (UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.") + (
        f"{moment.microsecond // 1000:03d}Z"
    )
