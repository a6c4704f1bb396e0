"""Gerenciamento de correlation_id para rastreamento de envios.

O correlation_id é injetado em todos os logs pelo `CorrelationIdFilter`.
Usa ContextVar, então cada task asyncio do fan-out herda o id do envio
que a criou.

Uso:
    from app.observability import correlation_scope, get_correlation_id

    with correlation_scope(request_id):
        await connector.send(options)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco; reaproveita o atual se houver.

    Yields:
        O correlation_id em vigor dentro do bloco.
    """
    current = get_correlation_id()
    token = set_correlation_id(correlation_id or current or None)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
