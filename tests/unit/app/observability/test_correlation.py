"""Testes para app.observability.correlation."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Testes para set/get/reset do correlation_id."""

    def test_default_is_empty(self) -> None:
        """Sem definição, o id é string vazia."""
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        """Reset restaura o valor anterior."""
        token = set_correlation_id("req-1")
        assert get_correlation_id() == "req-1"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_set_without_value_generates_uuid(self) -> None:
        """Sem valor, gera um UUID."""
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)

    def test_generate_is_unique(self) -> None:
        """IDs gerados são distintos."""
        assert generate_correlation_id() != generate_correlation_id()


class TestCorrelationScope:
    """Testes para correlation_scope."""

    def test_explicit_id(self) -> None:
        """Usa o id informado dentro do bloco."""
        with correlation_scope("abc") as correlation_id:
            assert correlation_id == "abc"
            assert get_correlation_id() == "abc"
        assert get_correlation_id() == ""

    def test_reuses_current_id(self) -> None:
        """Escopo aninhado sem id reaproveita o atual."""
        with correlation_scope("outer"):
            with correlation_scope() as inner:
                assert inner == "outer"

    def test_generates_when_absent(self) -> None:
        """Sem id atual nem informado, gera um novo."""
        with correlation_scope() as correlation_id:
            assert correlation_id

    @pytest.mark.asyncio
    async def test_tasks_inherit_id(self) -> None:
        """Tasks criadas dentro do escopo herdam o id."""

        async def read() -> str:
            return get_correlation_id()

        with correlation_scope("fan-out"):
            results = await asyncio.gather(read(), read())
        assert results == ["fan-out", "fan-out"]
