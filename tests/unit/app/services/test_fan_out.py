"""Testes para app.services.fan_out."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.services.error_normalizer import ProviderErrorDetails
from app.services.fan_out import (
    TargetFailure,
    TargetSuccess,
    dispatch_fan_out,
    dispatch_group,
    settle_outcomes,
)
from utils.errors import ConnectorError, FanOutFailureError, MissingConfigurationError


def _status_error(status_code: int, payload: dict[str, object]) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://provider.test/send")
    response = httpx.Response(status_code, json=payload, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def _parse_reason(body: object) -> ProviderErrorDetails:
    assert isinstance(body, dict)
    return ProviderErrorDetails(code="E", message=str(body["reason"]))


class TestDispatchFanOut:
    """Testes para dispatch_fan_out."""

    @pytest.mark.asyncio
    async def test_all_success_keeps_order(self) -> None:
        """Ids na ordem dos destinos, mesmo com conclusão fora de ordem."""

        async def send_one(target: str) -> str:
            await asyncio.sleep(0.01 if target == "a" else 0)
            return f"id-{target}"

        report = await dispatch_fan_out(["a", "b", "c"], send_one, label="Test")
        assert report.ids == ["id-a", "id-b", "id-c"]
        assert report.succeeded == 3
        assert report.failed == 0

    @pytest.mark.asyncio
    async def test_partial_failure_returns_reason_in_position(self) -> None:
        """Falha parcial: razão do provedor na posição do destino."""

        async def send_one(target: str) -> str:
            if target == "bad":
                raise _status_error(400, {"reason": "BadDeviceToken"})
            return f"id-{target}"

        report = await dispatch_fan_out(
            ["good", "bad"], send_one, label="APNs", error_parser=_parse_reason
        )
        assert report.ids == ["id-good", "BadDeviceToken"]
        assert isinstance(report.outcomes[0], TargetSuccess)
        assert isinstance(report.outcomes[1], TargetFailure)
        assert report.outcomes[1].target == "bad"

    @pytest.mark.asyncio
    async def test_total_failure_raises_with_count(self) -> None:
        """Todas as falhas: FanOutFailureError com contagem e razões."""

        async def send_one(target: str) -> str:
            raise _status_error(410, {"reason": f"Unregistered-{target}"})

        with pytest.raises(FanOutFailureError) as exc_info:
            await dispatch_fan_out(["a", "b"], send_one, label="APNs", error_parser=_parse_reason)

        error = exc_info.value
        assert error.message == "All 2 APNs message(s) failed to send"
        assert error.status_code == 500
        assert error.provider_message == "Unregistered-a; Unregistered-b"

    @pytest.mark.asyncio
    async def test_failure_does_not_cancel_siblings(self) -> None:
        """Uma falha rápida não cancela envios irmãos mais lentos."""
        finished: list[str] = []

        async def send_one(target: str) -> str:
            if target == "fast-fail":
                raise RuntimeError("boom")
            await asyncio.sleep(0.01)
            finished.append(target)
            return target

        report = await dispatch_fan_out(["fast-fail", "slow"], send_one, label="Test")
        assert finished == ["slow"]
        assert report.ids == ["boom", "slow"]

    @pytest.mark.asyncio
    async def test_empty_targets_raise_before_sending(self) -> None:
        """Lista vazia: erro de configuração 400 sem nenhuma chamada."""
        calls: list[str] = []

        async def send_one(target: str) -> str:
            calls.append(target)
            return target

        with pytest.raises(MissingConfigurationError) as exc_info:
            await dispatch_fan_out([], send_one, label="FCM")
        assert exc_info.value.status_code == 400
        assert calls == []


class TestSettleOutcomes:
    """Testes para settle_outcomes."""

    def test_one_success_is_enough(self) -> None:
        """Um sucesso basta para não levantar erro."""
        report = settle_outcomes(
            [TargetFailure(target="a", reason="DeviceNotRegistered"), TargetSuccess("b", "t-1")],
            label="Expo push",
        )
        assert report.ids == ["DeviceNotRegistered", "t-1"]

    def test_no_success_raises(self) -> None:
        """Nenhum sucesso levanta FanOutFailureError."""
        with pytest.raises(FanOutFailureError, match="All 1 Expo push message"):
            settle_outcomes([TargetFailure(target="a", reason="x")], label="Expo push")


class TestDispatchGroup:
    """Testes para dispatch_group."""

    @pytest.mark.asyncio
    async def test_single_outcome(self) -> None:
        """Envio em grupo produz um único id."""

        async def send_once() -> str:
            return "projects/p/messages/1"

        report = await dispatch_group(send_once, label="FCM")
        assert report.ids == ["projects/p/messages/1"]

    @pytest.mark.asyncio
    async def test_failure_raises_provider_error(self) -> None:
        """Falha levanta o erro normalizado do provedor, não o agregado."""

        async def send_once() -> str:
            raise _status_error(404, {"reason": "TopicNotFound"})

        with pytest.raises(ConnectorError) as exc_info:
            await dispatch_group(send_once, label="FCM", error_parser=_parse_reason)

        assert not isinstance(exc_info.value, FanOutFailureError)
        assert exc_info.value.status_code == 404
        assert exc_info.value.provider_message == "TopicNotFound"
