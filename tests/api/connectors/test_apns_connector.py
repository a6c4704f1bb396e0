"""Testes para o conector APNs."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.apns import ApnsPushConnector
from app.domain.messages import PushOptions, PushOverrides
from app.infra.http import HttpClient
from config.settings import ApnsSettings
from tests.fakes.fake_clock import FakeClock
from tests.fakes.fake_transport import RecordingTransport, request_json
from tests.fakes.keys import ec_private_key_pem
from utils.errors import FanOutFailureError, MissingConfigurationError


def _settings(production: bool = True) -> ApnsSettings:
    return ApnsSettings(
        key_id="KEY123",
        team_id="TEAM123",
        private_key=ec_private_key_pem(),
        bundle_id="com.acme.app",
        production=production,
    )


def _device_handler(request: httpx.Request) -> httpx.Response:
    device_token = request.url.path.rsplit("/", 1)[-1]
    if device_token.startswith("bad"):
        return httpx.Response(400, json={"reason": "BadDeviceToken"})
    return httpx.Response(200, headers={"apns-id": f"apns-{device_token}"})


def _connector(transport: RecordingTransport, production: bool = True) -> ApnsPushConnector:
    return ApnsPushConnector(
        _settings(production),
        http_client=HttpClient(transport=transport),
        clock=FakeClock(),
    )


def _options(*targets: str, **kwargs: object) -> PushOptions:
    return PushOptions(target=list(targets), title="Olá", content="Sua entrega chegou", **kwargs)


class TestApnsPushConnector:
    """Testes para ApnsPushConnector."""

    @pytest.mark.asyncio
    async def test_sends_one_request_per_device(self) -> None:
        """Um POST por token, ids do header apns-id na ordem."""
        transport = RecordingTransport(_device_handler)
        result = await _connector(transport).send(_options("tok1", "tok2"))

        assert result.ids == ["apns-tok1", "apns-tok2"]
        assert result.date == "2024-01-15T12:00:00.000Z"
        paths = sorted(request.url.path for request in transport.requests)
        assert paths == ["/3/device/tok1", "/3/device/tok2"]
        assert all(request.url.host == "api.push.apple.com" for request in transport.requests)

    @pytest.mark.asyncio
    async def test_headers_and_payload(self) -> None:
        """Headers de autenticação/tópico e payload aps + custom."""
        transport = RecordingTransport(_device_handler)
        options = _options(
            "tok1",
            payload={"orderId": "42"},
            overrides=PushOverrides(sound="default", badge=2),
        )
        await _connector(transport).send(options)

        request = transport.last
        assert request.headers["authorization"].startswith("bearer ")
        assert request.headers["apns-topic"] == "com.acme.app"
        assert request.headers["apns-push-type"] == "alert"
        assert request_json(request) == {
            "aps": {
                "alert": {"title": "Olá", "body": "Sua entrega chegou"},
                "sound": "default",
                "badge": 2,
            },
            "orderId": "42",
        }

    @pytest.mark.asyncio
    async def test_passthrough_overrides(self) -> None:
        """Passthrough altera body aninhado e adiciona headers."""
        transport = RecordingTransport(_device_handler)
        await _connector(transport).send(
            _options("tok1"),
            {
                "_passthrough": {
                    "body": {"aps": {"mutable-content": 1}},
                    "headers": {"apns-priority": "5"},
                }
            },
        )
        request = transport.last
        assert request.headers["apns-priority"] == "5"
        body = request_json(request)
        assert body["aps"]["mutable-content"] == 1
        assert body["aps"]["alert"]["title"] == "Olá"

    @pytest.mark.asyncio
    async def test_sandbox_host(self) -> None:
        """production=False usa o host sandbox."""
        transport = RecordingTransport(_device_handler)
        await _connector(transport, production=False).send(_options("tok1"))
        assert transport.last.url.host == "api.sandbox.push.apple.com"

    @pytest.mark.asyncio
    async def test_partial_failure(self) -> None:
        """Dispositivo recusado aparece com a razão do APNs."""
        transport = RecordingTransport(_device_handler)
        result = await _connector(transport).send(_options("tok1", "bad1"))
        assert result.ids == ["apns-tok1", "BadDeviceToken"]

    @pytest.mark.asyncio
    async def test_total_failure(self) -> None:
        """Todos recusados: FanOutFailureError."""
        transport = RecordingTransport(_device_handler)
        with pytest.raises(FanOutFailureError, match="All 2 APNs message"):
            await _connector(transport).send(_options("bad1", "bad2"))

    @pytest.mark.asyncio
    async def test_empty_targets(self) -> None:
        """Sem destinos: erro 400 e nenhuma requisição."""
        transport = RecordingTransport(_device_handler)
        with pytest.raises(MissingConfigurationError):
            await _connector(transport).send(_options())
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_token_reused_across_sends(self) -> None:
        """O JWT do provedor é reaproveitado entre envios."""
        transport = RecordingTransport(_device_handler)
        connector = _connector(transport)
        await connector.send(_options("tok1"))
        await connector.send(_options("tok2"))
        first, second = (request.headers["authorization"] for request in transport.requests)
        assert first == second
