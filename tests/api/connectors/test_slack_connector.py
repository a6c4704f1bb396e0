"""Testes para o conector Slack."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.slack import SlackChatConnector
from app.domain.messages import ChatOptions
from app.infra.http import HttpClient
from config.settings import SlackSettings
from tests.fakes.fake_clock import FakeClock
from tests.fakes.fake_transport import RecordingTransport, request_json
from utils.errors import ConnectorError, MissingConfigurationError

WEBHOOK = "https://hooks.slack.com/services/T000/B000/XXXX"


def _connector(transport: RecordingTransport, webhook_url: str | None = None) -> SlackChatConnector:
    return SlackChatConnector(
        SlackSettings(webhook_url=webhook_url),
        http_client=HttpClient(transport=transport),
        clock=FakeClock(),
    )


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="ok")


class TestSlackChatConnector:
    """Testes para SlackChatConnector."""

    @pytest.mark.asyncio
    async def test_posts_text_to_webhook(self) -> None:
        """Webhook das opções recebe {text}; sem id no resultado."""
        transport = RecordingTransport(_ok)
        result = await _connector(transport).send(ChatOptions(content="Deploy ok", webhook_url=WEBHOOK))

        assert result.id is None
        assert result.to_dict() == {"date": "2024-01-15T12:00:00.000Z"}
        assert str(transport.last.url) == WEBHOOK
        assert request_json(transport.last) == {"text": "Deploy ok"}

    @pytest.mark.asyncio
    async def test_settings_webhook_fallback(self) -> None:
        """Sem webhook nas opções, usa o dos settings."""
        transport = RecordingTransport(_ok)
        await _connector(transport, webhook_url=WEBHOOK).send(ChatOptions(content="x"))
        assert str(transport.last.url) == WEBHOOK

    @pytest.mark.asyncio
    async def test_passthrough_blocks(self) -> None:
        """Blocks do passthrough seguem crus."""
        transport = RecordingTransport(_ok)
        blocks = [{"type": "section", "text": {"type": "mrkdwn", "text": "*oi*"}}]
        await _connector(transport).send(
            ChatOptions(content="oi", webhook_url=WEBHOOK),
            {"_passthrough": {"body": {"blocks": blocks}}},
        )
        assert request_json(transport.last)["blocks"] == blocks

    @pytest.mark.asyncio
    async def test_missing_webhook(self) -> None:
        """Nenhum webhook: erro 400 sem chamada."""
        transport = RecordingTransport(_ok)
        with pytest.raises(MissingConfigurationError) as exc_info:
            await _connector(transport).send(ChatOptions(content="x"))
        assert exc_info.value.status_code == 400
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_text_error(self) -> None:
        """Erro em texto puro do webhook."""
        transport = RecordingTransport(lambda request: httpx.Response(400, text="invalid_payload"))
        with pytest.raises(ConnectorError) as exc_info:
            await _connector(transport).send(ChatOptions(content="x", webhook_url=WEBHOOK))
        assert exc_info.value.provider_message == "invalid_payload"
