"""Testes para o conector WhatsApp Business."""

from __future__ import annotations

import logging

import pytest

from api.connectors.whatsapp import WhatsAppChatConnector
from app.domain.messages import ChatOptions
from app.infra.http import HttpClient
from config.settings import WhatsAppBusinessSettings
from tests.fakes.fake_clock import FakeClock
from tests.fakes.fake_transport import RecordingTransport, json_response, request_json
from utils.errors import ConnectorError

OAUTH_ERROR = {
    "error": {
        "message": "Invalid OAuth access token.",
        "type": "OAuthException",
        "code": 190,
        "fbtrace_id": "AbC",
    }
}


def _connector(transport: RecordingTransport) -> WhatsAppChatConnector:
    settings = WhatsAppBusinessSettings(access_token="EAAG", phone_number_id="1098")
    return WhatsAppChatConnector(settings, http_client=HttpClient(transport=transport), clock=FakeClock())


class TestWhatsAppChatConnector:
    """Testes para WhatsAppChatConnector."""

    @pytest.mark.asyncio
    async def test_text_message(self) -> None:
        """Mensagem de texto para o número do canal."""
        transport = RecordingTransport(
            json_response({"messaging_product": "whatsapp", "messages": [{"id": "wamid.1"}]})
        )
        result = await _connector(transport).send(ChatOptions(content="Oi", channel="5511999990000"))

        assert result.id == "wamid.1"
        request = transport.last
        assert str(request.url) == "https://graph.facebook.com/v21.0/1098/messages"
        assert request.headers["authorization"] == "Bearer EAAG"
        assert request_json(request) == {
            "messaging_product": "whatsapp",
            "to": "5511999990000",
            "type": "text",
            "text": {"body": "Oi"},
        }

    @pytest.mark.asyncio
    async def test_graph_error_is_normalized_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Erro da Graph API vira ConnectorError e é logado sem PII."""
        transport = RecordingTransport(json_response(OAUTH_ERROR, status_code=401))
        with caplog.at_level(logging.WARNING), pytest.raises(ConnectorError) as exc_info:
            await _connector(transport).send(ChatOptions(content="Oi", channel="5511999990000"))

        assert exc_info.value.status_code == 401
        assert exc_info.value.provider_code == "190"
        assert exc_info.value.provider_message == "Invalid OAuth access token."
        record = next(r for r in caplog.records if r.getMessage() == "whatsapp_send_failed")
        assert record.error_type == "OAuthException"
        assert "5511999990000" not in caplog.text
