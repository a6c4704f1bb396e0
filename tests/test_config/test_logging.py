"""Testes abrangentes para config.logging.

Cobre: configure_logging, configure_logging_from_settings, get_logger,
CorrelationIdFilter, SecretRedactionFilter, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REDACTED,
    REQUIRED_LOG_FIELDS,
    VALID_LOG_LEVELS,
    CorrelationIdFilter,
    SecretRedactionFilter,
    configure_logging,
    configure_logging_from_settings,
    create_json_formatter,
    get_logger,
)
from config.settings import DEFAULT_SERVICE_NAME, BaseSettings


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO

    def test_configure_logging_debug_level(self) -> None:
        """Configura logging com nível DEBUG."""
        configure_logging(level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG

    def test_configure_logging_warning_level(self) -> None:
        """Configura logging com nível WARNING."""
        configure_logging(level="warning")  # case insensitive
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_both_filters(self) -> None:
        """Handler instalado injeta contexto e mascara segredos."""
        handler = configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        assert logging.getLogger().handlers == [handler]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, SecretRedactionFilter) for f in handler.filters)

    def test_valid_log_levels_constant(self) -> None:
        """VALID_LOG_LEVELS contém os níveis esperados."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        """DEFAULT_SERVICE_NAME está definido."""
        assert DEFAULT_SERVICE_NAME == "pyloto-connectors"


class TestConfigureLoggingFromSettings:
    """Testes para configure_logging_from_settings."""

    def test_uses_settings_level(self) -> None:
        """Usa o nível dos settings base."""
        configure_logging_from_settings(BaseSettings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_debug_forces_debug_level(self) -> None:
        """debug=True força nível DEBUG."""
        configure_logging_from_settings(BaseSettings(debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        """Retorna um logger para o nome especificado."""
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Mesmo nome retorna mesma instância."""
        assert get_logger("same.module") is get_logger("same.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        """Filter adiciona correlation_id do getter."""
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        """Filter usa string vazia quando não há getter."""
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""
        assert record.service == "service_name"


class TestSecretRedactionFilter:
    """Testes para SecretRedactionFilter."""

    def test_masks_sensitive_extras(self) -> None:
        """Extras com nome de credencial são mascarados."""
        record = _record()
        record.authorization = "Bearer abc"
        record.access_token = "ya29"
        record.api_secret = "s3cr3t"
        record.provider = "FCM"
        assert SecretRedactionFilter().filter(record) is True
        assert record.authorization == REDACTED
        assert record.access_token == REDACTED
        assert record.api_secret == REDACTED
        assert record.provider == "FCM"

    def test_standard_attributes_untouched(self) -> None:
        """Atributos padrão do LogRecord não são alterados."""
        record = _record(msg="token refreshed")
        SecretRedactionFilter().filter(record)
        assert record.msg == "token refreshed"
        assert record.name == "test"

    def test_custom_markers(self) -> None:
        """Marcadores customizados substituem os padrão."""
        filter_ = SecretRedactionFilter(markers=["phone"])
        assert filter_.is_sensitive("phone_number")
        assert not filter_.is_sensitive("access_token")


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        """REQUIRED_LOG_FIELDS contém campos obrigatórios."""
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == set(REQUIRED_LOG_FIELDS)

    def test_field_rename_map_content(self) -> None:
        """FIELD_RENAME_MAP mapeia campos corretamente."""
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_create_json_formatter_returns_formatter(self) -> None:
        """create_json_formatter retorna JsonFormatter."""
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_json_formatter_formats_record(self) -> None:
        """JsonFormatter formata record como JSON com campos renomeados."""
        record = _record(msg="fan_out_success")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.provider = "APNs"
        output = json.loads(create_json_formatter().format(record))
        assert output["message"] == "fan_out_success"
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["correlation_id"] == "abc-123"
        assert output["provider"] == "APNs"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging."""

    def test_full_logging_flow(self) -> None:
        """Fluxo completo: configure, log com extra, JSON mascarado."""
        stream = io.StringIO()
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
            stream=stream,
        )
        get_logger("integration.test").info(
            "google_access_token_refreshed",
            extra={"expires_in": 3599, "access_token": "ya29.secret"},
        )
        output = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert output["service"] == "integration_test"
        assert output["correlation_id"] == "int-test-001"
        assert output["expires_in"] == 3599
        assert output["access_token"] == REDACTED
