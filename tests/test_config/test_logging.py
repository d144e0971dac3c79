"""Testes para config.logging.

Cobre: configure_logging, log_fallback,
ServiceNameFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    ServiceNameFilter,
    configure_logging,
    configure_logging_from_settings,
    create_json_formatter,
    log_fallback,
)
from config.logging.config import VALID_LOG_LEVELS
from config.settings.base import get_base_settings


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
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
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        """Nível aceito em minúsculas."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Substitui handlers existentes e instala o ServiceNameFilter."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, ServiceNameFilter) for f in root.handlers[0].filters)

    def test_configure_logging_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Usa LOG_LEVEL do ambiente via BaseSettings."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        get_base_settings.cache_clear()
        try:
            configure_logging_from_settings()
            assert logging.getLogger().level == logging.WARNING
        finally:
            get_base_settings.cache_clear()

    def test_valid_log_levels_constant(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        """Formato lazy com componente e extra sem reason."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "url_button")
        logger.debug.assert_called_once()
        args, kwargs = logger.debug.call_args
        assert args == ("Fallback applied for %s", "url_button")
        assert kwargs["extra"] == {"fallback_used": True, "component": "url_button"}

    def test_log_fallback_with_reason(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "list_button", reason="generated_button_id")
        assert logger.debug.call_args[1]["extra"]["reason"] == "generated_button_id"


class TestServiceNameFilter:
    """Testes para ServiceNameFilter."""

    def test_filter_adds_service(self) -> None:
        record = _record()
        assert ServiceNameFilter("my_service").filter(record) is True
        assert record.service == "my_service"

    def test_filter_preserves_explicit_service(self) -> None:
        record = _record()
        record.service = "explicit"
        ServiceNameFilter("svc").filter(record)
        assert record.service == "explicit"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {"asctime", "levelname", "name", "message", "service"}

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """Saída é JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _record("button_built")
        record.service = "test_service"
        record.button_type = 2
        data = json.loads(formatter.format(record))
        assert data["message"] == "button_built"
        assert data["logger"] == "test.logger"
        assert data["level"] == "INFO"
        assert data["service"] == "test_service"
        assert data["button_type"] == 2
