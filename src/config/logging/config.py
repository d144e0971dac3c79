"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging

    configure_logging(level="DEBUG", service_name="pyloto_buttons")

    logger = logging.getLogger(__name__)
    logger.debug("button_built", extra={"button_type": 1})
"""

from __future__ import annotations

import logging

from config.logging.filters import ServiceNameFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import DEFAULT_SERVICE_NAME, get_base_settings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez pela aplicação que consome os builders.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceNameFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings() -> None:
    """Configura logging a partir de BaseSettings (LOG_LEVEL, SERVICE_NAME)."""
    settings = get_base_settings()
    configure_logging(level=settings.log_level, service_name=settings.service_name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um default foi aplicado (id gerado, rótulo padrão).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "url_button").
        reason: Razão do fallback (ex: "generated_button_id"), sem PII.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.debug(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
