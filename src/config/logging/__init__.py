"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="pyloto_buttons")
    logger = logging.getLogger(__name__)

Campos obrigatórios em todo log: asctime, level, logger, message, service.
Logs sem PII: nunca registrar textos de botões ou legendas.
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    log_fallback,
)
from config.logging.filters import ServiceNameFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ServiceNameFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "log_fallback",
]
