"""Formatter de logging estruturado (JSON).

Campos obrigatórios: asctime, level, logger, message, service.
Nunca incluir texto de botões ou mensagens (pode conter PII).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa dos campos no JSON de saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "DEBUG",
            "logger": "api.payload_builders.whatsapp.buttons",
            "message": "button_built",
            "service": "pyloto_buttons",
            "button_type": 2
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
