"""Filter que injeta o nome do serviço em cada record."""

from __future__ import annotations

import logging


class ServiceNameFilter(logging.Filter):
    """Adiciona `service` ao record sem que o chamador precise informar.

    Se `service` já veio via `extra`, o valor é preservado.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "service", None):
            record.service = self._service_name
        return True
