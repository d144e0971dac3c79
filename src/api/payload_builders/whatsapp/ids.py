"""Geração de ids de botão derivados de timestamp.

Formato: `<prefixo>_<milissegundos desde epoch>`. A unicidade é fraca:
duas chamadas no mesmo milissegundo geram o mesmo id. Consumidores não
devem assumir ids únicos.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class ButtonIdGenerator:
    """Gera ids `<prefixo>_<ms>` a partir de um relógio injetável.

    Args:
        clock: Função que retorna milissegundos desde epoch.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _now_ms

    def next_id(self, prefix: str) -> str:
        return f"{prefix}_{self._clock()}"
