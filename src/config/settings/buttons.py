"""Settings de geração de mensagens com botões.

Defaults aplicados por `generate_message` quando a chamada não os
sobrescreve. Não são lidos de variáveis de ambiente.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from app.constants.whatsapp import DEFAULT_HEADER_TYPE, DEFAULT_VIEW_ONCE


@dataclass(frozen=True, slots=True)
class ButtonSettings:
    """Configuração de uma fábrica de botões.

    Attributes:
        view_once: Mensagens de visualização única por padrão
        header_type: Tipo de cabeçalho padrão
    """

    view_once: bool = DEFAULT_VIEW_ONCE
    header_type: int = DEFAULT_HEADER_TYPE

    def validate(self) -> list[str]:
        """Valida configurações de botões.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not isinstance(self.view_once, bool):
            errors.append("view_once deve ser bool")

        if isinstance(self.header_type, bool) or not isinstance(self.header_type, int):
            errors.append("header_type deve ser int")
        elif self.header_type < 0:
            errors.append("header_type deve ser >= 0")

        return errors


@lru_cache(maxsize=1)
def get_button_settings() -> ButtonSettings:
    """Retorna instância cacheada de ButtonSettings com os defaults."""
    return ButtonSettings()
