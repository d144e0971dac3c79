"""Constantes do esquema de botões WhatsApp (clientes estilo Baileys)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ButtonType(IntEnum):
    """Tag numérica do campo `type` de um botão."""

    QUICK_REPLY = 1
    URL = 2
    CALL = 3
    LIST = 4


# Tipos aceitos como "já normalizados" pelo auto-detector
VALID_BUTTON_TYPES: frozenset[int] = frozenset(int(t) for t in ButtonType)


class ButtonIdPrefix(StrEnum):
    """Prefixos dos ids gerados automaticamente (`<prefixo>_<ms>`)."""

    QUICK_REPLY = "btn"
    URL = "url"
    CALL = "call"
    LIST = "list"


# nativeFlowInfo.name de botões de lista (single select)
NATIVE_FLOW_SINGLE_SELECT = "single_select"

# Defaults de rótulos/títulos
DEFAULT_LIST_TITLE = "Menu"
DEFAULT_AUTO_LIST_TITLE = "Options"
DEFAULT_LIST_BUTTON_TEXT = "Select"

# Defaults de configuração de mensagem
DEFAULT_VIEW_ONCE = True
DEFAULT_HEADER_TYPE = 1
