"""Builders de botões e mensagens WhatsApp (esquema estilo Baileys).

Este pacote separa responsabilidades por módulo:
- buttons: botões tipo 1 (resposta rápida), 2 (URL), 3 (ligação), 4 (lista)
- list_data: seções/linhas de lista e serialização em paramsJson
- message: mensagem completa (legenda, mídia, rodapé, botões)
- auto_detect: escolha do builder a partir de registros soltos
- presets: conjuntos de botões prontos
- factory: ButtonFactory, funções de conveniência e aliases
"""

from api.payload_builders.whatsapp.auto_detect import (
    ButtonInputKind,
    ButtonSpec,
    classify,
    detect_button,
)
from api.payload_builders.whatsapp.buttons import quick_replies, url_buttons
from api.payload_builders.whatsapp.factory import (
    ButtonFactory,
    auto,
    auto_detect,
    call,
    call_button,
    create_list_data,
    download_buttons,
    generate,
    generate_message,
    help_buttons,
    list_,
    list_button,
    menu_nav_buttons,
    quick,
    quick_reply,
    social_buttons,
    url,
    url_button,
)
from api.payload_builders.whatsapp.ids import ButtonIdGenerator
from api.payload_builders.whatsapp.list_data import (
    create_row,
    create_section,
    serialize_list_data,
)

__all__ = [
    "ButtonFactory",
    "ButtonIdGenerator",
    "ButtonInputKind",
    "ButtonSpec",
    "auto",
    "auto_detect",
    "call",
    "call_button",
    "classify",
    "create_list_data",
    "create_row",
    "create_section",
    "detect_button",
    "download_buttons",
    "generate",
    "generate_message",
    "help_buttons",
    "list_",
    "list_button",
    "menu_nav_buttons",
    "quick",
    "quick_replies",
    "quick_reply",
    "serialize_list_data",
    "social_buttons",
    "url",
    "url_button",
    "url_buttons",
]
