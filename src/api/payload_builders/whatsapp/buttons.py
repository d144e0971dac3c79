"""Builders de botões (tipos 1 a 4).

Cada chamada valida os campos obrigatórios e retorna um registro novo.
Não há validação de formato de URL ou telefone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from api.payload_builders.whatsapp.ids import ButtonIdGenerator
from api.payload_builders.whatsapp.list_data import serialize_list_data
from api.validators.whatsapp import require_fields
from app.constants.whatsapp import (
    NATIVE_FLOW_SINGLE_SELECT,
    ButtonIdPrefix,
    ButtonType,
)
from app.protocols.models import Button, ListData
from config.logging import log_fallback

logger = logging.getLogger(__name__)

_DEFAULT_IDS = ButtonIdGenerator()


def _base_button(button_id: str, display_text: str, button_type: ButtonType) -> Button:
    logger.debug("button_built", extra={"button_type": int(button_type)})
    return {
        "buttonId": button_id,
        "buttonText": {"displayText": display_text},
        "type": int(button_type),
    }


def _resolve_id(
    button_id: str | None,
    prefix: ButtonIdPrefix,
    ids: ButtonIdGenerator | None,
    component: str,
) -> str:
    if button_id:
        return button_id
    log_fallback(logger, component, reason="generated_button_id")
    return (ids or _DEFAULT_IDS).next_id(prefix)


def quick_reply(display_text: str, button_id: str) -> Button:
    """Botão de resposta rápida (tipo 1).

    Args:
        display_text: Texto exibido
        button_id: Id devolvido no callback

    Raises:
        InvalidArgumentError: Se algum argumento estiver vazio
    """
    require_fields("quickReply", displayText=display_text, buttonId=button_id)
    return _base_button(button_id, display_text, ButtonType.QUICK_REPLY)


def url_button(
    display_text: str,
    url: str,
    button_id: str | None = None,
    *,
    ids: ButtonIdGenerator | None = None,
) -> Button:
    """Botão que abre uma URL (tipo 2). Id gerado como `url_<ms>` se omitido.

    Raises:
        InvalidArgumentError: Se display_text ou url estiverem vazios
    """
    require_fields("urlButton", displayText=display_text, url=url)
    resolved = _resolve_id(button_id, ButtonIdPrefix.URL, ids, "url_button")
    button = _base_button(resolved, display_text, ButtonType.URL)
    button["url"] = url
    return button


def call_button(
    display_text: str,
    phone_number: str,
    button_id: str | None = None,
    *,
    ids: ButtonIdGenerator | None = None,
) -> Button:
    """Botão de ligação (tipo 3). Qualquer string não vazia é aceita como número.

    Raises:
        InvalidArgumentError: Se display_text ou phone_number estiverem vazios
    """
    require_fields("callButton", displayText=display_text, phoneNumber=phone_number)
    resolved = _resolve_id(button_id, ButtonIdPrefix.CALL, ids, "call_button")
    button = _base_button(resolved, display_text, ButtonType.CALL)
    button["phoneNumber"] = phone_number
    return button


def list_button(
    display_text: str,
    list_data: ListData | Mapping[str, Any],
    button_id: str | None = None,
    *,
    ids: ButtonIdGenerator | None = None,
) -> Button:
    """Botão de lista single select (tipo 4).

    Args:
        display_text: Texto exibido
        list_data: ListData (ver `create_list_data`), serializado em paramsJson
        button_id: Id opcional; gerado como `list_<ms>` se omitido

    Raises:
        InvalidArgumentError: Se display_text ou list_data estiverem vazios
    """
    require_fields("listButton", displayText=display_text, listData=list_data)
    resolved = _resolve_id(button_id, ButtonIdPrefix.LIST, ids, "list_button")
    button = _base_button(resolved, display_text, ButtonType.LIST)
    button["nativeFlowInfo"] = {
        "name": NATIVE_FLOW_SINGLE_SELECT,
        "paramsJson": serialize_list_data(list_data),
    }
    return button


def quick_replies(items: Iterable[Mapping[str, Any]]) -> list[Button]:
    """Converte registros {text, id?} em botões tipo 1, preservando a ordem.

    Registros sem id recebem `btn_<posição>` (base 1).
    """
    return [
        quick_reply(item.get("text"), item.get("id") or f"{ButtonIdPrefix.QUICK_REPLY}_{index}")
        for index, item in enumerate(items, start=1)
    ]


def url_buttons(
    items: Iterable[Mapping[str, Any]],
    *,
    ids: ButtonIdGenerator | None = None,
) -> list[Button]:
    """Converte registros {text, url} em botões tipo 2, preservando a ordem."""
    return [url_button(item.get("text"), item.get("url"), ids=ids) for item in items]
