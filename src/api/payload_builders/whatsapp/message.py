"""Montagem da mensagem completa (legenda, mídia, rodapé, botões)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from api.validators.whatsapp import require_fields
from app.protocols.models import Message
from config.settings.buttons import ButtonSettings, get_button_settings

logger = logging.getLogger(__name__)


def generate_message(
    options: Mapping[str, Any],
    settings: ButtonSettings | None = None,
) -> Message:
    """Constrói a mensagem a partir das opções (chaves camelCase).

    Opções:
        body: Texto obrigatório, vira `caption`
        footer: Rodapé (default "")
        image / video: URL da mídia, vira {"url": ...}; ambas podem coexistir
        buttons: Lista de botões; só anexada se não vazia
        viewOnce / headerType: Sobrescrevem os defaults de `settings`

    Returns:
        Mensagem; sem a chave `buttons` quando não há botões

    Raises:
        InvalidArgumentError: Se body estiver ausente ou vazio
    """
    body = options.get("body")
    require_fields("generateMessage", body=body)
    settings = settings or get_button_settings()

    message: dict[str, Any] = {}

    image = options.get("image")
    if image:
        message["image"] = {"url": image}

    video = options.get("video")
    if video:
        message["video"] = {"url": video}

    view_once = options.get("viewOnce")
    header_type = options.get("headerType")

    message["caption"] = body
    message["footer"] = options.get("footer") or ""
    message["viewOnce"] = settings.view_once if view_once is None else view_once
    message["headerType"] = settings.header_type if header_type is None else header_type

    buttons = list(options.get("buttons") or ())
    if buttons:
        message["buttons"] = buttons

    logger.debug(
        "message_built",
        extra={
            "button_count": len(buttons),
            "has_image": "image" in message,
            "has_video": "video" in message,
        },
    )
    return message  # type: ignore[return-value]
