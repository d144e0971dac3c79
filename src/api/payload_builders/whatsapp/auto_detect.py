"""Auto-detecção do tipo de botão a partir de registros soltos.

Cada registro é classificado em um `ButtonInputKind` por uma cadeia de
prioridade fixa (o primeiro que casar vence):

1. ALREADY_TYPED: `type` em {1, 2, 3, 4}; o registro passa inalterado
2. URL_LIKE: `url` preenchida -> botão tipo 2
3. PHONE_LIKE: `phone` ou `phoneNumber` -> botão tipo 3
4. LIST_LIKE: `rows` presente -> botão tipo 4 com o próprio registro como seção
5. PLAIN_TEXT: resposta rápida (tipo 1)

Um registro com `url` e `phone` é sempre tratado como URL.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from api.payload_builders.whatsapp.buttons import (
    call_button,
    list_button,
    quick_reply,
    url_button,
)
from api.payload_builders.whatsapp.ids import ButtonIdGenerator
from api.payload_builders.whatsapp.list_data import create_list_data
from app.constants.whatsapp import (
    DEFAULT_AUTO_LIST_TITLE,
    DEFAULT_LIST_BUTTON_TEXT,
    VALID_BUTTON_TYPES,
    ButtonIdPrefix,
)
from app.protocols.models import Button
from utils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _coerce_scalar(value: Any) -> Any:
    """Números viram texto (`5511999` -> "5511999"); zero conta como ausente."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value) if value else None
    return value


# Texto solto: aceita números além de strings
LooseStr = Annotated[str | None, BeforeValidator(_coerce_scalar)]


class ButtonInputKind(StrEnum):
    """Variante do registro de entrada, na ordem de prioridade."""

    ALREADY_TYPED = "already_typed"
    URL_LIKE = "url_like"
    PHONE_LIKE = "phone_like"
    LIST_LIKE = "list_like"
    PLAIN_TEXT = "plain_text"


class ButtonSpec(BaseModel):
    """Registro solto de entrada (campos extras ignorados)."""

    model_config = ConfigDict(extra="ignore")

    type: Any = None
    text: LooseStr = None
    displayText: LooseStr = None
    id: LooseStr = None
    url: LooseStr = None
    phone: LooseStr = None
    phoneNumber: LooseStr = None
    title: LooseStr = None
    buttonText: LooseStr = None
    rows: list[dict[str, Any]] | None = None

    @property
    def label(self) -> str | None:
        return self.text or self.displayText

    @property
    def phone_value(self) -> str | None:
        return self.phone or self.phoneNumber


def _is_known_type(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in VALID_BUTTON_TYPES


def classify(spec: ButtonSpec) -> ButtonInputKind:
    """Classifica o registro seguindo a cadeia de prioridade do módulo."""
    if _is_known_type(spec.type):
        return ButtonInputKind.ALREADY_TYPED
    if spec.url:
        return ButtonInputKind.URL_LIKE
    if spec.phone_value:
        return ButtonInputKind.PHONE_LIKE
    if spec.rows is not None:
        return ButtonInputKind.LIST_LIKE
    return ButtonInputKind.PLAIN_TEXT


def _build_url(spec: ButtonSpec, ids: ButtonIdGenerator) -> Button:
    return url_button(spec.label, spec.url, ids=ids)


def _build_call(spec: ButtonSpec, ids: ButtonIdGenerator) -> Button:
    return call_button(spec.label, spec.phone_value, ids=ids)


def _build_list(spec: ButtonSpec, ids: ButtonIdGenerator) -> Button:
    # O próprio registro vira a única seção da lista
    section = {"title": spec.title, "rows": spec.rows}
    list_data = create_list_data(spec.title or DEFAULT_AUTO_LIST_TITLE, [section])
    return list_button(spec.buttonText or DEFAULT_LIST_BUTTON_TEXT, list_data, ids=ids)


def _build_quick_reply(spec: ButtonSpec, ids: ButtonIdGenerator) -> Button:
    button_id = spec.id or ids.next_id(ButtonIdPrefix.QUICK_REPLY)
    return quick_reply(spec.label, button_id)


_BUILDERS: dict[ButtonInputKind, Callable[[ButtonSpec, ButtonIdGenerator], Button]] = {
    ButtonInputKind.URL_LIKE: _build_url,
    ButtonInputKind.PHONE_LIKE: _build_call,
    ButtonInputKind.LIST_LIKE: _build_list,
    ButtonInputKind.PLAIN_TEXT: _build_quick_reply,
}


def _parse(record: Mapping[str, Any]) -> ButtonSpec:
    try:
        return ButtonSpec.model_validate(dict(record))
    except PydanticValidationError as exc:
        fields = tuple(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise InvalidArgumentError(
            f"invalid button record for autoDetect: {', '.join(fields)}",
            fields=fields,
        ) from exc


def detect_button(
    record: Mapping[str, Any],
    ids: ButtonIdGenerator | None = None,
) -> Mapping[str, Any] | Button:
    """Converte um único registro em botão.

    Raises:
        InvalidArgumentError: Se o builder escolhido não tiver seus campos
            obrigatórios (ex: resposta rápida sem texto)
    """
    # Registros já tipados seguem o formato de saída e não são parseados
    if _is_known_type(record.get("type")):
        kind = ButtonInputKind.ALREADY_TYPED
        logger.debug("button_kind_detected", extra={"input_kind": str(kind)})
        return record

    spec = _parse(record)
    kind = classify(spec)
    logger.debug("button_kind_detected", extra={"input_kind": str(kind)})
    return _BUILDERS[kind](spec, ids or ButtonIdGenerator())


def auto_detect(
    data: Mapping[str, Any] | Iterable[Mapping[str, Any]],
    ids: ButtonIdGenerator | None = None,
) -> list[Mapping[str, Any] | Button]:
    """Converte um registro ou sequência de registros em botões, na ordem recebida.

    Args:
        data: Registro único (embrulhado em lista) ou sequência de registros
        ids: Gerador de ids para botões sem id explícito

    Returns:
        Lista de botões
    """
    records = [data] if isinstance(data, Mapping) else list(data)
    return [detect_button(record, ids) for record in records]
