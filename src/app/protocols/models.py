"""Formatos canônicos dos registros de botão e mensagem.

Os registros são dicts simples no formato de fio do cliente de mensagens
(chaves camelCase). Os TypedDicts abaixo documentam o contrato; nenhum
registro é mutado após a construção.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict


class ButtonText(TypedDict):
    """Texto exibido no botão."""

    displayText: str


class NativeFlowInfo(TypedDict):
    """Payload de botão tipo 4 (lista)."""

    name: str
    paramsJson: str


class Button(TypedDict):
    """Botão interativo.

    O `type` determina quais campos opcionais existem:
    1 nenhum, 2 `url`, 3 `phoneNumber`, 4 `nativeFlowInfo`.
    """

    buttonId: str
    buttonText: ButtonText
    type: int
    url: NotRequired[str]
    phoneNumber: NotRequired[str]
    nativeFlowInfo: NotRequired[NativeFlowInfo]


class ListRow(TypedDict):
    title: str
    description: str
    id: str


class ListSection(TypedDict):
    title: str
    rows: list[ListRow]


class ListData(TypedDict):
    """Lista serializada dentro de `nativeFlowInfo.paramsJson`."""

    title: str
    sections: list[ListSection]


class MediaRef(TypedDict):
    url: str


class Message(TypedDict):
    """Mensagem completa com legenda, rodapé e botões opcionais.

    `buttons` só existe quando há ao menos um botão.
    """

    image: NotRequired[MediaRef]
    video: NotRequired[MediaRef]
    caption: str
    footer: str
    viewOnce: bool
    headerType: int
    buttons: NotRequired[list[Button]]
