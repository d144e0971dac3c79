"""Fábrica de botões e mensagens com configuração própria.

`ButtonFactory` guarda um `ButtonSettings` imutável (defaults de
viewOnce/headerType) e um gerador de ids. As funções de módulo usam uma
fábrica nova com os defaults a cada chamada.

Uso:
    factory = ButtonFactory(ButtonSettings(view_once=False))
    message = factory.generate_message({
        "body": "Escolha uma opção",
        "buttons": factory.auto_detect([{"text": "Site", "url": "https://x.com"}]),
    })
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp import buttons as _buttons
from api.payload_builders.whatsapp import list_data as _list_data
from api.payload_builders.whatsapp import presets as _presets
from api.payload_builders.whatsapp.auto_detect import auto_detect as _auto_detect
from api.payload_builders.whatsapp.ids import ButtonIdGenerator
from api.payload_builders.whatsapp.message import generate_message as _generate_message
from config.settings.buttons import ButtonSettings, get_button_settings
from utils.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from app.protocols.models import Button, ListData, ListRow, ListSection, Message


class ButtonFactory:
    """Agrupa todas as operações de botões sob uma configuração.

    Args:
        settings: Defaults de mensagem. Usa `get_button_settings()` se None.
        clock: Relógio em milissegundos para ids gerados (testes).

    Raises:
        InvalidArgumentError: Se `settings.validate()` reportar erros.
    """

    def __init__(
        self,
        settings: ButtonSettings | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        settings = settings or get_button_settings()
        errors = settings.validate()
        if errors:
            raise InvalidArgumentError("; ".join(errors), fields=("settings",))
        self._settings = settings
        self._ids = ButtonIdGenerator(clock)

    @property
    def settings(self) -> ButtonSettings:
        return self._settings

    # Botões

    def quick_reply(self, display_text: str, button_id: str) -> Button:
        return _buttons.quick_reply(display_text, button_id)

    def quick_replies(self, items: Iterable[Mapping[str, Any]]) -> list[Button]:
        return _buttons.quick_replies(items)

    def url_button(self, display_text: str, url: str, button_id: str | None = None) -> Button:
        return _buttons.url_button(display_text, url, button_id, ids=self._ids)

    def url_buttons(self, items: Iterable[Mapping[str, Any]]) -> list[Button]:
        return _buttons.url_buttons(items, ids=self._ids)

    def call_button(
        self, display_text: str, phone_number: str, button_id: str | None = None
    ) -> Button:
        return _buttons.call_button(display_text, phone_number, button_id, ids=self._ids)

    def list_button(
        self,
        display_text: str,
        list_data: ListData | Mapping[str, Any],
        button_id: str | None = None,
    ) -> Button:
        return _buttons.list_button(display_text, list_data, button_id, ids=self._ids)

    # Listas

    def create_list_data(
        self, title: str | None, sections: Iterable[Mapping[str, Any]]
    ) -> ListData:
        return _list_data.create_list_data(title, sections)

    def create_section(self, title: str = "", rows: Iterable[ListRow] = ()) -> ListSection:
        return _list_data.create_section(title, rows)

    def create_row(
        self, title: str = "", description: str = "", id: str = ""  # noqa: A002
    ) -> ListRow:
        return _list_data.create_row(title, description, id)

    # Mensagem e auto-detecção

    def generate_message(self, options: Mapping[str, Any]) -> Message:
        return _generate_message(options, self._settings)

    def auto_detect(
        self, data: Mapping[str, Any] | Iterable[Mapping[str, Any]]
    ) -> list[Mapping[str, Any] | Button]:
        return _auto_detect(data, self._ids)

    # Conjuntos prontos

    def help_buttons(self) -> list[Button]:
        return _presets.help_buttons(self._ids)

    def download_buttons(self) -> list[Button]:
        return _presets.download_buttons()

    def social_buttons(self) -> list[Button]:
        return _presets.social_buttons(self._ids)

    def menu_nav_buttons(self) -> list[Button]:
        return _presets.menu_nav_buttons()


def quick_reply(text: str, button_id: str) -> Button:
    return ButtonFactory().quick_reply(text, button_id)


def url_button(text: str, url: str, button_id: str | None = None) -> Button:
    return ButtonFactory().url_button(text, url, button_id)


def call_button(text: str, phone: str, button_id: str | None = None) -> Button:
    return ButtonFactory().call_button(text, phone, button_id)


def list_button(
    text: str,
    list_data: ListData | Mapping[str, Any],
    button_id: str | None = None,
) -> Button:
    return ButtonFactory().list_button(text, list_data, button_id)


def generate_message(options: Mapping[str, Any]) -> Message:
    return ButtonFactory().generate_message(options)


def auto_detect(
    data: Mapping[str, Any] | Iterable[Mapping[str, Any]],
) -> list[Mapping[str, Any] | Button]:
    return ButtonFactory().auto_detect(data)


def create_list_data(title: str | None, sections: Iterable[Mapping[str, Any]]) -> ListData:
    return ButtonFactory().create_list_data(title, sections)


def help_buttons() -> list[Button]:
    return ButtonFactory().help_buttons()


def download_buttons() -> list[Button]:
    return ButtonFactory().download_buttons()


def social_buttons() -> list[Button]:
    return ButtonFactory().social_buttons()


def menu_nav_buttons() -> list[Button]:
    return ButtonFactory().menu_nav_buttons()


# Aliases curtos
quick = quick_reply
url = url_button
call = call_button
list_ = list_button
generate = generate_message
auto = auto_detect
