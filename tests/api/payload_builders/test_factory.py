"""Testes para ButtonFactory, funções de conveniência e conjuntos prontos."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from api.payload_builders import whatsapp
from api.payload_builders.whatsapp import (
    ButtonFactory,
    download_buttons,
    help_buttons,
    menu_nav_buttons,
    social_buttons,
)
from config.settings.buttons import ButtonSettings
from utils.errors import InvalidArgumentError


@pytest.fixture
def factory() -> ButtonFactory:
    return ButtonFactory(ButtonSettings(view_once=False, header_type=1), clock=lambda: 7)


class TestButtonFactory:
    """Testes para ButtonFactory."""

    def test_default_settings(self) -> None:
        assert ButtonFactory().settings == ButtonSettings()

    def test_invalid_settings_raise(self) -> None:
        with pytest.raises(InvalidArgumentError, match="header_type"):
            ButtonFactory(ButtonSettings(header_type=-2))

    def test_settings_flow_into_message(self, factory: ButtonFactory) -> None:
        message = factory.generate_message({"body": "Menu"})
        assert message["viewOnce"] is False

    def test_clock_flows_into_generated_ids(self, factory: ButtonFactory) -> None:
        assert factory.url_button("Site", "https://x.com")["buttonId"] == "url_7"
        assert factory.call_button("Ligar", "+55")["buttonId"] == "call_7"
        assert factory.auto_detect({"text": "Oi"})[0]["buttonId"] == "btn_7"

    def test_command_menu_message(self, factory: ButtonFactory) -> None:
        """Menu de comandos: lista com seções dentro de uma mensagem."""
        list_data = factory.create_list_data(
            "Bot Commands",
            [
                {
                    "title": "📥 Download",
                    "rows": [
                        factory.create_row("YouTube", "Baixar vídeos", ".ytdl"),
                        factory.create_row("Instagram", "Baixar posts", ".igdl"),
                    ],
                },
                factory.create_section("🔧 Utilidades", [factory.create_row("QR", id=".qr")]),
            ],
        )
        message = factory.generate_message(
            {
                "body": "Escolha uma categoria",
                "footer": "Use as setas",
                "buttons": [factory.list_button("📂 Abrir lista", list_data, "cmd_menu")],
            }
        )
        assert message["buttons"][0]["buttonId"] == "cmd_menu"
        assert message["buttons"][0]["type"] == 4
        assert list_data["sections"][1]["rows"] == [
            {"title": "QR", "description": "", "id": ".qr"}
        ]

    def test_batch_methods(self, factory: ButtonFactory) -> None:
        assert [b["buttonId"] for b in factory.quick_replies([{"text": "A"}])] == ["btn_1"]
        assert factory.url_buttons([{"text": "A", "url": "https://a"}])[0]["buttonId"] == "url_7"


class TestModuleFunctions:
    """Funções de módulo e aliases usam uma fábrica padrão."""

    def test_aliases(self) -> None:
        assert whatsapp.quick is whatsapp.quick_reply
        assert whatsapp.url is whatsapp.url_button
        assert whatsapp.call is whatsapp.call_button
        assert whatsapp.list_ is whatsapp.list_button
        assert whatsapp.generate is whatsapp.generate_message
        assert whatsapp.auto is whatsapp.auto_detect

    def test_module_functions(self) -> None:
        assert whatsapp.quick_reply("A", "a")["type"] == 1
        assert whatsapp.call_button("Ligar", "+1")["type"] == 3
        assert whatsapp.generate_message({"body": "hi"})["viewOnce"] is True
        list_data = whatsapp.create_list_data("T", [])
        assert whatsapp.list_button("Abrir", list_data)["type"] == 4

    def test_module_functions_accept_button_id(self) -> None:
        list_data = whatsapp.create_list_data("T", [])
        assert whatsapp.list_button("Abrir", list_data, "cmd")["buttonId"] == "cmd"
        assert whatsapp.list_("Abrir", list_data, "cmd2")["buttonId"] == "cmd2"
        assert whatsapp.url_button("Site", "https://x", "site")["buttonId"] == "site"
        assert whatsapp.call_button("Ligar", "+1", "tel")["buttonId"] == "tel"


class TestRequiredArguments:
    """Todo builder com campo obrigatório falha com vazio ou ausente."""

    @pytest.mark.parametrize("empty", ["", None])
    @pytest.mark.parametrize(
        ("builder", "args", "position", "field"),
        [
            (whatsapp.quick_reply, ("Sim", "yes"), 0, "displayText"),
            (whatsapp.quick_reply, ("Sim", "yes"), 1, "buttonId"),
            (whatsapp.url_button, ("Site", "https://x"), 0, "displayText"),
            (whatsapp.url_button, ("Site", "https://x"), 1, "url"),
            (whatsapp.call_button, ("Ligar", "+1"), 0, "displayText"),
            (whatsapp.call_button, ("Ligar", "+1"), 1, "phoneNumber"),
            (whatsapp.list_button, ("Abrir", {"title": "T", "sections": []}), 0, "displayText"),
            (whatsapp.list_button, ("Abrir", {"title": "T", "sections": []}), 1, "listData"),
        ],
    )
    def test_builder_rejects_empty_argument(
        self,
        builder: Callable[..., Any],
        args: tuple[Any, ...],
        position: int,
        field: str,
        empty: str | None,
    ) -> None:
        call_args = list(args)
        call_args[position] = empty
        with pytest.raises(InvalidArgumentError) as exc:
            builder(*call_args)
        assert exc.value.fields == (field,)

    @pytest.mark.parametrize("list_data", [{}, None])
    def test_list_button_rejects_empty_list_data(self, list_data: dict | None) -> None:
        with pytest.raises(InvalidArgumentError, match="listButton"):
            whatsapp.list_("Abrir", list_data)

    @pytest.mark.parametrize("options", [{}, {"body": ""}, {"body": None}])
    def test_generate_message_rejects_empty_body(self, options: dict) -> None:
        with pytest.raises(InvalidArgumentError):
            whatsapp.generate_message(options)


class TestPresets:
    """Testes para os conjuntos de botões prontos."""

    def test_help_buttons(self) -> None:
        buttons = help_buttons()
        assert [b["type"] for b in buttons] == [1, 1, 2, 1]
        assert buttons[0]["buttonId"] == "help_commands"
        assert buttons[2]["url"] == "https://github.com/PrinceTech-org"

    def test_download_buttons(self) -> None:
        buttons = download_buttons()
        assert [b["buttonId"] for b in buttons] == [
            "download_video",
            "download_audio",
            "download_image",
            "download_doc",
        ]
        assert all(b["type"] == 1 for b in buttons)

    def test_social_buttons(self) -> None:
        buttons = social_buttons()
        assert len(buttons) == 4
        assert all(b["type"] == 2 for b in buttons)
        assert buttons[0]["url"] == "https://facebook.com/princetechn"

    def test_menu_nav_buttons(self) -> None:
        buttons = menu_nav_buttons()
        assert [b["buttonId"] for b in buttons] == [
            "menu_back",
            "menu_home",
            "menu_refresh",
            "menu_close",
        ]
