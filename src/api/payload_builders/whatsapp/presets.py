"""Conjuntos de botões pré-definidos (dados estáticos, sem parâmetros)."""

from __future__ import annotations

from api.payload_builders.whatsapp.buttons import quick_reply, url_button
from api.payload_builders.whatsapp.ids import ButtonIdGenerator
from app.protocols.models import Button

# (rótulo, id) para respostas rápidas; (rótulo, url) para links
_HELP_COMMANDS = ("📜 Commands", "help_commands")
_HELP_USAGE = ("❓ How to use", "help_usage")
_HELP_GITHUB = ("⭐ Star on GitHub", "https://github.com/PrinceTech-org")
_HELP_CONTACT = ("👨‍💻 Contact", "help_contact")

_DOWNLOAD_BUTTONS: tuple[tuple[str, str], ...] = (
    ("🎬 Video", "download_video"),
    ("🎵 Audio", "download_audio"),
    ("📷 Image", "download_image"),
    ("📄 Document", "download_doc"),
)

_SOCIAL_LINKS: tuple[tuple[str, str], ...] = (
    ("📘 Facebook", "https://facebook.com/princetechn"),
    ("📸 Instagram", "https://instagram.com/princetechn"),
    ("🐦 Twitter", "https://twitter.com/princetechn"),
    ("📹 YouTube", "https://youtube.com/princetechn"),
)

_MENU_NAV_BUTTONS: tuple[tuple[str, str], ...] = (
    ("⬅️ Back", "menu_back"),
    ("🏠 Home", "menu_home"),
    ("🔄 Refresh", "menu_refresh"),
    ("❌ Close", "menu_close"),
)


def help_buttons(ids: ButtonIdGenerator | None = None) -> list[Button]:
    """Ajuda: comandos, uso, GitHub (link) e contato."""
    return [
        quick_reply(*_HELP_COMMANDS),
        quick_reply(*_HELP_USAGE),
        url_button(*_HELP_GITHUB, ids=ids),
        quick_reply(*_HELP_CONTACT),
    ]


def download_buttons() -> list[Button]:
    return [quick_reply(text, button_id) for text, button_id in _DOWNLOAD_BUTTONS]


def social_buttons(ids: ButtonIdGenerator | None = None) -> list[Button]:
    return [url_button(text, url, ids=ids) for text, url in _SOCIAL_LINKS]


def menu_nav_buttons() -> list[Button]:
    return [quick_reply(text, button_id) for text, button_id in _MENU_NAV_BUTTONS]
