"""Base dos submenus do front-end de terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from avisa_api.client import Client
    from avisa_api.tui.app import App
    from avisa_api.tui.prompt import Prompt

PHONE_PATTERN = r"\d{10,15}"
PHONE_ERROR = "Enter a valid phone number (10-15 digits)"
URL_PATTERN = r"https?://\S+"
BACK = ("Back", "back")


def format_jid(number: str) -> str:
    """Completa número com ``@s.whatsapp.net`` quando ainda não é um JID."""
    if "@" in number:
        return number
    return f"{number}@s.whatsapp.net"


class Menu:
    """Submenu em loop até o usuário escolher "Back".

    Subclasses definem ``title``, ``question`` e ``choices`` (pares rótulo/chave);
    cada chave é despachada para o método de mesmo nome.
    """

    title = ""
    question = "Select option:"
    choices: tuple[tuple[str, str], ...] = ()

    def __init__(self, app: App) -> None:
        self.app = app

    @property
    def prompt(self) -> Prompt:
        return self.app.prompt

    @property
    def client(self) -> Client:
        return self.app.api

    def show(self) -> None:
        while True:
            self.prompt.header(self.title)
            choice = self.prompt.select(self.question, (*self.choices, BACK))
            if choice == "back":
                return
            action: Callable[[], None] = getattr(self, choice)
            action()

    def ask_required(self, question: str, **kwargs: str) -> str:
        return self.prompt.ask(question, required=True, **kwargs) or ""

    def ask_group_id(self) -> str:
        return self.ask_required("Group ID (JID):")

    def pause(self) -> None:
        self.prompt.keypress()
