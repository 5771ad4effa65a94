"""Aplicação de terminal: setup do cliente, menu principal e helpers de exibição."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from avisa_api.client import Client
from avisa_api.config.logging import get_logger
from avisa_api.config.settings import DEFAULT_BASE_URL
from avisa_api.tui.chat_menu import ChatMenu
from avisa_api.tui.groups_menu import GroupsMenu
from avisa_api.tui.instance_menu import InstanceMenu
from avisa_api.tui.menu import PHONE_ERROR, PHONE_PATTERN
from avisa_api.tui.messages_menu import MessagesMenu
from avisa_api.tui.prompt import Prompt
from avisa_api.tui.webhook_menu import WebhookMenu
from avisa_api.utils.errors import AvisaApiError, ConfigurationError

if TYPE_CHECKING:
    from avisa_api.response import Response

logger = get_logger(__name__)

TOKEN_PATTERN = r".{10,}"
TOKEN_ERROR = "Token must be at least 10 characters"

BANNER = (
    "+------------------------------------------------+",
    "|                   AvisaAPI                     |",
    "|              WhatsApp TUI Client               |",
    "|     Powered by AvisaAPI (avisaapi.com.br)      |",
    "+------------------------------------------------+",
)

MAIN_MENU: tuple[tuple[str, str], ...] = (
    ("Messages", "messages"),
    ("Instance Management", "instance"),
    ("Groups", "groups"),
    ("Webhooks", "webhooks"),
    ("Chat", "chat"),
    ("Validate Number", "validate"),
    ("Exit", "exit"),
)


class App:
    """Front-end de terminal sobre ``Client``.

    Args:
        prompt: Prompt de IO (injetável)
        client_factory: Construtor do cliente (``Client`` por padrão)
        token: Token já conhecido; se None, é pedido sem eco
        base_url: URL base; se None, é perguntada com ``default_base_url``
        default_base_url: Sugestão exibida no prompt de URL
    """

    def __init__(
        self,
        prompt: Prompt | None = None,
        client_factory: Callable[..., Client] = Client,
        token: str | None = None,
        base_url: str | None = None,
        default_base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self.prompt = prompt or Prompt()
        self.client: Client | None = None
        self.last_phone_number: str | None = None
        self._client_factory = client_factory
        self._token = token
        self._base_url = base_url
        self._default_base_url = default_base_url

    def run(self) -> int:
        """Executa o fluxo completo; devolve o exit code."""
        self.show_banner()
        if not self.setup_client():
            return 1
        self.main_menu()
        return 0

    def show_banner(self) -> None:
        for line in BANNER:
            self.prompt.say(line)
        self.prompt.say()

    def setup_client(self) -> bool:
        """Cria o cliente e verifica a conexão com ``instance.status``."""
        while True:
            token = self._token or self.prompt.mask(
                "Enter your API Token:", pattern=TOKEN_PATTERN, error=TOKEN_ERROR
            )
            base_url = self._base_url or self.prompt.ask(
                "Base URL (press Enter for default):", default=self._default_base_url
            )
            try:
                client = self._client_factory(token=token, base_url=base_url)
                response = client.instance.status()
            except (AvisaApiError, ConfigurationError) as exc:
                logger.warning("tui_setup_failed", extra={"error_type": type(exc).__name__})
                self.prompt.say(f"\nConnection error: {exc}")
                if not self.prompt.yes("Try again?"):
                    return False
                self._token = None
                continue

            self.client = client
            if response.is_success:
                self.prompt.say("\nConnected successfully!")
                self.show_instance_info(response.data)
            else:
                self.prompt.say("\nWarning: Could not verify connection")
            self.prompt.say()
            return True

    def show_instance_info(self, data: dict[str, Any]) -> None:
        instance = data.get("instance") or data.get("name") or "N/A"
        status = data.get("status") or ("connected" if data.get("LoggedIn") else "N/A")
        phone = data.get("phone") or data.get("number") or "N/A"
        self.prompt.say(f"Instance: {instance} | Status: {status} | Phone: {phone}")

    def main_menu(self) -> None:
        menus = {
            "messages": MessagesMenu,
            "instance": InstanceMenu,
            "groups": GroupsMenu,
            "webhooks": WebhookMenu,
            "chat": ChatMenu,
        }
        while True:
            self.prompt.header("Main Menu")
            choice = self.prompt.select("What would you like to do?", MAIN_MENU)
            if choice == "exit":
                self.prompt.say("\nBye!")
                return
            if choice == "validate":
                self.validate_number()
            else:
                menus[choice](self).show()

    def validate_number(self) -> None:
        self.prompt.header("Validate Number")
        number = self.prompt.ask(
            "Enter phone number to validate:",
            required=True,
            pattern=PHONE_PATTERN,
            error=PHONE_ERROR,
        )
        response = self.call(lambda: self.api.validation.check_number(number))
        if response is not None:
            if not response.is_success:
                self.prompt.say(f"\nCould not validate: {response.error_message}")
            elif response.data.get("exists") or response.data.get("valid"):
                self.prompt.say("\nNumber is valid and registered on WhatsApp!")
                jid = response.data.get("jid") or response.data.get("number")
                if jid:
                    self.prompt.say(f"JID: {jid}")
            else:
                self.prompt.say("\nNumber is NOT registered on WhatsApp")
        self.prompt.keypress()

    @property
    def api(self) -> Client:
        if self.client is None:
            raise RuntimeError("Client not configured; run setup_client() first")
        return self.client

    def ask_phone_number(self) -> str:
        """Pergunta o telefone, sugerindo o último informado."""
        number = self.prompt.ask(
            "Phone number:",
            required=True,
            default=self.last_phone_number,
            pattern=PHONE_PATTERN,
            error=PHONE_ERROR,
        )
        self.last_phone_number = number
        return number or ""

    def call(self, action: Callable[[], Response]) -> Response | None:
        """Executa uma chamada da API; erros viram diagnóstico curto (None)."""
        try:
            return action()
        except AvisaApiError as exc:
            logger.info(
                "tui_action_failed",
                extra={"error_kind": exc.kind.value, "status_code": exc.http_status},
            )
            self.prompt.say(f"\nError: {exc.message}")
            return None
        except ValueError as exc:
            self.prompt.say(f"\nInvalid input: {exc}")
            return None

    def perform(self, action: Callable[[], Response]) -> Response | None:
        """``call`` + exibição padrão da resposta + pausa."""
        response = self.call(action)
        if response is not None:
            self.show_response(response)
        self.prompt.keypress()
        return response

    def show_response(self, response: Response) -> None:
        if response.is_success:
            self.prompt.say("\nSuccess!")
            self.show_mapping(response.data)
        else:
            self.prompt.say("\nFailed!")
            self.prompt.say(f"  Status: {response.status_code}")
            self.prompt.say(f"  Body: {response.data}")

    def show_mapping(self, data: dict[str, Any], width: int | None = None) -> None:
        for key, value in data.items():
            text = ", ".join(map(str, value)) if isinstance(value, list) else str(value)
            if width is not None:
                text = text[:width]
            self.prompt.say(f"  {key}: {text}")
