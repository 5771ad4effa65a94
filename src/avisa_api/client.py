"""Cliente da AvisaAPI.

Exemplo:
    from avisa_api import Client

    client = Client(token="seu_token")
    response = client.messages.send_text(number="5511999999999", message="Olá!")
    if response.is_success:
        print(response.data)
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

from avisa_api.config.settings import RetryPolicy, build_settings
from avisa_api.connectors.http_base import HttpTransport
from avisa_api.endpoints import Chat, Groups, Instance, Messages, Validation, Webhook
from avisa_api.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from avisa_api.config.settings import ClientSettings
    from avisa_api.response import Response


class Client:
    """Ponto de entrada: configuração, transporte e grupos de endpoints.

    Args:
        token: Bearer token (obrigatório, aqui ou via ``avisa_api.configure``)
        base_url: URL base (default: ``DEFAULT_BASE_URL``)
        timeout: Timeout em segundos
        retry_policy: Política de retry para falhas de rede
        http_client: ``httpx.Client`` pré-configurado (testes/proxies)
        sleep: Função de espera usada no retry

    Raises:
        ConfigurationError: Se a configuração resultante for inválida
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        retry_policy: RetryPolicy | None = None,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.config: ClientSettings = build_settings(
            base_url=base_url,
            token=token,
            timeout=timeout,
            retry_policy=retry_policy,
        )
        errors = self.config.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

        transport_kwargs: dict[str, Any] = {"http_client": http_client}
        if sleep is not None:
            transport_kwargs["sleep"] = sleep
        self._transport = HttpTransport(self.config, **transport_kwargs)
        self._sleep = sleep

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @cached_property
    def messages(self) -> Messages:
        return Messages(self._transport)

    @cached_property
    def instance(self) -> Instance:
        return Instance(self._transport)

    @cached_property
    def webhook(self) -> Webhook:
        return Webhook(self._transport)

    @cached_property
    def validation(self) -> Validation:
        return Validation(self._transport)

    @cached_property
    def groups(self) -> Groups:
        return Groups(self._transport)

    @cached_property
    def chat(self) -> Chat:
        if self._sleep is not None:
            return Chat(self._transport, sleep=self._sleep)
        return Chat(self._transport)

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Response:
        return self._transport.get(path, params)

    def post(self, path: str, body: Mapping[str, Any] | None = None) -> Response:
        return self._transport.post(path, body)

    def delete(self, path: str) -> Response:
        return self._transport.delete(path)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
