"""Testes para Client (configuração, grupos de endpoints e cenários ponta a ponta)."""

from __future__ import annotations

import httpx
import pytest

import avisa_api
from avisa_api import Client
from avisa_api.config.settings import DEFAULT_BASE_URL, RetryPolicy, configure
from avisa_api.endpoints import Chat, Groups, Instance, Messages, Validation, Webhook
from avisa_api.utils.errors import ConfigurationError, RateLimitError


class TestClientConfiguration:
    """Construção e validação do Client."""

    def test_defaults(self) -> None:
        """Token explícito e URL padrão."""
        client = Client(token="abc")
        assert client.config.base_url == DEFAULT_BASE_URL
        assert client.config.token == "abc"

    def test_missing_token_raises_before_io(self) -> None:
        """Sem token (e sem configuração global) falha na construção."""
        with pytest.raises(ConfigurationError, match="Token is required"):
            Client()

    def test_configuration_error_is_value_error(self) -> None:
        """ConfigurationError é um ValueError."""
        with pytest.raises(ValueError):
            Client(token="")

    def test_invalid_timeout(self) -> None:
        """Timeout não positivo é rejeitado."""
        with pytest.raises(ConfigurationError, match="timeout_seconds"):
            Client(token="abc", timeout=0)

    def test_global_configuration_used(self) -> None:
        """Client sem argumentos usa a configuração global."""
        configure(token="global", base_url="https://custom.test/api")
        client = Client()
        assert client.config.token == "global"
        assert client.config.base_url == "https://custom.test/api/"

    def test_explicit_arguments_win(self) -> None:
        """Argumentos explícitos prevalecem sobre a configuração global."""
        configure(token="global", timeout_seconds=60)
        client = Client(token="local", timeout=5, retry_policy=RetryPolicy(max_retries=0))
        assert client.config.token == "local"
        assert client.config.timeout_seconds == 5
        assert client.config.retry_policy.max_retries == 0

    def test_endpoint_groups(self, client: Client) -> None:
        """Grupos de endpoints expostos e reutilizados."""
        assert isinstance(client.messages, Messages)
        assert isinstance(client.instance, Instance)
        assert isinstance(client.webhook, Webhook)
        assert isinstance(client.validation, Validation)
        assert isinstance(client.groups, Groups)
        assert isinstance(client.chat, Chat)
        assert client.messages is client.messages

    def test_context_manager_closes(self, handler) -> None:
        """Saída do with fecha o httpx.Client."""
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        with Client(token="abc", http_client=http_client):
            pass
        assert http_client.is_closed

    def test_package_exports(self) -> None:
        """API pública no pacote raiz."""
        assert avisa_api.Client is Client
        assert avisa_api.DEFAULT_BASE_URL == DEFAULT_BASE_URL
        assert callable(avisa_api.decode)


class TestClientScenarios:
    """Cenários completos com HTTP simulado."""

    def test_send_text(self, client: Client, handler) -> None:
        """send_text faz um único POST em actions/sendMessage."""
        handler.queue.append(httpx.Response(200, json={"status": "sent", "id": "abc"}))

        response = client.messages.send_text(number="5511999999999", message="Olá!")

        assert len(handler.requests) == 1
        assert handler.last.method == "POST"
        assert str(handler.last.url) == f"{DEFAULT_BASE_URL}actions/sendMessage"
        assert handler.last.headers["authorization"] == "Bearer test-token"
        assert handler.last_json() == {"number": "5511999999999", "message": "Olá!"}
        assert response.is_success
        assert response.data == {"status": "sent", "id": "abc"}

    def test_check_number_not_registered(self, client: Client, handler) -> None:
        """Número inexistente: sucesso com exists=False."""
        handler.queue.append(httpx.Response(200, json={"exists": False}))

        response = client.validation.check_number("5511000000000")

        assert response.is_success
        assert response.data["exists"] is False

    def test_rate_limit(self, client: Client, handler) -> None:
        """429 levanta RateLimitError."""
        handler.queue.append(httpx.Response(429, json={}))

        with pytest.raises(RateLimitError) as exc_info:
            client.messages.send_text(number="5511999999999", message="x")

        assert exc_info.value.http_status == 429
        assert len(handler.requests) == 1

    def test_raw_escape_hatch(self, client: Client, handler) -> None:
        """get/post/delete genéricos passam pelo mesmo transporte."""
        client.post("/custom/path", {"a": 1})
        assert str(handler.last.url) == f"{DEFAULT_BASE_URL}custom/path"
        client.get("custom/other", {"q": "1"})
        assert handler.last.url.params["q"] == "1"
        client.delete("custom/item")
        assert handler.last.method == "DELETE"
