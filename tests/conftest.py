"""Configuração do pytest para o projeto avisa_api."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import httpx  # noqa: E402

from avisa_api.config.settings import reset_configuration  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_global_configuration():
    """Cada teste começa com a configuração global padrão."""
    reset_configuration()
    yield
    reset_configuration()


class RecordingHandler:
    """Handler de MockTransport que grava requests e devolve respostas enfileiradas.

    Cada item da fila é um ``httpx.Response`` ou uma exceção a ser levantada.
    Com a fila vazia, responde 200 com ``{}``.
    """

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.queue = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.queue:
            return httpx.Response(200, json={})
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def http_client(handler: RecordingHandler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def client(http_client: httpx.Client, sleeps: list[float]):
    from avisa_api import Client

    return Client(token="test-token", http_client=http_client, sleep=sleeps.append)
