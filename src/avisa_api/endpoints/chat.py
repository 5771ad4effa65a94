"""Endpoints de chat (arquivar, presença de digitação/gravação)."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from avisa_api.endpoints.base import Endpoint, require

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from avisa_api.connectors.http_base import HttpTransport
    from avisa_api.response import Response


class Chat(Endpoint):
    def __init__(
        self,
        transport: HttpTransport,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(transport)
        self._sleep = sleep

    def archive(self, number: str, archive: bool = True) -> Response:
        """Arquiva (``archive=True``) ou desarquiva o chat."""
        body = {"number": require(number, "number"), "archive": bool(archive)}
        return self._post("/chat/archive", body)

    def start_typing(self, number: str) -> Response:
        return self._post("/chat/typing/start", {"number": require(number, "number")})

    def stop_typing(self, number: str) -> Response:
        return self._post("/chat/typing/stop", {"number": require(number, "number")})

    def start_recording(self, number: str) -> Response:
        return self._post("/chat/recording/start", {"number": require(number, "number")})

    def stop_recording(self, number: str) -> Response:
        return self._post("/chat/recording/stop", {"number": require(number, "number")})

    @contextmanager
    def typing(self, number: str, duration: float = 2.0) -> Iterator[None]:
        """Simula digitação antes de enviar algo.

        Exemplo:
            with client.chat.typing("5511999999999"):
                client.messages.send_text(number="5511999999999", message="Oi!")
        """
        self.start_typing(number)
        try:
            self._sleep(duration)
            yield
        finally:
            self.stop_typing(number)
