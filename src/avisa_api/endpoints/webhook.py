"""Endpoints de configuração do webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING

from avisa_api.endpoints.base import Endpoint, require

if TYPE_CHECKING:
    from avisa_api.response import Response


class Webhook(Endpoint):
    def show(self) -> Response:
        """URL do webhook configurado (vazio se não houver)."""
        return self._get("/webhook")

    def set(self, url: str) -> Response:
        return self._post("/webhook", {"webhook": require(url, "url")})

    def remove(self) -> Response:
        return self._post("/webhook", {"webhook": ""})
