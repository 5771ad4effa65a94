"""Endpoints da instância WhatsApp (QR code, status, usuários)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from avisa_api.endpoints.base import Endpoint, require

if TYPE_CHECKING:
    from avisa_api.response import Response


class Instance(Endpoint):
    def qr_code(self) -> Response:
        """QR code para conectar o WhatsApp (base64) ou status se já conectado."""
        return self._get("/instance/qr")

    def status(self) -> Response:
        """Status da instância (``LoggedIn``, ``phone``, ``name``)."""
        return self._get("/instance/status")

    def is_connected(self) -> bool:
        response = self.status()
        return response.is_success and response.data.get("LoggedIn") is True

    def delete(self) -> Response:
        """Desconecta e remove a instância."""
        return self._delete("/instance/user")

    def create_user(self, name: str, email: str) -> Response:
        """Cria usuário (exige token de integrador). A resposta traz o token novo."""
        body = {"name": require(name, "name"), "email": require(email, "email")}
        return self._post("/instance/createUser", body)

    def list_users(self) -> Response:
        """Lista usuários (exige token de integrador)."""
        return self._get("/instance/getAll")
