"""Endpoints de grupos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from avisa_api.endpoints.base import Endpoint, require
from avisa_api.payloads import GroupUpdatePayload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from avisa_api.response import Response


class Groups(Endpoint):
    """Operações sobre grupos (``group_id`` no formato '123456789@g.us')."""

    def list(self) -> Response:
        return self._get("/group/list")

    def info(self, group_id: str) -> Response:
        return self._get("/group/info", {"id": require(group_id, "group_id")})

    def send_text(self, group_id: str, message: str) -> Response:
        body = {"id": require(group_id, "group_id"), "message": require(message, "message")}
        return self._post("/actions/sendMessageGroup", body)

    def create(self, name: str, participants: Sequence[str]) -> Response:
        body = {
            "name": require(name, "name"),
            "participants": require(list(participants), "participants"),
        }
        return self._post("/group/create", body)

    def update(
        self,
        group_id: str,
        participants_add: Sequence[str] = (),
        participants_remove: Sequence[str] = (),
    ) -> Response:
        """Adiciona e/ou remove participantes; listas vazias são omitidas."""
        payload = GroupUpdatePayload(
            id=require(group_id, "group_id"),
            add=list(participants_add),
            remove=list(participants_remove),
        )
        return self._post("/group/update", payload.to_body())

    def change_name(self, group_id: str, name: str) -> Response:
        body = {"id": require(group_id, "group_id"), "name": require(name, "name")}
        return self._post("/group/name", body)

    def change_description(self, group_id: str, description: str) -> Response:
        body = {"id": require(group_id, "group_id"), "description": description}
        return self._post("/group/description", body)

    def change_photo(self, group_id: str, base64: str) -> Response:
        body = {"id": require(group_id, "group_id"), "image": require(base64, "base64")}
        return self._post("/group/photo", body)

    def set_admin_only(self, group_id: str, enabled: bool) -> Response:
        """``enabled=True``: apenas admins enviam mensagens."""
        body = {"id": require(group_id, "group_id"), "adminonly": bool(enabled)}
        return self._post("/group/adminonly", body)
