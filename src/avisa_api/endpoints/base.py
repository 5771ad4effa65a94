"""Base dos grupos de endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from avisa_api.connectors.http_base import HttpTransport
    from avisa_api.response import Response


def require(value: Any, name: str) -> Any:
    """Valida argumento obrigatório (None, string vazia ou coleção vazia).

    Raises:
        ValueError: Se o valor estiver ausente
    """
    if value is None:
        raise ValueError(f"{name} is required")
    if isinstance(value, str) and not value.strip():
        raise ValueError(f"{name} is required")
    if isinstance(value, (list, tuple, set)) and not value:
        raise ValueError(f"{name} must not be empty")
    return value


class Endpoint:
    """Conjunto sem estado de métodos que delegam ao transporte."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Response:
        return self._transport.execute("GET", path, params=params)

    def _post(self, path: str, body: Mapping[str, Any] | None = None) -> Response:
        return self._transport.execute("POST", path, body=body or {})

    def _delete(self, path: str) -> Response:
        return self._transport.execute("DELETE", path)
