"""Wrapper de resposta HTTP da AvisaAPI."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


def decode_body(body: Any) -> dict[str, Any]:
    """Decodifica o corpo da resposta, sempre devolvendo um dict.

    - vazio/None -> ``{}``
    - Mapping -> copiado sem alteração
    - str/bytes com objeto JSON -> objeto parseado
    - qualquer outro conteúdo (JSON inválido, array, escalar) -> ``{"raw": original}``
    """
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8", errors="replace")
    if not isinstance(body, str):
        return {"raw": body}
    if not body.strip():
        return {}
    try:
        parsed = json.loads(body)
    except ValueError:
        return {"raw": body}
    if isinstance(parsed, dict):
        return parsed
    return {"raw": body}


class Response:
    """Resposta bem-sucedida (ou não-erro) de uma chamada à API.

    Status >= 400 nunca chegam aqui: o transporte levanta o erro
    classificado antes de construir o Response.
    """

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.data = decode_body(body)
        self.headers: dict[str, str] = dict(headers or {})

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Response:
        """Constrói a partir de um ``httpx.Response``."""
        return cls(response.status_code, response.content, response.headers)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def error_message(self) -> str | None:
        """Mensagem de erro (None em sucesso)."""
        if self.is_success:
            return None
        return (
            self.data.get("message")
            or self.data.get("error")
            or f"HTTP {self.status_code}"
        )

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, data={self.data!r})"
