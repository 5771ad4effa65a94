"""Classificação de status HTTP na taxonomia de erros do cliente."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from avisa_api.utils.errors import (
    AuthenticationError,
    AvisaApiError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)

RATE_LIMIT_MESSAGE = "Rate limit exceeded (240 req/min)"


def _body_message(body: Any) -> str | None:
    if isinstance(body, Mapping):
        message = body.get("message")
        if message:
            return str(message)
    return None


def classify_http_error(status: int, body: Any = None) -> AvisaApiError:
    """Mapeia status HTTP para o erro correspondente.

    Função pura: retorna o erro, quem chama decide levantar.

    | status            | erro                | mensagem                               |
    |-------------------|---------------------|----------------------------------------|
    | 401               | AuthenticationError | "Invalid token"                        |
    | 404               | NotFoundError       | "Resource not found"                   |
    | 429               | RateLimitError      | "Rate limit exceeded (240 req/min)"    |
    | 400-499 (demais)  | ValidationError     | campo ``message`` do body ou "Client error" |
    | 500-599           | ServerError         | "Server error"                         |
    | outros            | AvisaApiError       | "HTTP Error: {status}"                 |
    """
    if status == 401:
        return AuthenticationError("Invalid token", http_status=status, details=body)
    if status == 404:
        return NotFoundError("Resource not found", http_status=status, details=body)
    if status == 429:
        return RateLimitError(RATE_LIMIT_MESSAGE, http_status=status, details=body)
    if 400 <= status <= 499:
        message = _body_message(body) or "Client error"
        return ValidationError(message, http_status=status, details=body)
    if 500 <= status <= 599:
        return ServerError("Server error", http_status=status, details=body)
    return AvisaApiError(f"HTTP Error: {status}", http_status=status, details=body)
