"""Hierarquia de erros do cliente AvisaAPI.

Toda falha observada na borda HTTP vira uma instância de ``AvisaApiError``
(ou subclasse). O tipo identifica o ``ErrorKind``; ``http_status`` e
``details`` permitem tratamento programático pelo integrador.
"""

from __future__ import annotations

import builtins
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classificação semântica dos erros."""

    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    SERVER = "server"
    CONNECTION = "connection"
    GENERIC = "generic"


class AvisaApiError(Exception):
    """Erro base da API (também usado para status HTTP não classificados)."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str = "",
        *,
        http_status: int | None = None,
        details: Any = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.details = details
        self.code = code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r})"
        )


class AuthenticationError(AvisaApiError):
    """Token inválido ou ausente (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION


class NotFoundError(AvisaApiError):
    """Recurso inexistente (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND


class RateLimitError(AvisaApiError):
    """Limite de requisições excedido (HTTP 429)."""

    kind = ErrorKind.RATE_LIMIT


class ValidationError(AvisaApiError):
    """Demais erros 4xx (payload recusado pela API)."""

    kind = ErrorKind.VALIDATION


class ServerError(AvisaApiError):
    """Falha do lado do gateway (HTTP 5xx)."""

    kind = ErrorKind.SERVER


class ApiConnectionError(AvisaApiError, builtins.ConnectionError):
    """DNS, conexão ou timeout após esgotar as tentativas. Sem status HTTP."""

    kind = ErrorKind.CONNECTION


class ConfigurationError(ValueError):
    """Configuração inválida detectada na construção do cliente."""
