"""Exceções públicas do cliente."""

from .exceptions import (
    ApiConnectionError,
    AuthenticationError,
    AvisaApiError,
    ConfigurationError,
    ErrorKind,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)

__all__ = [
    "ApiConnectionError",
    "AuthenticationError",
    "AvisaApiError",
    "ConfigurationError",
    "ErrorKind",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ValidationError",
]
