"""Cliente Python da AvisaAPI (gateway WhatsApp).

Exemplo:
    import avisa_api

    client = avisa_api.Client(token="seu_token")
    client.messages.send_text(number="5511999999999", message="Olá!")

    event = avisa_api.decode(request_json)
"""

from avisa_api.client import Client
from avisa_api.config.settings import (
    DEFAULT_BASE_URL,
    ClientSettings,
    RetryPolicy,
    configure,
    get_configuration,
    reset_configuration,
)
from avisa_api.payloads import ContextInfo
from avisa_api.response import Response
from avisa_api.utils.errors import (
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
from avisa_api.webhooks import WebhookEvent, decode

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiConnectionError",
    "AuthenticationError",
    "AvisaApiError",
    "Client",
    "ClientSettings",
    "ConfigurationError",
    "ContextInfo",
    "ErrorKind",
    "NotFoundError",
    "RateLimitError",
    "Response",
    "RetryPolicy",
    "ServerError",
    "ValidationError",
    "WebhookEvent",
    "__version__",
    "configure",
    "decode",
    "get_configuration",
    "reset_configuration",
]
