"""Webhooks recebidos da AvisaAPI."""

from .event import MEDIA_BLOCKS, WebhookEvent, decode
from .normalize import casefold_keys

__all__ = [
    "MEDIA_BLOCKS",
    "WebhookEvent",
    "casefold_keys",
    "decode",
]
