"""Grupos de endpoints da AvisaAPI.

Cada grupo é um conjunto sem estado de métodos: valida os argumentos,
monta o corpo/query e delega ao transporte, devolvendo o Response intacto.
"""

from .base import Endpoint, require
from .chat import Chat
from .groups import Groups
from .instance import Instance
from .messages import MEDIA_TYPES, Messages
from .validation import Validation
from .webhook import Webhook

__all__ = [
    "MEDIA_TYPES",
    "Chat",
    "Endpoint",
    "Groups",
    "Instance",
    "Messages",
    "Validation",
    "Webhook",
    "require",
]
