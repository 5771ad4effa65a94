"""Normalização de chaves dos payloads de webhook.

Os payloads chegam com casing variável (``Info``/``info``, ``fileEncSha256``/
``FileEncSHA256``). Uma única passada gera uma cópia com chaves em minúsculas;
os acessores leem apenas essa cópia.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


def casefold_keys(value: Any) -> Any:
    """Copia recursivamente ``value`` com chaves de dict em minúsculas.

    Em colisão (``Info`` e ``info`` no mesmo nível) vence a primeira chave.
    Listas são percorridas; escalares são devolvidos sem alteração.
    """
    if isinstance(value, Mapping):
        folded: dict[str, Any] = {}
        for key, item in value.items():
            folded.setdefault(str(key).casefold(), casefold_keys(item))
        return folded
    if isinstance(value, list):
        return [casefold_keys(item) for item in value]
    return value


def load_json_object(raw: Any) -> dict[str, Any]:
    """Converte str/bytes/Mapping em dict; qualquer falha vira ``{}``."""
    if isinstance(raw, Mapping):
        return dict(raw)
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        return {}
    try:
        parsed = json.loads(raw)
    except ValueError:
        logger.debug("webhook_json_fallback", extra={"reason": "invalid_json"})
        return {}
    if not isinstance(parsed, dict):
        logger.debug("webhook_json_fallback", extra={"reason": "not_an_object"})
        return {}
    return parsed


def dig(mapping: Any, *keys: str) -> Any:
    """Navega chaves (já em minúsculas); ausência em qualquer nível -> None."""
    current = mapping
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def region(mapping: Any, key: str) -> dict[str, Any]:
    """Sub-bloco ``key`` como dict (vazio se ausente ou de outro tipo)."""
    value = dig(mapping, key)
    return value if isinstance(value, dict) else {}
