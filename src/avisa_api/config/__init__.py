"""Configuração do cliente AvisaAPI.

Re-exporta settings e funções de ciclo de vida da configuração global.
"""

from __future__ import annotations

from avisa_api.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ClientSettings,
    RetryPolicy,
    build_settings,
    configure,
    get_configuration,
    get_env_settings,
    load_settings_from_env,
    normalize_base_url,
    reset_configuration,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "ClientSettings",
    "RetryPolicy",
    "build_settings",
    "configure",
    "get_configuration",
    "get_env_settings",
    "load_settings_from_env",
    "normalize_base_url",
    "reset_configuration",
]
