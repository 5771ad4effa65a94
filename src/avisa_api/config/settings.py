"""Settings do cliente AvisaAPI.

Configuração imutável capturada na construção do ``Client``.
Resolução de cada campo: argumento explícito > configuração global
(``configure``) > default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Any

import httpx

from avisa_api.utils.errors import ConfigurationError

# Raiz da API de produção
DEFAULT_BASE_URL: str = "https://www.avisaapi.com.br/api/"
DEFAULT_TIMEOUT_SECONDS: float = 30.0
DEFAULT_USER_AGENT: str = "avisa-api-python"


def normalize_base_url(url: str | None) -> str:
    """Garante exatamente uma barra final na URL base.

    URL vazia ou None resolve para ``DEFAULT_BASE_URL``.
    """
    if not url:
        return DEFAULT_BASE_URL
    return url.rstrip("/") + "/"


@dataclass(frozen=True)
class RetryPolicy:
    """Política de retry para falhas transitórias de rede.

    Attributes:
        max_retries: Tentativas extras após a primeira (0 desliga o retry)
        base_delay_seconds: Espera antes do primeiro retry
        backoff_factor: Multiplicador aplicado a cada retry seguinte
        retryable_exceptions: Exceções httpx que disparam retry
    """

    max_retries: int = 2
    base_delay_seconds: float = 0.5
    backoff_factor: float = 2.0
    retryable_exceptions: tuple[type[Exception], ...] = (
        httpx.TimeoutException,
        httpx.ConnectError,
    )

    def delay_for(self, attempt: int) -> float:
        """Espera (segundos) antes do retry ``attempt`` (base 0)."""
        return self.base_delay_seconds * (self.backoff_factor**attempt)


@dataclass(frozen=True)
class ClientSettings:
    """Configurações do cliente.

    Attributes:
        base_url: URL base, sempre com uma barra final
        token: Bearer token (obrigatório)
        timeout_seconds: Timeout de conexão e da requisição inteira
        retry_policy: Política de retry da camada de transporte
        user_agent: Valor do header User-Agent
    """

    base_url: str = DEFAULT_BASE_URL
    token: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @property
    def timeout(self) -> float:
        """Alias de leitura para ``timeout_seconds``."""
        return self.timeout_seconds

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.token or not self.token.strip():
            errors.append("Token is required")

        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be > 0")

        if self.retry_policy.max_retries < 0:
            errors.append("max_retries must be >= 0")

        return errors


_global_settings: ClientSettings = ClientSettings()


def configure(**overrides: Any) -> ClientSettings:
    """Define defaults globais usados por ``Client`` quando um argumento é omitido.

    Exemplo:
        avisa_api.configure(token="seu_token", timeout_seconds=60)
        client = avisa_api.Client()
    """
    global _global_settings
    _global_settings = replace(_global_settings, **overrides)
    return _global_settings


def get_configuration() -> ClientSettings:
    """Retorna a configuração global atual."""
    return _global_settings


def reset_configuration() -> ClientSettings:
    """Restaura a configuração global para os defaults."""
    global _global_settings
    _global_settings = ClientSettings()
    return _global_settings


def build_settings(
    *,
    base_url: str | None = None,
    token: str | None = None,
    timeout: float | None = None,
    retry_policy: RetryPolicy | None = None,
) -> ClientSettings:
    """Mescla argumentos explícitos sobre a configuração global."""
    defaults = get_configuration()
    return ClientSettings(
        base_url=base_url or defaults.base_url,
        token=token if token is not None else defaults.token,
        timeout_seconds=timeout if timeout is not None else defaults.timeout_seconds,
        retry_policy=retry_policy or defaults.retry_policy,
        user_agent=defaults.user_agent,
    )


def _env_number(name: str, default: str, cast: type[int] | type[float]) -> int | float:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number: {raw!r}") from None


def load_settings_from_env() -> ClientSettings:
    """Carrega ClientSettings a partir de variáveis de ambiente.

    Raises:
        ConfigurationError: Se AVISA_API_MAX_RETRIES ou AVISA_API_TIMEOUT_SECONDS
            não forem numéricos
    """
    retry_policy = RetryPolicy(
        max_retries=int(_env_number("AVISA_API_MAX_RETRIES", "2", int)),
    )
    return ClientSettings(
        base_url=os.getenv("AVISA_API_BASE_URL", DEFAULT_BASE_URL),
        token=os.getenv("AVISA_API_TOKEN", ""),
        timeout_seconds=float(
            _env_number(
                "AVISA_API_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS), float
            )
        ),
        retry_policy=retry_policy,
    )


@lru_cache(maxsize=1)
def get_env_settings() -> ClientSettings:
    """Retorna instância cacheada de ClientSettings carregada do ambiente."""
    return load_settings_from_env()
