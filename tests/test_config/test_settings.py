"""Testes para config.settings (ClientSettings, RetryPolicy, configuração global)."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

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
from avisa_api.utils.errors import ConfigurationError


class TestNormalizeBaseUrl:
    """Testes para normalize_base_url."""

    def test_appends_trailing_slash(self) -> None:
        """Adiciona barra final quando ausente."""
        assert normalize_base_url("https://example.com/api") == "https://example.com/api/"

    def test_keeps_single_trailing_slash(self) -> None:
        """URL já terminada em barra não muda."""
        assert normalize_base_url("https://example.com/api/") == "https://example.com/api/"

    def test_collapses_multiple_trailing_slashes(self) -> None:
        """Várias barras finais viram uma."""
        assert normalize_base_url("https://example.com/api///") == "https://example.com/api/"

    def test_is_idempotent(self) -> None:
        """Aplicar duas vezes produz o mesmo resultado."""
        once = normalize_base_url("https://example.com")
        assert normalize_base_url(once) == once

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_resolves_to_default(self, value: str | None) -> None:
        """URL vazia usa o default de produção."""
        assert normalize_base_url(value) == DEFAULT_BASE_URL


class TestRetryPolicy:
    """Testes para RetryPolicy."""

    def test_defaults(self) -> None:
        """Defaults: 2 retries, 0.5s, fator 2."""
        policy = RetryPolicy()
        assert policy.max_retries == 2
        assert policy.base_delay_seconds == 0.5
        assert policy.backoff_factor == 2.0

    def test_retryable_exceptions_cover_timeout_and_connect(self) -> None:
        """Timeout e falha de conexão disparam retry."""
        policy = RetryPolicy()
        assert httpx.TimeoutException in policy.retryable_exceptions
        assert httpx.ConnectError in policy.retryable_exceptions

    def test_delay_grows_exponentially(self) -> None:
        """Espera = base * fator ** tentativa."""
        policy = RetryPolicy(base_delay_seconds=1.0, backoff_factor=3.0)
        assert [policy.delay_for(n) for n in range(3)] == [1.0, 3.0, 9.0]


class TestClientSettings:
    """Testes para ClientSettings."""

    def test_defaults(self) -> None:
        """Defaults de URL e timeout."""
        settings = ClientSettings(token="abc")
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        assert settings.timeout == DEFAULT_TIMEOUT_SECONDS

    def test_base_url_normalized_on_creation(self) -> None:
        """base_url é normalizada no construtor."""
        settings = ClientSettings(base_url="http://localhost:8080/api", token="abc")
        assert settings.base_url == "http://localhost:8080/api/"

    def test_is_frozen(self) -> None:
        """Settings são imutáveis."""
        settings = ClientSettings(token="abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.token = "other"  # type: ignore[misc]

    def test_validate_ok(self) -> None:
        """Configuração válida não retorna erros."""
        assert ClientSettings(token="abc").validate() == []

    @pytest.mark.parametrize("token", ["", "   "])
    def test_validate_requires_token(self, token: str) -> None:
        """Token vazio ou em branco é inválido."""
        assert "Token is required" in ClientSettings(token=token).validate()

    def test_validate_timeout_positive(self) -> None:
        """Timeout deve ser positivo."""
        errors = ClientSettings(token="abc", timeout_seconds=0).validate()
        assert "timeout_seconds must be > 0" in errors

    def test_validate_negative_retries(self) -> None:
        """max_retries negativo é inválido."""
        settings = ClientSettings(token="abc", retry_policy=RetryPolicy(max_retries=-1))
        assert "max_retries must be >= 0" in settings.validate()


class TestGlobalConfiguration:
    """Testes para configure/get_configuration/reset_configuration."""

    def test_configure_updates_global(self) -> None:
        """configure altera apenas os campos informados."""
        configure(token="global-token", timeout_seconds=60)
        current = get_configuration()
        assert current.token == "global-token"
        assert current.timeout_seconds == 60
        assert current.base_url == DEFAULT_BASE_URL

    def test_configure_normalizes_base_url(self) -> None:
        """base_url configurada globalmente também é normalizada."""
        configure(base_url="https://custom.example.com/api")
        assert get_configuration().base_url == "https://custom.example.com/api/"

    def test_reset_restores_defaults(self) -> None:
        """reset_configuration volta aos defaults."""
        configure(token="global-token")
        reset_configuration()
        assert get_configuration() == ClientSettings()

    def test_build_settings_explicit_wins(self) -> None:
        """Argumentos explícitos prevalecem sobre a configuração global."""
        configure(token="global-token", base_url="https://global.example.com/")
        settings = build_settings(token="explicit", timeout=5)
        assert settings.token == "explicit"
        assert settings.timeout_seconds == 5
        assert settings.base_url == "https://global.example.com/"

    def test_build_settings_uses_global_token(self) -> None:
        """Sem token explícito, usa o global."""
        configure(token="global-token")
        assert build_settings().token == "global-token"


class TestEnvSettings:
    """Testes para load_settings_from_env/get_env_settings."""

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Lê token, URL, timeout e retries do ambiente."""
        monkeypatch.setenv("AVISA_API_TOKEN", "env-token")
        monkeypatch.setenv("AVISA_API_BASE_URL", "https://env.example.com")
        monkeypatch.setenv("AVISA_API_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("AVISA_API_MAX_RETRIES", "0")

        settings = load_settings_from_env()

        assert settings.token == "env-token"
        assert settings.base_url == "https://env.example.com/"
        assert settings.timeout_seconds == 12.5
        assert settings.retry_policy.max_retries == 0

    def test_load_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem variáveis, usa defaults e token vazio."""
        for name in (
            "AVISA_API_TOKEN",
            "AVISA_API_BASE_URL",
            "AVISA_API_TIMEOUT_SECONDS",
            "AVISA_API_MAX_RETRIES",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings_from_env()

        assert settings.token == ""
        assert settings.base_url == DEFAULT_BASE_URL

    @pytest.mark.parametrize(
        ("name", "value"),
        [("AVISA_API_MAX_RETRIES", "dois"), ("AVISA_API_TIMEOUT_SECONDS", "30s")],
    )
    def test_non_numeric_env_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        """Valor não numérico gera ConfigurationError com o nome da variável."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError, match=name):
            load_settings_from_env()

    def test_get_env_settings_is_cached(self) -> None:
        """get_env_settings retorna sempre a mesma instância."""
        get_env_settings.cache_clear()
        try:
            assert get_env_settings() is get_env_settings()
        finally:
            get_env_settings.cache_clear()
