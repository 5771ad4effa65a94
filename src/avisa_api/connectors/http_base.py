"""Transporte HTTP síncrono para a AvisaAPI.

Responsabilidades:
- Montar URL (base_url + path sem barra inicial)
- Injetar headers de autenticação e JSON
- Retry com backoff para timeout/falha de conexão
- Normalizar exceções de transporte em ``ApiConnectionError``
- Classificar status >= 400 antes de construir o ``Response``
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import httpx

from avisa_api.connectors.errors import classify_http_error
from avisa_api.connectors.http_logging import (
    log_connection_failure,
    log_http_error,
    log_retry,
    log_success,
)
from avisa_api.response import Response, decode_body
from avisa_api.utils.errors import ApiConnectionError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from avisa_api.config.settings import ClientSettings

SUPPORTED_METHODS = frozenset({"GET", "POST", "DELETE"})


def build_headers(settings: ClientSettings) -> dict[str, str]:
    """Headers enviados em toda requisição."""
    return {
        "Authorization": f"Bearer {settings.token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": settings.user_agent,
    }


def _describe_failure(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return f"Request timeout: {exc}"
    return f"Connection failed: {exc}"


class HttpTransport:
    """Executa requisições GET/POST/DELETE contra a URL base configurada.

    Seguro para uso sequencial; o compartilhamento entre threads depende
    apenas do ``httpx.Client`` subjacente (nenhum estado é mutado aqui).
    """

    def __init__(
        self,
        settings: ClientSettings,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._sleep = sleep
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(settings.timeout_seconds),
        )
        self._client.headers.update(build_headers(settings))

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def build_url(self, path: str) -> str:
        """Concatena base_url e path com exatamente uma barra entre eles."""
        return f"{self._settings.base_url}{path.lstrip('/')}"

    def execute(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Response:
        """Executa a requisição e devolve o Response.

        Raises:
            ValueError: Se o método HTTP não for suportado
            ApiConnectionError: Se a rede falhar após esgotar os retries
            AvisaApiError: (ou subclasse) se o status for >= 400
        """
        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        normalized_path = path.lstrip("/")
        url = self.build_url(normalized_path)
        request_kwargs: dict[str, Any] = {}
        if verb == "GET" and params:
            request_kwargs["params"] = dict(params)
        if verb == "POST":
            request_kwargs["json"] = dict(body or {})

        started = time.perf_counter()
        response = self._send_with_retry(verb, url, normalized_path, request_kwargs)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if response.status_code >= 400:
            error = classify_http_error(
                response.status_code, decode_body(response.content)
            )
            log_http_error(error, verb, normalized_path)
            raise error

        log_success(verb, normalized_path, response.status_code, elapsed_ms)
        return Response.from_httpx(response)

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Response:
        return self.execute("GET", path, params=params)

    def post(self, path: str, body: Mapping[str, Any] | None = None) -> Response:
        return self.execute("POST", path, body=body)

    def delete(self, path: str) -> Response:
        return self.execute("DELETE", path)

    def close(self) -> None:
        self._client.close()

    def _send_with_retry(
        self,
        verb: str,
        url: str,
        path: str,
        request_kwargs: dict[str, Any],
    ) -> httpx.Response:
        policy = self._settings.retry_policy
        attempt = 0
        while True:
            try:
                return self._client.request(verb, url, **request_kwargs)
            except policy.retryable_exceptions as exc:
                if attempt >= policy.max_retries:
                    reason = _describe_failure(exc)
                    log_connection_failure(verb, path, attempt + 1, type(exc).__name__)
                    raise ApiConnectionError(reason) from exc
                backoff = policy.delay_for(attempt)
                log_retry(verb, path, attempt + 1, backoff)
                self._sleep(backoff)
                attempt += 1
            except httpx.TransportError as exc:
                log_connection_failure(verb, path, attempt + 1, type(exc).__name__)
                raise ApiConnectionError(_describe_failure(exc)) from exc
