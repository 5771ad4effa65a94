"""Testes para connectors.errors.classify_http_error."""

from __future__ import annotations

import pytest

from avisa_api.connectors.errors import RATE_LIMIT_MESSAGE, classify_http_error
from avisa_api.utils.errors import (
    ApiConnectionError,
    AuthenticationError,
    AvisaApiError,
    ErrorKind,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)


class TestClassifyHttpError:
    """Tabela status -> erro."""

    @pytest.mark.parametrize(
        ("status", "error_type", "message"),
        [
            (401, AuthenticationError, "Invalid token"),
            (404, NotFoundError, "Resource not found"),
            (429, RateLimitError, RATE_LIMIT_MESSAGE),
            (400, ValidationError, "Client error"),
            (422, ValidationError, "Client error"),
            (500, ServerError, "Server error"),
            (503, ServerError, "Server error"),
            (302, AvisaApiError, "HTTP Error: 302"),
            (600, AvisaApiError, "HTTP Error: 600"),
        ],
    )
    def test_mapping(self, status: int, error_type: type, message: str) -> None:
        """Cada faixa de status vira o erro correspondente."""
        error = classify_http_error(status, {})
        assert type(error) is error_type
        assert error.message == message
        assert error.http_status == status

    def test_validation_uses_body_message(self) -> None:
        """4xx genérico usa o campo message do body."""
        error = classify_http_error(400, {"message": "number is required"})
        assert isinstance(error, ValidationError)
        assert error.message == "number is required"

    def test_details_carry_body(self) -> None:
        """details guarda o body decodificado."""
        body = {"error": "quota"}
        assert classify_http_error(429, body).details == body

    def test_non_mapping_body(self) -> None:
        """Body não-dict não quebra a classificação."""
        error = classify_http_error(418, "teapot")
        assert error.message == "Client error"
        assert error.details == "teapot"

    def test_rate_limit_message(self) -> None:
        """Mensagem de rate limit menciona o limite."""
        assert RATE_LIMIT_MESSAGE == "Rate limit exceeded (240 req/min)"


class TestErrorTaxonomy:
    """Testes para a hierarquia de exceções."""

    @pytest.mark.parametrize(
        ("error_type", "kind"),
        [
            (AuthenticationError, ErrorKind.AUTHENTICATION),
            (NotFoundError, ErrorKind.NOT_FOUND),
            (RateLimitError, ErrorKind.RATE_LIMIT),
            (ValidationError, ErrorKind.VALIDATION),
            (ServerError, ErrorKind.SERVER),
            (ApiConnectionError, ErrorKind.CONNECTION),
            (AvisaApiError, ErrorKind.GENERIC),
        ],
    )
    def test_kinds(self, error_type: type[AvisaApiError], kind: ErrorKind) -> None:
        """Cada classe expõe seu ErrorKind."""
        assert error_type.kind is kind
        assert issubclass(error_type, AvisaApiError)

    def test_connection_error_is_builtin_connection_error(self) -> None:
        """ApiConnectionError também é ConnectionError e não tem status."""
        error = ApiConnectionError("Connection failed: boom")
        assert isinstance(error, ConnectionError)
        assert error.http_status is None

    def test_str_is_message(self) -> None:
        """str(erro) é a mensagem."""
        assert str(NotFoundError("Resource not found", http_status=404)) == "Resource not found"
