"""Endpoints de validação de números."""

from __future__ import annotations

from typing import TYPE_CHECKING

from avisa_api.endpoints.base import Endpoint, require

if TYPE_CHECKING:
    from collections.abc import Iterable

    from avisa_api.response import Response


class Validation(Endpoint):
    def check_number(self, number: str) -> Response:
        """Verifica se o número possui WhatsApp.

        Args:
            number: Número brasileiro (ex: '51999999999' ou '(51) 9999-99999')

        Returns:
            Response com ``exists`` e, se existir, ``jid``.
        """
        return self._post("/actions/checknumber", {"number": require(number, "number")})

    def check_number_international(self, number: str) -> Response:
        return self._post(
            "/actions/checknumberinternational",
            {"number": require(number, "number")},
        )

    def check_numbers(self, numbers: Iterable[str]) -> list[Response]:
        """Uma chamada sequencial de ``check_number`` por número."""
        return [self.check_number(number) for number in numbers]
