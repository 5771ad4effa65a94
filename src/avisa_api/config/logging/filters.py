"""Filter que anota os records com serviço e correlation_id."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def new_correlation_id() -> str:
    """Identificador curto para agrupar os logs de uma execução (ex: sessão da TUI)."""
    return uuid.uuid4().hex[:12]


class CorrelationIdFilter(logging.Filter):
    """Anota cada record com ``service`` e ``correlation_id``.

    Na TUI o correlation_id é o identificador da sessão interativa: todas as
    chamadas à API feitas numa mesma execução compartilham o valor.
    ``extra={"correlation_id": ...}`` tem precedência sobre o getter.
    Nunca adicionar token, números de telefone ou corpo de mensagens nos logs.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.correlation_id_getter = correlation_id_getter

    def current_correlation_id(self) -> str:
        if self.correlation_id_getter is None:
            return ""
        return self.correlation_id_getter() or ""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self.current_correlation_id()
        record.service = self.service_name
        return True
