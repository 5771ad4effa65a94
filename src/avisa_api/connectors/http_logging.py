"""Helpers de logging do transporte HTTP (sem token nem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from avisa_api.utils.errors import AvisaApiError

logger = logging.getLogger(__name__)


def log_http_error(
    error: AvisaApiError,
    method: str,
    path: str,
) -> None:
    """Loga erro HTTP classificado."""
    logger.warning(
        "avisa_request_failed",
        extra={
            "method": method,
            "path": path,
            "status_code": error.http_status,
            "error_kind": error.kind.value,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    logger.debug(
        "avisa_request_completed",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_retry(method: str, path: str, attempt: int, backoff_seconds: float) -> None:
    logger.info(
        "avisa_request_retry",
        extra={
            "method": method,
            "path": path,
            "attempt": attempt,
            "backoff_seconds": backoff_seconds,
        },
    )


def log_connection_failure(method: str, path: str, attempts: int, reason: str) -> None:
    logger.error(
        "avisa_connection_failed",
        extra={
            "method": method,
            "path": path,
            "attempts": attempts,
            "reason": reason,
        },
    )
