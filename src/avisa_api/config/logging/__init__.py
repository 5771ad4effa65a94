"""Logging estruturado (JSON) do avisa_api.

Uso:
    from avisa_api.config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    logger = get_logger(__name__)
    logger.debug("avisa_request_completed", extra={"status_code": 200})
"""

from avisa_api.config.logging.config import configure_logging, get_logger
from avisa_api.config.logging.filters import CorrelationIdFilter, new_correlation_id
from avisa_api.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "new_correlation_id",
]
