"""Conector HTTP da AvisaAPI.

Único ponto de IO de rede do cliente: transporte, classificação de erros
e logging sem PII.
"""

from .errors import RATE_LIMIT_MESSAGE, classify_http_error
from .http_base import HttpTransport, build_headers

__all__ = [
    "RATE_LIMIT_MESSAGE",
    "HttpTransport",
    "build_headers",
    "classify_http_error",
]
