"""Leitura de arquivos locais para envio em Base64."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path


def encode_file_base64(path: str | Path) -> str:
    """Conteúdo do arquivo em Base64 puro (sem prefixo ``data:``).

    Raises:
        OSError: Se o arquivo não existir ou não puder ser lido (ex: diretório)
    """
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def guess_mime_type(path: str | Path, default_mime: str) -> str:
    mime, _ = mimetypes.guess_type(str(path))
    return mime or default_mime


def encode_file_as_data_uri(path: str | Path, default_mime: str) -> str:
    """Data URI ``data:<mime>;base64,<conteúdo>``; MIME inferido pela extensão."""
    mime = guess_mime_type(path, default_mime)
    return f"data:{mime};base64,{encode_file_base64(path)}"
