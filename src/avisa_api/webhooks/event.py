"""Decodificador de eventos de webhook da AvisaAPI.

Exemplo:
    event = decode(request_json)
    if event.is_message and not event.from_me:
        client.messages.send_text(number=event.phone, message=f"Recebido: {event.content}")

Nenhum acessor levanta exceção: campos ausentes viram None/False/{}.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from avisa_api.webhooks.normalize import casefold_keys, dig, load_json_object, region

# Sub-blocos de mídia baixável, em ordem de prioridade
MEDIA_BLOCKS: tuple[str, ...] = (
    "imagemessage",
    "videomessage",
    "ptvmessage",
    "audiomessage",
    "documentmessage",
)

# Campo de saída -> chave normalizada no bloco de mídia
_DOWNLOAD_FIELDS: tuple[tuple[str, str], ...] = (
    ("Url", "url"),
    ("DirectPath", "directpath"),
    ("MediaKey", "mediakey"),
    ("Mimetype", "mimetype"),
    ("FileEncSHA256", "fileencsha256"),
    ("FileSHA256", "filesha256"),
    ("FileLength", "filelength"),
)

_WRAPPER_KEY = "jsondata"


def _original_region(mapping: Any, key: str) -> dict[str, Any]:
    """Busca ``key`` sem diferenciar maiúsculas no payload original."""
    if not isinstance(mapping, dict):
        return {}
    for candidate, value in mapping.items():
        if str(candidate).casefold() == key:
            return value if isinstance(value, dict) else {}
    return {}


class WebhookEvent:
    """Visão somente leitura sobre um payload de webhook.

    Regiões resolvidas na construção:
    - envelope: payload, ou o conteúdo de ``jsonData`` quando este é
      objeto ou JSON serializado (outros valores são ignorados)
    - ``event``: sub-bloco do envelope; na ausência, o próprio envelope
    - ``Info`` e ``Message``: sub-blocos de ``event``
    """

    def __init__(self, payload: Any) -> None:
        self._raw = load_json_object(payload) if payload is not None else {}

        envelope = self._raw
        for key, value in self._raw.items():
            if str(key).casefold() == _WRAPPER_KEY:
                if isinstance(value, (Mapping, str, bytes, bytearray)):
                    envelope = load_json_object(value)
                break

        event = _original_region(envelope, "event") or envelope
        self._event = event
        self._info = _original_region(event, "info")
        self._message = _original_region(event, "message")

        self._c_envelope: dict[str, Any] = casefold_keys(envelope)
        self._c_event: dict[str, Any] = casefold_keys(event)
        self._c_info: dict[str, Any] = region(self._c_event, "info")
        self._c_message: dict[str, Any] = region(self._c_event, "message")

    # Acesso direto (chaves originais)

    @property
    def raw_data(self) -> dict[str, Any]:
        return self._raw

    @property
    def event(self) -> dict[str, Any]:
        return self._event

    @property
    def info(self) -> dict[str, Any]:
        return self._info

    @property
    def message(self) -> dict[str, Any]:
        return self._message

    # Tipo do evento

    @property
    def type(self) -> str | None:
        """"Message", "Status", etc."""
        return dig(self._c_envelope, "type")

    @property
    def is_message(self) -> bool:
        return self.type == "Message"

    @property
    def is_status(self) -> bool:
        return self.type == "Status"

    # Remetente

    @property
    def chat_jid(self) -> str | None:
        return dig(self._c_info, "chat")

    @property
    def sender_jid(self) -> str | None:
        """JID interno do remetente (ex: '113365745688680@lid')."""
        return dig(self._c_info, "sender")

    @property
    def sender_alt_jid(self) -> str | None:
        """JID no formato padrão (ex: '5541999845097@s.whatsapp.net')."""
        return dig(self._c_info, "senderalt")

    @property
    def phone(self) -> str | None:
        """Telefone do remetente: parte do JID antes do '@'."""
        jid = self.sender_alt_jid or self.sender_jid
        if not isinstance(jid, str) or not jid:
            return None
        return jid.split("@", 1)[0]

    @property
    def sender_name(self) -> str | None:
        return dig(self._c_info, "pushname")

    # Metadados da mensagem

    @property
    def message_id(self) -> str | None:
        return dig(self._c_info, "id")

    @property
    def message_type(self) -> str | None:
        return dig(self._c_info, "type")

    @property
    def media_type(self) -> str | None:
        """"ptv", "image", "video", "audio", "document", ..."""
        return dig(self._c_info, "mediatype")

    @property
    def timestamp(self) -> datetime | None:
        value = dig(self._c_info, "timestamp")
        if not isinstance(value, str) or not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None

    @property
    def from_me(self) -> bool:
        return dig(self._c_info, "isfromme") is True

    @property
    def is_group(self) -> bool:
        return dig(self._c_info, "isgroup") is True

    @property
    def is_ephemeral(self) -> bool:
        return dig(self._c_event, "isephemeral") is True

    @property
    def is_view_once(self) -> bool:
        return (
            dig(self._c_event, "isviewonce") is True
            or dig(self._c_event, "isviewoncev2") is True
        )

    @property
    def is_edit(self) -> bool:
        return dig(self._c_event, "isedit") is True

    # Conteúdo

    @property
    def text(self) -> str | None:
        return dig(self._c_message, "conversation") or dig(
            self._c_message, "extendedtextmessage", "text"
        )

    @property
    def caption(self) -> str | None:
        for block in ("imagemessage", "videomessage", "documentmessage"):
            value = dig(self._c_message, block, "caption")
            if value:
                return value
        return None

    @property
    def content(self) -> str | None:
        """Texto ou, na ausência, a legenda."""
        return self.text or self.caption

    # Tipo de mídia

    def _has_block(self, block: str) -> bool:
        return block in self._c_message

    @property
    def is_text(self) -> bool:
        return self.message_type == "text"

    @property
    def is_image(self) -> bool:
        return self.message_type == "image" or self._has_block("imagemessage")

    @property
    def is_video(self) -> bool:
        return (
            self.message_type == "video"
            or self.media_type == "video"
            or self._has_block("videomessage")
        )

    @property
    def is_ptv(self) -> bool:
        """Vídeo de recado (video note)."""
        return self.media_type == "ptv" or self._has_block("ptvmessage")

    @property
    def is_audio(self) -> bool:
        return self.message_type == "audio" or self._has_block("audiomessage")

    @property
    def is_document(self) -> bool:
        return self.message_type == "document" or self._has_block("documentmessage")

    @property
    def is_location(self) -> bool:
        return self.message_type == "location" or self._has_block("locationmessage")

    @property
    def is_sticker(self) -> bool:
        return self.message_type == "sticker" or self._has_block("stickermessage")

    @property
    def is_contact(self) -> bool:
        return self.message_type == "contact" or self._has_block("contactmessage")

    # Blocos de mídia (chaves normalizadas)

    def _block(self, name: str) -> dict[str, Any] | None:
        value = self._c_message.get(name)
        return value if isinstance(value, dict) else None

    @property
    def image_info(self) -> dict[str, Any] | None:
        return self._block("imagemessage")

    @property
    def video_info(self) -> dict[str, Any] | None:
        return self._block("videomessage")

    @property
    def ptv_info(self) -> dict[str, Any] | None:
        return self._block("ptvmessage")

    @property
    def audio_info(self) -> dict[str, Any] | None:
        return self._block("audiomessage")

    @property
    def document_info(self) -> dict[str, Any] | None:
        return self._block("documentmessage")

    @property
    def location_info(self) -> dict[str, Any] | None:
        return self._block("locationmessage")

    def _current_media(self) -> dict[str, Any] | None:
        present = [block for block in MEDIA_BLOCKS if self._block(block) is not None]
        if len(present) != 1:
            return None
        return self._block(present[0])

    @property
    def has_media(self) -> bool:
        """True se exatamente um bloco de mídia baixável estiver presente."""
        return self._current_media() is not None

    @property
    def media_keys(self) -> list[str] | None:
        media = self._current_media()
        return list(media) if media is not None else None

    @property
    def media_download_payload(self) -> dict[str, Any] | None:
        """Payload para ``client.messages.download_*``; campos ausentes omitidos."""
        media = self._current_media()
        if media is None:
            return None
        return {
            output: media[source]
            for output, source in _DOWNLOAD_FIELDS
            if media.get(source) is not None
        }

    # Contexto (respostas)

    @property
    def context_info(self) -> dict[str, Any] | None:
        value = dig(self._c_message, "contextinfo") or dig(
            self._c_message, "extendedtextmessage", "contextinfo"
        )
        return value if isinstance(value, dict) else None

    @property
    def quoted_message_id(self) -> str | None:
        """ID da mensagem respondida (``stanzaId``)."""
        return dig(self.context_info, "stanzaid")

    @property
    def is_reply(self) -> bool:
        return self.quoted_message_id is not None

    def __repr__(self) -> str:
        preview = self.text[:50] if isinstance(self.text, str) else None
        return (
            f"<WebhookEvent type={self.type} "
            f"from={self.sender_name or self.phone} text={preview!r}>"
        )


def decode(payload: Any) -> WebhookEvent:
    """Decodifica um payload de webhook (dict, str ou bytes). Nunca falha."""
    return WebhookEvent(payload)
