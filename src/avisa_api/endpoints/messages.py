"""Endpoints de mensagens (envio, edição, reação, mídia e download)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from avisa_api.endpoints.base import Endpoint, require
from avisa_api.payloads import (
    ContextInfo,
    DocumentPayload,
    ImagePayload,
    LocationPayload,
    MediaType,
    MediaUrlPayload,
    PreviewPayload,
    TextMessagePayload,
)

if TYPE_CHECKING:
    from avisa_api.response import Response

MEDIA_TYPES: frozenset[str] = frozenset({"image", "video", "audio", "document"})


def _context_info(value: ContextInfo | Mapping[str, Any] | None) -> ContextInfo | None:
    if value is None or isinstance(value, ContextInfo):
        return value
    return ContextInfo(
        stanza_id=require(value.get("stanza_id"), "context_info.stanza_id"),
        participant=value.get("participant"),
    )


class Messages(Endpoint):
    """Envio e manipulação de mensagens."""

    def send_text(
        self,
        number: str,
        message: str,
        id: str | None = None,
        context_info: ContextInfo | Mapping[str, Any] | None = None,
    ) -> Response:
        """Envia mensagem de texto.

        Args:
            number: Número do destinatário (ex: '5511999999999')
            message: Conteúdo da mensagem
            id: ID customizado da mensagem (opcional)
            context_info: Mensagem respondida: ``{"stanza_id": ..., "participant": ...}``
                ou ``ContextInfo``. Enviado como ``contextInfo.StanzaId/Participant``.
        """
        payload = TextMessagePayload(
            number=require(number, "number"),
            message=require(message, "message"),
            id=id,
            context_info=_context_info(context_info),
        )
        return self._post("/actions/sendMessage", payload.to_body())

    def send_text_international(self, number: str, message: str) -> Response:
        """Envia texto para número internacional (ex: '+5511999999999')."""
        body = {"number": require(number, "number"), "message": require(message, "message")}
        return self._post("/actions/sendMessageInternational", body)

    def edit(self, number: str, id: str, message: str) -> Response:
        body = {
            "number": require(number, "number"),
            "id": require(id, "id"),
            "message": require(message, "message"),
        }
        return self._post("/actions/editMessage", body)

    def delete_message(self, number: str, id: str) -> Response:
        body = {"number": require(number, "number"), "id": require(id, "id")}
        return self._post("/actions/deleteMessage", body)

    def mark_read(self, sender: str, chat: str, ids: Sequence[str]) -> Response:
        """Marca mensagens como lidas.

        Args:
            sender: JID do remetente (ex: '5511999999999@s.whatsapp.net')
            chat: JID do chat
            ids: IDs das mensagens
        """
        body = {
            "sender": require(sender, "sender"),
            "chat": require(chat, "chat"),
            "id": require(list(ids), "ids"),
        }
        return self._post("/actions/markreadMessage", body)

    def react(self, number: str, id: str, emoji: str) -> Response:
        body = {
            "number": require(number, "number"),
            "id": require(id, "id"),
            "react": require(emoji, "emoji"),
        }
        return self._post("/actions/reactMessage", body)

    def send_media(
        self,
        number: str,
        url: str,
        caption: str | None = None,
        media_type: MediaType = "image",
        file_name: str | None = None,
    ) -> Response:
        """Envia mídia a partir de uma URL pública.

        Args:
            number: Número do destinatário
            url: URL da mídia
            caption: Legenda (opcional)
            media_type: 'image', 'video', 'audio' ou 'document'
            file_name: Nome do arquivo (necessário para document)
        """
        if media_type not in MEDIA_TYPES:
            raise ValueError(f"Unsupported media_type: {media_type}")
        payload = MediaUrlPayload(
            number=require(number, "number"),
            file_url=require(url, "url"),
            type=media_type,
            message=caption,
            file_name=file_name,
        )
        return self._post("/actions/sendMedia", payload.to_body())

    def send_image(self, number: str, base64: str, message: str | None = None) -> Response:
        """Envia imagem em Base64 (com prefixo ``data:image/...;base64,``)."""
        payload = ImagePayload(
            number=require(number, "number"),
            image=require(base64, "base64"),
            message=message,
        )
        return self._post("/actions/sendImage", payload.to_body())

    def send_document(
        self,
        number: str,
        base64: str,
        filename: str,
        caption: str | None = None,
    ) -> Response:
        payload = DocumentPayload(
            number=require(number, "number"),
            document=require(base64, "base64"),
            file_name=require(filename, "filename"),
            caption=caption,
        )
        return self._post("/actions/sendDocument", payload.to_body())

    def send_audio(self, number: str, base64: str) -> Response:
        """Envia áudio OGG em Base64 (sem prefixo ``data:``)."""
        body = {"number": require(number, "number"), "audio": require(base64, "base64")}
        return self._post("/actions/sendAudio", body)

    def send_location(
        self,
        number: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
    ) -> Response:
        payload = LocationPayload(
            number=require(number, "number"),
            latitude=float(require(latitude, "latitude")),
            longitude=float(require(longitude, "longitude")),
            name=name,
        )
        return self._post("/actions/sendLocation", payload.to_body())

    def send_preview(
        self,
        number: str,
        message: str,
        url: str,
        image: str,
        title: str | None = None,
        description: str | None = None,
    ) -> Response:
        """Envia mensagem com preview de link.

        Args:
            number: Número do destinatário
            message: Texto contendo o link
            url: URL do preview (``urlSite``)
            image: Imagem do preview em Base64
            title: Título customizado (omitido se vazio)
            description: Descrição customizada (omitida se vazia)
        """
        payload = PreviewPayload(
            number=require(number, "number"),
            message=require(message, "message"),
            url_site=require(url, "url"),
            image=require(image, "image"),
            title=title,
            description=description,
        )
        return self._post("/actions/sendPreview", payload.to_body())

    def send_text_async(self, number: str, message: str) -> Response:
        """Enfileira texto para envio assíncrono; a resposta traz o ID de consulta."""
        body = {"number": require(number, "number"), "message": require(message, "message")}
        return self._post("/actions/sendMessageAsync", body)

    def get_async_result(self, id: str) -> Response:
        return self._get("/actions/getSendMessageAsync", {"id": require(id, "id")})

    def download_image(self, media_info: Mapping[str, Any]) -> Response:
        """Baixa imagem recebida (use ``WebhookEvent.media_download_payload``)."""
        return self._post("/message/download/image", dict(require(media_info, "media_info")))

    def download_video(self, media_info: Mapping[str, Any]) -> Response:
        return self._post("/message/download/video", dict(require(media_info, "media_info")))

    def download_document(self, media_info: Mapping[str, Any]) -> Response:
        return self._post(
            "/message/download/document", dict(require(media_info, "media_info"))
        )
