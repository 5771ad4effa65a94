"""Testes para endpoints.messages."""

from __future__ import annotations

import pytest

from avisa_api import Client, ContextInfo


def _path(handler) -> str:
    return handler.last.url.path.removeprefix("/api/")


class TestSendText:
    """Envio de texto."""

    def test_with_id_and_context(self, client: Client, handler) -> None:
        """Resposta a mensagem inclui contextInfo."""
        client.messages.send_text(
            "5511999999999",
            "resposta",
            id="my-id",
            context_info={"stanza_id": "ABC123", "participant": "5511@s.whatsapp.net"},
        )
        assert handler.last_json() == {
            "number": "5511999999999",
            "message": "resposta",
            "id": "my-id",
            "contextInfo": {"StanzaId": "ABC123", "Participant": "5511@s.whatsapp.net"},
        }

    def test_accepts_context_info_model(self, client: Client, handler) -> None:
        """ContextInfo pode ser passado diretamente."""
        client.messages.send_text("1", "x", context_info=ContextInfo(stanza_id="S1"))
        assert handler.last_json()["contextInfo"] == {"StanzaId": "S1"}

    @pytest.mark.parametrize(("number", "message"), [("", "x"), ("1", ""), (None, "x")])
    def test_requires_number_and_message(
        self, client: Client, handler, number, message
    ) -> None:
        """Campos obrigatórios vazios falham antes do IO."""
        with pytest.raises(ValueError):
            client.messages.send_text(number, message)
        assert handler.requests == []

    def test_international(self, client: Client, handler) -> None:
        """Texto internacional usa o endpoint próprio."""
        client.messages.send_text_international("+5511999999999", "hi")
        assert _path(handler) == "actions/sendMessageInternational"
        assert handler.last_json() == {"number": "+5511999999999", "message": "hi"}


class TestMessageActions:
    """Edição, exclusão, leitura e reação."""

    def test_edit(self, client: Client, handler) -> None:
        """edit envia number, id e message."""
        client.messages.edit("1", "MSG1", "novo texto")
        assert _path(handler) == "actions/editMessage"
        assert handler.last_json() == {"number": "1", "id": "MSG1", "message": "novo texto"}

    def test_delete(self, client: Client, handler) -> None:
        """delete_message envia number e id."""
        client.messages.delete_message("1", "MSG1")
        assert _path(handler) == "actions/deleteMessage"
        assert handler.last_json() == {"number": "1", "id": "MSG1"}

    def test_mark_read(self, client: Client, handler) -> None:
        """mark_read envia lista de ids em 'id'."""
        client.messages.mark_read("5511@s.whatsapp.net", "5511@s.whatsapp.net", ("A", "B"))
        assert _path(handler) == "actions/markreadMessage"
        assert handler.last_json() == {
            "sender": "5511@s.whatsapp.net",
            "chat": "5511@s.whatsapp.net",
            "id": ["A", "B"],
        }

    def test_mark_read_requires_ids(self, client: Client, handler) -> None:
        """Lista de ids vazia é rejeitada."""
        with pytest.raises(ValueError):
            client.messages.mark_read("s", "c", [])
        assert handler.requests == []

    def test_react(self, client: Client, handler) -> None:
        """Emoji vai no campo react."""
        client.messages.react("1", "MSG1", "👍")
        assert _path(handler) == "actions/reactMessage"
        assert handler.last_json() == {"number": "1", "id": "MSG1", "react": "👍"}


class TestMedia:
    """Mídia por URL, Base64, localização e preview."""

    def test_send_media(self, client: Client, handler) -> None:
        """send_media usa fileUrl/type/message/fileName."""
        client.messages.send_media(
            "1", "https://x/doc.pdf", caption="Relatório", media_type="document", file_name="doc.pdf"
        )
        assert _path(handler) == "actions/sendMedia"
        assert handler.last_json() == {
            "number": "1",
            "fileUrl": "https://x/doc.pdf",
            "type": "document",
            "message": "Relatório",
            "fileName": "doc.pdf",
        }

    def test_send_media_unknown_type(self, client: Client, handler) -> None:
        """Tipo de mídia desconhecido é rejeitado."""
        with pytest.raises(ValueError, match="media_type"):
            client.messages.send_media("1", "https://x", media_type="gif")  # type: ignore[arg-type]
        assert handler.requests == []

    def test_send_image(self, client: Client, handler) -> None:
        """Imagem Base64 com legenda opcional."""
        client.messages.send_image("1", "data:image/png;base64,AAA")
        assert _path(handler) == "actions/sendImage"
        assert handler.last_json() == {"number": "1", "image": "data:image/png;base64,AAA"}

    def test_send_document(self, client: Client, handler) -> None:
        """Documento Base64 com fileName."""
        client.messages.send_document("1", "data:application/pdf;base64,AAA", "a.pdf", caption="c")
        assert handler.last_json() == {
            "number": "1",
            "document": "data:application/pdf;base64,AAA",
            "fileName": "a.pdf",
            "caption": "c",
        }

    def test_send_audio(self, client: Client, handler) -> None:
        """Áudio Base64 puro."""
        client.messages.send_audio("1", "T2dnUw==")
        assert _path(handler) == "actions/sendAudio"
        assert handler.last_json() == {"number": "1", "audio": "T2dnUw=="}

    def test_send_location(self, client: Client, handler) -> None:
        """Coordenadas viram float e nome vazio é omitido."""
        client.messages.send_location("1", "-23.55", -46, name="")
        assert _path(handler) == "actions/sendLocation"
        assert handler.last_json() == {"number": "1", "latitude": -23.55, "longitude": -46.0}

    def test_send_preview(self, client: Client, handler) -> None:
        """Preview usa urlSite e omite título vazio."""
        client.messages.send_preview(
            "1", "veja https://a.b", "https://a.b", "data:image/png;base64,AAA", title=""
        )
        assert _path(handler) == "actions/sendPreview"
        assert handler.last_json() == {
            "number": "1",
            "message": "veja https://a.b",
            "urlSite": "https://a.b",
            "image": "data:image/png;base64,AAA",
        }


class TestAsyncAndDownload:
    """Envio assíncrono e download de mídia recebida."""

    def test_send_text_async(self, client: Client, handler) -> None:
        """Enfileira texto."""
        client.messages.send_text_async("1", "hi")
        assert _path(handler) == "actions/sendMessageAsync"

    def test_get_async_result(self, client: Client, handler) -> None:
        """Consulta resultado por id na query string."""
        client.messages.get_async_result("job-1")
        assert handler.last.method == "GET"
        assert _path(handler) == "actions/getSendMessageAsync"
        assert handler.last.url.params["id"] == "job-1"

    @pytest.mark.parametrize("kind", ["image", "video", "document"])
    def test_download(self, client: Client, handler, kind: str) -> None:
        """Payload de download é enviado sem alteração."""
        media = {"Url": "https://mmg/x", "MediaKey": "k", "FileLength": 10}
        getattr(client.messages, f"download_{kind}")(media)
        assert _path(handler) == f"message/download/{kind}"
        assert handler.last_json() == media
