"""Submenu de mensagens."""

from __future__ import annotations

from avisa_api.tui.files import encode_file_as_data_uri, encode_file_base64
from avisa_api.tui.menu import Menu, format_jid

SOURCES_FULL = (("URL", "url"), ("Base64", "base64"), ("File path", "file"))


class MessagesMenu(Menu):
    title = "Messages"
    question = "Select message type:"
    choices = (
        ("Send Text Message", "send_text"),
        ("Send Image", "send_image"),
        ("Send Document", "send_document"),
        ("Send Audio", "send_audio"),
        ("Send Video", "send_video"),
        ("Send Location", "send_location"),
        ("Send Link Preview", "send_preview"),
        ("React to Message", "react"),
        ("Delete Message", "delete_message"),
    )

    def send_text(self) -> None:
        self.prompt.header("Send Text Message")
        number = self.app.ask_phone_number()
        message = self.ask_required("Message:")
        self.app.perform(lambda: self.client.messages.send_text(number, message))

    def send_image(self) -> None:
        self.prompt.header("Send Image")
        number = self.app.ask_phone_number()
        source = self.prompt.select("Image source:", SOURCES_FULL)

        if source == "url":
            url = self.ask_required("Image URL:")
            file_name = self.ask_required("Filename (e.g., image.jpg):")
            caption = self.prompt.ask("Caption (optional):")
            self.app.perform(
                lambda: self.client.messages.send_media(
                    number, url, caption=caption, media_type="image", file_name=file_name
                )
            )
            return

        if source == "base64":
            image = self.ask_required("Base64 data (with data:image/...;base64, prefix):")
        else:
            image = self._read_file(self.ask_required("File path:"), "image/jpeg")
            if image is None:
                return
        caption = self.prompt.ask("Caption (optional):")
        self.app.perform(lambda: self.client.messages.send_image(number, image, caption))

    def send_document(self) -> None:
        self.prompt.header("Send Document")
        number = self.app.ask_phone_number()
        filename = self.ask_required("Filename (e.g., report.pdf):")
        source = self.prompt.select("Document source:", SOURCES_FULL)

        if source == "url":
            url = self.ask_required("Document URL:")
            self.app.perform(
                lambda: self.client.messages.send_media(
                    number, url, media_type="document", file_name=filename
                )
            )
            return

        if source == "base64":
            document = self.ask_required(
                "Base64 data (with data:application/...;base64, prefix):"
            )
        else:
            document = self._read_file(
                self.ask_required("File path:"), "application/octet-stream"
            )
            if document is None:
                return
        self.app.perform(
            lambda: self.client.messages.send_document(number, document, filename)
        )

    def send_audio(self) -> None:
        self.prompt.header("Send Audio")
        number = self.app.ask_phone_number()
        source = self.prompt.select(
            "Audio source:", (("URL", "url"), ("Base64", "base64"), ("File path (.ogg)", "file"))
        )

        if source == "url":
            url = self.ask_required("Audio URL:")
            file_name = self.ask_required("Filename (e.g., audio.ogg):")
            self.app.perform(
                lambda: self.client.messages.send_media(
                    number, url, media_type="audio", file_name=file_name
                )
            )
            return

        if source == "base64":
            audio = self.ask_required("Base64 data (plain, without data: prefix):")
        else:
            path = self.ask_required("Audio file path (.ogg):")
            try:
                audio = encode_file_base64(path)
            except OSError as exc:
                self._unreadable_file(path, exc)
                return
        self.app.perform(lambda: self.client.messages.send_audio(number, audio))

    def send_video(self) -> None:
        self.prompt.header("Send Video")
        number = self.app.ask_phone_number()
        caption = self.prompt.ask("Caption (optional):")
        url = self.ask_required("Video URL:")
        file_name = self.ask_required("Filename (e.g., video.mp4):")
        self.app.perform(
            lambda: self.client.messages.send_media(
                number, url, caption=caption, media_type="video", file_name=file_name
            )
        )

    def send_location(self) -> None:
        self.prompt.header("Send Location")
        number = format_jid(self.app.ask_phone_number())
        latitude = self.prompt.ask_float("Latitude:")
        longitude = self.prompt.ask_float("Longitude:")
        name = self.prompt.ask("Location name (optional):")
        self.app.perform(
            lambda: self.client.messages.send_location(number, latitude, longitude, name)
        )

    def send_preview(self) -> None:
        self.prompt.header("Send Link Preview")
        number = self.app.ask_phone_number()
        message = self.ask_required("Message (text with the link):")
        url = self.ask_required("URL to preview:")
        title = self.prompt.ask("Custom title (optional):")
        description = self.prompt.ask("Custom description (optional):")
        source = self.prompt.select(
            "Preview image source:", (("Base64", "base64"), ("File path", "file"))
        )

        if source == "base64":
            image = self.ask_required("Base64 image data:")
        else:
            image = self._read_file(self.ask_required("Image file path:"), "image/jpeg")
            if image is None:
                return
        self.app.perform(
            lambda: self.client.messages.send_preview(
                number, message, url, image, title=title, description=description
            )
        )

    def react(self) -> None:
        self.prompt.header("React to Message")
        number = format_jid(self.app.ask_phone_number())
        message_id = self.ask_required("Message ID to react to:")
        emoji = self.ask_required("Emoji reaction:")
        self.app.perform(lambda: self.client.messages.react(number, message_id, emoji))

    def delete_message(self) -> None:
        self.prompt.header("Delete Message")
        number = self.app.ask_phone_number()
        message_id = self.ask_required("Message ID to delete:")
        if not self.prompt.yes(f"Are you sure you want to delete message {message_id}?"):
            return
        self.app.perform(lambda: self.client.messages.delete_message(number, message_id))

    def _read_file(self, path: str, default_mime: str) -> str | None:
        try:
            return encode_file_as_data_uri(path, default_mime)
        except OSError as exc:
            self._unreadable_file(path, exc)
            return None

    def _unreadable_file(self, path: str, exc: OSError) -> None:
        if isinstance(exc, FileNotFoundError):
            self.prompt.say(f"File not found: {path}")
        else:
            self.prompt.say(f"Could not read file {path}: {exc.strerror or exc}")
        self.pause()
