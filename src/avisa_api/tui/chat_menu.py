"""Submenu de chat (arquivar e presença)."""

from __future__ import annotations

from avisa_api.tui.menu import Menu


class ChatMenu(Menu):
    title = "Chat"
    choices = (
        ("Archive Chat", "archive"),
        ("Unarchive Chat", "unarchive"),
        ("Send Typing Indicator", "typing"),
        ("Send Recording Indicator", "recording"),
    )

    def archive(self) -> None:
        self.prompt.header("Archive Chat")
        number = self.app.ask_phone_number()
        self.app.perform(lambda: self.client.chat.archive(number))

    def unarchive(self) -> None:
        self.prompt.header("Unarchive Chat")
        number = self.app.ask_phone_number()
        self.app.perform(lambda: self.client.chat.archive(number, archive=False))

    def typing(self) -> None:
        self.prompt.header("Typing Indicator")
        number = self.app.ask_phone_number()
        if self.prompt.yes("Start typing? (No stops it)", default=True):
            self.app.perform(lambda: self.client.chat.start_typing(number))
        else:
            self.app.perform(lambda: self.client.chat.stop_typing(number))

    def recording(self) -> None:
        self.prompt.header("Recording Indicator")
        number = self.app.ask_phone_number()
        if self.prompt.yes("Start recording? (No stops it)", default=True):
            self.app.perform(lambda: self.client.chat.start_recording(number))
        else:
            self.app.perform(lambda: self.client.chat.stop_recording(number))
