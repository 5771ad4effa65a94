"""Submenu de gestão da instância."""

from __future__ import annotations

from pathlib import Path

from avisa_api.tui.menu import Menu

QR_KEYS = ("qrcode", "qr", "code")


class InstanceMenu(Menu):
    title = "Instance Management"
    choices = (
        ("Check Status", "check_status"),
        ("Get QR Code", "qr_code"),
        ("Disconnect Instance", "disconnect"),
    )

    def check_status(self) -> None:
        self.prompt.header("Instance Status")
        response = self.app.call(self.client.instance.status)
        if response is not None:
            if response.is_success:
                self.prompt.say("\nInstance Status:")
                self.app.show_mapping(response.data)
            else:
                self.prompt.say("\nFailed to get status")
                self.prompt.say(f"Body: {response.data}")
        self.pause()

    def qr_code(self) -> None:
        self.prompt.header("QR Code")
        response = self.app.call(self.client.instance.qr_code)
        if response is None:
            self.pause()
            return
        if not response.is_success:
            self.prompt.say("\nFailed to get QR code")
            self.prompt.say(f"Status: {response.status_code}")
            self.prompt.say(f"Body: {response.data}")
            self.pause()
            return

        data = response.data
        qr_data = next((data[key] for key in QR_KEYS if data.get(key)), None)
        if qr_data:
            self.prompt.say("\nQR Code received!")
            self.prompt.say("-" * 50)
            self.prompt.say(str(qr_data))
            self.prompt.say("-" * 50)
            self.prompt.say("Scan this QR code with your WhatsApp app")
            if self.prompt.yes("\nWould you like to save the QR data to a file?"):
                filename = self.prompt.ask("Filename:", default="qrcode.txt") or "qrcode.txt"
                self.save_qr(filename, str(qr_data))
        elif data.get("status") == "connected" or data.get("connected") or data.get("LoggedIn"):
            self.prompt.say("\nInstance is already connected!")
            self.prompt.say("No QR code needed.")
        else:
            self.prompt.say("\nQR Code data:")
            self.prompt.say(repr(data))
        self.pause()

    def save_qr(self, filename: str, qr_data: str) -> None:
        try:
            Path(filename).write_text(qr_data, encoding="utf-8")
        except OSError as exc:
            self.prompt.say(f"Could not save file: {exc}")
            return
        self.prompt.say(f"Saved to {filename}")

    def disconnect(self) -> None:
        self.prompt.header("Disconnect Instance")
        if not self.prompt.yes("Are you sure you want to disconnect?"):
            return
        self.app.perform(self.client.instance.delete)
