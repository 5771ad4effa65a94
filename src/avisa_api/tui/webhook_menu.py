"""Submenu de configuração de webhook."""

from __future__ import annotations

from avisa_api.tui.menu import URL_PATTERN, Menu


class WebhookMenu(Menu):
    title = "Webhooks"
    choices = (
        ("Show Current Webhook", "show_webhook"),
        ("Set Webhook URL", "set_webhook"),
        ("Remove Webhook", "remove_webhook"),
    )

    def show_webhook(self) -> None:
        self.prompt.header("Current Webhook")
        response = self.app.call(self.client.webhook.show)
        if response is not None:
            if not response.is_success:
                self.prompt.say("\nFailed to get webhook")
                self.prompt.say(f"Status: {response.status_code}")
                self.prompt.say(f"Body: {response.data}")
            elif response.data:
                self.prompt.say("\nWebhook Configuration:")
                for key, value in response.data.items():
                    self.prompt.say(f"  {key}: {value if value not in ('', None) else '(empty)'}")
            else:
                self.prompt.say("No webhook configured")
        self.pause()

    def set_webhook(self) -> None:
        self.prompt.header("Set Webhook")
        url = self.ask_required(
            "Webhook URL:",
            pattern=URL_PATTERN,
            error="Please enter a valid URL starting with http:// or https://",
        )
        self.app.perform(lambda: self.client.webhook.set(url))

    def remove_webhook(self) -> None:
        self.prompt.header("Remove Webhook")
        if not self.prompt.yes("Are you sure you want to remove the webhook?"):
            return
        self.app.perform(self.client.webhook.remove)
