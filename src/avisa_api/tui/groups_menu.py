"""Submenu de grupos."""

from __future__ import annotations

from typing import Any

from avisa_api.tui.menu import Menu


def _group_row(group: dict[str, Any]) -> str:
    name = group.get("name") or group.get("subject") or "N/A"
    group_id = group.get("id") or group.get("jid") or "N/A"
    participants = group.get("participants")
    size = len(participants) if isinstance(participants, list) else group.get("size", "N/A")
    return f"  {name} | {group_id} | {size}"


class GroupsMenu(Menu):
    title = "Groups"
    choices = (
        ("List Groups", "list_groups"),
        ("Create Group", "create_group"),
        ("Get Group Info", "group_info"),
        ("Send Message to Group", "send_text"),
        ("Add Participant", "add_participant"),
        ("Remove Participant", "remove_participant"),
    )

    def list_groups(self) -> None:
        self.prompt.header("List Groups")
        response = self.app.call(self.client.groups.list)
        if response is not None:
            groups = response.data.get("groups") or response.data.get("data")
            if not response.is_success:
                self.prompt.say("\nFailed to list groups")
                self.prompt.say(f"Body: {response.data}")
            elif isinstance(groups, list) and groups:
                self.prompt.say(f"\nFound {len(groups)} group(s):")
                self.prompt.say("  Name | ID | Participants")
                for group in groups:
                    if isinstance(group, dict):
                        self.prompt.say(_group_row(group))
            else:
                self.prompt.say("\nNo groups found or unable to parse response")
                self.prompt.say(f"Response: {response.data!r}")
        self.pause()

    def create_group(self) -> None:
        self.prompt.header("Create Group")
        name = self.ask_required("Group name:")
        participants: list[str] = []
        while True:
            participant = self.prompt.ask("Add participant number (or press Enter to finish):")
            if not participant:
                break
            participants.append(participant)

        if not participants:
            self.prompt.say("At least one participant is required")
            self.pause()
            return
        self.app.perform(lambda: self.client.groups.create(name, participants))

    def group_info(self) -> None:
        self.prompt.header("Group Info")
        group_id = self.ask_group_id()
        response = self.app.call(lambda: self.client.groups.info(group_id))
        if response is not None:
            if response.is_success:
                self.prompt.say("\nGroup Information:")
                self.app.show_mapping(response.data, width=60)
            else:
                self.prompt.say("\nFailed to get group info")
                self.prompt.say(f"Body: {response.data}")
        self.pause()

    def send_text(self) -> None:
        self.prompt.header("Send Message to Group")
        group_id = self.ask_group_id()
        message = self.ask_required("Message:")
        self.app.perform(lambda: self.client.groups.send_text(group_id, message))

    def add_participant(self) -> None:
        self.prompt.header("Add Participant")
        group_id = self.ask_group_id()
        participant = self.ask_required("Participant number:")
        self.app.perform(
            lambda: self.client.groups.update(group_id, participants_add=[participant])
        )

    def remove_participant(self) -> None:
        self.prompt.header("Remove Participant")
        group_id = self.ask_group_id()
        participant = self.ask_required("Participant number:")
        if not self.prompt.yes(f"Are you sure you want to remove {participant}?"):
            return
        self.app.perform(
            lambda: self.client.groups.update(group_id, participants_remove=[participant])
        )
