"""Uninstall confirmation modal."""
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from skill_search.paths import shorten_path
from skill_search.registry import InstalledSkill


def confirmation_message(skill: InstalledSkill, skills_dir_display: str) -> str:
    message = (
        f"This will remove the skill from {skills_dir_display}/ "
        "and all agent directories where it is installed."
    )
    if skill.agents:
        message += f"\n\nLinked to: {', '.join(skill.agents)}"
    return message


class ConfirmUninstallModal(ModalScreen[bool]):
    """Yes/no dialog shown before a skill is uninstalled."""

    DEFAULT_CSS = """
    ConfirmUninstallModal {
        align: center middle;
    }
    #confirm-dialog {
        width: 60;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }
    #confirm-title {
        text-style: bold;
        color: $error;
        margin-bottom: 1;
    }
    #confirm-actions {
        height: 3;
        align: center middle;
        margin-top: 1;
    }
    #confirm-actions Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("y", "confirm", "Uninstall"),
    ]

    def __init__(self, skill: InstalledSkill, skills_dir_display: str | None = None):
        super().__init__()
        self.skill = skill
        self._skills_dir_display = skills_dir_display or shorten_path(skill.path.parent)

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-dialog"):
            yield Label(f'Uninstall "{self.skill.name}"?', id="confirm-title")
            yield Static(confirmation_message(self.skill, self._skills_dir_display))
            with Horizontal(id="confirm-actions"):
                yield Button("Uninstall", variant="error", id="btn-uninstall")
                yield Button("Cancel", variant="default", id="btn-cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-uninstall":
            self.action_confirm()
        else:
            self.action_cancel()

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
