"""Modal screens for the TUI.

The only modal is the upgrade prompt raised from a paywalled bubble.
To change how the prompt looks, modify only this file.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

DEFAULT_PLAN = "Pro"


class UpgradePlanScreen(ModalScreen[bool]):
    """Offers a plan upgrade for a paywalled response.

    Dismisses with True when the user chooses to upgrade.
    """

    CSS = """
    UpgradePlanScreen {
        align: center middle;
        background: $background 60%;
    }

    #upgrade-dialog {
        width: 56;
        height: auto;
        border: thick $warning;
        background: $surface;
        padding: 1 2;
    }

    #upgrade-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $warning;
    }

    #upgrade-body {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin: 1 0;
    }

    #upgrade-actions {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #upgrade-actions Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("enter", "upgrade", "Upgrade", show=False),
        Binding("escape", "dismiss_prompt", "Not now", show=False),
    ]

    def __init__(self, plan_name: str = DEFAULT_PLAN) -> None:
        super().__init__()
        self.plan_name = plan_name

    def compose(self) -> ComposeResult:
        with Vertical(id="upgrade-dialog"):
            yield Static(f"Upgrade to {self.plan_name}", id="upgrade-title")
            yield Static(
                "This response is only available on a paid plan.",
                id="upgrade-body",
            )
            with Horizontal(id="upgrade-actions"):
                yield Button("Upgrade", id="upgrade-confirm", variant="warning")
                yield Button("Not now", id="upgrade-cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "upgrade-confirm")

    def action_upgrade(self) -> None:
        self.dismiss(True)

    def action_dismiss_prompt(self) -> None:
        self.dismiss(False)
