"""Status footer showing session information and key shortcuts."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label


class StatusFooter(Widget):
    """Footer displaying evaluator, transcript size, recall state and keys."""

    DEFAULT_CSS = """
    StatusFooter {
        dock: bottom;
        height: 1;
        background: $footer-background;
        color: $footer-foreground;
        layout: horizontal;
    }

    StatusFooter > #session-info {
        width: 1fr;
        height: 1;
        padding: 0 1;
        color: $footer-description-foreground;
        background: $footer-description-background;
    }

    StatusFooter > #shortcuts {
        width: auto;
        height: 1;
        layout: horizontal;
    }

    StatusFooter .shortcut-key {
        color: $footer-key-foreground;
        background: $footer-key-background;
        text-style: bold;
        padding: 0 1;
    }

    StatusFooter .shortcut-desc {
        color: $footer-description-foreground;
        background: $footer-description-background;
        padding: 0 1 0 0;
    }

    StatusFooter .shortcut-separator {
        color: $footer-foreground;
        background: $footer-background;
        padding: 0 1;
    }
    """

    evaluator_name = reactive("")
    """Name of the active evaluator."""

    entry_count = reactive(0)
    """Number of transcript entries."""

    recall_index = reactive(-1)
    """Transcript index being recalled, -1 on the live line."""

    def compose(self) -> ComposeResult:
        """Create child widgets for the status footer."""
        yield Label("", id="session-info")

        with Horizontal(id="shortcuts"):
            yield Label("Enter", classes="shortcut-key")
            yield Label("Evaluate", classes="shortcut-desc")
            yield Label("│", classes="shortcut-separator")
            yield Label("↑↓", classes="shortcut-key")
            yield Label("History", classes="shortcut-desc")
            yield Label("│", classes="shortcut-separator")
            yield Label("^P", classes="shortcut-key")
            yield Label("Command Palette", classes="shortcut-desc")

    def on_mount(self) -> None:
        """Update the footer when mounted."""
        self._update_session_info()

    def build_info(self) -> Text:
        """Build the session information text."""
        text = Text()
        text.append("⚙ ", style="dim")
        text.append(self.evaluator_name or "no evaluator", style="bold")
        text.append("  ", style="dim")
        text.append(f"{self.entry_count} entries", style="dim")

        if self.recall_index >= 0:
            text.append("  ", style="dim")
            text.append(f"recalling #{self.recall_index}", style="bold cyan")

        return text

    def _update_session_info(self) -> None:
        self.query_one("#session-info", Label).update(self.build_info())

    def _watch_evaluator_name(self, name: str) -> None:
        if self.is_mounted:
            self._update_session_info()

    def _watch_entry_count(self, count: int) -> None:
        if self.is_mounted:
            self._update_session_info()

    def _watch_recall_index(self, index: int) -> None:
        if self.is_mounted:
            self._update_session_info()
