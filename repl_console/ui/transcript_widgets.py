"""Widgets rendering transcript entries."""

from typing import Dict, Type

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ..core.transcript import EntryType, TranscriptEntry


class EntryWidget(Horizontal):
    """Base display for one transcript entry.

    Entry text is always rendered literally (no markup), since it comes
    from the user or the evaluator.
    """

    DEFAULT_CSS = """
    EntryWidget {
        width: 100%;
        height: auto;
    }

    EntryWidget .entry-label {
        width: auto;
        text-style: bold;
    }

    EntryWidget .entry-content {
        width: 1fr;
    }
    """

    LABEL = ""

    def __init__(self, entry: TranscriptEntry, **kwargs):
        """Initialize an entry widget.

        Args:
            entry: Transcript entry to display
            **kwargs: Additional arguments
        """
        entry_class = f"{entry.entry_type.value}-entry"
        if "classes" in kwargs:
            kwargs["classes"] = f"{kwargs['classes']} {entry_class}"
        else:
            kwargs["classes"] = entry_class

        super().__init__(**kwargs)
        self.entry = entry

    @property
    def display_text(self) -> str:
        return self.entry.text

    def compose(self) -> ComposeResult:
        """Compose the entry widget."""
        if self.LABEL:
            yield Static(self.LABEL, classes="entry-label", markup=False)
        yield Static(self.display_text, classes="entry-content", markup=False)


class PromptEntry(EntryWidget):
    """A submitted command."""

    DEFAULT_CSS = """
    PromptEntry {
        margin: 1 0 0 0;
    }

    PromptEntry .entry-label {
        color: $primary;
    }
    """

    LABEL = "> "


class ResultEntry(EntryWidget):
    """Value returned by the evaluator."""

    DEFAULT_CSS = """
    ResultEntry .entry-content {
        color: $accent;
    }
    """


class ErrorEntry(EntryWidget):
    """Evaluation failure message."""

    DEFAULT_CSS = """
    ErrorEntry {
        border-left: thick $error;
        padding: 0 1;
    }

    ErrorEntry .entry-content {
        color: $error;
    }
    """


class OutputEntry(EntryWidget):
    """Text streamed by the evaluator while it ran."""

    DEFAULT_CSS = """
    OutputEntry .entry-content {
        color: $text-muted;
    }
    """

    @property
    def display_text(self) -> str:
        # Lines arrive newline-terminated; the widget already ends the line
        return self.entry.text.removesuffix("\n")


ENTRY_WIDGETS: Dict[EntryType, Type[EntryWidget]] = {
    EntryType.PROMPT: PromptEntry,
    EntryType.RESULT: ResultEntry,
    EntryType.ERROR: ErrorEntry,
    EntryType.OUTPUT: OutputEntry,
}


def widget_for_entry(entry: TranscriptEntry) -> EntryWidget:
    """Build the widget displaying ``entry``."""
    return ENTRY_WIDGETS[entry.entry_type](entry)
