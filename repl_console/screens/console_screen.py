"""Console screen: transcript, prompt and scroll reconciliation."""

import logging
from functools import partial
from typing import Callable, Iterable, Optional

import pyperclip
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import TextArea

from ..config.settings_manager import ConsoleSettings
from ..core.controller import (
    ConsoleController,
    Effect,
    Event,
    RenderTranscript,
    ScheduleEvent,
    ScrollSettle,
    SetEditText,
)
from ..core.session import Session
from ..ui.status_footer import StatusFooter
from ..ui.transcript_widgets import widget_for_entry

LOGGER = logging.getLogger(__name__)

# Keys inserting a line break instead of submitting
NEWLINE_KEYS = frozenset({"shift+enter", "ctrl+j", "newline"})

KeyHandler = Callable[[str, str], bool]


class PromptTextArea(TextArea):
    """Edit surface whose console keys are routed to a handler.

    The handler receives the key name and the current text and returns
    whether it handled the key; handled keys skip the default TextArea
    behaviour (so Up/Down recall history instead of moving the cursor).
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.key_handler: Optional[KeyHandler] = None

    def set_text(self, text: str) -> None:
        """Replace the text and put the caret after its last character."""
        self.load_text(text)
        self.move_cursor(self.document.end)

    async def _on_key(self, event: events.Key) -> None:
        """Route console keys; Shift+Enter / Ctrl+J insert a newline."""
        key = event.key.lower()

        if key in NEWLINE_KEYS:
            if self.read_only:
                return
            event.stop()
            event.prevent_default()
            self._restart_blink()
            self.insert("\n")
            return

        if self.key_handler is not None and self.key_handler(key, self.text):
            event.stop()
            event.prevent_default()
            return

        await super()._on_key(event)


class ConsoleScreen(Screen):
    """Interactive console bound to one session."""

    DEFAULT_PROMPT_TITLE = "Enter to evaluate, Shift+Enter or Ctrl+J for new line"

    CSS = """
    ConsoleScreen {
        layout: vertical;
    }

    #console {
        height: 1fr;
        width: 100%;
        padding: 0 2;
        background: $surface;
    }

    #entries {
        width: 100%;
        height: auto;
    }

    #prompt {
        width: 100%;
        height: auto;
        max-height: 12;
        margin: 1 0;
        border: solid $border;
        background: $panel;
    }

    #prompt:focus {
        border: solid $primary;
    }
    """

    BINDINGS = [
        Binding("ctrl+y", "copy_transcript", "Copy Transcript"),
        Binding("ctrl+end", "scroll_bottom", "Scroll to Bottom"),
    ]

    def __init__(self, session: Session, settings: Optional[ConsoleSettings] = None):
        """Initialize the console screen.

        Args:
            session: Session providing the evaluator and transcript
            settings: Console settings (defaults if omitted)
        """
        super().__init__()
        self.session = session
        self.settings = settings or ConsoleSettings()
        self.controller = ConsoleController(
            session=session,
            viewport=self,
            settle_delay=self.settings.settle_delay,
            settle_max_attempts=self.settings.settle_max_attempts,
            on_event_posted=self._schedule_pending,
        )
        self.console_log: Optional[VerticalScroll] = None
        self.entries_view: Optional[Vertical] = None
        self.prompt_input: Optional[PromptTextArea] = None
        self._rendered_count = 0

    def compose(self) -> ComposeResult:
        """Create child widgets for the console screen."""
        # The prompt scrolls with the transcript, below the last entry
        with VerticalScroll(id="console"):
            yield Vertical(id="entries")
            prompt = PromptTextArea(self.settings.startup_code, id="prompt")
            prompt.show_line_numbers = False
            prompt.border_title = self.DEFAULT_PROMPT_TITLE
            yield prompt

        yield StatusFooter()

    def on_mount(self) -> None:
        """Bind widgets, render existing entries and focus the prompt."""
        self.console_log = self.query_one("#console", VerticalScroll)
        self.entries_view = self.query_one("#entries", Vertical)
        self.prompt_input = self.query_one("#prompt", PromptTextArea)
        self.prompt_input.key_handler = self.handle_prompt_key
        self.prompt_input.move_cursor(self.prompt_input.document.end)

        self.query_one(StatusFooter).evaluator_name = self.session.evaluator_name

        self.apply_effects([RenderTranscript(), ScheduleEvent(ScrollSettle())])
        self.prompt_input.focus()

    def on_click(self, event: events.Click) -> None:
        """Clicking anywhere on the console focuses the prompt."""
        if self.prompt_input is not None:
            self.prompt_input.focus()

    # Controller wiring

    def handle_prompt_key(self, key: str, text: str) -> bool:
        """Forward a prompt key press to the controller.

        Returns:
            Whether the key was handled
        """
        handled, effects = self.controller.handle_key(key, text)
        self.apply_effects(effects)
        return handled

    def send_event(self, event: Event) -> None:
        """Dispatch an event through the controller and apply its effects."""
        self.controller.post(event)
        self.apply_effects(self.controller.process_pending())

    def _schedule_pending(self) -> None:
        self.call_later(self._drain_pending)

    def _drain_pending(self) -> None:
        self.apply_effects(self.controller.process_pending())

    def apply_effects(self, effects: Iterable[Effect]) -> None:
        """Carry out controller effects in order."""
        for effect in effects:
            if isinstance(effect, RenderTranscript):
                self.render_transcript()
            elif isinstance(effect, SetEditText):
                self.prompt_input.set_text(effect.text)
            elif isinstance(effect, ScheduleEvent):
                self._schedule_event(effect)
            else:
                LOGGER.warning("Ignoring unknown console effect: %r", effect)

        self._update_footer()

    def _schedule_event(self, effect: ScheduleEvent) -> None:
        callback = partial(self.send_event, effect.event)
        if effect.delay > 0:
            self.set_timer(effect.delay, callback)
        else:
            self.call_after_refresh(callback)

    def render_transcript(self) -> None:
        """Mount widgets for entries appended since the last render."""
        new_entries = self.session.transcript.since(self._rendered_count)
        if not new_entries:
            return

        self.entries_view.mount_all(widget_for_entry(entry) for entry in new_entries)
        self._rendered_count += len(new_entries)

    def _update_footer(self) -> None:
        footer = self.query_one(StatusFooter)
        footer.entry_count = len(self.session.transcript)
        cursor = self.session.history.cursor
        footer.recall_index = -1 if cursor is None else cursor

    # Viewport

    def get_scroll_extent(self) -> float:
        return float(self.console_log.max_scroll_y)

    def get_scroll_position(self) -> float:
        return float(self.console_log.scroll_y)

    def set_scroll_position(self, value: float) -> None:
        self.console_log.scroll_target_y = value
        self.console_log.scroll_y = value

    # Actions

    def action_scroll_bottom(self) -> None:
        """Scroll the transcript to the prompt."""
        self.send_event(ScrollSettle())

    def action_copy_transcript(self) -> None:
        """Copy the whole transcript to the clipboard."""
        if not len(self.session.transcript):
            self.notify("Transcript is empty", title="Info", severity="information")
            return

        try:
            pyperclip.copy(self.session.transcript.as_text())
            self.notify(
                f"Copied {len(self.session.transcript)} entries to clipboard",
                title="Success",
            )
        except pyperclip.PyperclipException as e:
            self.notify(f"Failed to copy: {e}", title="Error", severity="error")
