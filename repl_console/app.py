"""Main application module for repl-console."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from .config.settings_manager import (
    ConsoleSettings,
    get_console_settings,
    get_theme_setting,
    set_settings,
)
from .core.session import EvaluatorFactory, Session
from .evaluators import load_evaluator_factory
from .screens.console_screen import ConsoleScreen
from .ui.theme import get_themes


def get_console_commands_provider():
    """Lazy load console command provider.

    Returns:
        ConsoleCommandProvider class
    """
    from .commands import ConsoleCommandProvider

    return ConsoleCommandProvider


class ConsoleApp(App):
    """Interactive console TUI application."""

    BINDINGS = [
        Binding("ctrl+t", "toggle_dark", "Toggle Dark Mode"),
    ]

    # Keep Textual's default commands and add the console actions
    COMMANDS = App.COMMANDS | {get_console_commands_provider}

    TITLE = "REPL Console"

    def __init__(
        self,
        settings: Optional[ConsoleSettings] = None,
        evaluator_factory: Optional[EvaluatorFactory] = None,
    ):
        """Initialize the application.

        Args:
            settings: Console settings (loaded from config.json if omitted)
            evaluator_factory: Evaluator factory overriding ``settings.evaluator``

        Raises:
            EvaluatorLoadError: If the configured evaluator cannot be loaded
        """
        super().__init__()

        for theme in get_themes().values():
            self.register_theme(theme)

        self.settings = settings or get_console_settings()
        self.theme = self.settings.theme

        if evaluator_factory is None:
            evaluator_factory = load_evaluator_factory(self.settings.evaluator)
        self.session = Session(evaluator_factory)
        self.sub_title = self.session.evaluator_name

    @property
    def theme(self) -> str:
        """Get current theme."""
        return super().theme

    @theme.setter
    def theme(self, value: str) -> None:
        """Set theme and persist it when it differs from the saved one.

        Raises:
            IOError, OSError: If saving the theme preference fails
        """
        App.theme.__set__(self, value)

        if get_theme_setting() != value:
            set_settings({"theme": value})

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()

    def on_mount(self) -> None:
        """Show the console once the app is running."""
        self.push_screen(ConsoleScreen(self.session, self.settings))

    def action_toggle_dark(self) -> None:
        """Toggle between the dark and light console themes."""
        self.theme = "console-light" if self.theme == "console-dark" else "console-dark"
