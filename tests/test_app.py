"""Tests for the application."""

import pytest
from unittest.mock import patch

from repl_console.app import ConsoleApp, get_console_commands_provider
from repl_console.commands import ConsoleCommandProvider
from repl_console.config.settings_manager import ConsoleSettings
from repl_console.evaluators import EvaluatorLoadError
from repl_console.evaluators.python_evaluator import PythonEvaluator
from repl_console.screens.console_screen import ConsoleScreen


@pytest.fixture(autouse=True)
def saved_theme():
    """Keep theme persistence away from the real config file."""
    with patch("repl_console.app.set_settings") as mock_set, patch(
        "repl_console.app.get_theme_setting", return_value="console-dark"
    ):
        yield mock_set


class TestConsoleApp:
    """Test the ConsoleApp class."""

    @pytest.fixture
    def app(self, make_session):
        session = make_session()
        return ConsoleApp(
            settings=ConsoleSettings(theme="console-dark"),
            evaluator_factory=lambda sink: session.evaluator,
        )

    def test_app_initialization(self, app):
        assert app.TITLE == "REPL Console"
        assert app.theme == "console-dark"
        assert app.sub_title == "ScriptedEvaluator"
        assert app.session.transcript is not None

    def test_console_themes_registered(self, app):
        assert "console-dark" in app.available_themes
        assert "console-light" in app.available_themes

    def test_theme_saved_only_when_changed(self, app, saved_theme):
        saved_theme.assert_not_called()

        app.theme = "nord"

        saved_theme.assert_called_once_with({"theme": "nord"})

    def test_action_toggle_dark(self, app):
        app.action_toggle_dark()
        assert app.theme == "console-light"

        app.action_toggle_dark()
        assert app.theme == "console-dark"

    def test_configured_evaluator_is_loaded(self):
        app = ConsoleApp(
            settings=ConsoleSettings(
                evaluator="repl_console.evaluators.python_evaluator:PythonEvaluator"
            )
        )

        assert isinstance(app.session.evaluator, PythonEvaluator)
        assert app.sub_title == "PythonEvaluator"

    def test_bad_evaluator_raises(self):
        with pytest.raises(EvaluatorLoadError):
            ConsoleApp(settings=ConsoleSettings(evaluator="nowhere"))

    def test_commands_include_console_provider(self):
        assert get_console_commands_provider() is ConsoleCommandProvider
        assert get_console_commands_provider in ConsoleApp.COMMANDS

    def test_app_bindings_defined(self):
        keys = [binding.key for binding in ConsoleApp.BINDINGS]
        assert "ctrl+t" in keys

    async def test_console_screen_is_shown(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert isinstance(app.screen, ConsoleScreen)
            assert app.screen.session is app.session

    async def test_evaluate_end_to_end(self):
        app = ConsoleApp(
            settings=ConsoleSettings(
                evaluator="repl_console.evaluators.python_evaluator:PythonEvaluator",
                startup_code="print('hi'); 40 + 2",
            )
        )
        async with app.run_test() as pilot:
            await pilot.pause()

            await pilot.press("enter")
            await pilot.pause()

            texts = [entry.text for entry in app.session.transcript]
            assert texts == ["print('hi'); 40 + 2", "hi\n"]
