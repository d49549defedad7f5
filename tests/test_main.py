"""Tests for the command line entry point."""

from unittest.mock import patch

from click.testing import CliRunner

from repl_console.__main__ import main
from repl_console.config.settings_manager import ConsoleSettings


@patch("repl_console.app.set_settings")
@patch("repl_console.app.get_theme_setting", return_value="console-dark")
@patch("repl_console.config.settings_manager.get_console_settings")
def test_bad_evaluator_exits_with_error(mock_settings, _theme, _save):
    mock_settings.return_value = ConsoleSettings()

    result = CliRunner().invoke(main, ["--evaluator", "not-a-spec"])

    assert result.exit_code == 1
    assert "expected 'module:attribute'" in result.output


@patch("repl_console.app.ConsoleApp")
@patch("repl_console.config.settings_manager.get_console_settings")
def test_options_override_settings(mock_settings, mock_app):
    mock_settings.return_value = ConsoleSettings()

    result = CliRunner().invoke(
        main, ["--evaluator", "my_lisp:Evaluator", "--startup-code", "(+ 1 2)"]
    )

    assert result.exit_code == 0
    settings = mock_app.call_args.kwargs["settings"]
    assert settings.evaluator == "my_lisp:Evaluator"
    assert settings.startup_code == "(+ 1 2)"
    mock_app.return_value.run.assert_called_once()


@patch("repl_console.app.ConsoleApp")
@patch("repl_console.config.settings_manager.get_console_settings")
def test_keyboard_interrupt_exits_cleanly(mock_settings, mock_app):
    mock_settings.return_value = ConsoleSettings()
    mock_app.return_value.run.side_effect = KeyboardInterrupt

    result = CliRunner().invoke(main, [])

    assert result.exit_code == 0
    assert "Exiting" in result.output
