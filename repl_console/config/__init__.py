"""Configuration for repl-console."""

from .settings_manager import ConsoleSettings, get_console_settings

__all__ = ["ConsoleSettings", "get_console_settings"]
