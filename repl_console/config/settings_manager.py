"""Centralized settings management for repl-console.

Settings Schema:
    {
        "evaluator": str,              # Evaluator factory ("module:attribute")
        "startup_code": str,           # Text prefilled into the prompt
        "settle_delay": float,         # Seconds between scroll-settle checks
        "settle_max_attempts": int,    # Scroll-settle checks before giving up
        "theme": str,                  # Theme name (e.g., "console-dark", "nord")
    }

Environment variables (a .env file is honoured) override the file:
    REPL_CONSOLE_EVALUATOR, REPL_CONSOLE_STARTUP_CODE
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Dict
import logging

from dotenv import load_dotenv

from repl_console.core.config_paths import ConfigPaths
from repl_console.core.controller import (
    DEFAULT_SETTLE_DELAY,
    DEFAULT_SETTLE_MAX_ATTEMPTS,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_EVALUATOR = "repl_console.evaluators.python_evaluator:PythonEvaluator"

# Default theme if none is saved
DEFAULT_THEME = "console-dark"

# Valid theme names (console themes plus Textual built-ins)
VALID_THEMES = {
    "console-dark",
    "console-light",
    "textual-dark",
    "textual-light",
    "nord",
    "gruvbox",
    "dracula",
    "tokyo-night",
    "monokai",
    "solarized-light",
}


@dataclass
class ConsoleSettings:
    """Resolved settings for a console run."""

    evaluator: str = DEFAULT_EVALUATOR
    startup_code: str = ""
    settle_delay: float = DEFAULT_SETTLE_DELAY
    settle_max_attempts: int = DEFAULT_SETTLE_MAX_ATTEMPTS
    theme: str = DEFAULT_THEME


def load_config_data() -> Dict[str, Any]:
    """Loads configuration data from config.json."""
    config_file = ConfigPaths.get_config_file()
    if not config_file.exists():
        return {}
    try:
        content = config_file.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        return json.loads(content)
    except (json.JSONDecodeError, IOError) as e:
        LOGGER.warning(
            f"Failed to load config file: {e}. Using empty configuration.",
            exc_info=True,
        )
        return {}


def _save_config_data(data: Dict[str, Any]) -> None:
    """Saves the configuration data to config.json."""
    config_file = ConfigPaths.get_config_file()
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(json.dumps(data, indent=4), encoding="utf-8")
    except IOError as e:
        LOGGER.error(f"Failed to save config file: {e}", exc_info=True)


def get_setting(key: str, default: Any = None) -> Any:
    """Retrieve a setting from the config file."""
    data = load_config_data()
    return data.get(key, default)


def set_settings(updates: Dict[str, Any]) -> None:
    """Load existing settings, apply updates, and save back."""
    data = load_config_data()
    data.update(updates)
    _save_config_data(data)


def validate_theme(theme: str) -> bool:
    """Check if a theme name is valid.

    Args:
        theme: Theme name to validate

    Returns:
        True if theme is a known theme name
    """
    return theme in VALID_THEMES


def get_theme_setting() -> str:
    """Retrieve the saved theme setting, falling back to default.

    Returns:
        A valid theme name. If the saved theme is invalid, returns DEFAULT_THEME.
    """
    theme = get_setting("theme", DEFAULT_THEME)
    return theme if validate_theme(theme) else DEFAULT_THEME


def _coerce(data: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read ``key`` from ``data`` as ``kind``, falling back on bad values."""
    value = data.get(key, default)
    try:
        value = kind(value)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid %s=%r in config, using %r", key, value, default)
        return default
    return value


def get_console_settings() -> ConsoleSettings:
    """Resolve console settings from config.json and the environment.

    Returns:
        ConsoleSettings with invalid values replaced by defaults
    """
    load_dotenv()
    data = load_config_data()

    settings = ConsoleSettings(
        evaluator=str(data.get("evaluator") or DEFAULT_EVALUATOR),
        startup_code=str(data.get("startup_code") or ""),
        settle_delay=_coerce(data, "settle_delay", float, DEFAULT_SETTLE_DELAY),
        settle_max_attempts=_coerce(
            data, "settle_max_attempts", int, DEFAULT_SETTLE_MAX_ATTEMPTS
        ),
        theme=get_theme_setting(),
    )

    if settings.settle_delay < 0:
        settings.settle_delay = DEFAULT_SETTLE_DELAY
    if settings.settle_max_attempts < 1:
        settings.settle_max_attempts = DEFAULT_SETTLE_MAX_ATTEMPTS

    env_evaluator = os.environ.get("REPL_CONSOLE_EVALUATOR")
    if env_evaluator:
        settings.evaluator = env_evaluator

    env_startup = os.environ.get("REPL_CONSOLE_STARTUP_CODE")
    if env_startup is not None:
        settings.startup_code = env_startup

    return settings
