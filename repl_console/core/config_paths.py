"""Centralized configuration path management for repl-console.

This module provides a single source of truth for all configuration and data
file paths, following XDG Base Directory specification.
"""

from pathlib import Path


class ConfigPaths:
    """Centralized configuration path management.

    All repl-console configuration and log files are stored in
    ~/.config/repl-console/.
    """

    # XDG-compliant base directory
    BASE_DIR = Path.home() / ".config" / "repl-console"

    @classmethod
    def get_base_dir(cls) -> Path:
        """Get base configuration directory, creating if needed.

        Returns:
            Path to ~/.config/repl-console/
        """
        cls.BASE_DIR.mkdir(parents=True, exist_ok=True)
        return cls.BASE_DIR

    @classmethod
    def get_config_file(cls) -> Path:
        """Get path to main configuration file.

        Returns:
            Path to config.json
        """
        cls.get_base_dir()  # Ensure directory exists
        return cls.BASE_DIR / "config.json"

    @classmethod
    def get_log_file(cls) -> Path:
        """Get path to the debug log file.

        Returns:
            Path to debug.log
        """
        cls.get_base_dir()  # Ensure directory exists
        return cls.BASE_DIR / "debug.log"
