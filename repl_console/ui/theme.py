"""Custom themes for the console.

Transcript entries are coloured through the semantic theme colours:
prompts use primary, results accent, errors error.
"""

from textual.theme import Theme


# Console Dark Theme - low-glare terminal palette
CONSOLE_DARK = Theme(
    name="console-dark",
    primary="#4A9EFF",  # Prompt marker and focus
    secondary="#7B68EE",
    background="#0F1419",
    surface="#1A1F26",
    panel="#252B35",
    accent="#00D4AA",  # Evaluation results
    warning="#FFB648",
    error="#FF5C5C",  # Evaluation errors
    success="#00D98C",
    foreground="#E8E8E8",
    variables={
        "text-primary": "#E8E8E8",
        "text-muted": "#888888",
        "border": "#404854",
        "border-focus": "#4A9EFF",
    },
)


# Console Light Theme - paper palette
CONSOLE_LIGHT = Theme(
    name="console-light",
    primary="#2563EB",
    secondary="#7C3AED",
    background="#FFFFFF",
    surface="#F9FAFB",
    panel="#F3F4F6",
    accent="#0D9488",
    warning="#F59E0B",
    error="#DC2626",
    success="#10B981",
    foreground="#1F2937",
    dark=False,
    variables={
        "text-primary": "#1F2937",
        "text-muted": "#9CA3AF",
        "border": "#E5E7EB",
        "border-focus": "#2563EB",
    },
)


def get_themes():
    """Get all console themes.

    Returns:
        Dict mapping theme names to Theme objects
    """
    return {
        "console-dark": CONSOLE_DARK,
        "console-light": CONSOLE_LIGHT,
    }
