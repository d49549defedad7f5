"""Command palette provider for repl-console.

Adds console actions to the Textual command palette while preserving
Textual's default commands (quit, theme, show/hide keys, etc.).
"""

from textual.command import Hit, Hits, Provider


class ConsoleCommandProvider(Provider):
    """Command provider for console actions."""

    def _commands(self):
        return [
            (
                "Copy Transcript",
                "Copy every prompt, result, error and output to the clipboard",
                self._run_copy_transcript,
            ),
            (
                "Scroll to Bottom",
                "Scroll the transcript down to the prompt",
                self._run_scroll_bottom,
            ),
        ]

    async def discover(self) -> Hits:
        """Provide default commands when palette first opens (empty query).

        Yields:
            All console commands for discoverability
        """
        for name, help_text, callback in self._commands():
            yield Hit(1, name, callback, help=help_text)

    async def search(self, query: str) -> Hits:
        """Search for console commands.

        Args:
            query: The search query from command palette

        Yields:
            Command hits matching the query
        """
        matcher = self.matcher(query)

        for name, help_text, callback in self._commands():
            score = matcher.match(name)
            if score > 0:
                yield Hit(
                    score,
                    matcher.highlight(name),
                    callback,
                    help=help_text,
                )

    def _run_copy_transcript(self) -> None:
        """Run the copy_transcript action on the console screen."""
        if hasattr(self.screen, "action_copy_transcript"):
            self.screen.action_copy_transcript()

    def _run_scroll_bottom(self) -> None:
        """Run the scroll_bottom action on the console screen."""
        if hasattr(self.screen, "action_scroll_bottom"):
            self.screen.action_scroll_bottom()
