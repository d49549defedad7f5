"""Tests for transcript entry widgets."""

import pytest
from textual.app import App
from textual.widgets import Static

from repl_console.core.transcript import TranscriptEntry
from repl_console.ui.transcript_widgets import (
    ErrorEntry,
    OutputEntry,
    PromptEntry,
    ResultEntry,
    widget_for_entry,
)


class TestWidgetForEntry:
    """Test widget selection per entry type."""

    @pytest.mark.parametrize(
        "entry, widget_type, css_class",
        [
            (TranscriptEntry.prompt("1"), PromptEntry, "prompt-entry"),
            (TranscriptEntry.result("1"), ResultEntry, "result-entry"),
            (TranscriptEntry.error("1"), ErrorEntry, "error-entry"),
            (TranscriptEntry.output("1"), OutputEntry, "output-entry"),
        ],
    )
    def test_widget_type_and_class(self, entry, widget_type, css_class):
        widget = widget_for_entry(entry)

        assert type(widget) is widget_type
        assert widget.has_class(css_class)
        assert widget.entry is entry

    def test_extra_classes_are_kept(self):
        widget = PromptEntry(TranscriptEntry.prompt("x"), classes="highlight")

        assert widget.has_class("highlight")
        assert widget.has_class("prompt-entry")

    def test_output_drops_trailing_newline(self):
        widget = OutputEntry(TranscriptEntry.output("line\n"))

        assert widget.display_text == "line"

    def test_output_keeps_unterminated_text(self):
        widget = OutputEntry(TranscriptEntry.output("partial"))

        assert widget.display_text == "partial"


class TestEntryRendering:
    """Test mounted entry widgets."""

    async def test_markup_is_not_interpreted(self):
        widget = ResultEntry(TranscriptEntry.result("[bold]x[/bold]"))

        class _TestApp(App):
            def compose(self):
                yield widget

        async with _TestApp().run_test() as pilot:
            await pilot.pause()
            content = widget.query_one(".entry-content", Static)
            assert "[bold]x[/bold]" in str(content.render())

    async def test_prompt_has_label(self):
        widget = PromptEntry(TranscriptEntry.prompt("(+ 1 2)"))

        class _TestApp(App):
            def compose(self):
                yield widget

        async with _TestApp().run_test() as pilot:
            await pilot.pause()
            assert len(widget.query(".entry-label")) == 1
            assert len(widget.query(".entry-content")) == 1
