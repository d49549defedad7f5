"""Prompt recall over the session transcript (UI-agnostic)."""

from typing import Optional

from .transcript import TranscriptStore


class HistoryNavigator:
    """Walks backward and forward through previously submitted prompts.

    The cursor is an index into the transcript, or ``None`` while the user
    is on the live (unsubmitted) line. Blank prompts and non-prompt entries
    are skipped.

    The two directions are asymmetric: running out of earlier
    prompts leaves everything untouched, and running out of later prompts
    also leaves the cursor and edit text where they are rather than
    returning to the live line.
    """

    def __init__(self, transcript: TranscriptStore):
        self.transcript = transcript
        self.cursor: Optional[int] = None

    @property
    def is_recalling(self) -> bool:
        return self.cursor is not None

    def reset(self) -> None:
        """Return to the live line."""
        self.cursor = None

    def recall_previous(self) -> Optional[str]:
        """Recall the closest non-blank prompt before the cursor.

        Returns:
            The prompt text to place in the edit surface, or None when
            there is no earlier prompt (cursor unchanged)
        """
        start = self.cursor if self.cursor is not None else len(self.transcript)
        idx = start - 1
        if idx < 0:
            return None

        while idx >= 0:
            entry = self.transcript[idx]
            if entry.is_recallable:
                self.cursor = idx
                return entry.text
            idx -= 1

        return None

    def recall_next(self) -> Optional[str]:
        """Recall the closest non-blank prompt after the cursor.

        Returns:
            The prompt text to place in the edit surface, or None when not
            recalling or when no later prompt exists (cursor unchanged)
        """
        if self.cursor is None:
            return None

        idx = self.cursor + 1
        while idx < len(self.transcript):
            entry = self.transcript[idx]
            if entry.is_recallable:
                self.cursor = idx
                return entry.text
            idx += 1

        return None
