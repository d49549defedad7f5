"""Data models for the console transcript."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, overload


class EntryType(Enum):
    """Types of transcript entries."""

    PROMPT = "prompt"  # Submitted command text
    RESULT = "result"  # Value returned by the evaluator
    ERROR = "error"  # Evaluation failure message
    OUTPUT = "output"  # Text streamed by the evaluator


@dataclass(frozen=True)
class TranscriptEntry:
    """A single immutable transcript entry."""

    entry_type: EntryType
    text: str

    @classmethod
    def prompt(cls, text: str) -> "TranscriptEntry":
        return cls(EntryType.PROMPT, text)

    @classmethod
    def result(cls, text: str) -> "TranscriptEntry":
        return cls(EntryType.RESULT, text)

    @classmethod
    def error(cls, text: str) -> "TranscriptEntry":
        return cls(EntryType.ERROR, text)

    @classmethod
    def output(cls, text: str) -> "TranscriptEntry":
        return cls(EntryType.OUTPUT, text)

    @property
    def is_recallable(self) -> bool:
        """Whether this entry is a prompt with non-whitespace text."""
        return self.entry_type is EntryType.PROMPT and bool(self.text.strip())

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"entry_type": self.entry_type.value, "text": self.text}


class TranscriptStore:
    """Append-only, ordered log of transcript entries.

    Entries are never removed or reordered, so an index keeps referring to
    the same entry for the lifetime of the store.
    """

    def __init__(self) -> None:
        self._entries: List[TranscriptEntry] = []

    def append(self, entry: TranscriptEntry) -> int:
        """Append an entry.

        Args:
            entry: Entry to append

        Returns:
            Index of the appended entry
        """
        self._entries.append(entry)
        return len(self._entries) - 1

    @overload
    def __getitem__(self, index: int) -> TranscriptEntry: ...

    @overload
    def __getitem__(self, index: slice) -> List[TranscriptEntry]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(self._entries)

    def since(self, start: int) -> List[TranscriptEntry]:
        """Return the entries appended at or after ``start``."""
        return self._entries[start:]

    def as_text(self) -> str:
        """Render the transcript as plain text for copying."""
        lines = []
        for entry in self._entries:
            if entry.entry_type is EntryType.PROMPT:
                lines.append(f"> {entry.text}")
            elif entry.entry_type is EntryType.OUTPUT:
                lines.append(entry.text.rstrip("\n"))
            else:
                lines.append(entry.text)
        return "\n".join(lines)
