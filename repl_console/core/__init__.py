"""Console session core: transcript, output sink, history and controller."""

from .transcript import EntryType, TranscriptEntry, TranscriptStore
from .sink import LineBufferedSink
from .history import HistoryNavigator
from .session import EvaluationError, Evaluator, Session
from .controller import ConsoleController

__all__ = [
    "EntryType",
    "TranscriptEntry",
    "TranscriptStore",
    "LineBufferedSink",
    "HistoryNavigator",
    "EvaluationError",
    "Evaluator",
    "Session",
    "ConsoleController",
]
