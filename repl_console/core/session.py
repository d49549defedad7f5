"""Console session: evaluator handle, transcript and output sink."""

import logging
from typing import Callable, Optional, Protocol

from .history import HistoryNavigator
from .sink import LineBufferedSink
from .transcript import TranscriptEntry, TranscriptStore

logger = logging.getLogger(__name__)


class EvaluationError(Exception):
    """Raised by an evaluator when it rejects or fails on a command.

    The message is shown verbatim in the transcript.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Evaluator(Protocol):
    """Contract for command evaluators.

    Evaluators receive a ``LineBufferedSink`` at construction and may write
    bytes to it while ``evaluate`` runs, strictly before it returns.
    """

    def evaluate(self, command: str) -> Optional[str]:
        """Evaluate a command.

        Returns:
            Display text for the result, or None when there is nothing to show

        Raises:
            EvaluationError: If evaluation fails
        """
        ...


EvaluatorFactory = Callable[[LineBufferedSink], Evaluator]


def _describe_exception(exc: BaseException) -> str:
    message = str(exc)
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


class Session:
    """Owns the evaluator, the transcript and the evaluator's output sink."""

    def __init__(self, evaluator_factory: EvaluatorFactory):
        """Initialize a session.

        Args:
            evaluator_factory: Builds the evaluator around this session's sink
        """
        self.transcript = TranscriptStore()
        self.history = HistoryNavigator(self.transcript)
        self.evaluating = False

        # Receives sink output written while no evaluation is running
        self.on_background_output: Optional[Callable[[str], None]] = None

        self.sink = LineBufferedSink(on_output=self._on_sink_output)
        self.evaluator = evaluator_factory(self.sink)

    @property
    def evaluator_name(self) -> str:
        return type(self.evaluator).__name__

    def append_output(self, text: str) -> None:
        """Append streamed evaluator output to the transcript."""
        self.transcript.append(TranscriptEntry.output(text))

    def _on_sink_output(self, text: str) -> None:
        if self.evaluating or self.on_background_output is None:
            self.append_output(text)
        else:
            self.on_background_output(text)

    def submit(self, text: str) -> None:
        """Evaluate a command and record the outcome in the transcript."""
        self.transcript.append(TranscriptEntry.prompt(text))

        outcome: Optional[TranscriptEntry] = None
        self.evaluating = True
        try:
            value = self.evaluator.evaluate(text)
            if value is not None:
                outcome = TranscriptEntry.result(value)
        except EvaluationError as e:
            outcome = TranscriptEntry.error(e.message)
        except (Exception, KeyboardInterrupt) as e:
            logger.exception("Evaluator %s crashed on command", self.evaluator_name)
            outcome = TranscriptEntry.error(_describe_exception(e))
        finally:
            # An unterminated last line must land before the result
            self.sink.flush()
            self.evaluating = False
            self.history.reset()

        if outcome is not None:
            self.transcript.append(outcome)
