"""Reference evaluator running Python source in a persistent namespace."""

import io
import sys
import traceback
from contextlib import redirect_stderr, redirect_stdout
from typing import Any, Dict, Optional

from ..core.session import EvaluationError
from ..core.sink import LineBufferedSink


class SinkWriter(io.TextIOBase):
    """Text stream that encodes writes into a byte sink.

    ``flush`` is intentionally not forwarded: partial lines stay buffered in
    the sink until the session flushes it after evaluation.
    """

    def __init__(self, sink: LineBufferedSink, encoding: str = "utf-8"):
        super().__init__()
        self._sink = sink
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self._sink.write(text.encode(self._encoding, errors="replace"))
        return len(text)


class PythonEvaluator:
    """Evaluate Python expressions and statements.

    Expressions return the ``repr`` of their value (``None`` shows nothing)
    and bind it to ``_``. Statements run for their side effects. Anything
    printed to stdout or stderr goes to the sink. Standard input reads as
    empty, so ``input()`` fails with ``EOFError`` instead of waiting.
    """

    filename = "<console>"

    def __init__(self, sink: LineBufferedSink):
        self.sink = sink
        self.stream = SinkWriter(sink)
        self.namespace: Dict[str, Any] = {"__name__": "__console__"}

    def evaluate(self, command: str) -> Optional[str]:
        """Evaluate one command.

        Args:
            command: Python source, possibly spanning several lines

        Returns:
            repr of an expression's value, or None

        Raises:
            EvaluationError: On syntax errors and uncaught exceptions
        """
        if not command.strip():
            return None

        code, is_expression = self._compile(command)

        # input() must not block on the terminal
        saved_stdin = sys.stdin
        sys.stdin = io.StringIO()
        try:
            with redirect_stdout(self.stream), redirect_stderr(self.stream):
                value = eval(code, self.namespace)
        except (Exception, SystemExit, KeyboardInterrupt) as e:
            raise EvaluationError(self._format_exception(e)) from e
        finally:
            sys.stdin = saved_stdin

        if not is_expression or value is None:
            return None

        self.namespace["_"] = value
        return repr(value)

    def _compile(self, command: str):
        source = command.strip("\n")
        try:
            return compile(source, self.filename, "eval"), True
        except SyntaxError:
            pass

        try:
            return compile(source, self.filename, "exec"), False
        except SyntaxError as e:
            raise EvaluationError(self._format_exception(e)) from e

    @staticmethod
    def _format_exception(exc: BaseException) -> str:
        # Drop the evaluator's own frame from the traceback
        tb = exc.__traceback__.tb_next if exc.__traceback__ else None
        if tb is None:
            lines = traceback.format_exception_only(type(exc), exc)
        else:
            lines = traceback.format_exception(type(exc), exc, tb)
        return "".join(lines).rstrip("\n")
