"""Shared fixtures for console tests."""

import pytest

from repl_console.core.session import Session


class ScriptedEvaluator:
    """Evaluator replaying canned outcomes.

    ``script`` maps a command to ``(writes, outcome)``: each write is sent to
    the sink in order, then the outcome is returned (or raised when it is an
    exception). Unknown commands produce no output and no value.
    """

    def __init__(self, sink, script=None):
        self.sink = sink
        self.script = script or {}
        self.calls = []

    def evaluate(self, command):
        self.calls.append(command)
        writes, outcome = self.script.get(command, ((), None))
        for chunk in writes:
            self.sink.write(chunk)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def make_session():
    """Build a Session around a ScriptedEvaluator."""

    def _make(script=None):
        return Session(lambda sink: ScriptedEvaluator(sink, script))

    return _make
