"""Tests for the console session."""

from unittest.mock import Mock

from repl_console.core.session import EvaluationError, Session
from repl_console.core.transcript import EntryType, TranscriptEntry


def texts(session):
    return [(e.entry_type, e.text) for e in session.transcript]


class TestSession:
    """Test Session.submit."""

    def test_factory_receives_session_sink(self):
        factory = Mock()

        session = Session(factory)

        factory.assert_called_once_with(session.sink)
        assert session.evaluator is factory.return_value

    def test_result_is_appended_after_prompt(self, make_session):
        session = make_session({"(+ 1 2)": ((), "3")})

        session.submit("(+ 1 2)")

        assert list(session.transcript) == [
            TranscriptEntry.prompt("(+ 1 2)"),
            TranscriptEntry.result("3"),
        ]

    def test_no_value_appends_only_prompt(self, make_session):
        session = make_session()

        session.submit("(define x 1)")

        assert texts(session) == [(EntryType.PROMPT, "(define x 1)")]

    def test_evaluation_error_appends_error(self, make_session):
        session = make_session({"x": ((), EvaluationError("unbound: x"))})

        session.submit("x")

        assert texts(session)[-2:] == [
            (EntryType.PROMPT, "x"),
            (EntryType.ERROR, "unbound: x"),
        ]

    def test_unexpected_exception_is_reported_not_raised(self, make_session):
        session = make_session({"crash": ((), RuntimeError("kaput"))})

        session.submit("crash")

        assert texts(session)[-1] == (EntryType.ERROR, "RuntimeError: kaput")

    def test_keyboard_interrupt_is_reported_not_raised(self, make_session):
        session = make_session(
            {"stop": ((b"partial",), KeyboardInterrupt()), "good": ((), "ok")}
        )
        session.submit("good")
        session.history.recall_previous()
        assert session.history.cursor == 0

        session.submit("stop")

        assert texts(session)[-3:] == [
            (EntryType.PROMPT, "stop"),
            (EntryType.OUTPUT, "partial"),
            (EntryType.ERROR, "KeyboardInterrupt"),
        ]
        assert session.history.cursor is None
        assert session.evaluating is False

    def test_session_usable_after_error(self, make_session):
        session = make_session(
            {"bad": ((), EvaluationError("nope")), "good": ((), "ok")}
        )

        session.submit("bad")
        session.submit("good")

        assert texts(session)[-1] == (EntryType.RESULT, "ok")

    def test_streamed_output_is_flushed_before_outcome(self, make_session):
        session = make_session({"cmd": ((b"a\n", b"b"), None)})

        session.submit("cmd")

        assert list(session.transcript) == [
            TranscriptEntry.prompt("cmd"),
            TranscriptEntry.output("a\n"),
            TranscriptEntry.output("b"),
        ]

    def test_output_precedes_result(self, make_session):
        session = make_session({"cmd": ((b"line\n", b"tail"), "42")})

        session.submit("cmd")

        assert texts(session) == [
            (EntryType.PROMPT, "cmd"),
            (EntryType.OUTPUT, "line\n"),
            (EntryType.OUTPUT, "tail"),
            (EntryType.RESULT, "42"),
        ]

    def test_partial_output_flushed_on_error(self, make_session):
        session = make_session({"cmd": ((b"half",), EvaluationError("boom"))})

        session.submit("cmd")

        assert texts(session)[1:] == [
            (EntryType.OUTPUT, "half"),
            (EntryType.ERROR, "boom"),
        ]

    def test_submit_resets_navigation_cursor(self, make_session):
        session = make_session()
        session.submit("one")
        session.submit("two")
        session.history.recall_previous()
        session.history.recall_previous()
        assert session.history.cursor == 0

        session.submit("three")

        assert session.history.cursor is None
        assert session.history.recall_previous() == "three"

    def test_background_output_is_routed_to_hook(self, make_session):
        session = make_session()
        received = []
        session.on_background_output = received.append

        session.sink.write(b"late\n")

        assert received == ["late\n"]
        assert len(session.transcript) == 0

    def test_background_output_without_hook_is_appended(self, make_session):
        session = make_session()

        session.sink.write(b"late\n")

        assert texts(session) == [(EntryType.OUTPUT, "late\n")]

    def test_output_during_evaluation_bypasses_hook(self, make_session):
        session = make_session({"cmd": ((b"now\n",), None)})
        hook = Mock()
        session.on_background_output = hook

        session.submit("cmd")

        hook.assert_not_called()
        assert texts(session)[-1] == (EntryType.OUTPUT, "now\n")
