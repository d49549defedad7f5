"""Event dispatch for the console front end.

The controller turns input events into session and history calls and
answers with effects: plain data describing what the rendering layer has to
do (re-render the transcript, replace the edit text, schedule a follow-up
event). It never touches widgets itself, so any UI that can interpret the
effects and implement ``Viewport`` can drive it.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional, Protocol, Tuple, Union

from .session import Session

logger = logging.getLogger(__name__)

# Default delay between scroll-settle checks, in seconds
DEFAULT_SETTLE_DELAY = 0.05

# Default number of scroll-settle checks before giving up
DEFAULT_SETTLE_MAX_ATTEMPTS = 20

SUBMIT_KEYS = frozenset({"enter"})
PREVIOUS_KEYS = frozenset({"up"})
NEXT_KEYS = frozenset({"down"})


# Events


@dataclass(frozen=True)
class Submit:
    """Evaluate the given command text."""

    text: str


@dataclass(frozen=True)
class Output:
    """Output that arrived outside of an evaluation call."""

    text: str


@dataclass(frozen=True)
class RecallPrevious:
    """Recall the previous non-blank prompt."""


@dataclass(frozen=True)
class RecallNext:
    """Recall the next non-blank prompt."""


@dataclass(frozen=True)
class ScrollSettle:
    """Move the viewport to the bottom and check that it stayed there.

    Attributes:
        attempt: Number of checks already made in this chain
        last_extent: Scroll extent measured by the previous check
    """

    attempt: int = 0
    last_extent: Optional[float] = None


Event = Union[Submit, Output, RecallPrevious, RecallNext, ScrollSettle]


# Effects


@dataclass(frozen=True)
class RenderTranscript:
    """Bring the rendered transcript up to date with the store."""


@dataclass(frozen=True)
class SetEditText:
    """Replace the edit surface text and move the caret to its end."""

    text: str


@dataclass(frozen=True)
class ScheduleEvent:
    """Dispatch ``event`` again after ``delay`` seconds (0 = after refresh)."""

    event: Event
    delay: float = 0.0


Effect = Union[RenderTranscript, SetEditText, ScheduleEvent]


class Viewport(Protocol):
    """Scrollable area showing the transcript."""

    def get_scroll_extent(self) -> float: ...

    def get_scroll_position(self) -> float: ...

    def set_scroll_position(self, value: float) -> None: ...


def key_to_event(key: str, edit_text: str) -> Optional[Event]:
    """Map a key press on the edit surface to a controller event.

    Args:
        key: Textual key name
        edit_text: Current edit surface text

    Returns:
        The event for the key, or None if the key is not handled
    """
    if key in SUBMIT_KEYS:
        return Submit(edit_text)
    if key in PREVIOUS_KEYS:
        return RecallPrevious()
    if key in NEXT_KEYS:
        return RecallNext()
    return None


@dataclass
class ConsoleController:
    """Dispatches console events against a session.

    Attributes:
        session: Session whose transcript and history are driven
        viewport: Scroll target for ``ScrollSettle``; settling is skipped
            while it is None
        settle_delay: Seconds between scroll-settle checks
        settle_max_attempts: Checks per settle chain before giving up
        on_event_posted: Called when output arrives outside an evaluation
            and an event is waiting for ``process_pending``
    """

    session: Session
    viewport: Optional[Viewport] = None
    settle_delay: float = DEFAULT_SETTLE_DELAY
    settle_max_attempts: int = DEFAULT_SETTLE_MAX_ATTEMPTS
    on_event_posted: Optional[Callable[[], None]] = None
    _pending: Deque[Event] = field(default_factory=deque, init=False, repr=False)

    def __post_init__(self) -> None:
        self.session.on_background_output = self._queue_background_output
        self._handlers: Dict[type, Callable[..., List[Effect]]] = {
            Submit: self._on_submit,
            Output: self._on_output,
            RecallPrevious: self._on_recall_previous,
            RecallNext: self._on_recall_next,
            ScrollSettle: self._on_scroll_settle,
        }

    def post(self, event: Event) -> None:
        """Queue an event for the next ``process_pending`` call."""
        self._pending.append(event)

    def process_pending(self) -> List[Effect]:
        """Dispatch queued events in order and collect their effects."""
        effects: List[Effect] = []
        while self._pending:
            effects.extend(self.dispatch(self._pending.popleft()))
        return effects

    def _queue_background_output(self, text: str) -> None:
        self.post(Output(text))
        if self.on_event_posted is not None:
            self.on_event_posted()

    def dispatch(self, event: Event) -> List[Effect]:
        """Handle one event.

        Returns:
            Effects for the rendering layer to apply, in order
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported console event: {event!r}")
        return handler(event)

    def handle_key(self, key: str, edit_text: str) -> Tuple[bool, List[Effect]]:
        """Process a key press from the edit surface.

        Every key keeps the prompt in view; submit also clears the edit text.

        Returns:
            Tuple of (handled, effects). Handled keys must not reach the
            edit surface's default key handling.
        """
        effects: List[Effect] = [ScheduleEvent(ScrollSettle())]

        event = key_to_event(key, edit_text)
        if event is None:
            return False, effects

        if isinstance(event, Submit):
            effects.append(SetEditText(""))

        self.post(event)
        effects.extend(self.process_pending())
        return True, effects

    def _on_submit(self, event: Submit) -> List[Effect]:
        self.session.submit(event.text)
        return [RenderTranscript(), ScheduleEvent(ScrollSettle())]

    def _on_output(self, event: Output) -> List[Effect]:
        self.session.append_output(event.text)
        return [RenderTranscript()]

    def _on_recall_previous(self, event: RecallPrevious) -> List[Effect]:
        text = self.session.history.recall_previous()
        if text is None:
            return []
        return [SetEditText(text)]

    def _on_recall_next(self, event: RecallNext) -> List[Effect]:
        text = self.session.history.recall_next()
        if text is None:
            return []
        return [SetEditText(text)]

    def _on_scroll_settle(self, event: ScrollSettle) -> List[Effect]:
        if self.viewport is None:
            return []

        extent = self.viewport.get_scroll_extent()
        self.viewport.set_scroll_position(extent)
        position = self.viewport.get_scroll_position()

        # Layout may still be growing the content after the last check
        if position >= extent and extent == event.last_extent:
            return []

        attempt = event.attempt + 1
        if attempt >= self.settle_max_attempts:
            logger.debug(
                "Scroll did not settle after %d checks (extent=%s, position=%s)",
                attempt,
                extent,
                position,
            )
            return []

        return [
            ScheduleEvent(
                ScrollSettle(attempt=attempt, last_extent=extent),
                delay=self.settle_delay,
            )
        ]
