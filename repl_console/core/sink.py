"""Line-buffered byte sink for evaluator output."""

from typing import Callable

OutputCallback = Callable[[str], None]


class LineBufferedSink:
    """Turns an arbitrary stream of bytes into whole-line output events.

    Every ``write`` emits everything up to and including the last newline
    seen so far as a single event; the remainder stays buffered until more
    bytes complete it or ``flush`` drains it.
    """

    def __init__(self, on_output: OutputCallback):
        """Initialize the sink.

        Args:
            on_output: Called with decoded text for each emitted chunk
        """
        self.on_output = on_output
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes written since the last emitted newline."""
        return bytes(self._buffer)

    def write(self, data: bytes) -> int:
        """Buffer ``data`` and emit any completed lines.

        Returns:
            Number of bytes accepted (always all of them)
        """
        self._buffer.extend(data)

        i = self._buffer.rfind(b"\n")
        if i != -1:
            complete = bytes(self._buffer[: i + 1])
            del self._buffer[: i + 1]
            self.on_output(complete.decode("utf-8", errors="replace"))

        return len(data)

    def flush(self) -> None:
        """Emit whatever is buffered, terminated by a newline or not."""
        if not self._buffer:
            return

        text = self._buffer.decode("utf-8", errors="replace")
        self._buffer.clear()
        self.on_output(text)
