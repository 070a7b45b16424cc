from __future__ import annotations

"""Answer input: a blocking line reader and the thread that pumps it.

The reader knows nothing about questions or deadlines. ``AnswerFeed`` runs
it on a daemon thread so that the blocking read never stalls the quiz loop.
"""

import queue
import sys
import threading
from typing import Optional, TextIO

from ..errors import InputClosed

_CLOSED = object()


class InputReader:
    """Reads one line at a time from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def next_line(self) -> str:
        """Block until a line is available and return it without its terminator.

        Raises:
            InputClosed: the stream is exhausted or no longer readable.
        """
        if self._closed:
            raise InputClosed("input already closed")
        try:
            line = self.stream.readline()
        except (OSError, ValueError) as e:
            self._closed = True
            raise InputClosed(str(e)) from e
        if line == "":
            self._closed = True
            raise InputClosed("end of input")
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line


class AnswerFeed:
    """Pumps lines from an :class:`InputReader` into a queue on a daemon thread.

    The pump cannot be interrupted while blocked in a read. ``stop`` only
    prevents the next read, so at most one thread may outlive the quiz.
    """

    def __init__(self, reader: InputReader) -> None:
        self.reader = reader
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._closed = False

    def start(self) -> "AnswerFeed":
        if self._thread is None:
            self._thread = threading.Thread(target=self._pump, name="answer-feed", daemon=True)
            self._thread.start()
        return self

    def _pump(self) -> None:
        while not self._stop.is_set():
            try:
                line = self.reader.next_line()
            except InputClosed:
                self._queue.put(_CLOSED)
                return
            self._queue.put(line)

    def get(self, timeout: Optional[float] = None) -> Optional[str]:
        """Return the next answer line, or ``None`` if none arrived within ``timeout``.

        Raises:
            InputClosed: the underlying input has ended.
        """
        if self._closed:
            raise InputClosed("input already closed")
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            self._closed = True
            raise InputClosed("end of input")
        return item  # type: ignore[return-value]

    def stop(self) -> None:
        self._stop.set()

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
