from __future__ import annotations

"""Deadline: a one-shot wall-clock timer for the quiz."""

import math
import threading
import time
from typing import Callable, Optional


class Deadline:
    """Fires exactly once, ``duration`` seconds after :meth:`start`.

    ``duration=None`` never fires (untimed quiz), nor does an infinite duration
    or one beyond what a timer thread can wait for. Zero or negative durations
    are already fired when ``start`` returns. NaN is rejected.
    """

    def __init__(self, duration: Optional[float], clock: Callable[[], float] = time.monotonic) -> None:
        if duration is not None and math.isnan(duration):
            raise ValueError("duration must be a number, not NaN")
        self.duration = duration
        self._clock = clock
        self._fired = threading.Event()
        self._timer: Optional[threading.Timer] = None
        self._expires_at: Optional[float] = None

    @classmethod
    def start(cls, duration: Optional[float], clock: Callable[[], float] = time.monotonic) -> "Deadline":
        d = cls(duration, clock)
        d._arm()
        return d

    def _arm(self) -> None:
        if self.duration is None or self.duration > threading.TIMEOUT_MAX:
            return
        self._expires_at = self._clock() + float(self.duration)
        if self.duration <= 0:
            self._fired.set()
            return
        self._timer = threading.Timer(float(self.duration), self._fired.set)
        self._timer.daemon = True
        self._timer.start()

    def fired(self) -> bool:
        if self._fired.is_set():
            return True
        # Timer thread may be scheduled late; the clock is authoritative.
        if self._expires_at is not None and self._clock() >= self._expires_at:
            self._fired.set()
            return True
        return False

    def remaining(self) -> Optional[float]:
        if self._expires_at is None:
            return None
        if self.fired():
            return 0.0
        return max(0.0, self._expires_at - self._clock())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until fired or ``timeout`` elapses, whichever is first."""
        if self.fired():
            return True
        rem = self.remaining()
        if rem is None:
            limit = timeout
        elif timeout is None:
            limit = rem
        else:
            limit = min(timeout, rem)
        self._fired.wait(limit)
        return self.fired()

    def cancel(self) -> None:
        if self._timer:
            self._timer.cancel()
            self._timer = None
