"""
Debounced re-parse scheduling.

The parser has no notion of a pending or latest run; callers that re-parse
on every edit put a Debouncer in front of it and throw stale work away by
cancelling the timer.
"""

import threading
from typing import Any, Callable, Optional

# Delay used by the original editor integration
DEFAULT_DELAY = 0.15


class Debouncer:
    """Runs ``callback`` once ``delay`` seconds after the last trigger."""

    def __init__(self, callback: Callable[..., Any], delay: float = DEFAULT_DELAY):
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.callback = callback
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._args: tuple = ()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self, *args: Any) -> None:
        """(Re)start the countdown; only the latest arguments are used."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> bool:
        """Run a pending call now. Returns whether one was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
            args = self._args
        self.callback(*args)
        return True

    def _fire(self) -> None:
        with self._lock:
            if self._timer is None or threading.current_thread() is not self._timer:
                return
            self._timer = None
            args = self._args
        self.callback(*args)
