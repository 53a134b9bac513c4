from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """Coalesce bursts of calls into one call with the latest arguments.

    Each ``call`` restarts a ``wait``-second timer; when the timer fires the
    wrapped function runs once with the most recent arguments. ``flush`` runs a
    pending call immediately, ``cancel`` drops it.
    """

    def __init__(self, func: Callable[..., Any], wait: float) -> None:
        self.func = func
        self.wait = wait
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[tuple, dict]] = None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.call(*args, **kwargs)

    def call(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            if self.wait <= 0:
                self._timer = None
                run_now = True
            else:
                timer = threading.Timer(self.wait, self._on_timer)
                timer.args = (timer,)
                timer.daemon = True
                self._timer = timer
                timer.start()
                run_now = False
        if run_now:
            self.flush()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def _take_pending(self) -> Optional[Tuple[tuple, dict]]:
        with self._lock:
            pending, self._pending = self._pending, None
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            return pending

    def _on_timer(self, timer: threading.Timer) -> None:
        with self._lock:
            # a newer call replaced this timer after it had already started firing
            if self._timer is not timer:
                return
        self.flush()

    def flush(self) -> bool:
        """Run the pending call now. Returns False when nothing was pending."""
        pending = self._take_pending()
        if pending is None:
            return False
        args, kwargs = pending
        self.func(*args, **kwargs)
        return True

    def cancel(self) -> None:
        self._take_pending()
