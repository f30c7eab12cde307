"""Debounce rapid input: only the last call within the quiet period runs."""
import threading
from typing import Any, Callable

DEFAULT_DELAY_SECONDS = 0.3


class Debouncer:
    def __init__(self, delay: float = DEFAULT_DELAY_SECONDS) -> None:
        self.delay = delay
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def call(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Schedule fn after delay, cancelling any call still pending."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, fn, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
