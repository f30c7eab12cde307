"""Observable value holders backing the view-model (UI re-renders on change)."""
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class StateHolder(Generic[T]):
    """
    Holds one value and notifies subscribers when it changes.
    Equal values are conflated: assigning the current value again does not notify.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[Callable[[T], None]] = []
        self._lock = threading.Lock()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        with self._lock:
            if new == self._value:
                return
            self._value = new
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(new)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register callback (called immediately with the current value). Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe
