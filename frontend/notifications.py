import time
from typing import Callable, Optional


class NotificationSlot:
    """
    A single transient message with a pending clear.

    Showing a new message replaces the previous one together with its clear
    deadline, so the newest message always gets its full duration.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._message: Optional[str] = None
        self._clear_at: Optional[float] = None

    def show(self, message: str, duration: float) -> None:
        self._message = message
        self._clear_at = self._clock() + duration

    def current(self) -> Optional[str]:
        if self._clear_at is not None and self._clock() >= self._clear_at:
            self.clear()
        return self._message

    def clear(self) -> None:
        self._message = None
        self._clear_at = None
