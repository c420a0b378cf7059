"""Operator notices: transient success messages and scoped error banners."""

import threading
from dataclasses import dataclass
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class ErrorBanners:
    """Dismissible error banners, one per console region."""
    load_error: Optional[str] = None        # Initial page load
    action_error: Optional[str] = None      # List refresh, start/stop/delete
    form_error: Optional[str] = None        # Form load and save
    detail_error: Optional[str] = None      # Provider detail load


class NoticeBoard:
    """
    Holds at most one transient success notice.

    Each posted notice starts its own dismissal timer and cancels the
    previous one, so notices never stack and an old timer never clears a
    newer notice.
    """

    def __init__(self, dismiss_after_seconds: float = 4.0):
        self.dismiss_after_seconds = dismiss_after_seconds
        self._lock = threading.Lock()
        self._notice: Optional[str] = None
        self._generation = 0
        self._timer: Optional[threading.Timer] = None

    @property
    def notice(self) -> Optional[str]:
        with self._lock:
            return self._notice

    def post(self, message: str) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._notice = message
            generation = self._generation
            if self.dismiss_after_seconds > 0:
                self._timer = threading.Timer(
                    self.dismiss_after_seconds, self._expire, args=(generation,)
                )
                self._timer.daemon = True
                self._timer.start()
        logger.info("Notice posted", notice=message)

    def dismiss(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self._notice = None

    def close(self) -> None:
        """Stop any pending timer without touching the current notice."""
        with self._lock:
            self._cancel_timer()

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._notice = None
            self._timer = None
        logger.debug("Notice expired")

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
