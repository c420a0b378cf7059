"""Tracking of in-flight lifecycle actions, at most one per provider."""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog

from ..errors import ActionInFlightError

logger = structlog.get_logger(__name__)


class InFlightActions:
    """Set of provider names with a start/stop/delete/save request outstanding."""

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: dict[str, str] = {}

    def begin(self, provider: str, action: str) -> None:
        """
        Mark an action as in flight.

        Raises:
            ActionInFlightError: If an action for this provider is already pending
        """
        with self._lock:
            current = self._pending.get(provider)
            if current is not None:
                raise ActionInFlightError(
                    f"Provider {provider} already has a pending {current} request",
                    provider=provider,
                    action=action,
                )
            self._pending[provider] = action

    def finish(self, provider: str) -> None:
        with self._lock:
            self._pending.pop(provider, None)

    def is_pending(self, provider: str) -> bool:
        with self._lock:
            return provider in self._pending

    def pending_action(self, provider: str) -> Optional[str]:
        with self._lock:
            return self._pending.get(provider)

    @contextmanager
    def track(self, provider: str, action: str) -> Iterator[None]:
        """Hold the provider's slot for the duration of the block."""
        self.begin(provider, action)
        logger.debug("Action started", provider=provider, action=action)
        try:
            yield
        finally:
            self.finish(provider)
