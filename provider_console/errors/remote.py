"""
Remote call error classifications.

Remote failures are reported to the operator as a banner scoped to the
action that triggered them. They never roll back local state.
"""

from typing import Optional, Dict, Any


class RemoteCallError(Exception):
    """A call to the provider admin API failed.

    The string form of the error is the human-readable message shown to the
    operator.
    """

    def __init__(self, message: str, operation: Optional[str] = None,
                 status_code: Optional[int] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code
        self.context = context or {}

    @property
    def retryable(self) -> bool:
        """Server and network errors may succeed on a later attempt."""
        return self.status_code is None or self.status_code >= 500


class ActionInFlightError(Exception):
    """A lifecycle action for this provider is already pending."""

    def __init__(self, message: str, provider: Optional[str] = None,
                 action: Optional[str] = None):
        super().__init__(message)
        self.provider = provider
        self.action = action
