"""
Payload quality error classifications for admin API responses.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for response payloads the console cannot interpret."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedPayloadError(DataQualityError):
    """Payload exists but is in an incorrect format."""

    def __init__(self, message: str, raw_data: Optional[Any] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
