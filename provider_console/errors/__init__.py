"""
Error classification for the provider console.

This module provides the exception hierarchy for the failures the console
distinguishes: form validation, remote call failures, malformed payloads
and invalid console configuration.
"""

from .validation import (
    FormValidationError,
    FieldError,
    PreconditionError,
)
from .remote import (
    RemoteCallError,
    ActionInFlightError,
)
from .data_quality import (
    DataQualityError,
    MalformedPayloadError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Form validation
    "FormValidationError",
    "FieldError",
    "PreconditionError",
    # Remote calls
    "RemoteCallError",
    "ActionInFlightError",
    # Payload quality
    "DataQualityError",
    "MalformedPayloadError",
    # System failures
    "SystemFailureError",
    "ConfigurationError",
]
