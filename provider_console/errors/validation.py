"""
Form validation errors raised while interpreting adapter settings.

Validation errors block a submission entirely and are shown inline in the
form. They are resolved locally by the operator and never reach the backend.
"""

from typing import Optional, Dict, Any


class FormValidationError(Exception):
    """Base class for errors that block a form submission."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True


class FieldError(FormValidationError):
    """A value for one named settings field is missing or cannot be coerced."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.raw_value = raw_value


class PreconditionError(FormValidationError):
    """The form is not ready to submit (missing provider name or adapter)."""

    def __init__(self, message: str, precondition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.precondition = precondition
