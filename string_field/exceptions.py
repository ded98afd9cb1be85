"""
Custom exception classes for string field widgets.

Most of these never leave the package: the date codec raises them
internally and recovers to "no value". Schema and control errors are
caller mistakes and propagate.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class StringFieldError(Exception):
    """
    Base exception for string field errors.

    Attributes:
        message: Error message
        context: Additional context information
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def get_full_details(self) -> Dict[str, Any]:
        """Get complete error details including context."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


class SchemaError(StringFieldError):
    """Raised when a schema fragment cannot drive a string field."""

    def __init__(self, schema: Any, reason: str, message: Optional[str] = None):
        self.schema = schema
        self.reason = reason

        if message is None:
            message = f"Invalid string field schema: {reason}"

        super().__init__(message, {'reason': reason, 'schema': schema})


class MalformedDateError(StringFieldError):
    """
    Raised when a value cannot be parsed as an ISO-8601 date.

    The codec recovers from this by treating every date part as unset.
    """

    def __init__(self, value: Any, original_error: Optional[Exception] = None):
        self.value = value
        self.original_error = original_error

        context = {'value': value}
        if original_error is not None:
            context['original_error_type'] = type(original_error).__name__
            context['original_error_message'] = str(original_error)

        super().__init__(f"Unable to parse date {value!r}", context)


class IncompleteCompositeError(StringFieldError):
    """Raised when date parts cannot be encoded because some are unset."""

    def __init__(self, missing_parts: list):
        self.missing_parts = list(missing_parts)
        message = f"Date parts not set: {', '.join(self.missing_parts)}"
        super().__init__(message, {'missing_parts': self.missing_parts})


class FormatValidationError(StringFieldError):
    """A single violated format constraint, as reported in a field's error list."""

    def __init__(self, message: str, path: str = "."):
        self.path = path
        super().__init__(message, {'path': path})


class UnknownControlError(StringFieldError):
    """Raised when a change event targets a control the widget does not render."""

    def __init__(self, control_id: str, known_ids: list):
        self.control_id = control_id
        self.known_ids = list(known_ids)
        message = f"Unknown control id '{control_id}' (expected one of: {', '.join(self.known_ids)})"
        super().__init__(message, {'control_id': control_id, 'known_ids': self.known_ids})
