"""
Default validator for string field values.

Checks the value against the string constraints of its schema (format,
enum, length, pattern) and returns one error entry per violated
constraint. Empty values are never format errors; required-ness belongs
to the form container.
"""

from typing import Any, Callable, Dict, List, Optional, Union
import logging
import re

from .date_codec import parse_date_string
from .exceptions import FormatValidationError, MalformedDateError
from .schema import (
    SchemaDescriptor,
    ValidationErrorEntry,
    describe_schema,
    FORMAT_DATE_TIME,
    FORMAT_EMAIL,
    FORMAT_URI,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^@]+@[^@]+$')
# RFC 3986 scheme followed by at least one character
URI_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:\S+$')

Validator = Callable[[SchemaDescriptor, Optional[str]], List[ValidationErrorEntry]]


def check_date_time(value: str) -> None:
    try:
        parse_date_string(value)
    except MalformedDateError as e:
        raise FormatValidationError(f'does not conform to the "{FORMAT_DATE_TIME}" format') from e


def check_email(value: str) -> None:
    if not EMAIL_PATTERN.match(value):
        raise FormatValidationError(f'does not conform to the "{FORMAT_EMAIL}" format')


def check_uri(value: str) -> None:
    if not URI_PATTERN.match(value):
        raise FormatValidationError(f'does not conform to the "{FORMAT_URI}" format')


FORMAT_CHECKS: Dict[str, Callable[[str], None]] = {
    FORMAT_DATE_TIME: check_date_time,
    FORMAT_EMAIL: check_email,
    FORMAT_URI: check_uri,
}


def _constraint_checks(descriptor: SchemaDescriptor) -> List[Callable[[str], None]]:
    """Build the checks that apply to a schema, in reporting order."""
    checks = []

    format_check = FORMAT_CHECKS.get(descriptor.format) if descriptor.format else None
    if format_check is not None:
        checks.append(format_check)

    if descriptor.enum is not None:
        choices = descriptor.enum

        def check_enum(value: str) -> None:
            if value not in choices:
                raise FormatValidationError(f"should be equal to one of the allowed values: {choices}")
        checks.append(check_enum)

    if descriptor.min_length is not None:
        min_length = descriptor.min_length

        def check_min_length(value: str) -> None:
            if len(value) < min_length:
                raise FormatValidationError(f"should NOT be shorter than {min_length} characters")
        checks.append(check_min_length)

    if descriptor.max_length is not None:
        max_length = descriptor.max_length

        def check_max_length(value: str) -> None:
            if len(value) > max_length:
                raise FormatValidationError(f"should NOT be longer than {max_length} characters")
        checks.append(check_max_length)

    if descriptor.pattern:
        pattern = descriptor.pattern

        def check_pattern(value: str) -> None:
            if not re.search(pattern, value):
                raise FormatValidationError(f'should match pattern "{pattern}"')
        checks.append(check_pattern)

    return checks


def validate(
    schema: Union[SchemaDescriptor, Dict[str, Any]],
    value: Optional[str]
) -> List[ValidationErrorEntry]:
    """
    Validate a string field value against its schema.

    Args:
        schema: Schema fragment or descriptor
        value: Canonical value (None when absent)

    Returns:
        List of ValidationErrorEntry, empty when the value is valid
    """
    if value is None or value == "":
        return []

    descriptor = describe_schema(schema)

    if not isinstance(value, str):
        return [ValidationErrorEntry(message="should be string")]

    errors = []
    for check in _constraint_checks(descriptor):
        try:
            check(value)
        except FormatValidationError as e:
            errors.append(ValidationErrorEntry(message=e.message, path=e.path))
        except re.error as e:
            logger.error(f"Invalid pattern in schema: {e}")
            errors.append(ValidationErrorEntry(message=f"invalid pattern in schema: {e}"))

    if errors:
        logger.debug(f"Value {value!r} failed {len(errors)} constraint(s)")
    return errors
