"""
Live validation trigger for string fields.
"""

from enum import Enum
from typing import List, Optional
import logging

from .format_validator import Validator, validate
from .schema import SchemaDescriptor, ValidationErrorEntry

logger = logging.getLogger(__name__)


class TriggerState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"


class ValidationTrigger:
    """
    Runs the validator for accepted value changes and keeps the resulting
    error list. Each run replaces the previous errors entirely.
    """

    def __init__(self, schema: SchemaDescriptor, validator: Optional[Validator] = None,
                 enabled: bool = False):
        self.schema = schema
        self.validator = validator or validate
        self.enabled = enabled
        self.state = TriggerState.IDLE
        self.errors: List[ValidationErrorEntry] = []

    def on_value_changed(self, value: Optional[str]) -> List[ValidationErrorEntry]:
        """Validate if live validation is on; return the current error list."""
        if not self.enabled:
            return self.errors
        return self.run(value)

    def run(self, value: Optional[str]) -> List[ValidationErrorEntry]:
        """Validate unconditionally and replace the error list."""
        self.state = TriggerState.VALIDATING
        try:
            self.errors = list(self.validator(self.schema, value))
        finally:
            self.state = TriggerState.IDLE

        logger.debug(f"Validated {value!r}: {len(self.errors)} error(s)")
        return self.errors

    def reset(self) -> None:
        self.errors = []
