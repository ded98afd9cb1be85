"""
Schema descriptors for string fields.
Parses JSON-Schema fragments and UI schema hints into read-only Pydantic models.
"""

from typing import Dict, Any, List, Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError
import logging

from .exceptions import SchemaError

logger = logging.getLogger(__name__)

# Recognized ``ui:widget`` overrides
UI_WIDGET_ALT_DATETIME = "alt-datetime"
UI_WIDGET_ALT_DATE = "alt-date"
UI_WIDGET_DATE = "date"

# Formats with a dedicated widget
FORMAT_DATE_TIME = "date-time"
FORMAT_EMAIL = "email"
FORMAT_URI = "uri"


class SchemaDescriptor(BaseModel):
    """Read-only view of a ``type: string`` schema fragment."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    type: Literal['string']
    format: Optional[str] = None
    enum: Optional[List[str]] = None
    default: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    min_length: Optional[int] = Field(default=None, alias='minLength', ge=0)
    max_length: Optional[int] = Field(default=None, alias='maxLength', ge=0)
    pattern: Optional[str] = None


class UiOverride(BaseModel):
    """UI schema hints for a single field; only ``ui:widget`` is read."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True, frozen=True)

    widget: Optional[str] = Field(default=None, alias='ui:widget')


class ValidationErrorEntry(BaseModel):
    """One entry of a field's error list."""

    model_config = ConfigDict(frozen=True)

    message: str
    path: str = "."


def describe_schema(schema: Union[SchemaDescriptor, Dict[str, Any]]) -> SchemaDescriptor:
    """
    Build a SchemaDescriptor from a raw schema dictionary.

    Args:
        schema: Raw JSON-Schema fragment or an existing descriptor

    Returns:
        SchemaDescriptor

    Raises:
        SchemaError: If the fragment is not a usable string schema
    """
    if isinstance(schema, SchemaDescriptor):
        return schema

    if not isinstance(schema, dict):
        raise SchemaError(schema, f"expected a mapping, got {type(schema).__name__}")

    try:
        return SchemaDescriptor.model_validate(schema)
    except ValidationError as e:
        reasons = []
        for error in e.errors():
            field_path = ' -> '.join(str(loc) for loc in error.get('loc', []))
            reasons.append(f"{field_path}: {error.get('msg')}")
        logger.error(f"Rejected string field schema {schema!r}: {reasons}")
        raise SchemaError(schema, '; '.join(reasons)) from e


def describe_ui(ui_schema: Union[UiOverride, Dict[str, Any], None]) -> UiOverride:
    """Build a UiOverride from a raw UI schema dictionary (or None)."""
    if isinstance(ui_schema, UiOverride):
        return ui_schema
    if not ui_schema:
        return UiOverride()
    if not isinstance(ui_schema, dict):
        raise SchemaError(ui_schema, f"expected a UI schema mapping, got {type(ui_schema).__name__}")
    widget = ui_schema.get('ui:widget')
    if widget is not None and not isinstance(widget, str):
        logger.warning(f"Ignoring non-string ui:widget override: {widget!r}")
        return UiOverride()
    return UiOverride.model_validate(ui_schema)
