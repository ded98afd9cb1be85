"""
Widget resolution for string fields.
Maps a schema fragment plus UI hints to one of a closed set of widget variants.
"""

from enum import Enum
from typing import Dict, Any, Union, Optional
import logging

from .schema import (
    SchemaDescriptor,
    UiOverride,
    describe_schema,
    describe_ui,
    FORMAT_DATE_TIME,
    FORMAT_EMAIL,
    FORMAT_URI,
    UI_WIDGET_ALT_DATE,
    UI_WIDGET_ALT_DATETIME,
    UI_WIDGET_DATE,
)

logger = logging.getLogger(__name__)


class WidgetVariant(str, Enum):
    """Every widget a string field can render as."""

    TEXT = "text"
    SELECT = "select"
    NATIVE_DATETIME = "native-datetime"
    NATIVE_DATE = "native-date"
    COMPOSITE_DATETIME = "composite-datetime"
    COMPOSITE_DATE = "composite-date"
    EMAIL = "email"
    URL = "url"

    @property
    def is_composite(self) -> bool:
        return self in (WidgetVariant.COMPOSITE_DATETIME, WidgetVariant.COMPOSITE_DATE)

    @property
    def is_native_date(self) -> bool:
        return self in (WidgetVariant.NATIVE_DATETIME, WidgetVariant.NATIVE_DATE)

    @property
    def includes_time(self) -> bool:
        """Whether the composite variant edits hour/minute/second too."""
        return self is WidgetVariant.COMPOSITE_DATETIME


def resolve_widget(
    schema: Union[SchemaDescriptor, Dict[str, Any]],
    ui_schema: Union[UiOverride, Dict[str, Any], None] = None
) -> WidgetVariant:
    """
    Determine the widget variant for a string field.

    The first matching rule wins: enum, email, uri, then the date-time
    family (composite date, composite date-time, native date, native
    date-time), and plain text for everything else, including formats
    that have no dedicated widget.

    Args:
        schema: Schema fragment or descriptor
        ui_schema: UI schema hints or override

    Returns:
        WidgetVariant
    """
    descriptor = describe_schema(schema)
    override: Optional[str] = describe_ui(ui_schema).widget
    fmt = descriptor.format

    if descriptor.enum is not None:
        return WidgetVariant.SELECT

    if fmt == FORMAT_EMAIL:
        return WidgetVariant.EMAIL

    if fmt == FORMAT_URI:
        return WidgetVariant.URL

    if fmt == FORMAT_DATE_TIME:
        if override == UI_WIDGET_ALT_DATE:
            return WidgetVariant.COMPOSITE_DATE
        elif override == UI_WIDGET_ALT_DATETIME:
            return WidgetVariant.COMPOSITE_DATETIME
        elif override == UI_WIDGET_DATE:
            return WidgetVariant.NATIVE_DATE
        if override is not None:
            logger.debug(f"Unrecognized ui:widget '{override}' for date-time field, using native control")
        return WidgetVariant.NATIVE_DATETIME

    if fmt is not None:
        logger.debug(f"No dedicated widget for format '{fmt}', using text input")

    return WidgetVariant.TEXT
