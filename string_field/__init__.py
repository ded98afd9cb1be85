"""
Schema-driven string field widgets with composite date assembly.
"""

from .date_codec import DateParts, decode, encode
from .field import StringField
from .format_validator import validate
from .schema import SchemaDescriptor, UiOverride, ValidationErrorEntry
from .widget_resolver import WidgetVariant, resolve_widget

__all__ = [
    'DateParts',
    'SchemaDescriptor',
    'StringField',
    'UiOverride',
    'ValidationErrorEntry',
    'WidgetVariant',
    'decode',
    'encode',
    'resolve_widget',
    'validate',
]
