"""
Declarative widget descriptions.

A description tells a rendering surface which controls to draw for a
string field, with their ids, display values and options. Building one
never changes field state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging

from .date_codec import (
    DateParts,
    SelectOption,
    DEFAULT_YEAR_RANGE,
    UNSET_OPTION_VALUE,
    part_options,
    truncate_for_display,
)
from .schema import SchemaDescriptor
from .widget_resolver import WidgetVariant

logger = logging.getLogger(__name__)

ACTION_NOW = "now"
ACTION_CLEAR = "clear"
ACTION_LABELS = {
    ACTION_NOW: "Now",
    ACTION_CLEAR: "Clear",
}


class ControlKind(str, Enum):
    TEXT = "text"
    SELECT = "select"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"


# Input kind of each single-control variant
SINGLE_CONTROL_KINDS = {
    WidgetVariant.TEXT: ControlKind.TEXT,
    WidgetVariant.SELECT: ControlKind.SELECT,
    WidgetVariant.EMAIL: ControlKind.EMAIL,
    WidgetVariant.URL: ControlKind.URL,
    WidgetVariant.NATIVE_DATE: ControlKind.DATE,
    WidgetVariant.NATIVE_DATETIME: ControlKind.DATETIME_LOCAL,
}


@dataclass(frozen=True)
class ControlDescription:
    kind: ControlKind
    id: str
    value: str = ""
    options: Tuple[SelectOption, ...] = ()
    placeholder: Optional[str] = None
    title: Optional[str] = None
    part: Optional[str] = None


@dataclass(frozen=True)
class ActionDescription:
    id: str
    label: str
    action: str


@dataclass(frozen=True)
class WidgetDescription:
    variant: WidgetVariant
    id: str
    label: str
    controls: Tuple[ControlDescription, ...]
    actions: Tuple[ActionDescription, ...] = ()

    @property
    def control_ids(self) -> Tuple[str, ...]:
        return tuple(control.id for control in self.controls)

    def control(self, control_id: str) -> Optional[ControlDescription]:
        for control in self.controls:
            if control.id == control_id:
                return control
        return None


def part_control_id(id_prefix: str, part: str) -> str:
    return f"{id_prefix}_{part}"


def action_id(id_prefix: str, action: str) -> str:
    return f"{id_prefix}_{action}"


def _part_option_value(value: Optional[int]) -> str:
    return str(UNSET_OPTION_VALUE if value is None else value)


def describe_widget(
    variant: WidgetVariant,
    schema: SchemaDescriptor,
    value: Optional[str],
    id_prefix: str = "root",
    parts: Optional[DateParts] = None,
    year_range: Tuple[int, int] = DEFAULT_YEAR_RANGE
) -> WidgetDescription:
    """
    Describe the controls a widget variant renders for the current value.

    Args:
        variant: Resolved widget variant
        schema: Field schema
        value: Canonical value
        id_prefix: Field id, e.g. ``root``
        parts: Current date parts (composite variants only)
        year_range: Inclusive range of the year control

    Returns:
        WidgetDescription
    """
    label = schema.title or ""

    if variant.is_composite:
        if parts is None:
            raise ValueError(f"{variant.value} widget needs its date parts to be described")
        controls = tuple(
            ControlDescription(
                kind=ControlKind.SELECT,
                id=part_control_id(id_prefix, part),
                value=_part_option_value(getattr(parts, part)),
                options=tuple(part_options(part, year_range)),
                part=part
            )
            for part in parts.editable_parts
        )
        actions = tuple(
            ActionDescription(id=action_id(id_prefix, action), label=ACTION_LABELS[action], action=action)
            for action in (ACTION_NOW, ACTION_CLEAR)
        )
        return WidgetDescription(variant=variant, id=id_prefix, label=label,
                                 controls=controls, actions=actions)

    kind = SINGLE_CONTROL_KINDS[variant]

    if variant is WidgetVariant.SELECT:
        control = ControlDescription(
            kind=kind,
            id=id_prefix,
            value=value or "",
            options=tuple(SelectOption(value=choice, label=choice) for choice in schema.enum or []),
            title=schema.description
        )
    elif variant.is_native_date:
        control = ControlDescription(
            kind=kind,
            id=id_prefix,
            value=truncate_for_display(value, include_time=variant is WidgetVariant.NATIVE_DATETIME)
        )
    else:
        control = ControlDescription(
            kind=kind,
            id=id_prefix,
            value=value or "",
            placeholder=schema.description
        )

    return WidgetDescription(variant=variant, id=id_prefix, label=label, controls=(control,))
