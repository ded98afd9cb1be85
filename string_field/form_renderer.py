"""
Streamlit rendering for string fields.
Draws a field's widget description and feeds widget results back into the field.
"""

import streamlit as st
from datetime import date, datetime, time
from typing import Optional, Tuple
import logging

from dateutil.parser import isoparse

from .field import StringField
from .widgets import ControlDescription, ControlKind, WidgetDescription

logger = logging.getLogger(__name__)


class FormRenderer:
    """Renders string fields with Streamlit widgets."""

    @staticmethod
    def render_field(field: StringField) -> Optional[str]:
        """
        Render a field and apply whatever the user changed since the last run.

        Args:
            field: Field to render

        Returns:
            The field's canonical value after applying changes
        """
        description = field.describe()

        if field.variant.is_composite:
            FormRenderer._render_composite(field, description)
        else:
            control = description.controls[0]
            raw, changed = FormRenderer._render_control(control, description.label or field.id)
            if changed:
                field.change(control.id, raw)

        for error in field.errors:
            st.error(error.message)

        return field.value

    @staticmethod
    def _render_composite(field: StringField, description: WidgetDescription) -> None:
        if description.label:
            st.markdown(f"**{description.label}**")

        columns = st.columns(len(description.controls))
        for column, control in zip(columns, description.controls):
            with column:
                raw, changed = FormRenderer._render_control(control, control.part.capitalize())
            if changed:
                field.change(control.id, raw)

        action_columns = st.columns(len(description.actions))
        for column, action in zip(action_columns, description.actions):
            with column:
                clicked = st.button(action.label, key=action.id)
            if clicked:
                field.click(action.action)
                FormRenderer._forget_part_selections(description)
                st.rerun()

    @staticmethod
    def _forget_part_selections(description: WidgetDescription) -> None:
        """Drop the part selectbox keys so the next run shows the field's new parts."""
        for control in description.controls:
            if control.id in st.session_state:
                del st.session_state[control.id]

    @staticmethod
    def _render_control(control: ControlDescription, label: str) -> Tuple[Optional[str], bool]:
        """Render one control; return its raw value and whether it differs from the description."""
        if control.kind == ControlKind.SELECT:
            return FormRenderer._render_select(control, label)
        elif control.kind == ControlKind.DATE:
            return FormRenderer._render_date_input(control, label)
        elif control.kind == ControlKind.DATETIME_LOCAL:
            return FormRenderer._render_datetime_input(control, label)
        return FormRenderer._render_text_input(control, label)

    @staticmethod
    def _render_text_input(control: ControlDescription, label: str) -> Tuple[Optional[str], bool]:
        kwargs = {
            'label': label,
            'value': control.value,
            'key': control.id,
        }
        if control.placeholder:
            kwargs['placeholder'] = control.placeholder
        if control.kind == ControlKind.EMAIL:
            kwargs['help'] = "Email address"
        elif control.kind == ControlKind.URL:
            kwargs['help'] = "Absolute URL, e.g. https://example.com"

        result = st.text_input(**kwargs)
        return result, result != control.value

    @staticmethod
    def _render_select(control: ControlDescription, label: str) -> Tuple[Optional[str], bool]:
        values = [option.value for option in control.options]
        labels = {option.value: option.label for option in control.options}
        if control.value and control.value not in values:
            # e.g. a Now year past the configured year range
            values.append(control.value)
        index = values.index(control.value) if control.value in values else None

        kwargs = {
            'label': label,
            'options': values,
            'index': index,
            'format_func': lambda v: labels.get(v, v),
            'key': control.id,
        }
        if control.title:
            kwargs['help'] = control.title

        result = st.selectbox(**kwargs)
        if result is None:
            return None, control.value != ""
        return result, result != control.value

    @staticmethod
    def _render_date_input(control: ControlDescription, label: str) -> Tuple[Optional[str], bool]:
        current = FormRenderer._parse_display_value(control.value)
        result = st.date_input(
            label=label,
            value=current.date() if current else None,
            key=control.id
        )
        if result is None:
            return None, control.value != ""
        if isinstance(result, datetime):
            result = result.date()
        if not isinstance(result, date):
            logger.warning(f"Unexpected date value type: {type(result)}")
            return None, False
        raw = result.isoformat()
        return raw, raw != control.value

    @staticmethod
    def _render_datetime_input(control: ControlDescription, label: str) -> Tuple[Optional[str], bool]:
        # Streamlit has no datetime input; combine date and time inputs.
        # time_input works in whole minutes, so seconds are carried over from the current value.
        current = FormRenderer._parse_display_value(control.value)
        current_minute = current.time().replace(second=0, microsecond=0) if current else None
        col_date, col_time = st.columns(2)
        with col_date:
            date_part = st.date_input(
                label=label,
                value=current.date() if current else None,
                key=f"{control.id}_date"
            )
        with col_time:
            time_part = st.time_input(
                label="Time",
                value=current_minute,
                key=f"{control.id}_time",
                step=60
            )

        if date_part is None:
            return None, control.value != ""
        if isinstance(date_part, datetime):
            date_part = date_part.date()
        if time_part is None:
            time_part = time(0, 0)
        elif current is not None and time_part.replace(second=0, microsecond=0) == current_minute:
            time_part = current.time()

        combined = datetime.combine(date_part, time_part)
        if current is not None and combined == current.replace(tzinfo=None):
            return control.value, False
        raw = combined.strftime("%Y-%m-%dT%H:%M:%S")
        return raw, raw != control.value

    @staticmethod
    def _parse_display_value(value: str) -> Optional[datetime]:
        if not value:
            return None
        try:
            return isoparse(value)
        except (ValueError, OverflowError) as e:
            logger.warning(f"Failed to parse date string '{value}': {e}")
            return None
