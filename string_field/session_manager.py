"""
Session state management for string fields rendered with Streamlit.
Keeps field objects, their values and validation errors alive across reruns.
"""

import streamlit as st
from typing import Dict, Any, Callable, List, Optional
from datetime import datetime
import logging

from .field import StringField

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages Streamlit session state for string fields."""

    @staticmethod
    def initialize():
        """Initialize all session state variables with default values."""
        defaults = {
            'string_fields': {},
            'form_data': {},
            'validation_errors': {},
            'last_activity': datetime.now(),
            'session_id': None,
        }

        for key, default_value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = default_value

        if not st.session_state['session_id']:
            st.session_state['session_id'] = f"session_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        logger.info(f"Session initialized: {st.session_state['session_id']}")

    @staticmethod
    def get_field(key: str, factory: Callable[[], StringField]) -> StringField:
        """
        Get the field stored under key, creating it with factory on first use.

        The created field reports its changes back into the session form data.
        """
        fields = st.session_state.get('string_fields')
        if fields is None:
            fields = {}
            st.session_state['string_fields'] = fields

        if key not in fields:
            field = factory()
            field.on_change = SessionManager.change_handler(key)
            fields[key] = field
            SessionManager.set_field_value(key, field.value)
            logger.debug(f"Stored new field '{key}' in session")

        return fields[key]

    @staticmethod
    def change_handler(key: str) -> Callable[[Optional[str]], None]:
        """Build an on_change callback that records the field's value and errors."""
        def _on_change(value: Optional[str]) -> None:
            SessionManager.set_field_value(key, value)
            field = st.session_state.get('string_fields', {}).get(key)
            if field is not None:
                SessionManager.set_validation_errors(key, [e.message for e in field.errors])
        return _on_change

    @staticmethod
    def get_form_data() -> Dict[str, Any]:
        """Get the current form data."""
        return st.session_state.get('form_data', {})

    @staticmethod
    def set_field_value(key: str, value: Optional[str]):
        """Record a field value in the form data; absent values are dropped."""
        form_data = dict(st.session_state.get('form_data', {}))
        if value is None:
            form_data.pop(key, None)
        else:
            form_data[key] = value
        st.session_state['form_data'] = form_data
        SessionManager.update_activity()

    @staticmethod
    def get_validation_errors(key: str) -> List[str]:
        """Get current validation errors of a field."""
        return st.session_state.get('validation_errors', {}).get(key, [])

    @staticmethod
    def set_validation_errors(key: str, errors: List[str]):
        """Set validation errors of a field."""
        all_errors = dict(st.session_state.get('validation_errors', {}))
        all_errors[key] = list(errors)
        st.session_state['validation_errors'] = all_errors

    @staticmethod
    def clear_validation_errors():
        """Clear validation errors of every field."""
        st.session_state['validation_errors'] = {}

    @staticmethod
    def update_activity():
        """Update last activity timestamp."""
        st.session_state['last_activity'] = datetime.now()

    @staticmethod
    def reset_field(key: str):
        """Forget a field so the next get_field() rebuilds it."""
        st.session_state.get('string_fields', {}).pop(key, None)
        SessionManager.set_field_value(key, None)
        all_errors = dict(st.session_state.get('validation_errors', {}))
        all_errors.pop(key, None)
        st.session_state['validation_errors'] = all_errors
        logger.info(f"Reset field '{key}'")

    @staticmethod
    def get_session_info() -> Dict[str, Any]:
        """Get session information for debugging."""
        return {
            'session_id': st.session_state.get('session_id', 'unknown'),
            'fields': list(st.session_state.get('string_fields', {}).keys()),
            'form_data': dict(SessionManager.get_form_data()),
            'validation_errors_count': sum(
                len(errors) for errors in st.session_state.get('validation_errors', {}).values()
            ),
        }
