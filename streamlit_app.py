"""
Streamlit demo for string field widgets.
Renders one field per widget variant and shows the canonical values they hold.
"""

import streamlit as st
import json
import logging

from string_field.config_loader import get_config_value
from string_field.exceptions import StringFieldError
from string_field.form_renderer import FormRenderer
from string_field.field import StringField
from string_field.session_manager import SessionManager


def get_logging_level(level_str):
    """Map string logging level to logging constant."""
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.INFO)


# Configure logging dynamically from config
try:
    log_level_str = get_config_value('logging', 'level', 'INFO')
    log_format = get_config_value('logging', 'format', logging.BASIC_FORMAT)
    logging.basicConfig(level=get_logging_level(log_level_str), format=log_format)
    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured to level: {log_level_str}")
except Exception as e:
    # Fallback to INFO if config reading fails
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)
    logger.error(f"Failed to configure logging from config: {e}, using INFO level")


# One demo field per widget variant: (key, schema, ui schema)
DEMO_FIELDS = [
    ("text", {"type": "string", "title": "Text", "description": "Anything goes", "default": "plop"}, None),
    ("select", {"type": "string", "title": "Select", "enum": ["foo", "bar"], "description": "Pick one"}, None),
    ("email", {"type": "string", "title": "Email", "format": "email", "description": "foo@bar.baz"}, None),
    ("url", {"type": "string", "title": "URL", "format": "uri", "description": "http://foo.bar/baz"}, None),
    ("native_datetime", {"type": "string", "title": "Native date-time", "format": "date-time"}, None),
    ("native_date", {"type": "string", "title": "Native date", "format": "date-time"}, {"ui:widget": "date"}),
    ("alt_datetime", {"type": "string", "title": "Composite date-time", "format": "date-time"},
     {"ui:widget": "alt-datetime"}),
    ("alt_date", {"type": "string", "title": "Composite date", "format": "date-time"}, {"ui:widget": "alt-date"}),
]


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=get_config_value('app', 'name', 'String Field Widgets'),
        layout="wide"
    )
    SessionManager.initialize()

    st.title(get_config_value('app', 'name', 'String Field Widgets'))
    live_validate = st.sidebar.checkbox(
        "Live validation",
        value=bool(get_config_value('validation', 'live_validate', False))
    )

    validate_all = st.sidebar.button("Validate all")
    if validate_all:
        SessionManager.clear_validation_errors()

    for key, schema, ui_schema in DEMO_FIELDS:
        try:
            field = SessionManager.get_field(
                key,
                lambda schema=schema, ui_schema=ui_schema, key=key: StringField(
                    schema, ui_schema, live_validate=live_validate, id_prefix=key
                )
            )
            field.trigger.enabled = live_validate
            if validate_all:
                errors = field.validate()
                SessionManager.set_validation_errors(key, [e.message for e in errors])
            FormRenderer.render_field(field)
        except StringFieldError as e:
            logger.error(f"Cannot render field '{key}': {e}", exc_info=True)
            st.error(f"Cannot render field '{key}': {e.message}")

    st.subheader("Form data")
    st.code(json.dumps(SessionManager.get_form_data(), indent=2), language="json")
    st.sidebar.json(SessionManager.get_session_info())


if __name__ == "__main__":
    main()
