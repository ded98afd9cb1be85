"""
Tests for the configuration-based logging setup of the demo app.
"""

import logging

import pytest

from streamlit_app import DEMO_FIELDS, get_logging_level
from string_field.field import StringField


@pytest.mark.parametrize("level_str", ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
def test_logging_levels(level_str):
    """Test that every configured level maps to its logging constant."""
    assert get_logging_level(level_str) == getattr(logging, level_str)
    assert get_logging_level(level_str.lower()) == getattr(logging, level_str)


def test_unknown_level_falls_back_to_info():
    assert get_logging_level('VERBOSE') == logging.INFO


def test_demo_fields_cover_every_variant():
    """Test that the demo app builds one field per widget variant."""
    variants = {StringField(schema, ui_schema).variant for _, schema, ui_schema in DEMO_FIELDS}

    assert len(variants) == 8


def test_malformed_date_is_logged(caplog):
    """Test that degrading a malformed date leaves a warning behind."""
    with caplog.at_level(logging.WARNING, logger='string_field.date_codec'):
        StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"},
                    form_data="invalid")

    assert any("malformed date" in record.getMessage() for record in caplog.records)
