"""
Unit tests for the default string validator.
"""

import pytest

from string_field.format_validator import validate
from string_field.schema import ValidationErrorEntry, describe_schema


class TestFormatValidation:
    """Test format-specific checks."""

    @pytest.mark.parametrize("value", [
        "2012-10-02T01:02:03.000Z",
        "2023-05-01T10:15:30",
        "2023-05-01",
        "2023-05-01T10:15:30+02:00",
    ])
    def test_valid_date_time(self, value):
        assert validate({"type": "string", "format": "date-time"}, value) == []

    def test_invalid_date_time(self):
        errors = validate({"type": "string", "format": "date-time"}, "invalid")

        assert len(errors) == 1
        assert errors[0].message == 'does not conform to the "date-time" format'
        assert errors[0].path == "."

    @pytest.mark.parametrize("value", ["foo@bar.baz", "a@b"])
    def test_valid_email(self, value):
        assert validate({"type": "string", "format": "email"}, value) == []

    @pytest.mark.parametrize("value", ["invalid", "@bar.baz", "foo@", "foo@bar@baz"])
    def test_invalid_email(self, value):
        errors = validate({"type": "string", "format": "email"}, value)

        assert len(errors) == 1
        assert "email" in errors[0].message

    @pytest.mark.parametrize("value", [
        "http://foo.bar/baz",
        "https://example.com",
        "mailto:someone@example.com",
        "urn:isbn:0451450523",
    ])
    def test_valid_uri(self, value):
        assert validate({"type": "string", "format": "uri"}, value) == []

    @pytest.mark.parametrize("value", ["invalid", "/relative/path", "http:", "2023-05-01T10:15:30.000Z"])
    def test_invalid_uri(self, value):
        errors = validate({"type": "string", "format": "uri"}, value)

        assert len(errors) == 1
        assert "uri" in errors[0].message

    def test_unknown_format_is_not_checked(self):
        assert validate({"type": "string", "format": "hostname"}, "anything at all") == []

    @pytest.mark.parametrize("fmt", ["date-time", "email", "uri"])
    def test_empty_value_bypasses_format(self, fmt):
        """Test that absence is never a format error."""
        schema = {"type": "string", "format": fmt}

        assert validate(schema, "") == []
        assert validate(schema, None) == []


class TestConstraintValidation:
    """Test the remaining string constraints."""

    def test_enum_membership(self):
        schema = {"type": "string", "enum": ["foo", "bar"]}

        assert validate(schema, "foo") == []
        errors = validate(schema, "baz")
        assert len(errors) == 1
        assert "allowed values" in errors[0].message

    def test_length_constraints(self):
        schema = {"type": "string", "minLength": 3, "maxLength": 5}

        assert validate(schema, "abcd") == []
        assert len(validate(schema, "ab")) == 1
        assert len(validate(schema, "abcdef")) == 1

    def test_pattern(self):
        schema = {"type": "string", "pattern": "^[a-z]+$"}

        assert validate(schema, "abc") == []
        assert validate(schema, "ABC")[0].message == 'should match pattern "^[a-z]+$"'

    def test_one_entry_per_violated_constraint(self):
        """Test that every failing constraint is reported separately."""
        schema = {"type": "string", "format": "email", "minLength": 20, "pattern": "^x"}

        errors = validate(schema, "invalid")

        assert len(errors) == 3
        assert all(isinstance(error, ValidationErrorEntry) for error in errors)

    def test_invalid_pattern_is_reported(self):
        errors = validate({"type": "string", "pattern": "("}, "abc")

        assert len(errors) == 1
        assert "invalid pattern" in errors[0].message

    def test_accepts_descriptor(self):
        descriptor = describe_schema({"type": "string", "format": "email"})

        assert len(validate(descriptor, "invalid")) == 1

    def test_non_string_value(self):
        errors = validate({"type": "string"}, 42)

        assert errors == [ValidationErrorEntry(message="should be string")]
