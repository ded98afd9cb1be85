"""
Tests for declarative widget descriptions.
"""

import pytest

from string_field.date_codec import DateParts
from string_field.field import StringField
from string_field.schema import describe_schema
from string_field.widget_resolver import WidgetVariant
from string_field.widgets import ControlKind, describe_widget


class TestSingleControlDescriptions:
    """Test descriptions of one-control widgets."""

    @pytest.mark.parametrize("schema,kind", [
        ({"type": "string"}, ControlKind.TEXT),
        ({"type": "string", "enum": ["a", "b"]}, ControlKind.SELECT),
        ({"type": "string", "format": "email"}, ControlKind.EMAIL),
        ({"type": "string", "format": "uri"}, ControlKind.URL),
        ({"type": "string", "format": "date-time"}, ControlKind.DATETIME_LOCAL),
    ])
    def test_control_kind_and_id(self, schema, kind):
        description = StringField(schema).describe()

        assert len(description.controls) == 1
        assert description.controls[0].kind is kind
        assert description.control_ids == ("root",)
        assert description.actions == ()

    def test_native_date_kind(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "date"})

        assert field.describe().controls[0].kind is ControlKind.DATE

    def test_label_from_title(self):
        description = StringField({"type": "string", "title": "foo"}).describe()

        assert description.label == "foo"

    @pytest.mark.parametrize("fmt", [None, "email", "uri"])
    def test_placeholder_from_description(self, fmt):
        schema = {"type": "string", "description": "baz"}
        if fmt:
            schema["format"] = fmt

        control = StringField(schema).describe().controls[0]

        assert control.placeholder == "baz"
        assert control.title is None

    def test_select_tooltip_and_options(self):
        schema = {"type": "string", "enum": ["foo", "bar"], "description": "baz"}

        control = StringField(schema).describe().controls[0]

        assert control.title == "baz"
        assert control.placeholder is None
        assert [(o.value, o.label) for o in control.options] == [("foo", "foo"), ("bar", "bar")]

    def test_absent_value_displays_empty(self):
        assert StringField({"type": "string"}).describe().controls[0].value == ""


class TestCompositeDescriptions:
    """Test descriptions of composite date widgets."""

    def test_datetime_controls(self):
        field = StringField({"type": "string", "format": "date-time", "title": "foo"},
                            {"ui:widget": "alt-datetime"})

        description = field.describe()

        assert description.label == "foo"
        assert description.control_ids == (
            "root_year", "root_month", "root_day", "root_hour", "root_minute", "root_second")
        assert [len(c.options) for c in description.controls] == [122, 13, 32, 25, 61, 61]
        assert all(c.kind is ControlKind.SELECT for c in description.controls)

    def test_date_controls(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"})

        description = field.describe()

        assert description.control_ids == ("root_year", "root_month", "root_day")
        assert [len(c.options) for c in description.controls] == [122, 13, 32]

    def test_month_options(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"})

        month = field.describe().control("root_month")

        assert [o.value for o in month.options] == [
            "-1", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12"]
        assert [o.label for o in month.options] == [
            "month", "01", "02", "03", "04", "05", "06", "07", "08", "09", "10", "11", "12"]

    @pytest.mark.parametrize("ui_widget", ["alt-date", "alt-datetime"])
    def test_action_buttons(self, ui_widget):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": ui_widget})

        actions = field.describe().actions

        assert [a.label for a in actions] == ["Now", "Clear"]
        assert [a.id for a in actions] == ["root_now", "root_clear"]
        assert [a.action for a in actions] == ["now", "clear"]

    def test_unset_parts_show_placeholder(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"})
        field.change("root_year", 2012)

        assert [c.value for c in field.describe().controls] == ["2012", "-1", "-1"]

    def test_year_range_override(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"},
                            year_range=(2000, 2010))

        year = field.describe().control("root_year")

        assert len(year.options) == 12
        assert year.options[-1].value == "2010"

    def test_unknown_control_lookup(self):
        field = StringField({"type": "string", "format": "date-time"}, {"ui:widget": "alt-date"})

        assert field.describe().control("root_hour") is None

    def test_composite_requires_parts(self):
        schema = describe_schema({"type": "string", "format": "date-time"})

        with pytest.raises(ValueError):
            describe_widget(WidgetVariant.COMPOSITE_DATE, schema, None)

    def test_describe_with_explicit_parts(self):
        schema = describe_schema({"type": "string", "format": "date-time"})
        parts = DateParts(year=2012, month=10, day=2, include_time=False)

        description = describe_widget(WidgetVariant.COMPOSITE_DATE, schema, None,
                                      id_prefix="root_when", parts=parts)

        assert description.control_ids == ("root_when_year", "root_when_month", "root_when_day")
        assert [c.value for c in description.controls] == ["2012", "10", "2"]
