"""
String field: owns the canonical value and error list of one ``type: string``
schema fragment, and routes control events to the right synchronizer.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union
import logging

from .config_loader import get_config_value
from .date_codec import Clock, DEFAULT_YEAR_RANGE
from .exceptions import UnknownControlError
from .format_validator import Validator
from .schema import SchemaDescriptor, UiOverride, ValidationErrorEntry, describe_schema, describe_ui
from .synchronizer import CompositeSynchronizer, SingleControlSynchronizer
from .validation import ValidationTrigger
from .widget_resolver import resolve_widget
from .widgets import ACTION_CLEAR, ACTION_NOW, WidgetDescription, describe_widget, part_control_id

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Optional[str]], None]


def _configured_year_range() -> Tuple[int, int]:
    start = get_config_value('widgets', 'year_start', DEFAULT_YEAR_RANGE[0])
    end = get_config_value('widgets', 'year_end', DEFAULT_YEAR_RANGE[1])
    return int(start), int(end)


class StringField:
    """
    A rendered string field and its value state.

    The initial value is the explicit form data if given, else the schema
    default, else absent. After that the value only changes through
    ``change()``, ``click()`` or ``set_value()``.
    """

    def __init__(
        self,
        schema: Union[SchemaDescriptor, Dict[str, Any]],
        ui_schema: Union[UiOverride, Dict[str, Any], None] = None,
        form_data: Optional[str] = None,
        live_validate: Optional[bool] = None,
        validator: Optional[Validator] = None,
        on_change: Optional[ChangeCallback] = None,
        id_prefix: str = "root",
        year_range: Optional[Tuple[int, int]] = None,
        clock: Optional[Clock] = None
    ):
        self.schema = describe_schema(schema)
        self.ui = describe_ui(ui_schema)
        self.variant = resolve_widget(self.schema, self.ui)
        self.id = id_prefix
        self.on_change = on_change
        self.year_range = year_range or _configured_year_range()

        if live_validate is None:
            live_validate = bool(get_config_value('validation', 'live_validate', False))

        self._value = form_data if form_data is not None else self.schema.default
        self.trigger = ValidationTrigger(self.schema, validator, enabled=live_validate)

        if self.variant.is_composite:
            self.synchronizer = CompositeSynchronizer(
                include_time=self.variant.includes_time,
                value=self._value,
                clock=clock
            )
        else:
            self.synchronizer = SingleControlSynchronizer()

        logger.info(f"Created {self.variant.value} field '{self.id}' with value {self._value!r}")

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def errors(self) -> List[ValidationErrorEntry]:
        return self.trigger.errors

    @property
    def live_validate(self) -> bool:
        return self.trigger.enabled

    def get_value(self) -> Optional[str]:
        return self._value

    def set_value(self, value: Optional[str]) -> None:
        """Replace the value from outside (e.g. the form container reloading data)."""
        self._value = value
        if isinstance(self.synchronizer, CompositeSynchronizer):
            self.synchronizer.sync_from_value(value)

    def validate(self) -> List[ValidationErrorEntry]:
        """Validate the current value regardless of live validation."""
        return self.trigger.run(self._value)

    def describe(self) -> WidgetDescription:
        parts = self.synchronizer.parts if isinstance(self.synchronizer, CompositeSynchronizer) else None
        return describe_widget(
            self.variant,
            self.schema,
            self._value,
            id_prefix=self.id,
            parts=parts,
            year_range=self.year_range
        )

    def change(self, control_id: str, raw: Any) -> Optional[str]:
        """
        Handle a change event from one of the field's controls.

        Args:
            control_id: Id of the control that changed (``root``, ``root_month``, ...)
            raw: Raw control value

        Returns:
            The canonical value after the change
        """
        if isinstance(self.synchronizer, CompositeSynchronizer):
            for part in self.synchronizer.part_names:
                if control_id == part_control_id(self.id, part):
                    return self._accept(self.synchronizer.change_part(part, raw))
            raise UnknownControlError(control_id, [part_control_id(self.id, p) for p in self.synchronizer.part_names])

        if control_id != self.id:
            raise UnknownControlError(control_id, [self.id])
        return self._accept(self.synchronizer.change(raw))

    def click(self, action: str) -> Optional[str]:
        """Handle the Now / Clear buttons of a composite widget."""
        if not isinstance(self.synchronizer, CompositeSynchronizer):
            raise UnknownControlError(action, [])

        if action == ACTION_NOW:
            return self._accept(self.synchronizer.now())
        elif action == ACTION_CLEAR:
            self.synchronizer.clear()
            return self._accept(None)

        raise UnknownControlError(action, [ACTION_NOW, ACTION_CLEAR])

    def _accept(self, value: Optional[str]) -> Optional[str]:
        self._value = value
        self.trigger.on_value_changed(value)
        if self.on_change is not None:
            self.on_change(value)
        return value
