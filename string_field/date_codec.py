"""
Date codec for composite date widgets.

Converts between canonical ISO-8601 strings (``YYYY-MM-DDTHH:MM:SS.000Z``)
and a record of independently editable date parts, and builds the option
lists shown by the part controls. Everything here is pure: nothing touches
field state.
"""

from dataclasses import dataclass, fields as dataclass_fields
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Tuple
import logging

from dateutil.parser import isoparse

from .exceptions import IncompleteCompositeError, MalformedDateError

logger = logging.getLogger(__name__)

# Option value of the placeholder entry in every part control
UNSET_OPTION_VALUE = -1

DATE_PARTS: Tuple[str, ...] = ('year', 'month', 'day')
TIME_PARTS: Tuple[str, ...] = ('hour', 'minute', 'second')

DEFAULT_YEAR_RANGE: Tuple[int, int] = (1900, 2020)

# Natural range of each non-year part, inclusive
PART_RANGES = {
    'month': (1, 12),
    'day': (1, 31),
    'hour': (0, 23),
    'minute': (0, 59),
    'second': (0, 59),
}

# Canonical strings carry seconds precision only
DISPLAY_DATETIME_LENGTH = 19
DISPLAY_DATE_LENGTH = 10

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DateParts:
    """
    Date parts being composed by a composite widget.

    ``None`` marks a part the user has not chosen yet. When ``include_time``
    is false the time parts are not editable and encode as midnight.
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    include_time: bool = True

    @classmethod
    def unset(cls, include_time: bool = True) -> "DateParts":
        return cls(include_time=include_time)

    @property
    def editable_parts(self) -> Tuple[str, ...]:
        return DATE_PARTS + TIME_PARTS if self.include_time else DATE_PARTS

    def missing_parts(self) -> List[str]:
        return [name for name in self.editable_parts if getattr(self, name) is None]

    def is_complete(self) -> bool:
        return not self.missing_parts()

    def set_part(self, part: str, value: Optional[int]) -> None:
        if part not in DATE_PARTS + TIME_PARTS:
            raise KeyError(f"Unknown date part '{part}'")
        setattr(self, part, value)

    def clear(self) -> None:
        for name in DATE_PARTS + TIME_PARTS:
            setattr(self, name, None)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in dataclass_fields(self)}


@dataclass(frozen=True)
class SelectOption:
    """A single ``<option>`` of a select control."""

    value: str
    label: str


def pad(value: int, width: int = 2) -> str:
    """Zero-pad a number to at least ``width`` digits."""
    return f"{value:0{width}d}"


def parse_date_string(value: str) -> datetime:
    """
    Parse an ISO-8601 string into an aware UTC datetime.

    Strings without an offset are read as UTC.

    Raises:
        MalformedDateError: If the string is not ISO-8601
    """
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError, TypeError) as e:
        raise MalformedDateError(value, e) from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parts_from_datetime(moment: datetime, include_time: bool = True) -> DateParts:
    moment = moment.astimezone(timezone.utc) if moment.tzinfo else moment
    if include_time:
        return DateParts(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            include_time=True
        )
    return DateParts(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=0,
        minute=0,
        second=0,
        include_time=False
    )


def decode(value: Optional[str], include_time: bool = True) -> DateParts:
    """
    Decode a canonical value into date parts.

    An absent or empty value gives a fully unset record. A malformed value
    is logged and also gives a fully unset record.

    Args:
        value: Canonical ISO-8601 string or None
        include_time: Whether hour/minute/second are editable

    Returns:
        DateParts
    """
    if not value:
        return DateParts.unset(include_time)

    try:
        moment = parse_date_string(value)
    except MalformedDateError as e:
        logger.warning(f"Treating malformed date as unset: {e}")
        return DateParts.unset(include_time)

    return parts_from_datetime(moment, include_time)


def format_timestamp(moment: datetime) -> str:
    """Format a UTC datetime as ``YYYY-MM-DDTHH:MM:SS.000Z``."""
    return (
        f"{pad(moment.year, 4)}-{pad(moment.month)}-{pad(moment.day)}"
        f"T{pad(moment.hour)}:{pad(moment.minute)}:{pad(moment.second)}.000Z"
    )


def encode_strict(parts: DateParts) -> str:
    """
    Encode complete date parts into a canonical value.

    Days, hours, minutes and seconds beyond their natural range roll over
    the same way UTC calendar arithmetic does (day 31 of April is May 1st).

    Raises:
        IncompleteCompositeError: If a required part is unset
        ValueError: If the year falls outside what datetime can represent
    """
    missing = parts.missing_parts()
    if missing:
        raise IncompleteCompositeError(missing)

    if parts.include_time:
        hour, minute, second = parts.hour, parts.minute, parts.second
    else:
        hour = minute = second = 0

    year = parts.year + (parts.month - 1) // 12
    month = (parts.month - 1) % 12 + 1

    moment = datetime(year, month, 1, tzinfo=timezone.utc) + timedelta(
        days=parts.day - 1,
        hours=hour,
        minutes=minute,
        seconds=second
    )
    return format_timestamp(moment)


def encode(parts: DateParts) -> Optional[str]:
    """
    Encode date parts into a canonical value, or None if they are incomplete.

    Args:
        parts: Date parts record

    Returns:
        Canonical ISO-8601 string, or None
    """
    try:
        return encode_strict(parts)
    except IncompleteCompositeError as e:
        logger.debug(f"Composite value not ready: {e}")
        return None
    except (ValueError, OverflowError) as e:
        logger.warning(f"Date parts {parts.as_dict()} cannot be encoded: {e}")
        return None


def now_parts(include_time: bool = True, clock: Optional[Clock] = None) -> DateParts:
    """
    Date parts for the current instant.

    Sub-second precision is dropped; date-only records are at midnight.
    """
    moment = (clock or utc_now)()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return parts_from_datetime(moment, include_time)


def parse_part_value(raw) -> Optional[int]:
    """
    Convert a part control's raw value to a part value.

    The placeholder option value (-1), empty values and None all mean
    "unset".
    """
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric date part value {raw!r}")
        return None
    if value == UNSET_OPTION_VALUE:
        return None
    return value


def range_options(unit: str, start: int, stop: int) -> List[SelectOption]:
    """
    Options for a part control: the placeholder, then start..stop inclusive.

    Args:
        unit: Part name, used as the placeholder label
        start: First value
        stop: Last value

    Returns:
        List of SelectOption
    """
    options = [SelectOption(value=str(UNSET_OPTION_VALUE), label=unit)]
    for value in range(start, stop + 1):
        options.append(SelectOption(value=str(value), label=pad(value)))
    return options


def part_options(part: str, year_range: Tuple[int, int] = DEFAULT_YEAR_RANGE) -> List[SelectOption]:
    if part == 'year':
        start, stop = year_range
    else:
        start, stop = PART_RANGES[part]
    return range_options(part, start, stop)


def truncate_for_display(value: Optional[str], include_time: bool = True) -> str:
    """
    Truncate a canonical value for a native date or date-time control.

    The value is assumed to be UTC already; no offset is applied.
    """
    if not value:
        return ""
    if include_time:
        return value[:DISPLAY_DATETIME_LENGTH]
    return value[:DISPLAY_DATE_LENGTH]
