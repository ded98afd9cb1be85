"""
Value synchronizers.

A synchronizer turns control-level change events into the next canonical
value for its field. Single-control widgets pass the raw string through;
composite date widgets merge part edits into an owned DateParts record and
only produce a value once every part is chosen.
"""

from typing import Optional, Tuple
import logging

from .date_codec import (
    DateParts,
    Clock,
    decode,
    encode,
    now_parts,
    parse_part_value,
)

logger = logging.getLogger(__name__)


class SingleControlSynchronizer:
    """Synchronizer for widgets that render one control holding the whole value."""

    def change(self, raw: Optional[str]) -> Optional[str]:
        return raw


class CompositeSynchronizer:
    """
    Owns the DateParts record of one composite date or date-time widget.

    Part edits are applied in the order they arrive; the value returned
    after the last edit of a batch is the only meaningful one. While any
    part is unset the returned value is None.
    """

    def __init__(self, include_time: bool = True, value: Optional[str] = None,
                 clock: Optional[Clock] = None):
        self.include_time = include_time
        self.clock = clock
        self.parts = decode(value, include_time)

    @property
    def part_names(self) -> Tuple[str, ...]:
        return self.parts.editable_parts

    def sync_from_value(self, value: Optional[str]) -> None:
        """Re-derive the record after the canonical value changed from outside."""
        self.parts = decode(value, self.include_time)

    def change_part(self, part: str, raw) -> Optional[str]:
        """
        Apply one part edit and re-encode.

        Args:
            part: Part name ('year', 'month', ...)
            raw: Raw option value; the placeholder (-1) unsets the part

        Returns:
            Canonical value, or None while the record is incomplete
        """
        if part not in self.part_names:
            raise KeyError(f"'{part}' is not editable in this widget")

        self.parts.set_part(part, parse_part_value(raw))
        value = encode(self.parts)
        logger.debug(f"Part {part}={raw!r} -> {value!r}")
        return value

    def now(self) -> Optional[str]:
        """Set every part from the current instant and return the encoded value."""
        self.parts = now_parts(self.include_time, self.clock)
        return encode(self.parts)

    def clear(self) -> None:
        """Discard the in-progress record."""
        self.parts = DateParts.unset(self.include_time)
