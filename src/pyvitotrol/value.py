"""Timestamped attribute values as returned by the Vitotrol service.

The service reports every attribute as a raw string plus the time the
controller captured it.  :class:`TimestampedValue` keeps both untouched;
decoding happens through the attribute's value type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from pyvitotrol.types import DOUBLE_LITERAL, TYPE_DATE

if TYPE_CHECKING:
    from pyvitotrol.types import TypedValue, ValueType

# Decimal literals plus the nan/inf spellings the service may report.
_NUM_RE = re.compile(rf"{DOUBLE_LITERAL}|[+-]?inf(?:inity)?|nan", re.IGNORECASE)


@dataclass(frozen=True)
class TimestampedValue:
    """Raw wire value of an attribute with its capture time."""

    value: str
    time: datetime

    @classmethod
    def from_vitodata(cls, value: str, time: str | datetime) -> TimestampedValue:
        """Build from a service response.

        Args:
            value: Raw attribute value
            time: Capture time, either a datetime or a string in the
                service's date layout

        Raises:
            VitotrolParseError: If time is a string not in the date layout
        """
        if isinstance(time, str):
            time = TYPE_DATE.parse(time)
        return cls(value=value, time=time)

    def num(self) -> float:
        """Return the value as a float, or 0.0 if it is not a number.

        A non-numeric value and a literal zero are indistinguishable here;
        use parse_with(TYPE_DOUBLE) when the difference matters.  Padding,
        digit separators and non-ASCII digits count as non-numeric.
        """
        if not isinstance(self.value, str) or not _NUM_RE.fullmatch(self.value):
            return 0.0
        return float(self.value)

    def parse_with(self, value_type: ValueType) -> TypedValue:
        """Decode the raw value with value_type."""
        return value_type.parse(self.value)


__all__ = ["TimestampedValue"]
