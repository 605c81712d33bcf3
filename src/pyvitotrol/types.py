"""Value types for Vitotrol attribute values.

The Vitotrol service exchanges every attribute value as a plain string.
A :class:`ValueType` knows how to turn that wire string into a Python value
(``parse``) and back (``format``).  There are exactly four kinds:

- ``double``: decimal floating-point numbers (temperatures, counters)
- ``string``: free text, passed through unchanged
- ``date``: timestamps in the service's ``YYYY-MM-DD HH:MM:SS`` layout
- ``enum``: integer codes indexing an ordered list of labels

Enum types carry their labels as data, so an on/off pump state and a
five-way operating mode are both plain ``ValueType`` instances:

    mode = enum_type(["Abschalt", "Nur WW", "Heizen + WW"])
    mode.parse("2")          # "Heizen + WW"
    mode.parse_code("2")     # 2
    mode.format("Nur WW")    # "1"
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pyvitotrol.exceptions import VitotrolParseError, VitotrolRangeError

# Wire layout of date attributes and of value timestamps.
VITODATA_TIME_LAYOUT = "%Y-%m-%d %H:%M:%S"

# Base-10 ASCII float literal, no whitespace or digit separators.
DOUBLE_LITERAL = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"

# strptime accepts single-digit fields; the service never sends them.
# float(), int() and strptime also accept non-ASCII digits, so the
# patterns spell out [0-9].
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")
_DOUBLE_RE = re.compile(DOUBLE_LITERAL)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

TypedValue = float | str | datetime


class TypeKind(StrEnum):
    """Underlying representation of a value type."""

    DOUBLE = "double"
    STRING = "string"
    DATE = "date"
    ENUM = "enum"


def format_double(value: float) -> str:
    """Render a number as its canonical decimal string.

    Uses the shortest digits that round-trip, positional notation and no
    trailing ``.0``: ``20.0 -> "20"``, ``1e-07 -> "0.0000001"``.

    Raises:
        VitotrolParseError: If value is NaN, infinite or too large for a float
    """
    try:
        number = float(value)
    except OverflowError:
        raise VitotrolParseError(
            f"<{int(value).bit_length()}-bit int>", TypeKind.DOUBLE, "out of float range"
        ) from None
    if not math.isfinite(number):
        raise VitotrolParseError(repr(value), TypeKind.DOUBLE, "not a finite number")
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


@dataclass(frozen=True)
class ValueType:
    """Parsing and formatting contract for one category of wire value.

    Attributes:
        kind: Which of the four representations this type uses.
        labels: Enum labels indexed by code.  Non-empty exactly when
            kind is ENUM.
    """

    kind: TypeKind
    labels: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Normalise labels to a tuple and check they match the kind."""
        object.__setattr__(self, "kind", TypeKind(self.kind))
        object.__setattr__(self, "labels", tuple(self.labels))
        if self.kind is TypeKind.ENUM and not self.labels:
            raise ValueError("enum value type requires at least one label")
        if self.kind is not TypeKind.ENUM and self.labels:
            raise ValueError(f"{self.kind} value type does not take labels")

    @classmethod
    def from_name(cls, kind: str, labels: Iterable[str] = ()) -> ValueType:
        """Create a value type from its kind name ("double", "enum", ...).

        The shared instances are returned for the label-less kinds.
        """
        type_kind = TypeKind(kind)
        if type_kind is TypeKind.ENUM:
            return cls(type_kind, tuple(labels))
        return _SIMPLE_TYPES[type_kind]

    def type_name(self) -> str:
        """Return the human label of the representation."""
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is TypeKind.ENUM:
            return f"enum({', '.join(repr(label) for label in self.labels)})"
        return self.kind.value

    # ------------------------------------------------------------------
    # Wire -> Python
    # ------------------------------------------------------------------

    def parse(self, raw: str) -> TypedValue:
        """Convert a wire string into a typed value.

        Returns a float for double, the string itself for string, a naive
        datetime for date and the label for enum.

        Raises:
            VitotrolParseError: If raw does not have the expected form
            VitotrolRangeError: If an enum code is outside the label range
        """
        if self.kind is TypeKind.DOUBLE:
            return self._parse_double(raw)
        if self.kind is TypeKind.STRING:
            return raw
        if self.kind is TypeKind.DATE:
            return self._parse_date(raw)
        return self.labels[self.parse_code(raw)]

    def parse_code(self, raw: str) -> int:
        """Convert a wire string into an enum code, checking its range.

        Raises:
            TypeError: If this is not an enum type
            VitotrolParseError: If raw is not an integer
            VitotrolRangeError: If the code is outside [0, len(labels))
        """
        self._require_enum()
        if not isinstance(raw, str) or not _INTEGER_RE.fullmatch(raw):
            raise VitotrolParseError(raw, self.kind, "not an integer code")
        return self._check_code(int(raw))

    def label_for(self, code: int) -> str:
        """Return the label of an enum code.

        Raises:
            VitotrolRangeError: If the code is outside [0, len(labels))
        """
        self._require_enum()
        return self.labels[self._check_code(code)]

    def code_for(self, label: str) -> int:
        """Return the code of an enum label.

        Raises:
            VitotrolRangeError: If the label is not one of the enum labels
        """
        self._require_enum()
        try:
            return self.labels.index(label)
        except ValueError:
            raise VitotrolRangeError(label, self.labels) from None

    # ------------------------------------------------------------------
    # Python -> wire
    # ------------------------------------------------------------------

    def format(self, value: TypedValue | int) -> str:
        """Convert a typed value into its wire string.

        Double accepts numbers or decimal strings, date accepts datetimes or
        layout strings, enum accepts a label or an integer code.

        Raises:
            TypeError: If value has the wrong Python type for this kind
            VitotrolParseError: If a string value does not have the expected form
            VitotrolRangeError: If an enum label or code is not valid
        """
        if self.kind is TypeKind.DOUBLE:
            if isinstance(value, str):
                value = self._parse_double(value)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise TypeError(f"double value must be a number, got {type(value).__name__}")
            return format_double(value)

        if self.kind is TypeKind.STRING:
            if not isinstance(value, str):
                raise TypeError(f"string value must be str, got {type(value).__name__}")
            return value

        if self.kind is TypeKind.DATE:
            if isinstance(value, str):
                value = self._parse_date(value)
            if not isinstance(value, datetime):
                raise TypeError(f"date value must be a datetime, got {type(value).__name__}")
            # isoformat zero-pads the year, strftime does not on every platform
            return value.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")

        if isinstance(value, bool):
            raise TypeError("enum value must be a label or an integer code, got bool")
        if isinstance(value, int):
            return str(self._check_code(value))
        if isinstance(value, str):
            return str(self.code_for(value))
        raise TypeError(f"enum value must be a label or an integer code, got {type(value).__name__}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_double(self, raw: str) -> float:
        if not isinstance(raw, str) or not _DOUBLE_RE.fullmatch(raw):
            raise VitotrolParseError(raw, TypeKind.DOUBLE, "not a decimal number")
        value = float(raw)
        if not math.isfinite(value):
            raise VitotrolParseError(raw, TypeKind.DOUBLE, "out of float range")
        return value

    def _parse_date(self, raw: str) -> datetime:
        if not isinstance(raw, str) or not _DATE_RE.fullmatch(raw):
            raise VitotrolParseError(raw, TypeKind.DATE, "expected YYYY-MM-DD HH:MM:SS")
        try:
            return datetime.strptime(raw, VITODATA_TIME_LAYOUT)
        except ValueError as err:
            raise VitotrolParseError(raw, TypeKind.DATE, str(err)) from err

    def _check_code(self, code: int) -> int:
        if not 0 <= code < len(self.labels):
            raise VitotrolRangeError(code, self.labels)
        return code

    def _require_enum(self) -> None:
        if self.kind is not TypeKind.ENUM:
            raise TypeError(f"{self.kind} value type has no enum codes")


def enum_type(labels: Iterable[str]) -> ValueType:
    """Create an enum value type from labels ordered by code."""
    return ValueType(TypeKind.ENUM, tuple(labels))


TYPE_DOUBLE = ValueType(TypeKind.DOUBLE)
TYPE_STRING = ValueType(TypeKind.STRING)
TYPE_DATE = ValueType(TypeKind.DATE)

# Two-label conveniences.  Ordinary enums, code 0 first.
TYPE_ON_OFF = enum_type(("off", "on"))
TYPE_ENABLED = enum_type(("disabled", "enabled"))

_SIMPLE_TYPES: dict[TypeKind, ValueType] = {
    TypeKind.DOUBLE: TYPE_DOUBLE,
    TypeKind.STRING: TYPE_STRING,
    TypeKind.DATE: TYPE_DATE,
}

__all__ = [
    "TYPE_DATE",
    "TYPE_DOUBLE",
    "TYPE_ENABLED",
    "TYPE_ON_OFF",
    "TYPE_STRING",
    "VITODATA_TIME_LAYOUT",
    "TypeKind",
    "TypedValue",
    "ValueType",
    "enum_type",
    "format_double",
]
