"""Exceptions raised by pyvitotrol.

All exceptions inherit from :class:`VitotrolError` so callers can use a
single ``except VitotrolError`` to catch parsing, range, lookup and access
failures alike.  The value errors also derive from :class:`ValueError` and
the lookup error from :class:`LookupError`, so generic handlers keep working.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyvitotrol.attributes.definitions import AttrAccess


class VitotrolError(Exception):
    """Base exception for all pyvitotrol errors."""

    pass


class VitotrolParseError(VitotrolError, ValueError):
    """Raw value does not match the lexical form of its value type."""

    def __init__(self, raw: str, kind: str, reason: str = "") -> None:
        """Initialize with the offending raw value.

        Args:
            raw: The wire string that failed to parse
            kind: Name of the value type that rejected it
            reason: Optional detail appended to the message
        """
        self.raw = raw
        self.kind = kind
        message = f"Invalid {kind} value {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class VitotrolRangeError(VitotrolError, ValueError):
    """Enum code outside the label range, or label not in the enum."""

    def __init__(self, value: object, labels: Sequence[str]) -> None:
        """Initialize with the rejected value and the valid labels.

        Args:
            value: The code or label that was rejected
            labels: The enum labels, indexed by code
        """
        self.value = value
        self.labels = tuple(labels)
        if isinstance(value, int):
            message = f"Enum code {value} out of range [0, {len(self.labels)})"
        else:
            message = f"Unknown enum label {value!r} (expected one of {list(self.labels)})"
        super().__init__(message)


class AttributeNotFoundError(VitotrolError, LookupError):
    """Attribute ID or attribute name is not in the registry."""

    def __init__(self, key: int | str) -> None:
        """Initialize with the missing key.

        Args:
            key: The attribute ID or name that was looked up
        """
        self.key = key
        if isinstance(key, int):
            message = f"Unknown attribute ID {key}"
        else:
            message = f"Unknown attribute name {key!r}"
        super().__init__(message)


class AttributeAccessError(VitotrolError):
    """Attribute access rights do not permit the requested operation."""

    def __init__(self, attr_id: int, requested: AttrAccess, granted: AttrAccess) -> None:
        """Initialize with the attribute and both access sets.

        Args:
            attr_id: Attribute being accessed
            requested: Access flags the caller needs
            granted: Access flags the attribute descriptor grants
        """
        self.attr_id = attr_id
        self.requested = requested
        self.granted = granted
        operations = [name for name, flag in (("read", 1), ("write", 2)) if requested & flag]
        super().__init__(
            f"Attribute {attr_id} is {granted.label}, cannot {' and '.join(operations)} it"
        )


__all__ = [
    "AttributeAccessError",
    "AttributeNotFoundError",
    "VitotrolError",
    "VitotrolParseError",
    "VitotrolRangeError",
]
