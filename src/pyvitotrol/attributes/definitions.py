"""Attribute descriptor types.

An attribute is identified by a 16-bit ``AttrID`` and described by an
:class:`AttrRef`: the value type used to decode its wire strings, the access
rights the service grants, a display name that is unique in a registry, and
a free-text description.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag

from pyvitotrol.types import ValueType

# AttrID bounds.  NO_ATTR is returned in error paths, never a real attribute.
MAX_ATTR_ID = 0xFFFF
NO_ATTR = 0xFFFF


def validate_attr_id(attr_id: int) -> int:
    """Check that attr_id fits the unsigned 16-bit identifier space.

    Raises:
        ValueError: If attr_id is not an int in [0, 0xFFFF]
    """
    if isinstance(attr_id, bool) or not isinstance(attr_id, int):
        raise ValueError(f"attribute ID must be an int, got {type(attr_id).__name__}")
    if not 0 <= attr_id <= MAX_ATTR_ID:
        raise ValueError(f"attribute ID {attr_id} outside 0-{MAX_ATTR_ID:#06x}")
    return attr_id


class AttrAccess(IntFlag):
    """Access rights granted on an attribute."""

    READ_ONLY = 1
    WRITE_ONLY = 2
    READ_WRITE = READ_ONLY | WRITE_ONLY

    @property
    def readable(self) -> bool:
        return bool(self & AttrAccess.READ_ONLY)

    @property
    def writable(self) -> bool:
        return bool(self & AttrAccess.WRITE_ONLY)

    @property
    def label(self) -> str:
        """Human label: read-only, write-only or read/write."""
        return ACCESS_TO_STR.get(self, f"access({int(self)})")

    @classmethod
    def from_label(cls, label: str) -> AttrAccess:
        """Parse a human label back into access rights.

        Raises:
            ValueError: If label is not one of ACCESS_TO_STR's values
        """
        for access, text in ACCESS_TO_STR.items():
            if text == label:
                return access
        raise ValueError(f"Unknown access label {label!r}")


ACCESS_TO_STR: dict[AttrAccess, str] = {
    AttrAccess.READ_ONLY: "read-only",
    AttrAccess.WRITE_ONLY: "write-only",
    AttrAccess.READ_WRITE: "read/write",
}


@dataclass(frozen=True)
class AttrRef:
    """Reference description of one attribute.

    Attributes:
        value_type: Parses and formats the attribute's wire values.
        access: Rights granted by the service on this attribute.
        name: Display identifier, unique within a registry.
        doc: Human-readable description.
        custom: True for attributes added at runtime rather than shipped
            in the built-in catalogue.
    """

    value_type: ValueType
    access: AttrAccess
    name: str
    doc: str = ""
    custom: bool = False

    def __post_init__(self) -> None:
        access = AttrAccess(self.access)
        if access not in ACCESS_TO_STR:
            raise ValueError(f"Invalid access {int(access)} for attribute {self.name!r}")
        object.__setattr__(self, "access", access)

    def __str__(self) -> str:
        return f"{self.name}: {self.doc} ({self.value_type.type_name()} - {self.access.label})"

    def as_custom(self) -> AttrRef:
        """Return a copy of this reference with the custom marker set."""
        if self.custom:
            return self
        return replace(self, custom=True)


__all__ = [
    "ACCESS_TO_STR",
    "MAX_ATTR_ID",
    "NO_ATTR",
    "AttrAccess",
    "AttrRef",
    "validate_attr_id",
]
