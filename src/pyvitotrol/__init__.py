"""Typed attribute catalogue for the Viessmann Vitotrol heating service.

The Vitotrol service reports and accepts every attribute as a timestamped
string.  This package gives those strings meaning: each attribute ID maps to
a descriptor carrying its value type, access rights, name and description.

Usage:
    from pyvitotrol import AttrAccess, AttributeRegistry, TimestampedValue
    from pyvitotrol.attributes.catalogue import BRENNER_STATUS, HEIZ_NORMAL_TEMP_M1

    registry = AttributeRegistry()
    registry.check_access(BRENNER_STATUS, AttrAccess.READ_ONLY)
    state = registry.parse_value(BRENNER_STATUS, TimestampedValue("1", now))
    # state == "Ein"

    # Writes go the other way
    wire = registry.format_value(HEIZ_NORMAL_TEMP_M1, 21.5)  # "21.5"
"""

from __future__ import annotations

from .attributes import (
    ACCESS_TO_STR,
    BUILTIN_ATTRIBUTES,
    NO_ATTR,
    AttrAccess,
    AttrRef,
    AttributeRegistry,
)
from .config import CustomAttributeConfig
from .exceptions import (
    AttributeAccessError,
    AttributeNotFoundError,
    VitotrolError,
    VitotrolParseError,
    VitotrolRangeError,
)
from .types import (
    TYPE_DATE,
    TYPE_DOUBLE,
    TYPE_ENABLED,
    TYPE_ON_OFF,
    TYPE_STRING,
    TypeKind,
    ValueType,
    enum_type,
)
from .value import TimestampedValue

__version__ = "0.1.0"
__all__ = [
    "AttributeRegistry",
    "AttrAccess",
    "AttrRef",
    "ACCESS_TO_STR",
    "BUILTIN_ATTRIBUTES",
    "NO_ATTR",
    "CustomAttributeConfig",
    "TimestampedValue",
    # Value types
    "TYPE_DATE",
    "TYPE_DOUBLE",
    "TYPE_ENABLED",
    "TYPE_ON_OFF",
    "TYPE_STRING",
    "TypeKind",
    "ValueType",
    "enum_type",
    # Exceptions
    "VitotrolError",
    "VitotrolParseError",
    "VitotrolRangeError",
    "AttributeNotFoundError",
    "AttributeAccessError",
]
