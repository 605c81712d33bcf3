"""Vitotrol attribute definitions and registry.

- definitions: AttrAccess flags, AttrRef descriptors, AttrID bounds
- catalogue: built-in attribute IDs and their descriptors (seed data)
- registry: AttributeRegistry mapping IDs to descriptors with name lookups
"""

from pyvitotrol.attributes.catalogue import BUILTIN_ATTRIBUTES
from pyvitotrol.attributes.definitions import (
    ACCESS_TO_STR,
    MAX_ATTR_ID,
    NO_ATTR,
    AttrAccess,
    AttrRef,
    validate_attr_id,
)
from pyvitotrol.attributes.registry import AttributeRegistry

__all__ = [
    "ACCESS_TO_STR",
    "BUILTIN_ATTRIBUTES",
    "MAX_ATTR_ID",
    "NO_ATTR",
    "AttrAccess",
    "AttrRef",
    "AttributeRegistry",
    "validate_attr_id",
]
