"""Custom attribute configuration.

This module provides the CustomAttributeConfig dataclass for describing
attributes that are not part of the built-in catalogue, supporting
serialization to/from dictionaries so applications can keep them in their
own configuration storage.

Example:
    # Describe a custom enum attribute
    config = CustomAttributeConfig(
        attr_id=7857,
        name="SolarPumpe",
        type="enum",
        access="read-only",
        doc="Zustand Solarpumpe",
        labels=("Aus", "Ein"),
    )
    config.validate()

    # Serialize to dict for storage
    data = config.to_dict()

    # Restore from dict and register
    registry.add_from_config(CustomAttributeConfig.from_dict(data))
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pyvitotrol.attributes.definitions import AttrAccess, AttrRef, validate_attr_id
from pyvitotrol.types import TypeKind, ValueType


@dataclass
class CustomAttributeConfig:
    """Configuration for a single custom attribute.

    Attributes:
        attr_id: Attribute ID on the Vitotrol service (0-65535)
        name: Display name, used for reverse lookups
        type: Value type kind: "double", "string", "date" or "enum"
        access: "read-only", "write-only" or "read/write"
        doc: Free-text description
        labels: Enum labels ordered by code (enum type only)
    """

    attr_id: int
    name: str
    type: str = TypeKind.DOUBLE.value
    access: str = "read-only"
    doc: str = ""
    labels: tuple[str, ...] = field(default=())

    def validate(self) -> None:
        """Validate configuration completeness.

        Raises:
            ValueError: If configuration is invalid
        """
        validate_attr_id(self.attr_id)

        if not self.name:
            raise ValueError("name is required")

        try:
            kind = TypeKind(self.type)
        except ValueError:
            raise ValueError(
                f"type must be one of {[k.value for k in TypeKind]}, got {self.type!r}"
            ) from None

        # Enum-specific validation
        if kind is TypeKind.ENUM:
            if not self.labels:
                raise ValueError("labels required for enum attributes")
            if len(set(self.labels)) != len(self.labels):
                raise ValueError("enum labels must be unique")
        elif self.labels:
            raise ValueError(f"labels are only allowed for enum attributes, not {self.type}")

        AttrAccess.from_label(self.access)

    def to_attr_ref(self) -> AttrRef:
        """Build the attribute reference this configuration describes."""
        return AttrRef(
            value_type=ValueType.from_name(self.type, self.labels),
            access=AttrAccess.from_label(self.access),
            name=self.name,
            doc=self.doc,
            custom=True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization.

        Returns:
            Dictionary with all configuration values, suitable for
            JSON serialization.
        """
        return {
            "attr_id": self.attr_id,
            "name": self.name,
            "type": self.type,
            "access": self.access,
            "doc": self.doc,
            "labels": list(self.labels),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CustomAttributeConfig:
        """Create configuration from dictionary.

        Args:
            data: Dictionary with configuration values (from to_dict())

        Returns:
            CustomAttributeConfig instance with values from dictionary

        Raises:
            ValueError: If attr_id or name is missing
        """
        if "attr_id" not in data or "name" not in data:
            raise ValueError("attr_id and name are required")

        return cls(
            attr_id=data["attr_id"],
            name=data["name"],
            type=data.get("type", TypeKind.DOUBLE.value),
            access=data.get("access", "read-only"),
            doc=data.get("doc", ""),
            labels=tuple(data.get("labels") or ()),
        )

    @classmethod
    def from_attr_ref(cls, attr_id: int, ref: AttrRef) -> CustomAttributeConfig:
        """Create configuration describing an existing attribute reference."""
        return cls(
            attr_id=attr_id,
            name=ref.name,
            type=ref.value_type.type_name(),
            access=ref.access.label,
            doc=ref.doc,
            labels=ref.value_type.labels,
        )


__all__ = ["CustomAttributeConfig"]
