"""Attribute registry: AttrID → AttrRef plus derived lookup indexes.

The registry owns three structures:

- the descriptor map (attribute ID → :class:`AttrRef`)
- the name index (attribute name → attribute ID)
- the flat tuple of all known attribute IDs

The two derived structures are always rebuilt from the full descriptor map,
never patched.  All three live in one immutable :class:`_Snapshot`; a
mutation builds the next snapshot off to the side and publishes it with a
single attribute assignment, so concurrent readers see either the old or the
new registry, never a mix.  Writers are serialised by a lock.

Example:
    registry = AttributeRegistry()
    ref = registry.descriptor_of(BRENNER_STATUS)
    registry.parse_value(BRENNER_STATUS, TimestampedValue("1", now))  # "Ein"

    registry.add_attribute_ref(
        0x1234, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "SolarTemp", "Solar")
    )
    registry.attr_id_of("SolarTemp")  # 0x1234
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pyvitotrol.attributes.catalogue import BUILTIN_ATTRIBUTES
from pyvitotrol.attributes.definitions import (
    ACCESS_TO_STR,
    AttrAccess,
    AttrRef,
    validate_attr_id,
)
from pyvitotrol.exceptions import AttributeAccessError, AttributeNotFoundError
from pyvitotrol.value import TimestampedValue

if TYPE_CHECKING:
    from pyvitotrol.config import CustomAttributeConfig
    from pyvitotrol.types import TypedValue

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    """One consistent view of the registry."""

    refs: Mapping[int, AttrRef]
    names_to_ids: Mapping[str, int]
    attr_ids: tuple[int, ...]

    @classmethod
    def build(cls, refs: dict[int, AttrRef]) -> _Snapshot:
        """Compute both derived indexes from the complete descriptor map."""
        names_to_ids: dict[str, int] = {}
        for attr_id, ref in refs.items():
            names_to_ids[ref.name] = attr_id
        return cls(
            refs=MappingProxyType(refs),
            names_to_ids=MappingProxyType(names_to_ids),
            attr_ids=tuple(refs),
        )


class AttributeRegistry:
    """Maps attribute IDs to their reference descriptions.

    Each instance is independent; build one per client (or per test) rather
    than sharing a module-level registry.
    """

    def __init__(self, refs: Mapping[int, AttrRef] | None = None) -> None:
        """Initialize the registry.

        Args:
            refs: Initial descriptors.  Defaults to the built-in catalogue.
        """
        initial = BUILTIN_ATTRIBUTES if refs is None else refs
        self._lock = threading.Lock()
        self._snapshot = _Snapshot.build(
            {validate_attr_id(attr_id): ref for attr_id, ref in initial.items()}
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def descriptor_of(self, attr_id: int) -> AttrRef:
        """Return the descriptor of an attribute.

        Raises:
            AttributeNotFoundError: If attr_id is not registered
        """
        try:
            return self._snapshot.refs[attr_id]
        except KeyError:
            raise AttributeNotFoundError(attr_id) from None

    def get(self, attr_id: int, default: AttrRef | None = None) -> AttrRef | None:
        """Return the descriptor of an attribute, or default if unknown."""
        return self._snapshot.refs.get(attr_id, default)

    def attr_id_of(self, name: str) -> int:
        """Return the attribute ID registered under name.

        If two attributes share a name, the one added last wins.

        Raises:
            AttributeNotFoundError: If no attribute has this name
        """
        try:
            return self._snapshot.names_to_ids[name]
        except KeyError:
            raise AttributeNotFoundError(name) from None

    def all_attr_ids(self) -> tuple[int, ...]:
        """Return every registered attribute ID, in no particular order."""
        return self._snapshot.attr_ids

    @property
    def names_to_ids(self) -> Mapping[str, int]:
        """Read-only view of the name index."""
        return self._snapshot.names_to_ids

    def __contains__(self, attr_id: object) -> bool:
        return attr_id in self._snapshot.refs

    def __len__(self) -> int:
        return len(self._snapshot.refs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._snapshot.attr_ids)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_attribute_ref(self, attr_id: int, ref: AttrRef) -> AttrRef:
        """Add or replace an attribute, marking it as custom.

        The stored reference always has ``custom=True`` whatever ref says.
        Existing entries are overwritten without error, and a name already
        used by another attribute is re-pointed at attr_id.

        Args:
            attr_id: Attribute ID to register
            ref: Reference description of the attribute

        Returns:
            The stored reference

        Raises:
            ValueError: If attr_id does not fit in 16 bits
        """
        validate_attr_id(attr_id)
        stored = ref.as_custom()

        with self._lock:
            current = self._snapshot
            previous = current.refs.get(attr_id)
            if previous is not None:
                _LOGGER.warning(
                    "Overwriting attribute %d (%s) with %s", attr_id, previous.name, stored.name
                )
            shadowed = current.names_to_ids.get(stored.name)
            if shadowed is not None and shadowed != attr_id:
                _LOGGER.warning(
                    "Attribute name %s already used by attribute %d, now resolves to %d",
                    stored.name,
                    shadowed,
                    attr_id,
                )

            # Re-insert at the end so the newest entry wins the name index
            refs = dict(current.refs)
            refs.pop(attr_id, None)
            refs[attr_id] = stored
            self._snapshot = _Snapshot.build(refs)

        _LOGGER.debug("Registered custom attribute %d: %s", attr_id, stored)
        return stored

    def add_from_config(self, config: CustomAttributeConfig) -> AttrRef:
        """Validate a custom attribute configuration and register it.

        Raises:
            ValueError: If the configuration is invalid
        """
        config.validate()
        return self.add_attribute_ref(config.attr_id, config.to_attr_ref())

    def load_custom_attributes(self, entries: Iterable[Mapping[str, Any]]) -> list[int]:
        """Register custom attributes from serialised configuration dicts.

        Args:
            entries: Dicts as produced by CustomAttributeConfig.to_dict()

        Returns:
            Attribute IDs registered, in input order

        Raises:
            ValueError: If an entry is invalid.  Entries before it stay registered.
        """
        from pyvitotrol.config import CustomAttributeConfig

        added: list[int] = []
        for entry in entries:
            config = CustomAttributeConfig.from_dict(entry)
            self.add_from_config(config)
            added.append(config.attr_id)
        _LOGGER.debug("Loaded %d custom attributes", len(added))
        return added

    # ------------------------------------------------------------------
    # Access and value coercion
    # ------------------------------------------------------------------

    def check_access(self, attr_id: int, access: AttrAccess) -> AttrRef:
        """Ensure the attribute grants every flag in access.

        Pass READ_ONLY before reading, WRITE_ONLY before writing.

        Returns:
            The attribute's descriptor

        Raises:
            ValueError: If access is not one of the three access modes
            AttributeNotFoundError: If attr_id is not registered
            AttributeAccessError: If a requested flag is not granted
        """
        if access not in ACCESS_TO_STR:
            raise ValueError(f"Invalid access request {int(access)}")
        ref = self.descriptor_of(attr_id)
        if access & ~ref.access:
            raise AttributeAccessError(attr_id, AttrAccess(access), ref.access)
        return ref

    def parse_value(self, attr_id: int, value: TimestampedValue | str) -> TypedValue:
        """Decode a wire value of attr_id with the attribute's value type.

        Raises:
            AttributeNotFoundError: If attr_id is not registered
            VitotrolParseError: If the raw string is malformed
            VitotrolRangeError: If an enum code is out of range
        """
        raw = value.value if isinstance(value, TimestampedValue) else value
        return self.descriptor_of(attr_id).value_type.parse(raw)

    def format_value(self, attr_id: int, value: TypedValue | int) -> str:
        """Encode a typed value of attr_id into its wire string.

        Raises:
            AttributeNotFoundError: If attr_id is not registered
            VitotrolParseError: If a string value is malformed
            VitotrolRangeError: If an enum label or code is not valid
        """
        return self.descriptor_of(attr_id).value_type.format(value)


__all__ = ["AttributeRegistry"]
