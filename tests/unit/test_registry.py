"""Unit tests for the attribute registry."""

from __future__ import annotations

import logging
import threading
from datetime import datetime

import pytest

from pyvitotrol.attributes.catalogue import (
    AUSSEN_TEMP,
    BRENNER_STATUS,
    BUILTIN_ATTRIBUTES,
    DATUM_UHRZEIT,
    HEIZ_NORMAL_TEMP_M1,
)
from pyvitotrol.attributes.definitions import NO_ATTR, AttrAccess, AttrRef
from pyvitotrol.attributes.registry import AttributeRegistry
from pyvitotrol.config import CustomAttributeConfig
from pyvitotrol.exceptions import (
    AttributeAccessError,
    AttributeNotFoundError,
    VitotrolError,
    VitotrolParseError,
    VitotrolRangeError,
)
from pyvitotrol.types import TYPE_DOUBLE, TYPE_STRING, enum_type
from pyvitotrol.value import TimestampedValue


def _assert_indexes_consistent(registry: AttributeRegistry) -> None:
    """Derived indexes must be a complete projection of the descriptor map."""
    ids = registry.all_attr_ids()
    assert len(ids) == len(set(ids)) == len(registry)
    for attr_id in ids:
        ref = registry.descriptor_of(attr_id)
        assert ref.name in registry.names_to_ids
    for name, attr_id in registry.names_to_ids.items():
        assert attr_id in registry
        assert registry.descriptor_of(attr_id).name == name


class TestRegistrySeed:
    """Tests for registry construction."""

    def test_default_seed_is_builtin_catalogue(self, registry: AttributeRegistry) -> None:
        assert len(registry) == len(BUILTIN_ATTRIBUTES)
        assert set(registry.all_attr_ids()) == set(BUILTIN_ATTRIBUTES)

    def test_default_indexes_consistent(self, registry: AttributeRegistry) -> None:
        _assert_indexes_consistent(registry)

    def test_custom_seed(self, small_registry: AttributeRegistry) -> None:
        assert set(small_registry.all_attr_ids()) == {600, 82}
        assert small_registry.attr_id_of("RoomTemp") == 82

    def test_empty_seed(self) -> None:
        empty = AttributeRegistry({})
        assert len(empty) == 0
        assert empty.all_attr_ids() == ()

    def test_seed_rejects_invalid_ids(self) -> None:
        with pytest.raises(ValueError):
            AttributeRegistry({0x10000: AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Big")})

    def test_instances_are_isolated(self) -> None:
        first = AttributeRegistry()
        second = AttributeRegistry()
        first.add_attribute_ref(1, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Only1"))
        assert 1 in first
        assert 1 not in second
        assert 1 not in BUILTIN_ATTRIBUTES


class TestRegistryLookups:
    """Tests for lookups by ID and by name."""

    def test_descriptor_of(self, registry: AttributeRegistry) -> None:
        ref = registry.descriptor_of(AUSSEN_TEMP)
        assert ref.name == "AussenTemp"
        assert ref.value_type is TYPE_DOUBLE

    def test_descriptor_of_unknown(self, registry: AttributeRegistry) -> None:
        with pytest.raises(AttributeNotFoundError) as exc_info:
            registry.descriptor_of(NO_ATTR)
        assert exc_info.value.key == NO_ATTR
        assert "Unknown attribute ID 65535" in str(exc_info.value)

    def test_not_found_is_lookup_error(self, registry: AttributeRegistry) -> None:
        with pytest.raises(LookupError):
            registry.descriptor_of(4242)
        with pytest.raises(VitotrolError):
            registry.attr_id_of("Nope")

    def test_get(self, registry: AttributeRegistry) -> None:
        assert registry.get(BRENNER_STATUS) is registry.descriptor_of(BRENNER_STATUS)
        assert registry.get(4242) is None

    def test_attr_id_of(self, registry: AttributeRegistry) -> None:
        assert registry.attr_id_of("BrennerStatus") == BRENNER_STATUS
        assert registry.attr_id_of("DatumUhrzeit") == DATUM_UHRZEIT

    def test_attr_id_of_unknown(self, registry: AttributeRegistry) -> None:
        with pytest.raises(AttributeNotFoundError) as exc_info:
            registry.attr_id_of("Kaffeemaschine")
        assert exc_info.value.key == "Kaffeemaschine"

    def test_contains_and_iter(self, registry: AttributeRegistry) -> None:
        assert BRENNER_STATUS in registry
        assert NO_ATTR not in registry
        assert set(registry) == set(registry.all_attr_ids())

    def test_names_index_is_read_only(self, registry: AttributeRegistry) -> None:
        with pytest.raises(TypeError):
            registry.names_to_ids["Hack"] = 1  # type: ignore[index]


class TestAddAttributeRef:
    """Tests for extending the registry at runtime."""

    def test_add_new_attribute(self, registry: AttributeRegistry) -> None:
        ref = AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "SolarTemp", "Kollektortemperatur")
        stored = registry.add_attribute_ref(7777, ref)

        assert stored.custom is True
        assert registry.descriptor_of(7777) == stored
        assert registry.attr_id_of("SolarTemp") == 7777
        assert 7777 in registry.all_attr_ids()
        assert len(registry) == len(BUILTIN_ATTRIBUTES) + 1
        _assert_indexes_consistent(registry)

    @pytest.mark.parametrize("custom", [True, False])
    def test_custom_flag_always_set(self, registry: AttributeRegistry, custom: bool) -> None:
        ref = AttrRef(TYPE_STRING, AttrAccess.READ_ONLY, "Note", custom=custom)
        registry.add_attribute_ref(7000, ref)
        assert registry.descriptor_of(7000).custom is True

    def test_caller_ref_unchanged(self, registry: AttributeRegistry) -> None:
        ref = AttrRef(TYPE_STRING, AttrAccess.READ_ONLY, "Note")
        registry.add_attribute_ref(7000, ref)
        assert ref.custom is False

    def test_overwrite_existing_id(
        self, registry: AttributeRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        replacement = AttrRef(TYPE_STRING, AttrAccess.READ_ONLY, "BrennerText", "Als Text")
        with caplog.at_level(logging.WARNING, logger="pyvitotrol.attributes.registry"):
            registry.add_attribute_ref(BRENNER_STATUS, replacement)

        assert registry.descriptor_of(BRENNER_STATUS).name == "BrennerText"
        assert registry.attr_id_of("BrennerText") == BRENNER_STATUS
        # Old name no longer resolves: the index is rebuilt, not patched
        with pytest.raises(AttributeNotFoundError):
            registry.attr_id_of("BrennerStatus")
        assert len(registry) == len(BUILTIN_ATTRIBUTES)
        assert "Overwriting attribute 600" in caplog.text
        _assert_indexes_consistent(registry)

    def test_name_collision_last_write_wins(
        self, registry: AttributeRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        clash = AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "AussenTemp", "Zweiter Fühler")
        with caplog.at_level(logging.WARNING, logger="pyvitotrol.attributes.registry"):
            registry.add_attribute_ref(9000, clash)

        # Both IDs stay registered, the name resolves to the newer one
        assert AUSSEN_TEMP in registry
        assert 9000 in registry
        assert registry.attr_id_of("AussenTemp") == 9000
        assert "already used by attribute 5373" in caplog.text

    def test_overwrite_takes_name_from_later_entry(self, registry: AttributeRegistry) -> None:
        registry.add_attribute_ref(9001, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Fuehler"))
        # Overwrite an ID that was seeded long before 9001
        registry.add_attribute_ref(
            AUSSEN_TEMP, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Fuehler")
        )
        assert registry.attr_id_of("Fuehler") == AUSSEN_TEMP

    def test_add_rejects_invalid_id(self, registry: AttributeRegistry) -> None:
        with pytest.raises(ValueError):
            registry.add_attribute_ref(-5, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Neg"))
        assert "Neg" not in registry.names_to_ids

    def test_previous_snapshot_unaffected(self, registry: AttributeRegistry) -> None:
        ids_before = registry.all_attr_ids()
        names_before = registry.names_to_ids
        registry.add_attribute_ref(7001, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, "Later"))
        assert 7001 not in ids_before
        assert "Later" not in names_before
        assert "Later" in registry.names_to_ids

    def test_concurrent_adds_keep_indexes_consistent(self) -> None:
        registry = AttributeRegistry({})

        def worker(base: int) -> None:
            for offset in range(50):
                attr_id = base + offset
                registry.add_attribute_ref(
                    attr_id, AttrRef(TYPE_DOUBLE, AttrAccess.READ_ONLY, f"A{attr_id}")
                )

        threads = [threading.Thread(target=worker, args=(base,)) for base in (0, 1000, 2000, 3000)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 200
        _assert_indexes_consistent(registry)


class TestAccessChecks:
    """Tests for access gating."""

    def test_read_on_read_only(self, registry: AttributeRegistry) -> None:
        ref = registry.check_access(BRENNER_STATUS, AttrAccess.READ_ONLY)
        assert ref.name == "BrennerStatus"

    def test_write_on_read_only(self, registry: AttributeRegistry) -> None:
        with pytest.raises(AttributeAccessError) as exc_info:
            registry.check_access(BRENNER_STATUS, AttrAccess.WRITE_ONLY)
        assert exc_info.value.attr_id == BRENNER_STATUS
        assert exc_info.value.granted is AttrAccess.READ_ONLY
        assert "cannot write" in str(exc_info.value)

    def test_read_write_attribute(self, registry: AttributeRegistry) -> None:
        registry.check_access(HEIZ_NORMAL_TEMP_M1, AttrAccess.READ_ONLY)
        registry.check_access(HEIZ_NORMAL_TEMP_M1, AttrAccess.WRITE_ONLY)
        registry.check_access(HEIZ_NORMAL_TEMP_M1, AttrAccess.READ_WRITE)

    def test_read_on_write_only(self, registry: AttributeRegistry) -> None:
        registry.add_attribute_ref(
            7100, AttrRef(TYPE_DOUBLE, AttrAccess.WRITE_ONLY, "Kommando")
        )
        with pytest.raises(AttributeAccessError, match="cannot read"):
            registry.check_access(7100, AttrAccess.READ_ONLY)

    def test_unknown_attribute(self, registry: AttributeRegistry) -> None:
        with pytest.raises(AttributeNotFoundError):
            registry.check_access(4242, AttrAccess.READ_ONLY)

    @pytest.mark.parametrize("access", [AttrAccess(0), AttrAccess(4), 7])
    def test_invalid_access_request(
        self, registry: AttributeRegistry, access: AttrAccess
    ) -> None:
        """An empty or unknown request must not pass as granted."""
        with pytest.raises(ValueError, match="Invalid access request"):
            registry.check_access(HEIZ_NORMAL_TEMP_M1, access)


class TestValueCoercion:
    """Tests for parsing and formatting through the registry."""

    def test_burner_status_scenario(
        self, small_registry: AttributeRegistry, captured_at: datetime
    ) -> None:
        assert small_registry.parse_value(600, TimestampedValue("1", captured_at)) == "On"
        with pytest.raises(VitotrolRangeError):
            small_registry.parse_value(600, TimestampedValue("2", captured_at))

    def test_builtin_burner_status(self, registry: AttributeRegistry) -> None:
        assert registry.parse_value(BRENNER_STATUS, "1") == "Ein"
        assert registry.parse_value(BRENNER_STATUS, "0") == "Aus"

    def test_parse_temperature(self, registry: AttributeRegistry) -> None:
        assert registry.parse_value(AUSSEN_TEMP, "-4.5") == -4.5
        with pytest.raises(VitotrolParseError):
            registry.parse_value(AUSSEN_TEMP, "kalt")

    def test_parse_date(self, registry: AttributeRegistry) -> None:
        assert registry.parse_value(DATUM_UHRZEIT, "2024-01-15 10:30:00") == datetime(
            2024, 1, 15, 10, 30
        )

    def test_format_values(self, registry: AttributeRegistry) -> None:
        assert registry.format_value(HEIZ_NORMAL_TEMP_M1, 21.5) == "21.5"
        assert registry.format_value(HEIZ_NORMAL_TEMP_M1, 21.0) == "21"
        assert registry.format_value(BRENNER_STATUS, "Ein") == "1"
        assert registry.format_value(DATUM_UHRZEIT, datetime(2024, 12, 24, 18, 0)) == (
            "2024-12-24 18:00:00"
        )

    def test_format_unknown_label(self, registry: AttributeRegistry) -> None:
        with pytest.raises(VitotrolRangeError):
            registry.format_value(BRENNER_STATUS, "Vielleicht")

    def test_unknown_attribute(self, registry: AttributeRegistry) -> None:
        with pytest.raises(AttributeNotFoundError):
            registry.parse_value(4242, "1")
        with pytest.raises(AttributeNotFoundError):
            registry.format_value(4242, 1.0)


class TestCustomAttributeLoading:
    """Tests for registering custom attributes from configuration."""

    def test_add_from_config(self, registry: AttributeRegistry) -> None:
        config = CustomAttributeConfig(
            attr_id=7857,
            name="SolarPumpe",
            type="enum",
            access="read-only",
            doc="Zustand Solarpumpe",
            labels=("Aus", "Ein"),
        )
        stored = registry.add_from_config(config)

        assert stored.custom is True
        assert stored.value_type == enum_type(["Aus", "Ein"])
        assert registry.attr_id_of("SolarPumpe") == 7857
        assert registry.parse_value(7857, "1") == "Ein"

    def test_add_from_invalid_config(self, registry: AttributeRegistry) -> None:
        config = CustomAttributeConfig(attr_id=7857, name="Broken", type="enum")
        with pytest.raises(ValueError, match="labels required"):
            registry.add_from_config(config)
        assert 7857 not in registry

    def test_load_custom_attributes(self, registry: AttributeRegistry) -> None:
        entries = [
            {"attr_id": 7900, "name": "SolarTemp", "type": "double"},
            {
                "attr_id": 7901,
                "name": "SolarModus",
                "type": "enum",
                "access": "read/write",
                "labels": ["Aus", "Auto", "Ein"],
            },
        ]
        added = registry.load_custom_attributes(entries)

        assert added == [7900, 7901]
        assert registry.descriptor_of(7900).access is AttrAccess.READ_ONLY
        assert registry.descriptor_of(7901).access is AttrAccess.READ_WRITE
        assert registry.format_value(7901, "Auto") == "1"
        _assert_indexes_consistent(registry)

    def test_load_stops_at_invalid_entry(self, registry: AttributeRegistry) -> None:
        entries = [
            {"attr_id": 7900, "name": "SolarTemp"},
            {"attr_id": 7901, "name": "Kaputt", "type": "integer"},
        ]
        with pytest.raises(ValueError, match="type must be one of"):
            registry.load_custom_attributes(entries)
        assert 7900 in registry
        assert 7901 not in registry
