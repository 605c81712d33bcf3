"""Pytest configuration and fixtures for pyvitotrol tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from pyvitotrol.attributes.definitions import AttrAccess, AttrRef
from pyvitotrol.attributes.registry import AttributeRegistry
from pyvitotrol.types import TYPE_DOUBLE, enum_type


@pytest.fixture
def registry() -> AttributeRegistry:
    """Fresh registry seeded with the built-in catalogue."""
    return AttributeRegistry()


@pytest.fixture
def small_registry() -> AttributeRegistry:
    """Registry with two hand-built attributes and nothing else."""
    return AttributeRegistry(
        {
            600: AttrRef(
                enum_type(["Off", "On"]), AttrAccess.READ_ONLY, "BurnerStatus", "Burner state"
            ),
            82: AttrRef(TYPE_DOUBLE, AttrAccess.READ_WRITE, "RoomTemp", "Room set point"),
        }
    )


@pytest.fixture
def captured_at() -> datetime:
    """Capture time used for timestamped values."""
    return datetime(2024, 1, 15, 10, 30, 0)
