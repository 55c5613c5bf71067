"""Shared fixtures for the ddd-patterns test suite."""

from __future__ import annotations

import pytest

from ddd_patterns.active_object.engine import ActiveObjectEngine
from ddd_patterns.primitives.clock import ManualClock


@pytest.fixture
def engine() -> ActiveObjectEngine:
    """Create a fresh engine for each test."""
    return ActiveObjectEngine()


@pytest.fixture
def clock() -> ManualClock:
    """Manual clock starting at t=0 that only moves when told to."""
    return ManualClock()
