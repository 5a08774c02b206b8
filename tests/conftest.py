"""Pytest configuration and shared fixtures for floor plan tests."""

from __future__ import annotations

import pytest

from floorplan.models import FloorPlan

from plans import make_plan, room_data


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def single_room_plan() -> FloorPlan:
    """One 400 x 300 living room at the origin, no openings, scale 1."""
    return make_plan(room_data("sala", name="Sala"))


@pytest.fixture
def overlapping_plan() -> FloorPlan:
    """Two 300 x 300 rooms overlapping on x in [200, 300]."""
    return make_plan(
        room_data("a", 0, 0, 300, 300),
        room_data("b", 200, 0, 300, 300),
    )


@pytest.fixture
def adjacent_plan() -> FloorPlan:
    """Two 300 x 300 rooms sharing the line x = 300, both walls built."""
    return make_plan(
        room_data("a", 0, 0, 300, 300),
        room_data("b", 300, 0, 300, 300),
    )


@pytest.fixture
def opening_plan() -> FloorPlan:
    """A 400 x 300 room with a door and a window on its north wall."""
    return make_plan(room_data(
        "quarto", name="Quarto",
        north={"openings": [
            {"type": "door", "offset": 50, "width": 80},
            {"type": "window", "offset": 200, "width": 120},
        ]},
    ))
