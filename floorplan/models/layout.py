"""Resolved plan geometry handed to the 2D/3D renderers."""

from __future__ import annotations

from .building import OpeningType, PlanModel, WallSide
from .geometry import Segment


class OpeningGeometry(PlanModel):
    """An opening at an absolute, scaled position."""
    type: OpeningType
    x: float
    y: float
    width: float
    height: float
    from_floor: float
    to: str | None = None
    direction: WallSide     # Side the opening faces; orients door swings/glazing


class WallGeometry(Segment, PlanModel):
    """One room side as an absolute, scaled segment."""
    length: float
    thickness: float
    exists: bool
    openings: list[OpeningGeometry] = []


class RoomGeometry(PlanModel):
    id: str
    name: str
    x: float
    y: float
    width: float
    height: float
    walls: dict[WallSide, WallGeometry]


class FloorGeometry(PlanModel):
    """Flat geometry tree for a whole floor."""
    width: float = 0.0
    height: float = 0.0
    rooms: list[RoomGeometry] = []
