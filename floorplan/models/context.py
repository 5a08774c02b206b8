"""Validation context — accumulates state during a single validation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import FloorPlan, WallSide
from .geometry import Rect, Segment
from .parameters import ValidationConfig
from .validation import ValidationIssue


class RoomBounds(Rect):
    """Bounding box of a room in plan units (unscaled)."""
    id: str
    name: str


class WallSegment(Segment):
    """A room side in plan units, tagged with its owner."""
    room_id: str
    room_name: str
    side: WallSide
    exists: bool


class ValidationContext(BaseModel):
    """
    Working state of one validation pass over one plan.

    `PlanAnalyzer` derives bounds and segments from the plan, every rule
    reads them, and the issues they return are collected in rule order.
    """
    floor_plan: FloorPlan
    config: ValidationConfig = Field(default_factory=ValidationConfig)

    # Plan units, in room order; segments go N, E, S, W within a room
    bounds: list[RoomBounds] = []
    segments: list[WallSegment] = []

    issues: list[ValidationIssue] = []

    def add_issues(self, issues: list[ValidationIssue]) -> None:
        self.issues.extend(issues)
