"""Validation issue models."""

from __future__ import annotations
from enum import Enum

from .building import PlanModel, WallSide
from .geometry import Rect, Segment


class Severity(str, Enum):
    ERROR = "error"         # Geometric impossibility the user must fix
    WARNING = "warning"     # Likely, but not certain, modelling mistake


class IssueType(str, Enum):
    OVERLAP = "overlap"
    DUPLICATE_WALL = "duplicate-wall"
    INVALID_DIMENSION = "invalid-dimension"


class IssueDetails(PlanModel):
    """Optional geometry for highlighting an issue on the plan."""
    wall_side: WallSide | None = None
    overlap_area: Rect | None = None
    wall_position: Segment | None = None


class ValidationIssue(PlanModel):
    id: str
    severity: Severity
    type: IssueType
    message: str
    room_ids: list[str]
    details: IssueDetails | None = None
