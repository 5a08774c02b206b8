"""Room overlap — coarse bounding-box intersection between every pair of rooms.

Rooms are plain rectangles here; touching walls are let through only by
the 1-unit tolerance, not by any wall-aware reasoning.
"""

from __future__ import annotations

from floorplan.rules.base import ValidationRule
from floorplan.core.analyzer import TOLERANCE
from floorplan.models import (
    IssueDetails, IssueType, Severity, ValidationContext, ValidationIssue,
)


class RoomOverlapRule(ValidationRule):
    """Reports the exact overlap rectangle of intersecting rooms."""

    priority = 20

    def get_id(self) -> str:
        return "room.overlap"

    def get_name(self) -> str:
        return "Room Overlap"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.bounds) > 1

    def check(self, context: ValidationContext) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        bounds = context.bounds

        for i in range(len(bounds)):
            for j in range(i + 1, len(bounds)):
                a, b = bounds[i], bounds[j]
                overlap = a.intersection(b)
                if not (overlap.width > TOLERANCE and overlap.height > TOLERANCE):
                    continue

                issues.append(ValidationIssue(
                    id=f"overlap-{a.id}-{b.id}",
                    severity=Severity.ERROR,
                    type=IssueType.OVERLAP,
                    message=f'"{a.name}" overlaps "{b.name}"',
                    room_ids=[a.id, b.id],
                    details=IssueDetails(overlap_area=overlap),
                ))

        return issues
